"""
Board Serializers.

Turn projected board views into plain data for rendering or JSON output.
"""

from rest_framework import serializers

from domain.orders.aggregates import Order
from domain.supply.aggregates import Product


class BoardEntitySerializer(serializers.Serializer):
    """Fields every tracked entity exposes."""

    id = serializers.CharField(read_only=True)
    status = serializers.CharField(source='status.value', read_only=True)
    status_label = serializers.CharField(source='status.label', read_only=True)
    timestamp = serializers.DateTimeField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    version = serializers.IntegerField(read_only=True)
    available_transitions = serializers.SerializerMethodField()

    def get_available_transitions(self, obj):
        return [status.value for status in obj.available_transitions]


class OrderSerializer(BoardEntitySerializer):
    """Serializer for Order."""

    label = serializers.CharField(read_only=True)


class ProductSerializer(BoardEntitySerializer):
    """Serializer for Product."""

    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(
        source='price.amount',
        max_digits=12,
        decimal_places=2,
        read_only=True
    )
    currency = serializers.CharField(source='price.currency', read_only=True)


MEMBER_SERIALIZERS = {
    Order: OrderSerializer,
    Product: ProductSerializer,
}


def serializer_for(entity) -> serializers.Serializer:
    """Pick the serializer matching the entity's kind."""
    try:
        serializer_class = MEMBER_SERIALIZERS[type(entity)]
    except KeyError:
        raise TypeError(f"No serializer for {type(entity).__name__}") from None
    return serializer_class(entity)


class GroupSerializer(serializers.Serializer):
    """One board section with its members."""

    status = serializers.CharField(source='status.value', read_only=True)
    title = serializers.CharField(read_only=True)
    count = serializers.IntegerField(read_only=True)
    members = serializers.SerializerMethodField()

    def get_members(self, group):
        return [serializer_for(member).data for member in group.members]


def board_payload(kind: str, groups) -> dict:
    """Full board view: its kind and every group in display order."""
    return {
        'board': kind,
        'groups': GroupSerializer(groups, many=True).data,
    }
