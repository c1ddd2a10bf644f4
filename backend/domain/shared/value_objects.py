"""
Shared Value Objects used across both boards.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any


# =============================================================================
# ENUMERATIONS
# =============================================================================

class OrderStatus(str, Enum):
    """Status of an order in the preparation pipeline."""

    NEW = "new"                  # 新訂單
    PREPARING = "preparing"      # 準備中
    READY = "ready"              # 準備完成

    @property
    def label(self) -> str:
        """Board label for this status."""
        return _ORDER_STATUS_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) status."""
        return self == OrderStatus.READY


_ORDER_STATUS_LABELS = {
    OrderStatus.NEW: "新訂單",
    OrderStatus.PREPARING: "準備中",
    OrderStatus.READY: "準備完成",
}


class StockStatus(str, Enum):
    """Stock level of a product on the supply board."""

    LOW_STOCK = "low_stock"        # 剩食 (leftovers)
    SCARCE = "scarce"              # 稀少
    OUT_OF_STOCK = "out_of_stock"  # 缺貨
    SUFFICIENT = "sufficient"      # 充足

    @property
    def label(self) -> str:
        """Board label for this status."""
        return _STOCK_STATUS_LABELS[self]


_STOCK_STATUS_LABELS = {
    StockStatus.LOW_STOCK: "剩食",
    StockStatus.SCARCE: "稀少",
    StockStatus.OUT_OF_STOCK: "缺貨",
    StockStatus.SUFFICIENT: "充足",
}


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Money:
    """
    Value object representing monetary amount.
    Immutable and includes currency.
    """

    amount: Decimal
    currency: str = "TWD"

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', self._to_decimal(self.amount))
        if not self.amount.is_finite():
            raise ValueError("Amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter code")

    @staticmethod
    def _to_decimal(value: Any) -> Decimal:
        if isinstance(value, bool):
            raise ValueError(f"Amount must be numeric, got {value!r}")
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Amount must be numeric, got {value!r}") from None

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
