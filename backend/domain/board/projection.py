"""
Board Domain - Grouping/Sort Projector.

Pure function from a collection of tracked entities to the ordered groups a
board renders. Nothing is cached: callers re-project after every mutation.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from domain.shared.exceptions import ValidationException

from .entities import TrackedEntity


@dataclass(frozen=True)
class Group:
    """One section of a board: a status and its members, newest first."""

    status: Enum
    members: Tuple[TrackedEntity, ...]

    @property
    def title(self) -> str:
        return getattr(self.status, 'label', str(self.status.value))

    @property
    def count(self) -> int:
        return len(self.members)

    @property
    def is_empty(self) -> bool:
        return not self.members


def project(
    entities: Iterable[TrackedEntity],
    status_order: Sequence[Enum],
    key: Callable[[TrackedEntity], object] = attrgetter('timestamp')
) -> Tuple[Group, ...]:
    """
    Partition ``entities`` by status and sort each partition by recency.

    - every status in ``status_order`` yields a group, empty or not
    - groups come out in ``status_order``, never in data order
    - members are sorted by ``key`` descending; the sort is stable, so
      entities with equal keys keep their input order
    """
    buckets: Dict[Enum, List[TrackedEntity]] = {}
    for status in status_order:
        if status in buckets:
            raise ValueError(f"Duplicate status '{status.value}' in display order")
        buckets[status] = []

    for entity in entities:
        bucket = buckets.get(entity.status)
        if bucket is None:
            raise ValidationException(
                f"{entity!r} has status '{entity.status}' outside the board's display order",
                field="status",
                value=entity.status
            )
        bucket.append(entity)

    return tuple(
        Group(status=status, members=tuple(sorted(members, key=key, reverse=True)))
        for status, members in buckets.items()
    )
