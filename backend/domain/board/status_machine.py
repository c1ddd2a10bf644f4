"""
Board Domain - Status Machine.

A status machine declares, for one entity kind, the ordered set of valid
statuses (the board's display order) and a transition policy deciding
which moves a board may request.

Two policies exist and are kept apart on purpose:
- PipelinePolicy: forward-only, each status has declared successors (orders)
- FreeFormPolicy: any declared status may move to any other (stock levels)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Set, Tuple

from domain.shared.exceptions import StatusTransitionException, ValidationException


class TransitionPolicy(ABC):
    """Decides which status moves are legal."""

    @abstractmethod
    def allowed_targets(self, current: Enum) -> Tuple[Enum, ...]:
        """Statuses a board may offer as the next step from ``current``."""

    def permits(self, current: Enum, target: Enum) -> bool:
        return target in self.allowed_targets(current)


class PipelinePolicy(TransitionPolicy):
    """Only the declared successors of a status are reachable."""

    def __init__(self, transitions: Mapping[Enum, Iterable[Enum]]):
        self._transitions: Dict[Enum, Tuple[Enum, ...]] = {
            status: tuple(targets) for status, targets in transitions.items()
        }

    def allowed_targets(self, current: Enum) -> Tuple[Enum, ...]:
        return self._transitions.get(current, ())


class FreeFormPolicy(TransitionPolicy):
    """
    Any declared status may move to any other.

    Re-applying the current status is permitted as a no-op correction,
    it only refreshes the entity's update time.
    """

    def __init__(self, statuses: Iterable[Enum]):
        self._statuses: Tuple[Enum, ...] = tuple(statuses)

    def allowed_targets(self, current: Enum) -> Tuple[Enum, ...]:
        return tuple(status for status in self._statuses if status != current)

    def permits(self, current: Enum, target: Enum) -> bool:
        return target in self._statuses


@dataclass(frozen=True)
class StatusMachine:
    """
    Status set, display order and transition policy of one entity kind.

    ``statuses`` is the display order of the board, not the transition order.
    ``initial_status`` is None when the creator chooses the starting status.
    """

    status_type: type
    statuses: Tuple[Enum, ...]
    policy: TransitionPolicy
    initial_status: Optional[Enum] = None
    default_status: Optional[Enum] = None

    def __post_init__(self):
        if set(self.statuses) != set(self.status_type):
            raise ValueError(
                f"{self.status_type.__name__} display order must list every status exactly once"
            )
        if len(set(self.statuses)) != len(self.statuses):
            raise ValueError(f"Duplicate status in {self.status_type.__name__} display order")

    @property
    def creation_status(self) -> Optional[Enum]:
        """Status applied when the creator does not pick one."""
        return self.initial_status or self.default_status

    def parse(self, raw: Any) -> Enum:
        """
        Resolve a raw status into a declared member.

        Accepts a member, its value, its name (any case) or its board label.
        """
        if isinstance(raw, self.status_type):
            return raw
        if isinstance(raw, str):
            text = raw.strip()
            for status in self.statuses:
                if text in (status.value, status.label) or text.upper() == status.name:
                    return status
        raise ValidationException(
            f"'{raw}' is not a valid {self.status_type.__name__}",
            field="status",
            value=raw
        )

    def can_transition(self, current: Enum, target: Enum) -> bool:
        return self.policy.permits(current, target)

    def allowed_targets(self, current: Enum) -> Tuple[Enum, ...]:
        return self.policy.allowed_targets(current)

    def check_transition(
        self,
        entity_type: str,
        current: Enum,
        target: Enum,
        entity_id: Any = None
    ) -> None:
        """Raise StatusTransitionException unless ``current -> target`` is legal."""
        if not self.can_transition(current, target):
            raise StatusTransitionException(
                entity_type,
                current.value,
                target.value,
                allowed_transitions=[s.value for s in self.allowed_targets(current)],
                entity_id=entity_id
            )


def pipeline_machine(
    status_type: type,
    transitions: Mapping[Enum, Set[Enum]],
    initial_status: Enum,
    display_order: Optional[Iterable[Enum]] = None
) -> StatusMachine:
    """Build a forward-only machine; display order defaults to enum order."""
    return StatusMachine(
        status_type=status_type,
        statuses=tuple(display_order or status_type),
        policy=PipelinePolicy(transitions),
        initial_status=initial_status,
    )


def free_form_machine(
    status_type: type,
    display_order: Iterable[Enum],
    default_status: Optional[Enum] = None
) -> StatusMachine:
    """Build a machine where any status may move to any other."""
    statuses = tuple(display_order)
    return StatusMachine(
        status_type=status_type,
        statuses=statuses,
        policy=FreeFormPolicy(statuses),
        default_status=default_status,
    )
