"""Core data types for the kennel model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BoneKind(Enum):
    """Closed set of bone flavors."""

    BACON_FLAVORED = "BaconFlavored"
    PEANUT_BUTTER = "PeanutButter"
    CHICKEN = "Chicken"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, repr=False)
class Bone:
    """Immutable resource a Dog can hold.

    Attributes:
        kind: Flavor of the bone, fixed at construction.
    """

    kind: BoneKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, BoneKind):
            raise TypeError(
                f"kind must be a BoneKind, got {type(self.kind).__name__}"
            )

    def __repr__(self) -> str:
        return f"Bone(kind={self.kind})"


class PreconditionError(Exception):
    """Returned when an operation's required slot state does not hold."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(details)
