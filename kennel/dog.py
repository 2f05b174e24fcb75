"""Dog - an entity with a single bone slot."""
from __future__ import annotations

from typing import Callable

from kennel.result import Err, Ok, Result
from kennel.types import Bone, PreconditionError

NoticeFn = Callable[[str], None]


def print_notice(message: str) -> None:
    """Default notice sink: write the message to stdout."""
    print(message)


class Dog:
    """Holds at most one Bone and gates walks on the slot being empty.

    Slot-state failures are returned as ``Err`` rather than raised. Every
    check runs before any mutation, so a failed call leaves the dog as it
    was. Successful operations report what happened through ``notify``.
    """

    def __init__(self, age: int = 0, notify: NoticeFn | None = None) -> None:
        if isinstance(age, bool) or not isinstance(age, int):
            raise TypeError(f"age must be an int, got {type(age).__name__}")
        if age < 0:
            raise ValueError(f"age must be >= 0, got {age}")
        self._age = age
        self._bone: Bone | None = None
        self._notify: NoticeFn = notify if notify is not None else print_notice

    @property
    def age(self) -> int:
        return self._age

    @property
    def bone(self) -> Bone | None:
        """The bone in the slot, or None when empty."""
        return self._bone

    @property
    def has_bone(self) -> bool:
        return self._bone is not None

    def increment_age(self) -> int:
        """Add one year. Never fails; returns the new age."""
        self._age += 1
        self._notify(f"Happy birthday! Now {self._age} years old.")
        return self._age

    def acquire(self, bone: Bone) -> Result[None]:
        """Take *bone* into the empty slot.

        When the slot is already occupied the held bone stays put and
        *bone* is left with the caller.
        """
        if not isinstance(bone, Bone):
            raise TypeError(f"expected a Bone, got {type(bone).__name__}")
        if self._bone is not None:
            return Err(
                PreconditionError(f"already holds a resource ({self._bone.kind})")
            )
        self._bone = bone
        self._notify(f"Got a {bone.kind} bone.")
        return Ok(None)

    def walk(self) -> Result[None]:
        """Go for a walk. Only allowed with an empty slot."""
        if self._bone is not None:
            return Err(
                PreconditionError(
                    f"action blocked by held resource ({self._bone.kind})"
                )
            )
        self._notify("Going for a walk.")
        return Ok(None)

    def release(self) -> Result[Bone]:
        """Empty the slot and hand the bone back to the caller."""
        bone = self._bone
        if bone is None:
            return Err(PreconditionError("no resource held"))
        self._bone = None
        self._notify(f"Dropped the {bone.kind} bone.")
        return Ok(bone)

    def __repr__(self) -> str:
        return f"Dog(age={self._age}, bone={self._bone!r})"
