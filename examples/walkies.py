"""Walkies -- the dog and bone walkthrough.

Demonstrates:
- Creating a Dog and a Bone
- Handling a failed operation by inspecting the returned result
- Letting an unhandled failure abort the run via unwrap()

Run: python examples/walkies.py
"""

import sys

from kennel import Bone, BoneKind, Dog, PreconditionError


def main() -> int:
    dog = Dog(8)
    print(f"Meet {dog!r}")

    # The first unhandled error ends the walkthrough.
    try:
        dog.increment_age()
        dog.walk().unwrap()

        dog.acquire(Bone(BoneKind.BACON_FLAVORED)).unwrap()
        print(f"Now {dog!r}")

        # Handled: the offered bone stays with us.
        spare = Bone(BoneKind.PEANUT_BUTTER)
        refused = dog.acquire(spare)
        if refused.is_err():
            print(f"Kept {spare!r}: {refused.unwrap_err()}")

        dog.walk().unwrap()
    except PreconditionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
