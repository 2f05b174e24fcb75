"""kennel - Single-slot ownership model with fallible, validated transfers."""
from kennel.dog import Dog, print_notice
from kennel.result import Err, Ok, Result
from kennel.types import Bone, BoneKind, PreconditionError

__all__ = [
    "Bone",
    "BoneKind",
    "Dog",
    "Err",
    "Ok",
    "PreconditionError",
    "Result",
    "print_notice",
]
