"""nonempty

A growable list that always holds at least one element, together with a
fallible collect protocol for building one from an iterable of unknown length.
"""

from nonempty.domain.collect import Producer, atry_collect, try_collect
from nonempty.domain.counts import NonZeroCount, non_zero
from nonempty.domain.errors import (
    EmptyInputError,
    InvariantViolationError,
    NonEmptyError,
    ZeroCountError,
)
from nonempty.domain.non_empty_list import NonEmptyList
from nonempty.domain.protocols import TryCollect, TryFromIterable

__all__ = [
    "__version__",
    "EmptyInputError",
    "InvariantViolationError",
    "NonEmptyError",
    "NonEmptyList",
    "NonZeroCount",
    "Producer",
    "TryCollect",
    "TryFromIterable",
    "ZeroCountError",
    "atry_collect",
    "non_zero",
    "try_collect",
]
__version__ = "0.1.0"
