"""Non-zero counts.

Operations that shrink a `NonEmptyList` to a requested length take a
`NonZeroCount` so that a request for zero elements cannot be expressed.
Plain ``int`` arguments are accepted too and are validated up front through
`non_zero`.
"""

import operator
from dataclasses import dataclass

from .errors import ZeroCountError


@dataclass(frozen=True, slots=True, order=True)
class NonZeroCount:
    """A strictly positive count.

    Behaves like an ``int`` wherever Python asks for an index (``__index__``),
    so it can be used directly in slicing and ``range``.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"NonZeroCount requires an int, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ZeroCountError(self.value)

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"NonZeroCount({self.value})"


def non_zero(value: "NonZeroCount | int", name: str = "count") -> NonZeroCount:
    """Coerce ``value`` into a `NonZeroCount`.

    Args:
        value: An existing `NonZeroCount` (returned as is) or an integer.
        name: Parameter name used in the error message.

    Returns:
        The validated count.

    Raises:
        ZeroCountError: If ``value`` is zero or negative.
        TypeError: If ``value`` is not an integer.
    """
    if isinstance(value, NonZeroCount):
        return value
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")
    number = operator.index(value)
    if number < 1:
        raise ZeroCountError(number, name)
    return NonZeroCount(number)
