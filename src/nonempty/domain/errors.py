"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class NonEmptyError(Exception):
    """Base class for all nonempty errors."""


class EmptyInputError(NonEmptyError, ValueError):
    """Raised when a non-empty container is built from a source with no elements."""

    def __init__(self, source: str = "input") -> None:
        super().__init__(f"Cannot build a non-empty container from empty {source}.")
        self.source = source


# ============================================================================
#                   Invariant related errors
# ============================================================================


class InvariantViolationError(NonEmptyError):
    """Raised when an operation would leave a non-empty container empty.

    The container is left untouched when this is raised.
    """

    def __init__(self, operation: str, length: int) -> None:
        super().__init__(
            f"Refusing '{operation}' on a container of length {length}: "
            "at least one element must remain."
        )
        self.operation = operation
        self.length = length


class ZeroCountError(NonEmptyError, ValueError):
    """Raised when a count that must be non-zero is zero (or negative)."""

    def __init__(self, value: int, name: str = "count") -> None:
        super().__init__(f"{name} must be a positive integer, got {value}.")
        self.value = value
        self.name = name
