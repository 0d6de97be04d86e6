"""A growable list guaranteed to hold at least one element.

`NonEmptyList` wraps an ordinary ``list`` and exposes the usual mutable
sequence API, intercepting every operation that could leave it empty:

* ``pop`` on a single element list removes nothing and returns ``None``.
* ``remove_at``, ``swap_remove``, ``remove``, ``del``, ``clear``, ``drain``,
  ``splice`` and ``retain`` raise `InvariantViolationError` instead of
  emptying the list. A refused call leaves the list untouched.
* ``truncate``, ``split_off``, ``resize`` and ``resize_with`` take a
  non-zero count (see `nonempty.domain.counts`).

Because the invariant always holds, `NonEmptyList.first` and
`NonEmptyList.last` never fail.
"""

from __future__ import annotations

import functools
import itertools
import logging
import operator
import sys
from collections.abc import (
    AsyncIterable,
    Buffer,
    Callable,
    Iterable,
    Iterator,
    MutableSequence,
)
from typing import Any, NoReturn, Self, SupportsIndex, overload

from .counts import NonZeroCount, non_zero
from .errors import EmptyInputError, InvariantViolationError
from .protocols import TryFromIterable

# pylint: disable=too-many-public-methods

logger = logging.getLogger(__name__)


@functools.total_ordering
class NonEmptyList[T](MutableSequence[T], TryFromIterable[T]):
    """Like ``list`` but guaranteed to have at least one element.

    Methods without their own documentation behave exactly like their
    ``list`` counterpart.

    Example:
        ```py
        numbers = NonEmptyList.from_single(5)
        numbers.push(6)
        numbers.pop()  # 6
        numbers.pop()  # None, the last element is never removed
        ```
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, first: T, *rest: T) -> None:
        self._items: list[T] = [first, *rest]

    # --- Construction Paths ---

    @classmethod
    def from_single(cls, value: T) -> Self:
        """Build a list holding only ``value``."""
        return cls(value)

    @classmethod
    def from_list_unchecked(cls, items: list[T]) -> Self:
        """Adopt ``items`` as backing storage without checking or copying it.

        The caller guarantees that ``items`` is not empty and hands over
        ownership: the list must not be used elsewhere afterwards. Passing an
        empty list breaks every guarantee of this class.
        """
        instance = cls.__new__(cls)
        instance._items = items
        return instance

    @classmethod
    def from_list_checked(cls, items: Iterable[T]) -> Self:
        """Build a list from a copy of ``items``.

        Raises:
            EmptyInputError: If ``items`` is empty.
        """
        values = list(items)
        if not values:
            raise EmptyInputError("list")
        return cls.from_list_unchecked(values)

    @classmethod
    def from_default(cls, factory: Callable[[], T]) -> Self:
        """Build a single element list holding ``factory()``."""
        return cls(factory())

    @classmethod
    def try_from_iter(cls, iterable: Iterable[T]) -> Self:
        """Consume ``iterable`` in a single pass and collect its elements.

        The container is only created once the first element has been pulled,
        so an empty iterable never materializes one.

        Raises:
            EmptyInputError: If ``iterable`` yields nothing.
        """
        iterator = iter(iterable)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError("iterable") from None
        container = cls.from_single(first)
        for value in iterator:
            container.push(value)
        return container

    @classmethod
    async def try_from_async_iter(cls, iterable: AsyncIterable[T]) -> Self:
        """Drive ``iterable`` to completion and collect its elements.

        Raises:
            EmptyInputError: If ``iterable`` yields nothing.
        """
        values = [value async for value in iterable]
        if not values:
            raise EmptyInputError("async iterable")
        return cls.from_list_unchecked(values)

    # --- Accessors ---

    def first(self) -> T:
        """Return the first element. Never fails."""
        return self._items[0]

    def last(self) -> T:
        """Return the last element. Never fails."""
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: SupportsIndex) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> list[T]: ...
    def __getitem__(self, index: SupportsIndex | slice) -> T | list[T]:
        # slices may be empty, so they come back as plain lists
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def index(self, value: Any, start: int = 0, stop: int = sys.maxsize) -> int:
        return self._items.index(value, start, stop)

    def count(self, value: Any) -> int:
        return self._items.count(value)

    # --- Growth ---

    def push(self, value: T) -> None:
        """Append ``value`` to the end."""
        self._items.append(value)

    def append(self, value: T) -> None:
        self.push(value)

    def insert(self, index: SupportsIndex, value: T) -> None:
        self._items.insert(index, value)

    def extend(self, values: Iterable[T]) -> None:
        if values is self:
            values = list(values)
        self._items.extend(values)

    def __iadd__(self, values: Iterable[T]) -> Self:
        self.extend(values)
        return self

    def append_list(self, other: list[T]) -> None:
        """Move every element of ``other`` to the end, leaving ``other`` empty."""
        self._items.extend(other)
        other.clear()

    # --- Removal ---

    def pop(self, index: SupportsIndex = -1) -> T | None:  # type: ignore[override]
        """Remove and return the element at ``index`` (default last).

        Never removes the last remaining element: on a single element list
        nothing is removed and ``None`` is returned.

        Raises:
            IndexError: If ``index`` is out of range.
        """
        if len(self._items) == 1:
            self._items[index]  # pylint: disable=pointless-statement
            logger.debug("pop refused on single element list")
            return None
        return self._items.pop(index)

    def remove_at(self, index: SupportsIndex) -> T:
        """Remove and return the element at ``index``, shifting later ones left.

        Raises:
            IndexError: If ``index`` is out of range.
            InvariantViolationError: If it is the only element.
        """
        self._check_removal("remove_at", index)
        return self._items.pop(index)

    def swap_remove(self, index: SupportsIndex) -> T:
        """Remove and return the element at ``index``, moving the last one into its slot.

        Does not preserve ordering but runs in constant time.

        Raises:
            IndexError: If ``index`` is out of range.
            InvariantViolationError: If it is the only element.
        """
        self._check_removal("swap_remove", index)
        items = self._items
        position = operator.index(index)
        if position < 0:
            position += len(items)
        tail = items.pop()
        if position == len(items):
            return tail
        removed = items[position]
        items[position] = tail
        return removed

    def remove(self, value: T) -> None:
        """Remove the first occurrence of ``value``.

        Raises:
            ValueError: If ``value`` is not present.
            InvariantViolationError: If ``value`` is the only element.
        """
        position = self._items.index(value)
        if len(self._items) == 1:
            self._refuse("remove")
        del self._items[position]

    def clear(self) -> NoReturn:
        """Always refused: a non-empty list cannot be cleared.

        Raises:
            InvariantViolationError: Always.
        """
        self._refuse("clear")

    def __delitem__(self, index: SupportsIndex | slice) -> None:
        if isinstance(index, slice):
            if self._span(index) >= len(self._items):
                self._refuse("del")
        else:
            self._check_removal("del", index)
        del self._items[index]

    def __setitem__(self, index: SupportsIndex | slice, value: Any) -> None:
        if isinstance(index, slice):
            values = list(value)
            if len(self._items) - self._span(index) + len(values) < 1:
                self._refuse("slice assignment")
            self._items[index] = values
        else:
            self._items[index] = value

    def truncate(self, new_len: NonZeroCount | int) -> None:
        """Keep only the first ``new_len`` elements.

        No-op when ``new_len`` is not smaller than the current length.

        Raises:
            ZeroCountError: If ``new_len`` is zero or negative.
        """
        count = non_zero(new_len, "new_len")
        del self._items[count.value :]

    def split_off(self, at: NonZeroCount | int) -> list[T]:
        """Split off and return the elements from ``at`` onwards.

        The head ``[0:at]`` stays in this list and always holds at least one
        element. The returned tail is an ordinary list and may be empty
        (when ``at == len(self)``).

        Raises:
            ZeroCountError: If ``at`` is zero or negative.
            IndexError: If ``at`` is greater than the length.
        """
        count = non_zero(at, "at")
        if count.value > len(self._items):
            raise IndexError(
                f"split index {count.value} out of range for length {len(self._items)}"
            )
        tail = self._items[count.value :]
        del self._items[count.value :]
        return tail

    def drain(
        self, start: SupportsIndex | slice | None = None, stop: SupportsIndex | None = None
    ) -> list[T]:
        """Remove and return the elements in ``[start:stop]``.

        Accepts either bounds or a ``slice`` with no step.

        Raises:
            InvariantViolationError: If the range covers every element.
            ValueError: If a stepped slice is given.
        """
        window = self._window(start, stop, "drain")
        if self._span(window) >= len(self._items):
            self._refuse("drain")
        drained = self._items[window]
        del self._items[window]
        return drained

    def splice(
        self,
        start: SupportsIndex | slice | None,
        stop: SupportsIndex | None,
        replacement: Iterable[T],
    ) -> list[T]:
        """Replace ``[start:stop]`` by ``replacement`` and return the removed elements.

        Raises:
            InvariantViolationError: If the result would be empty.
            ValueError: If a stepped slice is given.
        """
        window = self._window(start, stop, "splice")
        values = list(replacement)
        if len(self._items) - self._span(window) + len(values) < 1:
            self._refuse("splice")
        removed = self._items[window]
        self._items[window] = values
        return removed

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Keep only the elements for which ``predicate`` returns true.

        The predicate is evaluated for every element before anything is
        removed, so a refusal leaves the list as it was.

        Raises:
            InvariantViolationError: If no element would be kept.
        """
        kept = [value for value in self._items if predicate(value)]
        if not kept:
            self._refuse("retain")
        self._items[:] = kept

    # --- Resizing ---

    def resize(self, new_len: NonZeroCount | int, value: T) -> None:
        """Grow with ``value`` or shrink to ``new_len`` elements.

        When growing, the same ``value`` object fills every new slot.

        Raises:
            ZeroCountError: If ``new_len`` is zero or negative.
        """
        target = non_zero(new_len, "new_len").value
        if target <= len(self._items):
            del self._items[target:]
        else:
            self._items.extend(itertools.repeat(value, target - len(self._items)))

    def resize_with(self, new_len: NonZeroCount | int, factory: Callable[[], T]) -> None:
        """Grow with fresh ``factory()`` results or shrink to ``new_len`` elements.

        Raises:
            ZeroCountError: If ``new_len`` is zero or negative.
        """
        target = non_zero(new_len, "new_len").value
        if target <= len(self._items):
            del self._items[target:]
        else:
            missing = target - len(self._items)
            self._items.extend(factory() for _ in range(missing))

    # --- Reordering and deduplication ---

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)  # type: ignore[arg-type]

    def reverse(self) -> None:
        self._items.reverse()

    def dedup(self) -> None:
        """Remove consecutive equal elements, keeping the first of each run."""
        self.dedup_by(operator.eq)

    def dedup_by_key(self, key: Callable[[T], Any]) -> None:
        """Remove consecutive elements whose ``key`` is equal."""
        self.dedup_by(lambda current, previous: key(current) == key(previous))

    def dedup_by(self, same_bucket: Callable[[T, T], bool]) -> None:
        """Remove consecutive elements for which ``same_bucket(current, previous)`` holds.

        ``previous`` is the last element that was kept. The first element is
        always kept.
        """
        kept = [self._items[0]]
        for value in itertools.islice(self._items, 1, None):
            if not same_bucket(value, kept[-1]):
                kept.append(value)
        self._items[:] = kept

    # --- Mapping ---

    def map[U](self, func: Callable[[T], U]) -> NonEmptyList[U]:
        """Return a new list holding ``func(value)`` for every element."""
        return NonEmptyList.from_list_unchecked([func(value) for value in self._items])

    def map_in_place(self, func: Callable[[T], T]) -> None:
        """Replace every element by ``func(value)``."""
        self._items[:] = [func(value) for value in self._items]

    # --- Byte sink ---

    def write(self: NonEmptyList[int], data: Buffer) -> int:
        """Append the bytes of ``data`` and return how many were written.

        Lets a list of byte values stand in for a binary file opened for
        writing, e.g. as the destination of `shutil.copyfileobj`.
        """
        chunk = bytes(data)
        self._items.extend(chunk)
        return len(chunk)

    def writelines(self: NonEmptyList[int], chunks: Iterable[Buffer]) -> None:
        for chunk in chunks:
            self.write(chunk)

    def flush(self) -> None:
        """Nothing is buffered."""

    # --- Escape hatches ---

    def into_list(self) -> list[T]:
        """Return the elements as an ordinary list.

        This is the way out of the non-empty world: the returned list is a
        shallow copy the caller may freely empty.
        """
        return list(self._items)

    def to_list(self) -> list[T]:
        """Alias of `into_list`."""
        return self.into_list()

    def copy(self) -> Self:
        """Return a shallow copy."""
        return type(self).from_list_unchecked(list(self._items))

    __copy__ = copy

    # --- Comparison and display ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonEmptyList):
            return self._items == other._items
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, NonEmptyList):
            return self._items < other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._items))})"

    # --- Plumbing ---

    def _span(self, window: slice) -> int:
        """Number of elements a slice selects in the current list."""
        return len(range(*window.indices(len(self._items))))

    def _check_removal(self, operation: str, index: SupportsIndex) -> None:
        self._items[index]  # pylint: disable=pointless-statement
        if len(self._items) == 1:
            self._refuse(operation)

    def _refuse(self, operation: str) -> NoReturn:
        logger.debug(
            "%s refused on list of length %d", operation, len(self._items)
        )
        raise InvariantViolationError(operation, len(self._items))

    @staticmethod
    def _window(
        start: SupportsIndex | slice | None, stop: SupportsIndex | None, operation: str
    ) -> slice:
        if isinstance(start, slice):
            if stop is not None:
                raise TypeError(f"{operation}() takes a slice or bounds, not both")
            window = start
        else:
            window = slice(start, stop)
        if window.step not in (None, 1):
            raise ValueError(f"{operation}() does not support a slice step")
        return window
