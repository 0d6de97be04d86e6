"""Source-first entry points of the collect protocol.

`Producer` wraps any iterable so collection can be written source-first::

    Producer(rows).try_collect(NonEmptyList)

`try_collect` and `atry_collect` are the plain function forms and default to
collecting into a `NonEmptyList`.
"""

from collections.abc import AsyncIterable, Iterable, Iterator

from .non_empty_list import NonEmptyList
from .protocols import TryCollect, TryFromIterable


class Producer[T](TryCollect[T], Iterator[T]):
    """Single-pass iterator over ``source`` that can collect itself."""

    def __init__(self, source: Iterable[T]) -> None:
        self._iterator = iter(source)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._iterator)

    def try_collect[C: TryFromIterable](
        self, target: type[C] = NonEmptyList  # type: ignore[assignment]
    ) -> C:
        """Collect the remaining elements, into a `NonEmptyList` by default."""
        return super().try_collect(target)


def try_collect[T, C: TryFromIterable](
    iterable: Iterable[T], target: type[C] = NonEmptyList  # type: ignore[assignment]
) -> C:
    """Collect ``iterable`` into ``target``.

    Args:
        iterable: Elements to collect; consumed in a single pass.
        target: Type to build, defaults to `NonEmptyList`.

    Returns:
        The built ``target`` instance.

    Raises:
        EmptyInputError: If ``iterable`` yields nothing.
    """
    return Producer(iterable).try_collect(target)


async def atry_collect[T](
    iterable: AsyncIterable[T], target: type[NonEmptyList] = NonEmptyList
) -> NonEmptyList[T]:
    """Drive an async iterable to completion and collect it into ``target``.

    Nothing is built until ``iterable`` is exhausted.

    Raises:
        EmptyInputError: If ``iterable`` yields nothing.
    """
    return await target.try_from_async_iter(iterable)
