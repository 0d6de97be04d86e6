"""Contracts for fallible construction from iterables.

Two cooperating abstractions offer the same behaviour with two call-site
shapes:

* `TryFromIterable` is implemented by a *target* type and reads
  target-first: ``NonEmptyList.try_from_iter(items)``.
* `TryCollect` is implemented by a *source* of elements and reads
  source-first: ``Producer(items).try_collect(NonEmptyList)``.

`TryCollect.try_collect` is a thin delegation to `TryFromIterable.try_from_iter`,
so the construction logic lives in exactly one place.
"""

import abc
from collections.abc import Iterable
from typing import Self

# pylint: disable=too-few-public-methods


class TryFromIterable[T](abc.ABC):
    """Contract for a type that can attempt to build itself from an iterable."""

    @classmethod
    @abc.abstractmethod
    def try_from_iter(cls, iterable: Iterable[T]) -> Self:
        """Consume ``iterable`` to exhaustion and build an instance from it.

        Args:
            iterable: A single-pass source of elements.

        Returns:
            An instance holding every element, in production order.

        Raises:
            EmptyInputError: If the iterable yielded no elements.
        """


class TryCollect[T](abc.ABC):
    """Mixin for iterables that can attempt to collect themselves into a target."""

    @abc.abstractmethod
    def __iter__(self):
        """Iterate over the elements to collect."""

    def try_collect[C: TryFromIterable](self, target: type[C]) -> C:
        """Collect this iterable into ``target``.

        Equivalent to ``target.try_from_iter(self)``.

        Raises:
            EmptyInputError: If there was nothing to collect.
        """
        return target.try_from_iter(self)
