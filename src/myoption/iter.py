"""Pull-based iteration that reports exhaustion with Nothing.

``OptionIterator`` is the contract: ``next()`` returns ``Some(item)`` while
items remain and ``Nothing`` afterwards. Every implementation is also a
regular Python iterator, so it works in ``for`` loops and with ``list()``.

Example:
    ```python
    from myoption import Nothing, Some
    from myoption.iter import from_iterable

    it = from_iterable([0, 1, 2]).filter(lambda x: x > 1)
    assert it.next() == Some(2)
    assert it.next() is Nothing
    ```
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Protocol

from myoption.types.option import Nothing, NothingType, Some

__all__ = ["Filter", "FromIterable", "Map", "OptionIterator", "from_iterable"]


class OptionIterator[T](Protocol):
    """Protocol for a producer of T values, one ``next()`` call at a time.

    Implementations subclass it explicitly and define ``next()`` only.
    Adapters (``filter``, ``map``) and the Python iterator protocol come
    from the default methods below.
    """

    @abstractmethod
    def next(self) -> Some[T] | NothingType:
        """Advance and return the next element.

        Returns:
            Some(item) if an item was produced, Nothing once exhausted.
        """
        ...

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.next()
        if isinstance(item, NothingType):
            raise StopIteration
        return item.value

    def filter(self, predicate: Callable[[T], bool]) -> Filter[T]:
        """Lazily keep only the items for which ``predicate`` holds."""
        return Filter(self, predicate)

    def map[U](self, f: Callable[[T], U]) -> Map[T, U]:
        """Lazily transform every item with ``f``."""
        return Map(self, f)


class FromIterable[T](OptionIterator[T]):
    """Adapt a Python iterable. Fused: once exhausted, always Nothing."""

    __slots__ = ("_it", "_done")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._done = False

    def next(self) -> Some[T] | NothingType:
        if self._done:
            return Nothing
        for item in self._it:
            return Some(item)
        self._done = True
        return Nothing


class Filter[T](OptionIterator[T]):
    """Yield the items of ``source`` that satisfy ``predicate``."""

    __slots__ = ("_source", "_predicate")

    def __init__(self, source: OptionIterator[T], predicate: Callable[[T], bool]) -> None:
        self._source = source
        self._predicate = predicate

    def next(self) -> Some[T] | NothingType:
        while True:
            item = self._source.next()
            if isinstance(item, NothingType) or self._predicate(item.value):
                return item


class Map[T, U](OptionIterator[U]):
    """Yield ``f(item)`` for each item of ``source``."""

    __slots__ = ("_source", "_f")

    def __init__(self, source: OptionIterator[T], f: Callable[[T], U]) -> None:
        self._source = source
        self._f = f

    def next(self) -> Some[U] | NothingType:
        return self._source.next().map(self._f)


def from_iterable[T](iterable: Iterable[T]) -> FromIterable[T]:
    """Wrap any Python iterable as an OptionIterator."""
    return FromIterable(iterable)
