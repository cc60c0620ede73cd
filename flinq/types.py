from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Number = Union[int, float]


class EmptySequenceError(ValueError):
    """raised when a reduction has no element to seed it"""
    pass


class JoinRow(Generic[T, U]):
    """pairs one outer element with one matching inner element"""

    def __init__(self, outer: T, inner: U):
        self.outer = outer
        self.inner = inner

    def __iter__(self) -> Iterator[Any]:
        # allows `for outer, inner in rows`
        yield self.outer
        yield self.inner

    def __repr__(self) -> str:
        return f"JoinRow(outer={self.outer!r}, inner={self.inner!r})"


def _equal(a: Any, b: Any) -> bool:
    # numpy arrays compare elementwise, so `==` gives an array instead of a bool
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


class _SeenSet:
    """
    membership tracker using python equality.
    hashable values go through a set, unhashable ones (dicts, lists) fall back
    to a linear scan so set operations still work on records.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._hashed: Set[Any] = set()
        self._unhashed: List[Any] = []
        for value in values:
            self.add(value)

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._hashed
        except TypeError:
            return any(_equal(value, seen) for seen in self._unhashed)

    def add(self, value: Any) -> None:
        try:
            self._hashed.add(value)
        except TypeError:
            if value not in self:
                self._unhashed.append(value)

    def add_if_new(self, value: Any) -> bool:
        """add value, returning true only if it was not already present"""
        if value in self:
            return False
        self.add(value)
        return True
