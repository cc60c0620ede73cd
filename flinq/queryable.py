from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.grouping import _GroupingOperations
from .extensions.stats import _StatsOperations
from .extensions.quantifiers import _QuantifierOperations
from .extensions.element import _ElementOperations
from .extensions.set import _SetOperations
from .extensions.terminal import _TerminalOperations

# --- abstract base class ---

class IQueryable(ABC, Generic[T]):
    @abstractmethod
    def get_collection(self) -> List[T]:
        """get the underlying list"""
        pass

# --- base implementation ---

class _BaseQueryable(IQueryable[T]):
    def __init__(self, source: Optional[Iterable[T]] = None):
        """
        init from a source sequence. a list is held by reference, any other
        iterable is materialized, and None gives an empty sequence.
        """
        if source is None:
            self._items: List[T] = []
        elif isinstance(source, list):
            self._items = source
        else:
            self._items = list(source)

    def get_collection(self) -> List[T]:
        """
        the live internal list, not a copy. mutating it changes this wrapper;
        use to_list() for a safe copy.
        """
        return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

# --- main queryable class ---

class Queryable(
    _BaseQueryable[T],
    _CoreOperations[T],
    _GroupingOperations[T],
    _StatsOperations[T],
    _QuantifierOperations[T],
    _ElementOperations[T],
    _SetOperations[T],
    _TerminalOperations[T]
):
    """a linq-inspired, eagerly evaluated query wrapper over a list."""
    pass

# --- ordered queryable class ---

class OrderedQueryable(Queryable[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, source: List[T], sort_keys: List[Tuple[Callable, bool]]):
        # python's sort is stable, so we sort from the last key to the first
        data = source
        for key_selector, is_descending in reversed(sort_keys):
            data = sorted(data, key=key_selector, reverse=is_descending)
        super().__init__(data)
        # snapshot, so later changes to a caller-owned list never reach then_by
        self._source = list(source)
        self._sort_keys = sort_keys

    def then_by(self, key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """secondary sort ascending"""
        return OrderedQueryable(self._source, self._sort_keys + [(key_selector, False)])

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """secondary sort descending"""
        return OrderedQueryable(self._source, self._sort_keys + [(key_selector, True)])
