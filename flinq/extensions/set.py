from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..types import _SeenSet

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


def _unique(values: Iterable[T]) -> List[T]:
    seen = _SeenSet()
    return [x for x in values if seen.add_if_new(x)]


class _SetOperations(Generic[T]):
    """
    set-theoretic operations under python equality.
    every result is duplicate free and keeps the order in which elements were
    first met while scanning the receiver, then `other`.
    """

    def distinct(self: 'Queryable[T]') -> 'Queryable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..queryable import Queryable
        return Queryable(_unique(self._items))

    def union(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..queryable import Queryable
        return Queryable(_unique(chain(self._items, other)))

    def intersect(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """return distinct elements of this sequence that also occur in `other`."""
        from ..queryable import Queryable
        # one pass over other keeps lookups cheap for hashable elements
        other_set = _SeenSet(other)
        return Queryable(_unique(x for x in self._items if x in other_set))

    def except_(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """return distinct elements of this sequence that do not occur in `other`."""
        from ..queryable import Queryable
        other_set = _SeenSet(other)
        return Queryable(_unique(x for x in self._items if x not in other_set))
