from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Queryable[T]', key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """
        group elements by a key.
        groups come back in the order their key was first seen, and members keep
        source order. keys are compared with python equality, so they must be hashable.
        """
        groups = defaultdict(list)
        for item in self._items:
            groups[key_selector(item)].append(item)
        return dict(groups)

    def join(self: 'Queryable[T]', inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K]) -> 'Queryable[JoinRow[T, U]]':
        """inner join two sequences based on matching keys"""
        from ..queryable import Queryable
        inner_lookup = defaultdict(list)
        for inner_item in inner:
            inner_lookup[inner_key_selector(inner_item)].append(inner_item)
        rows = []
        for outer_item in self._items:
            # .get, so unmatched keys add no empty buckets
            for inner_item in inner_lookup.get(outer_key_selector(outer_item), ()):
                rows.append(JoinRow(outer_item, inner_item))
        return Queryable(rows)
