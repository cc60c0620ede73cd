from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


class _QuantifierOperations(Generic[T]):
    def any(self: 'Queryable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, or if there are any elements at all"""
        if predicate is None: return len(self._items) > 0
        return any(predicate(x) for x in self._items)

    def all(self: 'Queryable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true for an empty sequence"""
        return all(predicate(x) for x in self._items)
