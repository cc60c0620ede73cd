from __future__ import annotations
import typing
import logging
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable, OrderedQueryable

logger = logging.getLogger(__name__)


def _clamp_count(operation: str, count: int) -> int:
    if count < 0:
        logger.debug("%s called with negative count %d, treating as 0", operation, count)
        return 0
    return count


class _CoreOperations(Generic[T]):
    def select(self: 'Queryable[T]', selector: Selector[T, U]) -> 'Queryable[U]':
        """project each element to a new form"""
        from ..queryable import Queryable
        return Queryable([selector(x) for x in self._items])

    def where(self: 'Queryable[T]', predicate: Predicate[T]) -> 'Queryable[T]':
        """filter elements based on a predicate"""
        from ..queryable import Queryable
        return Queryable([x for x in self._items if predicate(x)])

    def order_by(self: 'Queryable[T]', key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """
        stable ascending sort by key. the source list is left untouched.
        keys must be mutually comparable with `<`; mixing incomparable key types
        raises the TypeError python itself raises.
        """
        from ..queryable import OrderedQueryable
        return OrderedQueryable(self._items, [(key_selector, False)])

    def order_by_descending(self: 'Queryable[T]', key_selector: KeySelector[T, K]) -> 'OrderedQueryable[T]':
        """stable descending sort by key"""
        from ..queryable import OrderedQueryable
        return OrderedQueryable(self._items, [(key_selector, True)])

    def take(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """take the first 'count' elements"""
        from ..queryable import Queryable
        return Queryable(self._items[:_clamp_count('take', count)])

    def skip(self: 'Queryable[T]', count: int) -> 'Queryable[T]':
        """skip the first 'count' elements"""
        from ..queryable import Queryable
        return Queryable(self._items[_clamp_count('skip', count):])

    def concat(self: 'Queryable[T]', other: Iterable[T]) -> 'Queryable[T]':
        """concatenate with another sequence, keeping duplicates and order"""
        from ..queryable import Queryable
        return Queryable(list(chain(self._items, other)))
