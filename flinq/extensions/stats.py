from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

logger = logging.getLogger(__name__)

# marks "no default supplied" so that None stays a usable default
_MISSING = object()


class _StatsOperations(Generic[T]):
    def count(self: 'Queryable[T]') -> int:
        """count elements"""
        return len(self._items)

    def sum(self: 'Queryable[T]', selector: Selector[T, Number]) -> Number:
        """left fold of the selected values, starting at 0"""
        total = 0
        for item in self._items:
            total = total + selector(item)
        return total

    def _reduce_by(self: 'Queryable[T]', operation: str, selector: Selector[T, Any],
                   pick: Callable, default: Any) -> T:
        if not self._items:
            if default is _MISSING:
                raise EmptySequenceError(f"cannot find {operation} of empty sequence")
            logger.debug("%s of empty sequence, returning supplied default", operation)
            return default
        # builtin min/max keep the first of equally ranked elements
        return pick(self._items, key=selector)

    def min(self: 'Queryable[T]', selector: Selector[T, Any], *, default: Any = _MISSING) -> T:
        """
        find the element with the smallest selected value.
        raises EmptySequenceError on an empty sequence unless `default` is given.
        """
        return self._reduce_by('minimum', selector, min, default)

    def max(self: 'Queryable[T]', selector: Selector[T, Any], *, default: Any = _MISSING) -> T:
        """
        find the element with the largest selected value.
        raises EmptySequenceError on an empty sequence unless `default` is given.
        """
        return self._reduce_by('maximum', selector, max, default)

    def average(self: 'Queryable[T]', selector: Selector[T, Number]) -> float:
        """mean of the selected values, 0 for an empty sequence"""
        count = self.count()
        if count == 0: return 0
        return self.sum(selector) / count
