from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable

logger = logging.getLogger(__name__)


class _ElementOperations(Generic[T]):
    def first_or_default(self: 'Queryable[T]', default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        return self._items[0] if self._items else default

    def last_or_default(self: 'Queryable[T]', default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        return self._items[-1] if self._items else default

    def single_or_default(self: 'Queryable[T]', default: Optional[T] = None) -> Optional[T]:
        """
        get the only element, or default when there is not exactly one.
        unlike a strict `single`, more than one element is not an error: the
        default is returned in that case too.
        """
        if len(self._items) == 1:
            return self._items[0]
        if len(self._items) > 1:
            logger.debug("single_or_default on %d elements, returning default", len(self._items))
        return default
