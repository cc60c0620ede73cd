import typing
from .types import *

if typing.TYPE_CHECKING:
    from .queryable import Queryable

def from_iterable(data: Optional[Iterable[T]]) -> 'Queryable[T]':
    """create queryable from iterable"""
    from .queryable import Queryable
    return Queryable(data)

def from_range(start: int, count: int) -> 'Queryable[int]':
    """create queryable from range"""
    from .queryable import Queryable
    return Queryable(range(start, start + count))

def repeat(item: T, count: int) -> 'Queryable[T]':
    """create queryable with repeated item"""
    from .queryable import Queryable
    return Queryable([item] * count)

def empty() -> 'Queryable[Any]':
    """create empty queryable"""
    from .queryable import Queryable
    return Queryable()

# --- aliases ---
query = from_iterable
Q = from_iterable
