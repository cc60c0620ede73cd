"""
'    ___________.__  .__
'    \_   _____/|  | |__| ____   ______
'     |    __)  |  | |  |/    \ / ____/
'     |     \   |  |_|  |   |  < <_|  |
'     \___  /   |____/__|___|  /\__   |
'         \/                 \/    |__|
"""
import logging

# expose the main classes
from .queryable import Queryable, OrderedQueryable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    query,
    Q
)

# expose supporting data classes
from .types import (
    JoinRow,
    EmptySequenceError
)

# the library only logs at debug level; applications decide where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Queryable",
    "OrderedQueryable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "query",
    "Q",
    "JoinRow",
    "EmptySequenceError"
]
