from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..queryable import Queryable


class _TerminalOperations(Generic[T]):
    def to_array(self: 'Queryable[T]') -> List[T]:
        """copy into a new list that does not alias the wrapper's storage"""
        return list(self._items)

    def to_list(self: 'Queryable[T]') -> List[T]:
        """convert to list"""
        return self.to_array()

    def to_dictionary(self: 'Queryable[T]', key_selector: KeySelector[T, K],
                      value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. on duplicate keys the later element wins"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._items}

    def to_set(self: 'Queryable[T]') -> Set[T]:
        """convert to set"""
        return set(self._items)

    def to_numpy(self: 'Queryable[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._items)

    def to_series(self: 'Queryable[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._items)

    def to_data_frame(self: 'Queryable[T]') -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self._items)
