from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import List, cast

import pandas as pd

from .base import STAT_FIELDS, SampleAnalyzer


class FrameAnalyzer:
    """Analyzer that treats the columns of a ``pandas.DataFrame`` as datasets.

    Parameters
    ----------
    df : pd.DataFrame
        Source data.  Columns may be ragged: ``NaN`` cells are dropped before
        a column is summarised.
    columns : str | list[str] | None
        Column(s) holding the values.  ``None`` selects every numeric column
        that is not used for grouping.
    """

    def __init__(self, df: pd.DataFrame, columns: str | list[str] | None = None) -> None:
        self.df: pd.DataFrame = df
        if columns is None:
            self.columns: List[str] | None = None
        else:
            self.columns = [columns] if isinstance(columns, str) else list(columns)
            missing = [c for c in self.columns if c not in df.columns]
            if missing:
                raise KeyError(f"unknown column(s): {', '.join(map(str, missing))}")

    def _value_columns(self, group_list: list[str]) -> list[str]:
        if self.columns is not None:
            return self.columns
        numeric = self.df.select_dtypes(include="number").columns
        return [c for c in numeric if c not in group_list]

    def datasets(self) -> Iterator[tuple[str, pd.Series]]:
        """Yield ``(column, values)`` for every value column, NaN dropped."""
        for col in self._value_columns([]):
            yield col, self.df[col].dropna()

    @staticmethod
    def _row(column: str, values: pd.Series) -> dict[str, object]:
        stats = SampleAnalyzer(values.dropna().to_numpy()).summary()
        return {"column": column, **stats.as_dict()}

    def summary(self, group: str | list[str] | None = None) -> pd.DataFrame:
        """Compute the statistics of every value column.

        Parameters
        ----------
        group : str | list[str] | None
            Grouping key(s).  ``None`` yields one row per column.

        Returns
        -------
        pd.DataFrame
            A tidy DataFrame with the grouping columns, a ``column`` column
            naming the dataset, and one column per statistic.
        """
        if group is None:
            group_list: list[str] = []
        else:
            group_list = [group] if isinstance(group, str) else list(cast(Iterable[str], group))
        for g in group_list:
            if g not in self.df.columns:
                raise KeyError(f"unsupported group {g}")

        value_cols = self._value_columns(group_list)
        rows: list[dict[str, object]] = []
        if not group_list:
            for col in value_cols:
                rows.append(self._row(col, self.df[col]))
        else:
            # sort=False keeps groups in order of first appearance
            for keys, part in self.df.groupby(group_list, sort=False):
                keys = keys if isinstance(keys, tuple) else (keys,)
                for col in value_cols:
                    rows.append({**dict(zip(group_list, keys)), **self._row(col, part[col])})

        return pd.DataFrame(rows, columns=group_list + ["column", *STAT_FIELDS])
