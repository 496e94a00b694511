"""Load chart series from CSV/TXT files or DataFrames."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import cycle
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from .data_model import MultiLineChartData, SeriesTriple
from .styles import GradientColor, GradientColors


class DataLoadError(Exception):
    """Raised when the input data file cannot be turned into series."""


@dataclass
class DataLoadResult:
    """Series read from one source, in column order."""

    series: List[MultiLineChartData]
    columns: List[str]
    source_path: Optional[Path] = None

    def triples(self) -> List[SeriesTriple]:
        return [(s.only_points().tolist(), s.label, s.get_gradient()) for s in self.series]


class SeriesDataLoader:
    """Turn every numeric column of a table into one chart series."""

    def __init__(self, *, gradients: Sequence[GradientColor] | None = None) -> None:
        self.gradients = list(gradients or GradientColors.all())
        if not self.gradients:
            raise ValueError("At least one gradient is required.")

    def load(self, path: str | Path) -> DataLoadResult:
        """Load the given data file and return its series."""
        file_path = Path(path)
        if not file_path.exists():
            raise DataLoadError(f"File not found: {file_path}")

        delimiter = "\t" if file_path.suffix.lower() == ".txt" else ","

        try:
            df = pd.read_csv(file_path, delimiter=delimiter)
        except pd.errors.EmptyDataError:
            raise DataLoadError("The selected file is empty.") from None
        if df.empty:
            raise DataLoadError("The selected file is empty.")

        result = self.from_dataframe(df)
        result.source_path = file_path
        print(f"[DataLoader] Loaded {len(result.series)} series from {file_path.name}")
        return result

    def from_dataframe(self, df: pd.DataFrame, columns: Iterable[str] | None = None) -> DataLoadResult:
        """Build series from ``columns`` of ``df`` (all numeric columns by default)."""
        if columns is None:
            columns = self._numeric_columns(df)
        else:
            columns = list(columns)
            missing = [column for column in columns if column not in df.columns]
            if missing:
                raise DataLoadError(f"Columns not found: {', '.join(missing)}")

        if not columns:
            raise DataLoadError("No numeric columns were detected to plot.")

        series: List[MultiLineChartData] = []
        for column, gradient in zip(columns, cycle(self.gradients)):
            values = pd.to_numeric(df[column], errors="coerce").dropna()
            series.append(MultiLineChartData(values.to_numpy(), str(column), gradient))

        return DataLoadResult(series=series, columns=[str(c) for c in columns])

    def _numeric_columns(self, df: pd.DataFrame) -> List[str]:
        numeric_columns: List[str] = []
        for column in df.columns:
            numeric_series = pd.to_numeric(df[column], errors="coerce")
            if numeric_series.notna().sum() > 0:
                numeric_columns.append(column)
        return numeric_columns
