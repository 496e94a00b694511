"""Unit tests for loading series from tables."""

from __future__ import annotations

import pandas as pd
import pytest

from linecharts.data_loader import DataLoadError, SeriesDataLoader
from linecharts.styles import GradientColors

pytestmark = pytest.mark.unit


def test_load_csv_makes_one_series_per_numeric_column(tmp_path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("name,a,b\nx,1,4\ny,2,oops\nz,3,6\n")

    result = SeriesDataLoader().load(path)

    assert result.columns == ["a", "b"]
    assert result.source_path == path
    assert result.series[0].only_points().tolist() == [1.0, 2.0, 3.0]
    assert result.series[1].only_points().tolist() == [4.0, 6.0]
    assert result.series[0].get_gradient() == GradientColors.ORANGE
    assert result.series[1].get_gradient() == GradientColors.BLUE


def test_load_txt_is_tab_delimited(tmp_path) -> None:
    path = tmp_path / "data.txt"
    path.write_text("a\tb\n1\t2\n3\t4\n")

    result = SeriesDataLoader().load(path)

    assert [s.label for s in result.series] == ["a", "b"]
    assert result.triples()[1][0] == [2.0, 4.0]


def test_gradients_cycle(tmp_path) -> None:
    df = pd.DataFrame({"a": [1], "b": [2], "c": [3]})
    loader = SeriesDataLoader(gradients=[GradientColors.GREEN, GradientColors.PURPLE])

    result = loader.from_dataframe(df)

    assert [s.get_gradient() for s in result.series] == [
        GradientColors.GREEN,
        GradientColors.PURPLE,
        GradientColors.GREEN,
    ]


def test_selected_columns_only() -> None:
    df = pd.DataFrame({"a": [1, 2], "b": [3, 4]})

    result = SeriesDataLoader().from_dataframe(df, columns=["b"])

    assert result.columns == ["b"]


def test_missing_column_raises() -> None:
    with pytest.raises(DataLoadError):
        SeriesDataLoader().from_dataframe(pd.DataFrame({"a": [1]}), columns=["zzz"])


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(DataLoadError):
        SeriesDataLoader().load(tmp_path / "absent.csv")


def test_empty_file_raises(tmp_path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DataLoadError):
        SeriesDataLoader().load(path)


def test_no_numeric_columns_raises(tmp_path) -> None:
    path = tmp_path / "words.csv"
    path.write_text("name\nalpha\nbeta\n")

    with pytest.raises(DataLoadError):
        SeriesDataLoader().load(path)
