"""Unit tests for scale bounds and pointer-to-index mapping."""

from __future__ import annotations

import math

import numpy as np
import pytest

from linecharts.calculations import (
    closest_point,
    global_bounds,
    index_for_offset,
    legend_values,
    normalize,
    selected_value,
    selected_values,
    step_width,
)
from linecharts.data_model import ChartDataset, MultiLineChartData

pytestmark = pytest.mark.unit


def _dataset(*series):
    return ChartDataset(MultiLineChartData(points, f"s{i}") for i, points in enumerate(series))


def test_global_bounds_cover_every_value() -> None:
    """Every value of every series lies between the global min and max."""

    dataset = _dataset([8, 23, 54, 32], [-3.5, 12], [100, 7])
    low, high = global_bounds(dataset)

    assert (low, high) == (-3.5, 100.0)
    for series in dataset:
        for value in series.only_points():
            assert low <= value <= high


def test_global_bounds_of_empty_dataset_is_zero() -> None:
    """No series, or only empty series, degrade to (0, 0)."""

    assert global_bounds(_dataset()) == (0.0, 0.0)
    assert global_bounds(_dataset([], [])) == (0.0, 0.0)


def test_global_bounds_skip_empty_series() -> None:
    assert global_bounds(_dataset([], [5, 9])) == (5.0, 9.0)


def test_step_width_subtracts_inset() -> None:
    assert step_width(300, 3) == 135
    assert step_width(330, 4) == 100


def test_step_width_for_single_point_is_infinite() -> None:
    assert math.isinf(step_width(300, 1))


def test_step_width_rejects_empty_series() -> None:
    with pytest.raises(ValueError):
        step_width(300, 0)


def test_index_for_offset_uses_half_inset() -> None:
    assert index_for_offset(165, 135) == 1
    assert index_for_offset(15, 135) == 0
    assert index_for_offset(14, 135) == -1


def test_index_for_offset_with_infinite_step() -> None:
    """Dividing by an infinite step gives +/-0, so every pointer lands on index 0."""

    assert index_for_offset(200, math.inf) == 0
    assert index_for_offset(15, math.inf) == 0
    assert index_for_offset(10, math.inf) == 0
    assert index_for_offset(0, math.inf) == 0


def test_index_for_offset_with_zero_step_is_out_of_range() -> None:
    assert index_for_offset(100, 0) == -1
    assert index_for_offset(0, 0.0) == -1


def test_index_for_offset_with_negative_step_follows_formula() -> None:
    """A plot narrower than the inset gives a negative step; floor still applies."""

    # floor((5 - 15) / -5) = 2
    assert index_for_offset(5, -5) == 2
    # floor((100 - 15) / -5) = -17
    assert index_for_offset(100, -5) == -17


def test_narrow_plot_selects_value_from_negative_step() -> None:
    """Width 20 on three points: step is -5 and x=5 selects the last point."""

    assert step_width(20, 3) == -5
    assert selected_value([1, 2, 3], 5, 20) == 3.0
    assert selected_value([1, 2, 3], 100, 20) == 0.0


def test_pointer_in_middle_selects_value_per_series() -> None:
    """Width 300 and pointer 165 pick index 1 in both series."""

    dataset = _dataset([1, 2, 3], [4, 5, 6])

    assert selected_values(dataset, 165, 300) == [2.0, 5.0]


def test_pointer_before_inset_falls_back_to_zero() -> None:
    """floor((0 - 15) / 100) is -1, which is out of range."""

    dataset = _dataset([10, 20, 30, 40])

    assert selected_values(dataset, 0, 330) == [0.0]


def test_pointer_at_right_edge_follows_formula() -> None:
    """At x == width the index is pointCount - 1 or past the end."""

    # floor(285 / 135) = 2 -> last point
    assert selected_value([1, 2, 3], 300, 300) == 3.0

    # 20 points: step = 270 / 19, floor(285 / step) = 20 -> out of range
    points = list(range(1, 21))
    assert math.floor((300 - 15) / step_width(300, 20)) == 20
    assert selected_value(points, 300, 300) == 0.0


def test_series_with_different_lengths_use_own_step() -> None:
    dataset = _dataset([1, 2, 3], [10, 20, 30, 40, 50])

    # steps are 135 and 67.5; offset 150 -> indices 1 and 2
    assert selected_values(dataset, 165, 300) == [2.0, 30.0]


def test_selected_value_is_idempotent() -> None:
    points = [3, 1, 4, 1, 5, 9, 2, 6]
    first = selected_value(points, 123.4, 480)

    for _ in range(5):
        assert selected_value(points, 123.4, 480) == first


def test_selected_value_of_empty_series_is_zero() -> None:
    assert selected_value([], 100, 300) == 0.0


def test_selected_value_of_single_point_series() -> None:
    assert selected_value([42], 100, 300) == 42.0
    assert selected_value([42], 0, 300) == 42.0
    assert selected_value([42], -50, 300) == 42.0


def test_legend_values_are_evenly_spaced() -> None:
    assert legend_values(0, 100) == [0.0, 25.0, 50.0, 75.0, 100.0]
    assert legend_values(5, 5, count=3) == [5.0, 5.0, 5.0]
    assert legend_values(2, 8, count=1) == [2.0]


def test_legend_values_require_a_line() -> None:
    with pytest.raises(ValueError):
        legend_values(0, 1, count=0)


def test_normalize_maps_range_onto_height() -> None:
    np.testing.assert_allclose(normalize([0, 5, 10], 0, 10, 240), [0, 120, 240])


def test_normalize_flat_range_sits_at_zero() -> None:
    np.testing.assert_allclose(normalize([7, 7], 7, 7, 240), [0, 0])


def test_closest_point_rounds_and_clamps() -> None:
    points = [1, 2, 3, 4, 5]

    assert closest_point(points, 0, 400) == 0
    assert closest_point(points, 149, 400) == 1
    assert closest_point(points, 151, 400) == 2
    assert closest_point(points, 1000, 400) == 4
    assert closest_point([9], 250, 400) == 0
    assert closest_point([], 250, 400) == -1


def test_dataset_keeps_insertion_order() -> None:
    dataset = _dataset([3], [1], [2])

    assert [series.label for series in dataset] == ["s0", "s1", "s2"]
    assert dataset[2].only_points().tolist() == [2.0]
