import pandas as pd

from csv_explorer.analytics.charts import category_counts, column_histogram, histogram_bins, scatter_points


def test_zero_range_uses_unit_width_and_first_bin():
    bins = histogram_bins([1, 1, 1, 1], bin_count=8)
    assert len(bins) == 8
    assert bins[0].count == 4
    assert sum(b.count for b in bins) == 4
    assert bins[0].lower == 1.0
    assert bins[-1].upper == 2.0


def test_maximum_lands_in_last_bin():
    bins = histogram_bins([0, 8], bin_count=8)
    assert [b.count for b in bins] == [1, 0, 0, 0, 0, 0, 0, 1]
    assert bins[0].label == "0.0 - 1.0"
    assert bins[-1].label == "7.0 - 8.0"


def test_values_spread_over_bins():
    bins = histogram_bins([0, 1, 2, 3, 4], bin_count=4)
    assert [b.count for b in bins] == [1, 1, 1, 2]


def test_empty_values_give_no_bins():
    assert histogram_bins([]) == []


def test_column_histogram_skips_non_numeric_cells():
    df = pd.DataFrame({"v": ["1", "x", None, "3"]}, dtype=object)
    bins = column_histogram(df, "v", bin_count=2)
    assert [b.count for b in bins] == [1, 1]


def test_category_counts_sorted_by_frequency():
    out = category_counts(["A", "B", "A", "C", "B", "A"])
    assert out == [{"label": "A", "count": 3}, {"label": "B", "count": 2}, {"label": "C", "count": 1}]


def test_category_ties_keep_first_seen_order():
    out = category_counts(["x", "y", "y", "x", "z"])
    assert [c["label"] for c in out] == ["x", "y", "z"]


def test_category_missing_values_are_unknown():
    out = category_counts([None, "", "A", "  "])
    assert out == [{"label": "Unknown", "count": 3}, {"label": "A", "count": 1}]


def test_category_top_n():
    values = [str(i) for i in range(15)]
    out = category_counts(values, top_n=10)
    assert len(out) == 10
    assert out[0]["label"] == "0"


def test_scatter_keeps_rows_where_both_parse():
    df = pd.DataFrame({"x": ["1", "a", "4", "5"], "y": ["2", "3", None, "6.5"]}, dtype=object)
    assert scatter_points(df, "x", "y") == [{"x": 1.0, "y": 2.0}, {"x": 5.0, "y": 6.5}]


def test_infinite_cells_left_out_of_chart_data():
    df = pd.DataFrame({"x": ["1", "Infinity", "2"], "y": ["3", "4", "-1e400"]}, dtype=object)
    assert scatter_points(df, "x", "y") == [{"x": 1.0, "y": 3.0}]
    assert sum(b.count for b in column_histogram(df, "x", bin_count=2)) == 2
