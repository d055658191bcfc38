import pandas as pd

from csv_explorer.analytics.summary import (
    count_missing,
    missingness_report,
    numeric_summary,
    summarize_column,
    total_missing,
)
from csv_explorer.data.loader import parse_csv_text


def _df(**columns):
    return pd.DataFrame(columns, dtype=object)


def test_even_count_summary():
    s = summarize_column(_df(v=["1", "2", "3", "4"]), "v")
    assert (s.min, s.max, s.mean, s.median) == (1.0, 4.0, 2.5, 2.5)
    assert s.formatted() == {"column": "v", "min": "1.00", "max": "4.00", "mean": "2.50", "median": "2.50"}


def test_odd_count_median_is_middle_value():
    s = summarize_column(_df(v=["3", "1", "2"]), "v")
    assert s.median == 2.0
    assert s.formatted()["median"] == "2.00"


def test_non_numeric_and_missing_cells_are_excluded():
    s = summarize_column(_df(v=["10", "abc", None, "", "20"]), "v")
    assert s.count == 2
    assert (s.min, s.max, s.mean, s.median) == (10.0, 20.0, 15.0, 15.0)


def test_rounded_to_two_decimals():
    s = summarize_column(_df(v=["1", "2", "2"]), "v")
    assert s.mean == 1.67
    assert s.formatted()["mean"] == "1.67"


def test_column_without_numbers_reports_no_data():
    s = summarize_column(_df(v=["x", None]), "v")
    assert s.min is None and s.median is None
    assert s.formatted() == {"column": "v", "min": "-", "max": "-", "mean": "-", "median": "-"}


def test_numeric_summary_one_entry_per_numeric_column():
    df = _df(a=["1", "2"], b=["x", "y"], c=["5", "7"])
    assert [s.column for s in numeric_summary(df, ["a", "c"])] == ["a", "c"]


def test_count_missing_treats_blank_and_absent_alike():
    df = parse_csv_text("a,b,c\n1, ,\n2\n3,x,y")
    assert count_missing(df, "a") == 0
    assert count_missing(df, "b") == 2
    assert count_missing(df, "c") == 2
    assert total_missing(df, ["a", "b", "c"]) == 4


def test_missingness_report_sorted_descending_with_stable_ties():
    df = _df(a=["1", ""], b=["", ""], c=["", "2"], d=["1", "2"])
    report = missingness_report(df, ["a", "b", "c", "d"])
    assert report == [
        {"column": "b", "missing": 2},
        {"column": "a", "missing": 1},
        {"column": "c", "missing": 1},
        {"column": "d", "missing": 0},
    ]


def test_infinite_cells_excluded_from_statistics():
    s = summarize_column(_df(v=["1", "Infinity", "3", "0x" + "f" * 300]), "v")
    assert s.count == 2
    assert (s.min, s.max, s.mean) == (1.0, 3.0, 2.0)
