import pytest
import requests

from csv_explorer.data import loader
from csv_explorer.data.loader import LoadError, ParseError, parse_csv_text
from csv_explorer.data.schemas import ChartSelection, FilterSpec, SortSpec
from csv_explorer.data.store import TableStore


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_keeps_values_as_strings():
    df = parse_csv_text("id,score\n007,1.50\n")
    assert df.loc[0, "id"] == "007"
    assert df.loc[0, "score"] == "1.50"


def test_parse_skips_blank_lines_and_outer_whitespace():
    df = parse_csv_text("\n\na,b\n1,2\n\n3,4\n\n")
    assert list(df.columns) == ["a", "b"]
    assert df["a"].tolist() == ["1", "3"]


def test_parse_short_rows_leave_absent_cells():
    df = parse_csv_text("a,b,c\n1,2\n")
    assert df.loc[0, "c"] is None


def test_parse_quoted_fields():
    df = parse_csv_text('name,note\n"Smith, J","said ""hi"""\n')
    assert df.loc[0, "name"] == "Smith, J"
    assert df.loc[0, "note"] == 'said "hi"'


def test_parse_empty_text_gives_empty_frame():
    assert parse_csv_text("   \n ").empty


def test_parse_too_many_fields_is_error():
    with pytest.raises(ParseError, match="Expected 2 fields"):
        parse_csv_text("a,b\n1,2\n3,4,5\n")


def test_parse_extra_leading_field_is_error():
    with pytest.raises(ParseError):
        parse_csv_text("a,b\n1,2,3\n4,5,6\n")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def test_load_replaces_state_and_resets_view(store, sample_csv):
    store.load_text(sample_csv)
    store.set_filter(FilterSpec(value="a"))
    store.set_sort(SortSpec("name", -1))

    store.load_text("x,y\n1,2\n")
    assert store.columns == ["x", "y"]
    assert store.filter == FilterSpec()
    assert store.sort == SortSpec()
    assert store.table.classification.numeric == ["x", "y"]
    assert store.status.message == "Loaded 1 rows from CSV."
    assert not store.status.is_error


def test_load_classifies_columns(loaded_store):
    classification = loaded_store.table.classification
    assert classification.numeric == ["amount", "score"]
    assert classification.categorical == ["name", "category"]


def test_parse_error_leaves_table_intact(loaded_store):
    before = loaded_store.table
    version = loaded_store.version
    with pytest.raises(ParseError):
        loaded_store.load_text("a,b\n1,2\n3,4,5\n")
    assert loaded_store.table is before
    assert loaded_store.version == version
    assert loaded_store.status.is_error
    assert loaded_store.status.message.startswith("CSV parse error: ")


def test_empty_text_loads_empty_table(store):
    table = store.load_text("")
    assert table.columns == []
    assert table.row_count == 0
    assert store.is_loaded
    assert store.status.message == "Loaded 0 rows from CSV."


def test_header_only_csv(store):
    store.load_text("name,score")
    assert store.columns == ["name", "score"]
    assert store.row_count() == 0
    assert store.table.classification.categorical == ["name", "score"]


def test_version_bumps_on_every_mutation(store, sample_csv):
    assert store.version == 0
    store.load_text(sample_csv)
    assert store.version == 1
    store.set_filter(FilterSpec(value="x"))
    store.clear_filter()
    store.toggle_sort("name")
    store.set_chart_selection(ChartSelection())
    assert store.version == 5


def test_end_to_end_misleading_score():
    store = TableStore()
    store.load_text("name,score\nAlpha,10\nBeta,abc\nGamma,30")
    assert store.columns == ["name", "score"]
    assert store.table.classification.categorical == ["name", "score"]
    assert store.table.classification.numeric == []


def test_oversized_literal_loads_as_number(store):
    store.load_text("v\n0x" + "f" * 300 + "\n1\n")
    assert not store.status.is_error
    assert store.status.message == "Loaded 2 rows from CSV."
    assert store.table.classification.numeric == ["v"]
    store.toggle_sort("v")
    assert store.view_rows()["v"].tolist() == ["1", "0x" + "f" * 300]


def test_infinity_counts_towards_numeric_classification(store):
    store.load_text("v\nInfinity\n-Infinity\n1e400\nabc\n")
    assert store.table.classification.numeric == ["v"]


def test_summary_rows_follow_filter_unless_all(loaded_store):
    loaded_store.set_filter(FilterSpec(column="category", value="a"))
    assert loaded_store.summary_rows()["name"].tolist() == ["Alpha", "Gamma"]
    assert len(loaded_store.summary_rows("all")) == 4


def test_clearing_filter_and_sort_restores_parse_order(loaded_store):
    original = loaded_store.view_rows()["name"].tolist()
    loaded_store.set_filter(FilterSpec(column="category", value="a"))
    loaded_store.toggle_sort("amount")
    loaded_store.toggle_sort("amount")
    assert loaded_store.view_rows()["name"].tolist() != original

    loaded_store.clear_filter()
    loaded_store.set_sort(SortSpec())
    assert loaded_store.view_rows()["name"].tolist() == original == ["Alpha", "Beta", "Gamma", "Delta"]


def test_view_rows_filters_then_sorts(loaded_store):
    loaded_store.set_filter(FilterSpec(column="category", value="a"))
    loaded_store.set_sort(SortSpec("amount", -1))
    assert loaded_store.view_rows()["name"].tolist() == ["Alpha", "Gamma"]


def test_toggle_sort_on_store(loaded_store):
    assert loaded_store.toggle_sort("score") == SortSpec("score", 1)
    assert loaded_store.toggle_sort("score") == SortSpec("score", -1)
    assert loaded_store.toggle_sort("name") == SortSpec("name", 1)


def test_count_missing_and_overview(loaded_store):
    assert loaded_store.count_missing("amount") == 1
    assert loaded_store.count_missing("category") == 1
    overview = loaded_store.overview()
    assert overview["rows"] == 4
    assert overview["columns"] == 4
    assert overview["missing"] == 2


def test_chart_selection_synced_on_load(loaded_store):
    assert loaded_store.charts == ChartSelection(
        histogram="amount", category="name", scatter_x="amount", scatter_y="score",
    )
    loaded_store.load_text("only\n1\n2\n")
    assert loaded_store.charts == ChartSelection(
        histogram="only", category=None, scatter_x="only", scatter_y="only",
    )


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def test_load_default_reads_bundled_file(store):
    store.load_default()
    assert store.row_count() == 4


def test_load_file_missing_sets_error(tmp_path, loaded_store):
    before = loaded_store.table
    with pytest.raises(LoadError):
        loaded_store.load_file(tmp_path / "nope.csv")
    assert loaded_store.table is before
    assert loaded_store.status.is_error
    assert loaded_store.status.message == "Could not load nope.csv."


def test_load_upload_decodes_utf8_bom(store):
    store.load_upload("\ufeffa,b\n1,2\n".encode("utf-8"), "up.csv")
    assert store.columns == ["a", "b"]


def test_load_upload_rejects_binary(loaded_store):
    with pytest.raises(LoadError):
        loaded_store.load_upload(b"\xff\xfe\x00bad", "bad.csv")
    assert loaded_store.row_count() == 4


class _FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


def test_load_url_success(monkeypatch, store, sample_csv):
    monkeypatch.setattr(loader.requests, "get", lambda url: _FakeResponse(sample_csv))
    store.load_url("http://example.test/static/data.csv")
    assert store.row_count() == 4


def test_load_url_http_error_includes_status(monkeypatch, loaded_store):
    monkeypatch.setattr(loader.requests, "get", lambda url: _FakeResponse(status_code=404))
    with pytest.raises(LoadError) as info:
        loaded_store.load_url("http://example.test/static/data.csv")
    assert info.value.status_code == 404
    assert loaded_store.status.message == "Could not load data.csv (404)."
    assert loaded_store.status.is_error
    assert loaded_store.row_count() == 4


def test_load_url_network_failure(monkeypatch, store):
    def boom(url):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(loader.requests, "get", boom)
    with pytest.raises(LoadError) as info:
        store.load_url("http://example.test/data.csv")
    assert info.value.status_code is None
    assert store.status.message == "Could not load data.csv."


def test_load_default_prefers_url(monkeypatch, data_file, sample_csv):
    calls = []

    def fake_get(url):
        calls.append(url)
        return _FakeResponse(sample_csv)

    monkeypatch.setattr(loader.requests, "get", fake_get)
    store = TableStore(data_file=data_file, data_url="http://example.test/data.csv")
    store.load_default()
    assert calls == ["http://example.test/data.csv"]
