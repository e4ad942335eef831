"""Unit tests for the page's Streamlit-free logic."""

from datatochart.app_logic import DataState, load_demo_data, preview_frame, process_data
from datatochart.axes import resolve_axes
from datatochart.schema import classify_columns


class TestProcessData:
    def test_success(self, sales_csv):
        state = process_data(sales_csv, "csv")
        assert state.error is None
        assert state.has_data
        assert len(state.data) == 2

    def test_blank_input(self):
        state = process_data("   ", "csv")
        assert state == DataState(error="Please enter some data")

    def test_parse_error_message(self):
        state = process_data('{"a": 1}', "json")
        assert state.data is None
        assert state.error.startswith("Error parsing data: ")

    def test_oversized_csv_field_is_reported(self):
        state = process_data("name,value\n" + "x" * 200_000 + ",1\n", "csv")
        assert state.data is None
        assert state.error.startswith("Error parsing data: Invalid CSV")

    def test_deeply_nested_json_is_reported(self):
        state = process_data("[" * 100_000, "json")
        assert state.data is None
        assert state.error.startswith("Error parsing data: Invalid JSON")

    def test_empty_array_has_no_data_to_show(self):
        state = process_data("[]", "json")
        assert state.error is None
        assert not state.has_data


class TestDemoData:
    def test_demo_dataset(self):
        state = load_demo_data()
        assert state.error is None
        assert len(state.data) == 16
        classification = classify_columns(state.data)
        assert classification.numeric == ("sales",)
        assert classification.categorical == ("product", "month", "category")
        assert resolve_axes(classification).x == "product"


class TestPreviewFrame:
    def test_first_ten_rows(self):
        df = preview_frame(load_demo_data().data)
        assert len(df) == 10
        assert list(df.columns) == ["product", "sales", "month", "category"]
