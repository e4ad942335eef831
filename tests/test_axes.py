"""Unit tests for default axis selection."""

from datatochart.axes import (
    AxisSelection,
    default_x,
    default_y,
    resolve_axes,
    y_axis_options,
)
from datatochart.dataset import Dataset
from datatochart.parser import parse_data
from datatochart.schema import classify_columns


class TestDefaults:
    def test_sales_scenario(self, sales_dataset):
        classification = classify_columns(sales_dataset)
        assert default_x(classification) == "product"
        assert default_y(classification) == "sales"

    def test_single_column_falls_back_to_it(self, single_column_dataset):
        classification = classify_columns(single_column_dataset)
        assert default_x(classification) == "a"
        assert default_y(classification) == "a"

    def test_no_numeric_uses_second_column(self):
        dataset = parse_data("name,city\nAnn,Oslo", "csv")
        classification = classify_columns(dataset)
        assert default_x(classification) == "name"
        assert default_y(classification) == "city"
        assert y_axis_options(classification) == ["name", "city"]

    def test_all_numeric_uses_first_column_for_x(self):
        dataset = parse_data("year,value\n2020,1\n2021,2", "csv")
        classification = classify_columns(dataset)
        assert default_x(classification) == "year"
        assert default_y(classification) == "year"

    def test_empty_dataset(self):
        classification = classify_columns(Dataset())
        assert default_x(classification) is None
        assert default_y(classification) is None


class TestResolveAxes:
    def test_defaults_when_nothing_selected(self, sales_dataset):
        axes = resolve_axes(classify_columns(sales_dataset))
        assert axes == AxisSelection(x="product", y="sales")

    def test_keeps_valid_selection(self, sales_dataset):
        axes = resolve_axes(classify_columns(sales_dataset), x="month", y="sales")
        assert axes == AxisSelection(x="month", y="sales")

    def test_rejects_non_numeric_y(self, sales_dataset):
        axes = resolve_axes(classify_columns(sales_dataset), y="month")
        assert axes.y == "sales"

    def test_selection_from_previous_dataset_is_dropped(self, sales_dataset):
        previous = resolve_axes(classify_columns(sales_dataset), x="month", y="sales")
        replacement = parse_data('[{"a":1},{"a":2},{"a":3}]', "json")
        axes = resolve_axes(classify_columns(replacement), previous.x, previous.y)
        assert axes == AxisSelection(x="a", y="a")
