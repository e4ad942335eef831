"""Unit tests for Altair chart rendering."""

import pytest

from datatochart.chart_spec import build_chart_spec
from datatochart.config import CHART_PALETTE
from datatochart.renderer import field_name, render_chart


def _render(dataset, chart_type, **kwargs):
    spec = build_chart_spec(dataset, chart_type)
    return render_chart(spec, dataset.to_frame(), **kwargs).to_dict()


class TestRenderChart:
    @pytest.mark.parametrize(
        "chart_type, mark",
        [("bar", "bar"), ("line", "line"), ("area", "area"), ("pie", "arc")],
    )
    def test_mark_per_chart_type(self, sales_dataset, chart_type, mark):
        assert _render(sales_dataset, chart_type)["mark"]["type"] == mark

    def test_bar_encoding(self, sales_dataset):
        encoding = _render(sales_dataset, "bar")["encoding"]
        assert encoding["x"]["field"] == "product"
        assert encoding["x"]["type"] == "nominal"
        assert encoding["y"]["field"] == "sales"
        assert encoding["y"]["type"] == "quantitative"

    def test_uses_default_color(self, sales_dataset):
        assert _render(sales_dataset, "line")["mark"]["color"] == CHART_PALETTE[0]

    def test_pie_encoding(self, sales_dataset):
        encoding = _render(sales_dataset, "pie")["encoding"]
        assert encoding["theta"]["field"] == "sales"
        assert encoding["color"]["field"] == "product"
        assert encoding["color"]["scale"]["range"] == CHART_PALETTE

    def test_title_and_height(self, sales_dataset):
        chart = _render(sales_dataset, "bar", height=700)
        assert chart["title"] == "sales by product"
        assert chart["height"] == 700

    def test_unsupported_type(self, sales_dataset):
        spec = build_chart_spec(sales_dataset, "bar")
        spec["chart"]["type"] = "boxplot"
        with pytest.raises(ValueError, match="Unsupported chart type"):
            render_chart(spec, sales_dataset.to_frame())

    def test_empty_encoding(self, sales_dataset):
        with pytest.raises(ValueError):
            render_chart({"chart": {"type": "bar"}, "encoding": {}}, sales_dataset.to_frame())


class TestFieldName:
    def test_plain_name_unchanged(self):
        assert field_name("sales") == "sales"

    def test_escapes_nested_access(self):
        assert field_name("price.usd") == "price\\.usd"
        assert field_name("a[0]") == "a\\[0\\]"
