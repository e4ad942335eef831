import pytest

from datatochart.parser import parse_data

SALES_CSV = """product,sales,month
Widget A,145,January
Widget B,98,January"""


@pytest.fixture
def sales_csv():
    return SALES_CSV


@pytest.fixture
def sales_dataset():
    """Two-row product/sales/month dataset."""
    return parse_data(SALES_CSV, "csv")


@pytest.fixture
def single_column_dataset():
    return parse_data('[{"a":1},{"a":2},{"a":3}]', "json")
