from __future__ import annotations

import pytest


@pytest.fixture
def records() -> list[dict[str, str]]:
    return [
        {"Region": "TX", "Category": "Furniture", "Order Date": "2014-01-05", "Profit": "10", "Sales": "100"},
        {"Region": "CA", "Category": "Technology", "Order Date": "11/20/2014", "Profit": "-4", "Sales": "40"},
        {"Region": "TX", "Category": "Furniture", "Order Date": "2015-03-02", "Profit": "20", "Sales": "300"},
        {"Region": "CA", "Category": "Furniture", "Order Date": "2014-06-30", "Profit": "5", "Sales": "50"},
        {"Region": "NY", "Category": "Office Supplies", "Order Date": "not-a-date", "Profit": "7.5", "Sales": "15"},
        {"Region": "TX", "Category": "Technology", "Order Date": "2015-12-31", "Profit": "n/a", "Sales": "60"},
    ]
