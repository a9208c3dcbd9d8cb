"""
Pytest configuration and shared fixtures for the sales analytics tests.
"""

import copy
import os
import tempfile

# Keep test log files out of the working tree; must run before the package
# reads its constants.
os.environ.setdefault("SALES_ANALYTICS_LOG_DIR", tempfile.mkdtemp(prefix="sales_analytics_logs_"))

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (isolated component tests)")
    config.addinivalue_line("markers", "integration: Integration tests (loader to export)")


RAW_DATA = {
    "sellers": [
        {"id": "seller_1", "first_name": "Ivan", "last_name": "Petrov"},
        {"id": "seller_2", "first_name": "Olga", "last_name": "Sidorova"},
        {"id": "seller_3", "first_name": "Nikolai", "last_name": "Orlov"},
    ],
    "customers": [
        {"id": "customer_1", "first_name": "Anna", "last_name": "Volkova"},
    ],
    "products": [
        {"sku": "SKU_001", "purchase_price": 10.0, "sale_price": 50.0},
        {"sku": "SKU_002", "purchase_price": 5.0, "sale_price": 20.0},
        {"sku": "SKU_003", "purchase_price": 1.0, "sale_price": 3.0},
    ],
    "purchase_records": [
        {
            "receipt_id": "receipt_1", "seller_id": "seller_1", "customer_id": "customer_1",
            "total_amount": 100.0,
            "items": [{"sku": "SKU_001", "quantity": 2, "discount": 0, "sale_price": 50.0}],
        },
        {
            "receipt_id": "receipt_2", "seller_id": "seller_2", "customer_id": "customer_1",
            "total_amount": 60.0,
            "items": [{"sku": "SKU_002", "quantity": 4, "discount": 25, "sale_price": 20.0}],
        },
        {
            "receipt_id": "receipt_3", "seller_id": "seller_1", "customer_id": "customer_1",
            "total_amount": 30.0,
            "items": [{"sku": "SKU_003", "quantity": 10, "discount": 0, "sale_price": 3.0}],
        },
        {
            "receipt_id": "receipt_4", "seller_id": "seller_3", "customer_id": "customer_1",
            "total_amount": 20.0,
            "items": [{"sku": "SKU_002", "quantity": 1, "discount": 0, "sale_price": 20.0}],
        },
    ],
}


@pytest.fixture
def raw_data():
    """Fresh copy of the three-seller dataset in its raw JSON shape."""
    return copy.deepcopy(RAW_DATA)


@pytest.fixture
def dataset(raw_data):
    from sales_analytics.models.dataset import SalesDataset
    return SalesDataset.from_dict(raw_data)


@pytest.fixture
def default_options():
    from sales_analytics.analysis.aggregator import AnalysisOptions
    return AnalysisOptions()


def make_record(seller_id, *items, total_amount=None, receipt_id=None):
    """Raw purchase record; items are (sku, quantity, sale_price[, discount]) tuples."""
    line_items = []
    for item in items:
        sku, quantity, sale_price = item[:3]
        discount = item[3] if len(item) > 3 else 0
        line_items.append({"sku": sku, "quantity": quantity, "discount": discount,
                           "sale_price": sale_price})
    if total_amount is None:
        total_amount = sum(i["sale_price"] * i["quantity"] * (1 - i["discount"] / 100)
                           for i in line_items)
    record = {"seller_id": seller_id, "total_amount": total_amount, "items": line_items}
    if receipt_id:
        record["receipt_id"] = receipt_id
    return record
