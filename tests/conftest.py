import os

os.environ.setdefault("SHIPSTATION_API_KEY", "test-key")
os.environ["SHIPSTATION_API_SECRET"] = ""
os.environ["SHIPSTATION_BASE_URL"] = "https://ssapi.test"
os.environ["WEBHOOK_TOKEN"] = ""
os.environ["SPLIT_DRY_RUN"] = "false"
for name in ("PRIMARY_SKU_PREFIX", "PRIMARY_ORDER_SUFFIX", "SECONDARY_ORDER_SUFFIX"):
    os.environ.pop(name, None)

import pytest  # noqa: E402


def make_order(order_number="1001", skus=("ba001-red", "xyz-blue"), **extra):
    order = {
        "orderNumber": order_number,
        "orderKey": "K1",
        "orderId": 555,
        "orderStatus": "awaiting_shipment",
        "shipTo": {"name": "Jane Doe", "city": "Austin"},
        "items": [{"sku": sku, "quantity": 1, "options": []} for sku in skus],
        "amountPaid": 50,
        "taxAmount": 5,
        "shippingAmount": 3,
    }
    order.update(extra)
    return order


@pytest.fixture
def mixed_order():
    return make_order()
