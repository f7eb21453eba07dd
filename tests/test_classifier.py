"""
Tests for the split decision: needs_split and item validation.
"""

import pytest

from services.order_split.classifier import needs_split, order_items
from services.order_split.constants import SplitConfig
from services.order_split.errors import MalformedOrderError

from conftest import make_order


def test_mixed_order_needs_split(mixed_order):
    assert needs_split(mixed_order) is True


def test_all_primary_items_do_not_need_split():
    order = make_order(skus=("ba001-a", "ba001-b"))
    assert needs_split(order) is False


def test_all_secondary_items_do_not_need_split():
    order = make_order(skus=("xyz-a", "abc-b", "ba002-c"))
    assert needs_split(order) is False


def test_empty_items_do_not_need_split():
    assert needs_split(make_order(skus=())) is False


def test_prefix_match_is_case_sensitive():
    order = make_order(skus=("BA001-red", "xyz-blue"))
    assert needs_split(order) is False


def test_prefix_must_be_at_start():
    order = make_order(skus=("red-ba001", "xyz-blue"))
    assert needs_split(order) is False


def test_custom_prefix_is_used():
    config = SplitConfig(primary_sku_prefix="wh2-")
    order = make_order(skus=("wh2-bolt", "ba001-red"))
    assert needs_split(order, config) is True
    assert needs_split(make_order(), config) is False


def test_needs_split_does_not_touch_order(mixed_order):
    before = repr(mixed_order)
    needs_split(mixed_order)
    assert repr(mixed_order) == before


@pytest.mark.parametrize(
    "order",
    [
        None,
        ["not", "an", "order"],
        {"orderNumber": "1"},
        {"orderNumber": "1", "items": None},
        {"orderNumber": "1", "items": "ba001"},
        {"orderNumber": "1", "items": ["ba001-red"]},
        {"orderNumber": "1", "items": [{"sku": "ba001-red"}, {"name": "no sku"}]},
        {"orderNumber": "1", "items": [{"sku": None}]},
    ],
)
def test_malformed_orders_raise(order):
    with pytest.raises(MalformedOrderError):
        needs_split(order)


def test_malformed_error_carries_order_number():
    with pytest.raises(MalformedOrderError) as excinfo:
        order_items({"orderNumber": "2002", "items": [{"quantity": 2}]})
    assert excinfo.value.order_number == "2002"
