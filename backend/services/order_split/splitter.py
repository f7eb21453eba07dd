import copy
from typing import Any, Dict, Tuple

from .classifier import is_primary_item, needs_split, order_items, order_label
from .constants import DEFAULT_SPLIT_CONFIG, IDENTITY_FIELDS, MONETARY_FIELDS, SplitConfig
from .errors import MalformedOrderError, SplitPreconditionError


def _base_order_number(order: Dict[str, Any]) -> str:
    value = order.get("orderNumber")
    if isinstance(value, bool) or not isinstance(value, (str, int)) or value == "":
        raise MalformedOrderError("Order has no orderNumber")
    return str(value)


def split_order(
    order: Dict[str, Any],
    config: SplitConfig = DEFAULT_SPLIT_CONFIG,
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split a mixed-source order into (primary, secondary) sibling orders.

    The primary order keeps the upstream identity and totals so ShipStation
    updates the original in place. The secondary order loses orderKey/orderId
    and has its totals zeroed so it is created as a new order. The input is
    left untouched; both results are deep copies.
    """
    order_items(order)
    base_number = _base_order_number(order)
    if not needs_split(order, config):
        raise SplitPreconditionError(
            "Order does not mix primary and secondary items",
            order_number=order_label(order),
        )

    prefix = config.primary_sku_prefix
    primary = copy.deepcopy(dict(order))
    primary["orderNumber"] = f"{base_number}{config.primary_suffix}"
    primary["items"] = [item for item in primary["items"] if is_primary_item(item, prefix)]

    secondary = copy.deepcopy(dict(order))
    secondary["orderNumber"] = f"{base_number}{config.secondary_suffix}"
    secondary["items"] = [
        item for item in secondary["items"] if not is_primary_item(item, prefix)
    ]
    for key in IDENTITY_FIELDS:
        secondary.pop(key, None)
    for key in MONETARY_FIELDS:
        secondary[key] = 0

    return primary, secondary
