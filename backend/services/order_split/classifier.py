from typing import Any, Dict, List, Mapping

from .constants import DEFAULT_SPLIT_CONFIG, SplitConfig
from .errors import MalformedOrderError


def order_label(order: Any) -> str | None:
    if not isinstance(order, Mapping):
        return None
    value = order.get("orderNumber")
    if value is None or value == "":
        return None
    return str(value)


def order_items(order: Any) -> List[Dict[str, Any]]:
    """Return the order's items after checking every one carries a string sku."""
    if not isinstance(order, Mapping):
        raise MalformedOrderError(f"Order must be a mapping, got {type(order).__name__}")
    label = order_label(order)
    items = order.get("items")
    if not isinstance(items, list):
        raise MalformedOrderError("Order has no items list", order_number=label)
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise MalformedOrderError(
                f"Item #{index} is not an object", order_number=label
            )
        if not isinstance(item.get("sku"), str):
            raise MalformedOrderError(
                f"Item #{index} has no sku", order_number=label
            )
    return items


def is_primary_item(item: Mapping[str, Any], prefix: str) -> bool:
    return item["sku"].startswith(prefix)


def needs_split(order: Any, config: SplitConfig = DEFAULT_SPLIT_CONFIG) -> bool:
    items = order_items(order)
    prefix = config.primary_sku_prefix
    has_primary = any(is_primary_item(item, prefix) for item in items)
    has_secondary = any(not is_primary_item(item, prefix) for item in items)
    return has_primary and has_secondary
