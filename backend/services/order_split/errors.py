class OrderSplitError(Exception):
    """Base error for a single order that could not be classified or split."""

    def __init__(self, message: str, order_number: str | None = None):
        super().__init__(message)
        self.order_number = order_number


class MalformedOrderError(OrderSplitError):
    """The order lacks a usable items list, sku, or order number."""


class SplitPreconditionError(OrderSplitError):
    """split_order was called on an order that does not mix sources."""
