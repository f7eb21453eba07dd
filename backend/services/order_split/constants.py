from dataclasses import dataclass

PRIMARY_SKU_PREFIX = "ba001"
PRIMARY_ORDER_SUFFIX = "-banner"
SECONDARY_ORDER_SUFFIX = "-split"

# Identity keys dropped so the secondary order is created as a new upstream order
IDENTITY_FIELDS = ("orderKey", "orderId")

# Accounting for the secondary portion is settled outside this service
MONETARY_FIELDS = ("amountPaid", "taxAmount", "shippingAmount")


@dataclass(frozen=True)
class SplitConfig:
    primary_sku_prefix: str = PRIMARY_SKU_PREFIX
    primary_suffix: str = PRIMARY_ORDER_SUFFIX
    secondary_suffix: str = SECONDARY_ORDER_SUFFIX


DEFAULT_SPLIT_CONFIG = SplitConfig()
