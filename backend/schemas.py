from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ShipStationWebhook(BaseModel):
    resource_url: str = Field(..., description="URL to fetch the notified resources from")
    resource_type: Optional[str] = Field(
        default=None, description="Notification type, e.g. ORDER_NOTIFY"
    )


class OrderOutcomeResponse(BaseModel):
    order_number: Optional[str]
    status: str
    orders: List[Dict[str, Any]] = []
    error: Optional[str] = None


class NewOrdersResponse(BaseModel):
    message: str
    analyzed: int = 0
    split: int = 0
    unchanged: int = 0
    failed: int = 0
    dry_run: bool = False
    results: List[OrderOutcomeResponse] = []
    data: List[Any] = []


class SplitConfigResponse(BaseModel):
    primary_sku_prefix: str
    primary_suffix: str
    secondary_suffix: str


class ApiInfoResponse(BaseModel):
    shipstation_base_url: str
    split: SplitConfigResponse
    dry_run: bool
    webhook_token_required: bool
