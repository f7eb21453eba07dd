from config import settings
from schemas import ApiInfoResponse, SplitConfigResponse
from services.order_split_service import split_config_from_settings


def get_api_info() -> ApiInfoResponse:
    config = split_config_from_settings()
    return ApiInfoResponse(
        shipstation_base_url=settings.shipstation_base_url,
        split=SplitConfigResponse(
            primary_sku_prefix=config.primary_sku_prefix,
            primary_suffix=config.primary_suffix,
            secondary_suffix=config.secondary_suffix,
        ),
        dry_run=settings.split_dry_run,
        webhook_token_required=bool(settings.webhook_token),
    )
