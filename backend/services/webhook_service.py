import logging

from config import settings
from schemas import NewOrdersResponse, OrderOutcomeResponse, ShipStationWebhook
from services.order_split_service import process_orders, split_config_from_settings
from shipstation import ShipStationClient

logger = logging.getLogger("order-splitter")

ORDER_NOTIFY = "ORDER_NOTIFY"


async def handle_new_orders(
    payload: ShipStationWebhook,
    client: ShipStationClient,
) -> NewOrdersResponse:
    if payload.resource_type and payload.resource_type.upper() != ORDER_NOTIFY:
        logger.info("Ignoring %s notification", payload.resource_type)
        return NewOrdersResponse(message=f"Ignored {payload.resource_type} notification.")

    orders = await client.fetch_orders(payload.resource_url)
    report = await process_orders(
        orders,
        client.create_orders,
        split_config_from_settings(),
        dry_run=settings.split_dry_run,
    )
    return NewOrdersResponse(
        message=f"Analyzed {report.analyzed} new order(s).",
        analyzed=report.analyzed,
        split=report.split,
        unchanged=report.unchanged,
        failed=report.failed,
        dry_run=settings.split_dry_run,
        results=[
            OrderOutcomeResponse(
                order_number=outcome.order_number,
                status=outcome.status,
                orders=outcome.orders,
                error=outcome.error,
            )
            for outcome in report.outcomes
        ],
        data=orders,
    )
