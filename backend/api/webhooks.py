import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from auth import verify_webhook_token
from schemas import NewOrdersResponse, ShipStationWebhook
from services.webhook_service import handle_new_orders
from shipstation import ShipStationClient, create_shipstation_client

router = APIRouter(
    prefix="/api/webhooks/shipstation",
    tags=["webhooks"],
    dependencies=[Depends(verify_webhook_token)],
)


def get_shipstation_client() -> ShipStationClient:
    return create_shipstation_client()


@router.post("/orders", response_model=NewOrdersResponse)
async def receive_new_orders(
    payload: ShipStationWebhook,
    client: ShipStationClient = Depends(get_shipstation_client),
) -> NewOrdersResponse:
    try:
        return await handle_new_orders(payload, client)
    except httpx.HTTPError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"ShipStation request failed: {exc}",
        ) from exc
