import logging

from fastapi import FastAPI

from api import info_router, webhooks_router
from config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("order-splitter")

app = FastAPI(title="ShipStation Order Splitter")

app.include_router(info_router)
app.include_router(webhooks_router)


@app.on_event("startup")
async def _on_startup() -> None:
    if settings.split_dry_run:
        logger.warning(
            "SPLIT_DRY_RUN is enabled; split orders will be logged but not submitted to ShipStation."
        )
    if not settings.webhook_token:
        logger.warning(
            "WEBHOOK_TOKEN is not set; the webhook endpoint accepts unauthenticated requests."
        )
