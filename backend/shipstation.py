from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import httpx

from config import settings

logger = logging.getLogger("order-splitter")

CREATE_ORDERS_PATH = "/orders/createorders"


@dataclass
class ShipStationCredentials:
    api_key: str
    api_secret: str | None = None
    base_url: str = "https://ssapi.shipstation.com"
    timeout_seconds: float = 30.0


def _extract_orders(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        return []
    orders = payload.get("orders")
    if isinstance(orders, list):
        return orders
    return []


def _page_count(payload: Any) -> int:
    if not isinstance(payload, dict):
        return 1
    try:
        return max(int(payload.get("pages") or 1), 1)
    except (TypeError, ValueError):
        return 1


class ShipStationClient:
    def __init__(
        self,
        creds: ShipStationCredentials,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.creds = creds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        auth = None
        if self.creds.api_secret:
            auth = httpx.BasicAuth(self.creds.api_key, self.creds.api_secret)
        else:
            headers["Authorization"] = self.creds.api_key
        return httpx.AsyncClient(
            headers=headers,
            auth=auth,
            timeout=self.creds.timeout_seconds,
            transport=self._transport,
        )

    async def fetch_orders(self, resource_url: str) -> List[Dict[str, Any]]:
        """Resolve a webhook resource_url into the full list of orders, all pages."""
        async with self._client() as client:
            response = await client.get(resource_url)
            response.raise_for_status()
            payload = response.json()
            orders = list(_extract_orders(payload))
            pages = _page_count(payload)
            for page in range(2, pages + 1):
                page_url = httpx.URL(resource_url).copy_merge_params({"page": page})
                response = await client.get(page_url)
                response.raise_for_status()
                orders.extend(_extract_orders(response.json()))
        logger.info("Fetched %s order(s) from %s", len(orders), resource_url)
        return orders

    async def create_orders(self, orders: List[Dict[str, Any]]) -> Dict[str, Any]:
        url = f"{self.creds.base_url}{CREATE_ORDERS_PATH}"
        async with self._client() as client:
            response = await client.post(url, json=orders)
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, dict) else {"results": data}


def create_shipstation_client() -> ShipStationClient:
    return ShipStationClient(
        ShipStationCredentials(
            api_key=settings.shipstation_api_key,
            api_secret=settings.shipstation_api_secret,
            base_url=settings.shipstation_base_url,
            timeout_seconds=settings.shipstation_timeout_seconds,
        )
    )
