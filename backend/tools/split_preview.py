import asyncio
import json
import sys
from pathlib import Path
from pprint import pprint
from typing import Any, Dict, List

from dotenv import load_dotenv

from services.order_split_service import process_orders, split_config_from_settings
from shipstation import create_shipstation_client

USAGE = "usage: python -m tools.split_preview <orders.json | resource_url>"


def _load_orders_file(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict) and isinstance(data.get("orders"), list):
        return data["orders"]
    if isinstance(data, list):
        return data
    return [data]


async def preview(source: str) -> None:
    if source.startswith(("http://", "https://")):
        orders = await create_shipstation_client().fetch_orders(source)
    else:
        orders = _load_orders_file(Path(source))

    report = await process_orders(orders, None, split_config_from_settings(), dry_run=True)
    for outcome in report.outcomes:
        print(f"[{outcome.status.upper()}] {outcome.order_number or '<unknown>'}")
        if outcome.error:
            print(f"    {outcome.error}")
        for derived in outcome.orders:
            pprint(derived)
    pprint(
        {
            "analyzed": report.analyzed,
            "split": report.split,
            "unchanged": report.unchanged,
            "failed": report.failed,
        }
    )


def main() -> None:
    load_dotenv()
    if len(sys.argv) != 2:
        raise SystemExit(USAGE)
    asyncio.run(preview(sys.argv[1]))


if __name__ == "__main__":
    main()
