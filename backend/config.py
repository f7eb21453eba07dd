import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _get_bool(name: str, fallback: bool = False) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None or raw_value.strip() == "":
        return fallback
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    shipstation_api_key: str = _require_env("SHIPSTATION_API_KEY")
    shipstation_api_secret: str | None = os.getenv("SHIPSTATION_API_SECRET") or None
    shipstation_base_url: str = os.getenv(
        "SHIPSTATION_BASE_URL", "https://ssapi.shipstation.com"
    ).rstrip("/")
    shipstation_timeout_seconds: float = float(
        os.getenv("SHIPSTATION_TIMEOUT_SECONDS", "30")
    )
    primary_sku_prefix: str = os.getenv("PRIMARY_SKU_PREFIX", "ba001")
    primary_order_suffix: str = os.getenv("PRIMARY_ORDER_SUFFIX", "-banner")
    secondary_order_suffix: str = os.getenv("SECONDARY_ORDER_SUFFIX", "-split")
    split_dry_run: bool = _get_bool("SPLIT_DRY_RUN")
    webhook_token: str | None = os.getenv("WEBHOOK_TOKEN") or None
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
