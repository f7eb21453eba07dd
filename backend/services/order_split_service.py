import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from config import settings
from services.order_split.classifier import needs_split, order_label
from services.order_split.constants import DEFAULT_SPLIT_CONFIG, SplitConfig
from services.order_split.errors import (
    MalformedOrderError,
    OrderSplitError,
    SplitPreconditionError,
)
from services.order_split.splitter import split_order

logger = logging.getLogger("order-splitter")

STATUS_SPLIT = "split"
STATUS_UNCHANGED = "unchanged"
STATUS_FAILED = "failed"

Submitter = Callable[[List[Dict[str, Any]]], Awaitable[Any]]

__all__ = [
    "BatchReport",
    "MalformedOrderError",
    "OrderOutcome",
    "OrderSplitError",
    "SplitConfig",
    "SplitPreconditionError",
    "analyze_order",
    "needs_split",
    "process_orders",
    "split_config_from_settings",
    "split_order",
]


@dataclass
class OrderOutcome:
    order_number: Optional[str]
    status: str
    orders: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class BatchReport:
    outcomes: List[OrderOutcome] = field(default_factory=list)

    def _count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def analyzed(self) -> int:
        return len(self.outcomes)

    @property
    def split(self) -> int:
        return self._count(STATUS_SPLIT)

    @property
    def unchanged(self) -> int:
        return self._count(STATUS_UNCHANGED)

    @property
    def failed(self) -> int:
        return self._count(STATUS_FAILED)

    @property
    def errors(self) -> List[OrderOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == STATUS_FAILED]


def split_config_from_settings() -> SplitConfig:
    return SplitConfig(
        primary_sku_prefix=settings.primary_sku_prefix,
        primary_suffix=settings.primary_order_suffix,
        secondary_suffix=settings.secondary_order_suffix,
    )


def analyze_order(order: Any, config: SplitConfig = DEFAULT_SPLIT_CONFIG) -> OrderOutcome:
    label = order_label(order)
    try:
        if not needs_split(order, config):
            return OrderOutcome(order_number=label, status=STATUS_UNCHANGED)
        primary, secondary = split_order(order, config)
    except OrderSplitError as exc:
        return OrderOutcome(order_number=label, status=STATUS_FAILED, error=str(exc))
    return OrderOutcome(order_number=label, status=STATUS_SPLIT, orders=[primary, secondary])


async def process_orders(
    orders: List[Any],
    submit: Optional[Submitter],
    config: SplitConfig = DEFAULT_SPLIT_CONFIG,
    *,
    dry_run: bool = False,
) -> BatchReport:
    """
    Classify every order and submit each split pair as one bulk call.

    A failure for one order is recorded on its outcome and never stops the
    rest of the batch.
    """
    report = BatchReport()
    for order in orders:
        outcome = analyze_order(order, config)
        report.outcomes.append(outcome)
        if outcome.status == STATUS_FAILED:
            logger.warning(
                "Skipping order %s: %s", outcome.order_number or "<unknown>", outcome.error
            )
            continue
        if outcome.status != STATUS_SPLIT:
            continue
        if dry_run or submit is None:
            logger.info("[DRY RUN] Order %s would be split", outcome.order_number)
            continue
        try:
            await submit(outcome.orders)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            outcome.status = STATUS_FAILED
            outcome.error = f"Submission failed: {exc}"
            logger.warning("Failed to submit split for order %s: %s", outcome.order_number, exc)
            continue
        logger.info(
            "Split order %s into %s",
            outcome.order_number,
            ", ".join(str(item.get("orderNumber")) for item in outcome.orders),
        )
    logger.info(
        "Analyzed %s order(s): %s split, %s unchanged, %s failed",
        report.analyzed,
        report.split,
        report.unchanged,
        report.failed,
    )
    return report
