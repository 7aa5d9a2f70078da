"""Low-stock alert generator.

Builds the low-stock report for one company in four stages, each usable on
its own:

    fetch_recent_activity -> join_candidates -> filter_low_stock -> enrich_with_estimate

A failure in either of the first two stages fails the whole report with
``AlertGenerationError``; no partial list is returned. A failure while
projecting a single row degrades that row's estimate to 0.
"""

from dataclasses import dataclass, field
from datetime import datetime

import structlog

from stockflow.alerts.estimator import SALES_WINDOW, estimate_days_until_stockout
from stockflow.alerts.store import AlertStore, CandidateRow, SupplierSnapshot
from stockflow.exceptions import AlertGenerationError
from stockflow.shared.identifiers import validate_identifier

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LowStockAlert:
    product_id: str
    product_name: str
    sku: str
    warehouse_id: str
    warehouse_name: str
    current_stock: int
    threshold: int
    supplier: SupplierSnapshot | None
    days_until_stockout: int

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "sku": self.sku,
            "warehouse_id": self.warehouse_id,
            "warehouse_name": self.warehouse_name,
            "current_stock": self.current_stock,
            "threshold": self.threshold,
            "supplier": (
                {
                    "id": self.supplier.id,
                    "name": self.supplier.name,
                    "contact_email": self.supplier.contact_email,
                }
                if self.supplier is not None
                else None
            ),
            "days_until_stockout": self.days_until_stockout,
        }


@dataclass(frozen=True)
class LowStockReport:
    alerts: list[LowStockAlert] = field(default_factory=list)

    @property
    def total_alerts(self) -> int:
        return len(self.alerts)

    def to_dict(self) -> dict:
        return {
            "alerts": [alert.to_dict() for alert in self.alerts],
            "total_alerts": self.total_alerts,
        }


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------
def fetch_recent_activity(store: AlertStore, now: datetime) -> set[str]:
    """Product ids with at least one sale in the trailing window (boundary inclusive)."""
    return {str(product_id) for product_id in store.find_recent_sale_product_ids(now - SALES_WINDOW)}


def join_candidates(store: AlertStore, company_id: str, active_product_ids: set[str]) -> list[CandidateRow]:
    """The company's inventory rows whose product sold recently."""
    return [
        row
        for row in store.join_inventory_with_catalog(company_id)
        if str(row.product.company_id) == company_id and str(row.product.id) in active_product_ids
    ]


def filter_low_stock(rows: list[CandidateRow]) -> list[CandidateRow]:
    """Rows strictly below their product's threshold."""
    return [row for row in rows if row.quantity < row.product.low_stock_threshold]


def enrich_with_estimate(store: AlertStore, rows: list[CandidateRow], now: datetime) -> list[LowStockAlert]:
    """Attach a stockout projection to every row, most urgent first."""
    alerts = [
        LowStockAlert(
            product_id=row.product.id,
            product_name=row.product.name,
            sku=row.product.sku,
            warehouse_id=row.warehouse.id,
            warehouse_name=row.warehouse.name,
            current_stock=row.quantity,
            threshold=row.product.low_stock_threshold,
            supplier=row.supplier,
            days_until_stockout=_project_stockout(store, row, now),
        )
        for row in rows
    ]
    return sorted(alerts, key=lambda a: (a.days_until_stockout, a.sku, a.warehouse_name, a.warehouse_id))


def _project_stockout(store: AlertStore, row: CandidateRow, now: datetime) -> int:
    try:
        sales = store.find_sale_events(row.product.id, row.warehouse.id, now - SALES_WINDOW)
        return estimate_days_until_stockout(sales, row.quantity, now)
    except Exception as exc:
        logger.warning(
            "Stockout projection failed, reporting 0 days",
            product_id=row.product.id,
            warehouse_id=row.warehouse.id,
            error=str(exc),
        )
        return 0


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------
class LowStockAlertGenerator:
    """Runs the four stages against an explicitly supplied store."""

    def __init__(self, store: AlertStore) -> None:
        self.store = store

    def generate(self, company_id, now: datetime) -> LowStockReport:
        """Build the low-stock report for ``company_id`` as of ``now``.

        Raises ``ValidationError`` for a malformed company id (before any store
        query) and ``AlertGenerationError`` if the activity or catalog reads fail.
        """
        company_id = validate_identifier(company_id, "company_id", "company")

        try:
            active_product_ids = fetch_recent_activity(self.store, now)
            candidates = join_candidates(self.store, company_id, active_product_ids)
        except Exception as exc:
            logger.error("Error fetching low stock alerts", company_id=company_id, error=str(exc))
            raise AlertGenerationError("Failed to fetch low stock alerts") from exc

        alerts = enrich_with_estimate(self.store, filter_low_stock(candidates), now)

        logger.info(
            "Low stock report generated",
            company_id=company_id,
            recently_sold=len(active_product_ids),
            candidates=len(candidates),
            alert_count=len(alerts),
        )
        return LowStockReport(alerts=alerts)
