"""In-memory alert store for development and testing.

Holds candidate rows and sale events in plain lists, records every call it
receives, and can be told to fail a given query to exercise the report's
failure handling.
"""

from datetime import datetime

from stockflow.alerts.store import AlertStore, CandidateRow, SaleEvent
from stockflow.shared.timestamps import as_utc


class InMemoryAlertStore(AlertStore):
    def __init__(self, rows: list[CandidateRow] | None = None, sales: list[SaleEvent] | None = None) -> None:
        self.rows: list[CandidateRow] = list(rows or [])
        self.sales: list[SaleEvent] = list(sales or [])
        self.calls: list[dict] = []
        self.failing: dict[str, Exception] = {}

    def add_row(self, row: CandidateRow) -> None:
        self.rows.append(row)

    def add_sale(self, sale: SaleEvent) -> None:
        self.sales.append(sale)

    def fail_on(self, method: str, error: Exception | None = None) -> None:
        """Make ``method`` raise ``error`` (a ``RuntimeError`` by default) on its next calls."""
        self.failing[method] = error or RuntimeError(f"{method} failed")

    def _record(self, method: str, **kwargs) -> None:
        self.calls.append({"method": method, **kwargs})
        if method in self.failing:
            raise self.failing[method]

    def find_recent_sale_product_ids(self, since: datetime) -> set[str]:
        self._record("find_recent_sale_product_ids", since=since)
        since = as_utc(since)
        return {sale.product_id for sale in self.sales if as_utc(sale.created_at) >= since}

    def join_inventory_with_catalog(self, company_id: str) -> list[CandidateRow]:
        self._record("join_inventory_with_catalog", company_id=company_id)
        return [row for row in self.rows if row.product.company_id == company_id]

    def find_sale_events(self, product_id: str, warehouse_id: str, since: datetime) -> list[SaleEvent]:
        self._record("find_sale_events", product_id=product_id, warehouse_id=warehouse_id, since=since)
        since = as_utc(since)
        matching = [
            sale
            for sale in self.sales
            if sale.product_id == product_id
            and sale.warehouse_id == warehouse_id
            and as_utc(sale.created_at) >= since
        ]
        return sorted(matching, key=lambda sale: as_utc(sale.created_at))
