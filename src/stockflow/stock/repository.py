"""Repositories for stock positions and the change ledger."""

from stockflow.domain import stockflow
from stockflow.shared.queries import fetch_all
from stockflow.shared.timestamps import as_utc
from stockflow.stock.history import ChangeReason, InventoryChange
from stockflow.stock.inventory import InventoryRecord


@stockflow.repository(part_of=InventoryRecord)
class InventoryRecordRepository:
    def find_for(self, product_id, warehouse_id) -> InventoryRecord | None:
        """Return the stock position of a product at a warehouse, if it exists."""
        items = (
            self._dao.query.filter(product_id=str(product_id), warehouse_id=str(warehouse_id)).all().items
        )
        return items[0] if items else None

    def for_product(self, product_id) -> list[InventoryRecord]:
        return fetch_all(self._dao.query.filter(product_id=str(product_id)))

    def for_products(self, product_ids) -> list[InventoryRecord]:
        product_ids = [str(pid) for pid in product_ids]
        if not product_ids:
            return []
        return fetch_all(self._dao.query.filter(product_id__in=product_ids))


@stockflow.repository(part_of=InventoryChange)
class InventoryChangeRepository:
    def history_for(self, product_id, warehouse_id, reason=None, since=None) -> list[InventoryChange]:
        """Ledger entries for one stock position, oldest first.

        ``since`` bounds the query itself; the ``as_utc`` comparison after
        loading only guards against providers returning naive datetimes.
        """
        criteria = {"product_id": str(product_id), "warehouse_id": str(warehouse_id)}
        if reason is not None:
            criteria["reason"] = reason.value if isinstance(reason, ChangeReason) else reason
        if since is not None:
            since = as_utc(since)
            criteria["created_at__gte"] = since

        entries = fetch_all(self._dao.query.filter(**criteria))
        if since is not None:
            entries = [e for e in entries if as_utc(e.created_at) >= since]
        return sorted(entries, key=lambda e: as_utc(e.created_at))

    def sales_since(self, since) -> list[InventoryChange]:
        """``sale`` entries at or after ``since``, in no particular order."""
        since = as_utc(since)
        entries = fetch_all(self._dao.query.filter(reason=ChangeReason.SALE.value, created_at__gte=since))
        return [e for e in entries if as_utc(e.created_at) >= since]
