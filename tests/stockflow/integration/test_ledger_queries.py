"""Integration tests for ledger reads and paged fetching through the repositories."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from protean import current_domain
from stockflow.shared import queries
from stockflow.stock import repository as stock_repository
from stockflow.stock.history import ChangeReason, InventoryChange

NOW = datetime.now(UTC)
PRODUCT_ID = str(uuid4())
WAREHOUSE_ID = str(uuid4())


def _add_entry(days_ago, reason=ChangeReason.SALE, product_id=PRODUCT_ID):
    entry = InventoryChange.record(
        product_id=product_id,
        warehouse_id=WAREHOUSE_ID,
        reason=reason,
        previous_quantity=10,
        new_quantity=9 if reason == ChangeReason.SALE else 11,
        created_at=NOW - timedelta(days=days_ago),
    )
    current_domain.repository_for(InventoryChange).add(entry)
    return entry


@pytest.fixture
def loaded(monkeypatch):
    """Entries as returned by the provider, before any in-process filtering."""
    rows = []

    def recording_fetch_all(queryset, *args, **kwargs):
        items = queries.fetch_all(queryset, *args, **kwargs)
        rows.extend(items)
        return items

    monkeypatch.setattr(stock_repository, "fetch_all", recording_fetch_all)
    return rows


class TestTimeBoundedLedgerQueries:
    def test_sales_since_does_not_load_older_sales(self, loaded):
        _add_entry(days_ago=90)
        _add_entry(days_ago=45)
        recent = _add_entry(days_ago=2)

        sales = current_domain.repository_for(InventoryChange).sales_since(NOW - timedelta(days=30))

        assert [str(s.id) for s in sales] == [str(recent.id)]
        assert [str(e.id) for e in loaded] == [str(recent.id)]

    def test_sales_since_skips_other_reasons(self, loaded):
        _add_entry(days_ago=1, reason=ChangeReason.RESTOCK)
        current_domain.repository_for(InventoryChange).sales_since(NOW - timedelta(days=30))
        assert loaded == []

    def test_history_since_does_not_load_older_entries(self, loaded):
        _add_entry(days_ago=60)
        recent = _add_entry(days_ago=3)

        history = current_domain.repository_for(InventoryChange).history_for(
            PRODUCT_ID, WAREHOUSE_ID, reason=ChangeReason.SALE, since=NOW - timedelta(days=30)
        )

        assert [str(e.id) for e in history] == [str(recent.id)]
        assert [str(e.id) for e in loaded] == [str(recent.id)]

    def test_history_without_since_loads_everything(self):
        _add_entry(days_ago=60)
        _add_entry(days_ago=3)
        history = current_domain.repository_for(InventoryChange).history_for(PRODUCT_ID, WAREHOUSE_ID)
        assert len(history) == 2
        assert history[0].created_at < history[1].created_at


class TestFetchAll:
    def test_pages_cover_every_row_once_in_id_order(self):
        entries = [_add_entry(days_ago=d, product_id=str(uuid4())) for d in range(7)]
        query = current_domain.repository_for(InventoryChange)._dao.query

        fetched = queries.fetch_all(query, page_size=2)

        fetched_ids = [str(e.id) for e in fetched]
        assert fetched_ids == sorted(str(e.id) for e in entries)

    def test_exact_multiple_of_page_size(self):
        for d in range(4):
            _add_entry(days_ago=d, product_id=str(uuid4()))
        query = current_domain.repository_for(InventoryChange)._dao.query
        assert len(queries.fetch_all(query, page_size=2)) == 4

    def test_empty_queryset(self):
        query = current_domain.repository_for(InventoryChange)._dao.query
        assert queries.fetch_all(query, page_size=2) == []
