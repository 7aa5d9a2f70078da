"""Alert store port (abstract interface).

The low-stock report reads through this interface only, so the generator can
run against the Protean repositories in the application and against an
in-memory store in tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SaleEvent:
    """The parts of a ``sale`` ledger entry the estimator needs."""

    product_id: str
    warehouse_id: str
    change: int
    created_at: datetime


@dataclass(frozen=True)
class ProductSnapshot:
    id: str
    company_id: str
    name: str
    sku: str
    low_stock_threshold: int


@dataclass(frozen=True)
class WarehouseSnapshot:
    id: str
    name: str


@dataclass(frozen=True)
class SupplierSnapshot:
    id: str
    name: str
    contact_email: str


@dataclass(frozen=True)
class CandidateRow:
    """One inventory record joined with its catalog data."""

    quantity: int
    product: ProductSnapshot
    warehouse: WarehouseSnapshot
    supplier: SupplierSnapshot | None = None


class AlertStore(ABC):
    """Read-only queries backing the low-stock report."""

    @abstractmethod
    def find_recent_sale_product_ids(self, since: datetime) -> set[str]:
        """Distinct product ids with at least one sale at or after ``since``."""
        ...

    @abstractmethod
    def join_inventory_with_catalog(self, company_id: str) -> list[CandidateRow]:
        """Every inventory record of the company's products, joined with catalog data.

        Records whose warehouse no longer resolves are left out.
        """
        ...

    @abstractmethod
    def find_sale_events(self, product_id: str, warehouse_id: str, since: datetime) -> list[SaleEvent]:
        """Sales of one product at one warehouse at or after ``since``, oldest first."""
        ...
