"""Warehouse aggregate: a physical location where a company keeps stock."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from stockflow.domain import stockflow
from stockflow.warehouse.events import WarehouseCreated, WarehouseUpdated


@stockflow.aggregate
class Warehouse:
    """A stock location owned by exactly one company."""

    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    location = String(max_length=255)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, company_id, name, location=None):
        """Create a new warehouse."""
        now = datetime.now(UTC)
        warehouse = cls(
            company_id=str(company_id),
            name=name.strip(),
            location=location,
            created_at=now,
            updated_at=now,
        )
        warehouse.raise_(
            WarehouseCreated(
                warehouse_id=str(warehouse.id),
                company_id=str(company_id),
                name=warehouse.name,
                location=location,
                created_at=now,
            )
        )
        return warehouse

    def update_details(self, name=None, location=None):
        """Update warehouse name and/or location."""
        if name is not None:
            self.name = name.strip()
        if location is not None:
            self.location = location
        self.updated_at = datetime.now(UTC)
        self.raise_(
            WarehouseUpdated(
                warehouse_id=str(self.id),
                name=self.name,
                location=self.location,
                updated_at=self.updated_at,
            )
        )
