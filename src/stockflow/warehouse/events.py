"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Identifier, String

from stockflow.domain import stockflow


@stockflow.event(part_of="Warehouse")
class WarehouseCreated:
    """A company opened a new warehouse."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    company_id = Identifier(required=True)
    name = String(required=True)
    location = String()
    created_at = DateTime(required=True)


@stockflow.event(part_of="Warehouse")
class WarehouseUpdated:
    """Warehouse name or location changed."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    name = String(required=True)
    location = String()
    updated_at = DateTime(required=True)
