"""Domain events for the Supplier aggregate."""

from protean.fields import DateTime, Identifier, String

from stockflow.domain import stockflow


@stockflow.event(part_of="Supplier")
class SupplierAdded:
    """A supplier was added to a company's vendor list."""

    __version__ = 1

    supplier_id = Identifier(required=True)
    company_id = Identifier(required=True)
    name = String(required=True)
    contact_email = String(required=True)
    added_at = DateTime(required=True)
