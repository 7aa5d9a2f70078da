"""A vendor that replenishes a company's products."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String, ValueObject

from stockflow.domain import stockflow
from stockflow.shared.email import EmailAddress
from stockflow.supplier.events import SupplierAdded


@stockflow.aggregate
class Supplier:
    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    contact_email = ValueObject(EmailAddress, required=True)
    created_at = DateTime()

    @classmethod
    def add(cls, company_id, name, contact_email):
        now = datetime.now(UTC)
        supplier = cls(
            company_id=str(company_id),
            name=name.strip(),
            contact_email=EmailAddress(address=contact_email.strip()),
            created_at=now,
        )
        supplier.raise_(
            SupplierAdded(
                supplier_id=str(supplier.id),
                company_id=str(company_id),
                name=supplier.name,
                contact_email=supplier.contact_email.address,
                added_at=now,
            )
        )
        return supplier
