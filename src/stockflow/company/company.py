"""Company aggregate. The tenant that owns warehouses, suppliers and products."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from stockflow.company.events import CompanyRegistered
from stockflow.domain import stockflow


@stockflow.aggregate
class Company:
    name = String(required=True, max_length=255)
    created_at = DateTime()

    @classmethod
    def register(cls, name):
        now = datetime.now(UTC)
        company = cls(name=name.strip(), created_at=now)
        company.raise_(
            CompanyRegistered(
                company_id=str(company.id),
                name=company.name,
                registered_at=now,
            )
        )
        return company
