"""Domain events for the Company aggregate."""

from protean.fields import DateTime, Identifier, String

from stockflow.domain import stockflow


@stockflow.event(part_of="Company")
class CompanyRegistered:
    """A new tenant company was registered."""

    __version__ = 1

    company_id = Identifier(required=True)
    name = String(required=True)
    registered_at = DateTime(required=True)
