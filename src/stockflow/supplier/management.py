"""Supplier management — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from stockflow.company.company import Company
from stockflow.domain import stockflow
from stockflow.supplier.supplier import Supplier


@stockflow.command(part_of="Supplier")
class AddSupplier:
    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    contact_email = String(required=True, max_length=254)


@stockflow.command_handler(part_of=Supplier)
class SupplierManagementHandler:
    @handle(AddSupplier)
    def add_supplier(self, command):
        current_domain.repository_for(Company).get(command.company_id)

        supplier = Supplier.add(
            company_id=command.company_id,
            name=command.name,
            contact_email=command.contact_email,
        )
        current_domain.repository_for(Supplier).add(supplier)
        return str(supplier.id)
