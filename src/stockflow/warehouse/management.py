"""Warehouse management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from stockflow.company.company import Company
from stockflow.domain import stockflow
from stockflow.warehouse.warehouse import Warehouse


@stockflow.command(part_of="Warehouse")
class CreateWarehouse:
    """Open a new warehouse for a company."""

    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    location = String(max_length=255)


@stockflow.command(part_of="Warehouse")
class UpdateWarehouse:
    """Rename or relocate a warehouse."""

    company_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    name = String(max_length=255)
    location = String(max_length=255)


@stockflow.command_handler(part_of=Warehouse)
class WarehouseManagementHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        # Raises ObjectNotFoundError for unknown companies
        current_domain.repository_for(Company).get(command.company_id)

        warehouse = Warehouse.create(
            company_id=command.company_id,
            name=command.name,
            location=command.location,
        )
        current_domain.repository_for(Warehouse).add(warehouse)
        return str(warehouse.id)

    @handle(UpdateWarehouse)
    def update_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        warehouse = repo.get(command.warehouse_id)
        if str(warehouse.company_id) != str(command.company_id):
            raise ObjectNotFoundError({"warehouse_id": ["Warehouse not found for this company"]})

        warehouse.update_details(name=command.name, location=command.location)
        repo.add(warehouse)
