"""Restocking: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockflow.domain import stockflow
from stockflow.stock.history import ChangeReason, InventoryChange
from stockflow.stock.inventory import InventoryRecord


@stockflow.command(part_of="InventoryRecord")
class RestockInventory:
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@stockflow.command_handler(part_of=InventoryRecord)
class RestockInventoryHandler:
    @handle(RestockInventory)
    def restock_inventory(self, command):
        records = current_domain.repository_for(InventoryRecord)
        record = records.find_for(command.product_id, command.warehouse_id)
        if record is None:
            raise ObjectNotFoundError({"inventory": ["Inventory not found"]})

        previous = record.quantity
        record.restock(command.quantity)
        records.add(record)
        current_domain.repository_for(InventoryChange).add(
            InventoryChange.record(
                product_id=record.product_id,
                warehouse_id=record.warehouse_id,
                reason=ChangeReason.RESTOCK,
                previous_quantity=previous,
                new_quantity=record.quantity,
                created_at=record.updated_at,
            )
        )
        return record.quantity
