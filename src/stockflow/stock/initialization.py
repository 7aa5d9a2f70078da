"""Opening stock positions: a product entering a warehouse for the first time."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockflow.domain import stockflow
from stockflow.exceptions import ConflictError
from stockflow.product.product import Product
from stockflow.stock.history import ChangeReason, InventoryChange
from stockflow.stock.inventory import InventoryRecord
from stockflow.warehouse.warehouse import Warehouse


def open_stock_position(product, warehouse, initial_quantity):
    """Create the InventoryRecord and its ``initial_stock`` ledger entry.

    Shared by product creation and InitializeStock so both paths enforce the
    one-record-per-(product, warehouse) rule and write the same history.
    """
    if str(warehouse.company_id) != str(product.company_id):
        raise ValidationError({"warehouse_id": ["Warehouse does not belong to the product's company"]})

    records = current_domain.repository_for(InventoryRecord)
    if records.find_for(product.id, warehouse.id) is not None:
        raise ConflictError({"warehouse_id": ["Product is already stocked in this warehouse"]})

    record = InventoryRecord.initialize(
        product_id=product.id,
        warehouse_id=warehouse.id,
        initial_quantity=initial_quantity,
    )
    records.add(record)
    current_domain.repository_for(InventoryChange).add(
        InventoryChange.record(
            product_id=product.id,
            warehouse_id=warehouse.id,
            reason=ChangeReason.INITIAL_STOCK,
            previous_quantity=0,
            new_quantity=record.quantity,
            created_at=record.created_at,
        )
    )
    return record


@stockflow.command(part_of="InventoryRecord")
class InitializeStock:
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    initial_quantity = Integer(required=True, min_value=0)


@stockflow.command_handler(part_of=InventoryRecord)
class InitializeStockHandler:
    @handle(InitializeStock)
    def initialize_stock(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        warehouse = current_domain.repository_for(Warehouse).get(command.warehouse_id)

        record = open_stock_position(product, warehouse, command.initial_quantity)
        return str(record.id)
