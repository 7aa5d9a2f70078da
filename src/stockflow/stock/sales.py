"""Recording sales — command and handler.

The record update and its ``sale`` ledger entry are added in the same unit
of work; if either fails, neither is committed.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockflow.domain import stockflow
from stockflow.stock.history import ChangeReason, InventoryChange
from stockflow.stock.inventory import InventoryRecord

logger = structlog.get_logger(__name__)


@stockflow.command(part_of="InventoryRecord")
class RecordSale:
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@stockflow.command_handler(part_of=InventoryRecord)
class RecordSaleHandler:
    @handle(RecordSale)
    def record_sale(self, command):
        records = current_domain.repository_for(InventoryRecord)
        record = records.find_for(command.product_id, command.warehouse_id)
        if record is None:
            raise ObjectNotFoundError({"inventory": ["Inventory not found"]})

        previous = record.quantity
        record.sell(command.quantity)
        records.add(record)
        current_domain.repository_for(InventoryChange).add(
            InventoryChange.record(
                product_id=record.product_id,
                warehouse_id=record.warehouse_id,
                reason=ChangeReason.SALE,
                previous_quantity=previous,
                new_quantity=record.quantity,
                created_at=record.updated_at,
            )
        )

        logger.info(
            "Sale recorded",
            product_id=str(record.product_id),
            warehouse_id=str(record.warehouse_id),
            quantity=command.quantity,
            new_quantity=record.quantity,
        )
        return record.quantity
