"""InventoryChange, the append-only ledger of stock movements.

Entries are written by the stock command handlers in the same unit of work
as the InventoryRecord they describe, and are never updated or deleted.
Sales velocity for the low-stock report is derived from the ``sale``
entries.
"""

from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String

from stockflow.domain import stockflow


class ChangeReason(Enum):
    SALE = "sale"
    RESTOCK = "restock"
    INITIAL_STOCK = "initial_stock"


@stockflow.aggregate
class InventoryChange:
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    change = Integer(required=True)
    reason = String(required=True, choices=ChangeReason)
    previous_quantity = Integer(required=True, min_value=0)
    new_quantity = Integer(required=True, min_value=0)
    created_at = DateTime(required=True)

    @classmethod
    def record(cls, product_id, warehouse_id, reason, previous_quantity, new_quantity, created_at):
        """Build a ledger entry whose signed change is ``new_quantity - previous_quantity``."""
        return cls(
            product_id=str(product_id),
            warehouse_id=str(warehouse_id),
            change=new_quantity - previous_quantity,
            reason=reason.value if isinstance(reason, ChangeReason) else reason,
            previous_quantity=previous_quantity,
            new_quantity=new_quantity,
            created_at=created_at,
        )
