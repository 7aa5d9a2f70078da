"""InventoryRecord aggregate (CQRS) — quantity of one product at one warehouse.

Every quantity change goes through a method here, which raises the matching
domain event carrying the quantity before and after. The command handlers
turn those same numbers into an InventoryChange ledger entry, so the record
and its history never disagree.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from stockflow.domain import stockflow
from stockflow.exceptions import ConflictError
from stockflow.stock.events import StockInitialized, StockRestocked, StockSold


@stockflow.aggregate
class InventoryRecord:
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def initialize(cls, product_id, warehouse_id, initial_quantity=0):
        """Open a stock position for a product entering a warehouse."""
        if initial_quantity is None or initial_quantity < 0:
            raise ValidationError({"initial_quantity": ["Initial quantity must be a non-negative number"]})

        now = datetime.now(UTC)
        record = cls(
            product_id=str(product_id),
            warehouse_id=str(warehouse_id),
            quantity=initial_quantity,
            created_at=now,
            updated_at=now,
        )
        record.raise_(
            StockInitialized(
                inventory_record_id=str(record.id),
                product_id=record.product_id,
                warehouse_id=record.warehouse_id,
                initial_quantity=initial_quantity,
                initialized_at=now,
            )
        )
        return record

    def sell(self, quantity):
        """Remove sold units. Stock can never go below zero."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.quantity:
            raise ConflictError({"quantity": [f"Insufficient stock: {self.quantity} available, {quantity} requested"]})

        previous = self.quantity
        self.quantity = previous - quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockSold(
                inventory_record_id=str(self.id),
                product_id=str(self.product_id),
                warehouse_id=str(self.warehouse_id),
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.quantity,
                sold_at=self.updated_at,
            )
        )

    def restock(self, quantity):
        """Receive units into the warehouse."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        previous = self.quantity
        self.quantity = previous + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockRestocked(
                inventory_record_id=str(self.id),
                product_id=str(self.product_id),
                warehouse_id=str(self.warehouse_id),
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.quantity,
                restocked_at=self.updated_at,
            )
        )
