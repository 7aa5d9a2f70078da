"""Domain events for the InventoryRecord aggregate."""

from protean.fields import DateTime, Identifier, Integer

from stockflow.domain import stockflow


@stockflow.event(part_of="InventoryRecord")
class StockInitialized:
    """A product entered a warehouse with its opening quantity."""

    __version__ = 1

    inventory_record_id = Identifier(required=True)
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    initial_quantity = Integer(required=True)
    initialized_at = DateTime(required=True)


@stockflow.event(part_of="InventoryRecord")
class StockSold:
    """Units left the warehouse through a sale."""

    __version__ = 1

    inventory_record_id = Identifier(required=True)
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    sold_at = DateTime(required=True)


@stockflow.event(part_of="InventoryRecord")
class StockRestocked:
    """Units were received into the warehouse."""

    __version__ = 1

    inventory_record_id = Identifier(required=True)
    product_id = Identifier(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    restocked_at = DateTime(required=True)
