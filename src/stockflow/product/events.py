"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from stockflow.domain import stockflow


@stockflow.event(part_of="Product")
class ProductCreated:
    """A product was added to a company's catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    company_id = Identifier(required=True)
    name = String(required=True)
    sku = String(required=True)
    price = Float(required=True)
    is_bundle = Boolean(default=False)
    low_stock_threshold = Integer(required=True)
    supplier_id = Identifier()
    created_at = DateTime(required=True)


@stockflow.event(part_of="Product")
class BundleComponentAdded:
    """A component product was declared as part of a bundle."""

    __version__ = 1

    product_id = Identifier(required=True)
    component_product_id = Identifier(required=True)
    quantity = Integer(required=True)
    added_at = DateTime(required=True)
