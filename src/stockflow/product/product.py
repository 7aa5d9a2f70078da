"""Product aggregate — a sellable item in one company's catalog.

SKUs are stored trimmed and upper-cased; uniqueness per company is enforced
by the creation handler because it needs a repository lookup. Bundle
products declare their components as child entities; the components only
record composition and are not used to derive stock.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String

from stockflow.domain import stockflow
from stockflow.exceptions import ConflictError
from stockflow.product.events import BundleComponentAdded, ProductCreated

DEFAULT_LOW_STOCK_THRESHOLD = 10


def normalize_sku(sku: str) -> str:
    return sku.strip().upper()


@stockflow.entity(part_of="Product")
class BundleComponent:
    """One unit of the owning bundle consumes ``quantity`` units of the component."""

    component_product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@stockflow.aggregate
class Product:
    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    sku = String(required=True, max_length=50)
    price = Float(required=True, min_value=0.0)
    is_bundle = Boolean(default=False)
    low_stock_threshold = Integer(default=DEFAULT_LOW_STOCK_THRESHOLD, min_value=0)
    supplier_id = Identifier()
    components = HasMany(BundleComponent)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(
        cls,
        company_id,
        name,
        sku,
        price,
        is_bundle=False,
        low_stock_threshold=None,
        supplier_id=None,
    ):
        now = datetime.now(UTC)
        if low_stock_threshold is None:
            low_stock_threshold = DEFAULT_LOW_STOCK_THRESHOLD

        product = cls(
            company_id=str(company_id),
            name=name.strip(),
            sku=normalize_sku(sku),
            price=price,
            is_bundle=bool(is_bundle),
            low_stock_threshold=low_stock_threshold,
            supplier_id=str(supplier_id) if supplier_id else None,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                company_id=product.company_id,
                name=product.name,
                sku=product.sku,
                price=product.price,
                is_bundle=product.is_bundle,
                low_stock_threshold=product.low_stock_threshold,
                supplier_id=product.supplier_id,
                created_at=now,
            )
        )
        return product

    def add_component(self, component_product_id, quantity):
        """Declare that one unit of this bundle consumes ``quantity`` units of another product."""
        if not self.is_bundle:
            raise ValidationError({"bundle_product_id": ["Product is not a bundle"]})
        if str(component_product_id) == str(self.id):
            raise ValidationError({"component_product_id": ["A bundle cannot contain itself"]})
        if any(str(c.component_product_id) == str(component_product_id) for c in (self.components or [])):
            raise ConflictError({"component_product_id": ["Product is already a component of this bundle"]})

        self.add_components(BundleComponent(component_product_id=str(component_product_id), quantity=quantity))
        self.updated_at = datetime.now(UTC)
        self.raise_(
            BundleComponentAdded(
                product_id=str(self.id),
                component_product_id=str(component_product_id),
                quantity=quantity,
                added_at=self.updated_at,
            )
        )
