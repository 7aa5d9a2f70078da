"""Product creation — catalog entry plus its first stock position.

The product, its InventoryRecord and the ``initial_stock`` ledger entry are
written in one unit of work.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from stockflow.company.company import Company
from stockflow.domain import stockflow
from stockflow.exceptions import ConflictError
from stockflow.product.product import Product
from stockflow.stock.initialization import open_stock_position
from stockflow.supplier.supplier import Supplier
from stockflow.warehouse.warehouse import Warehouse

logger = structlog.get_logger(__name__)


@stockflow.command(part_of="Product")
class CreateProduct:
    company_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    sku = String(required=True, max_length=50)
    price = Float(required=True, min_value=0.0)
    warehouse_id = Identifier(required=True)
    initial_quantity = Integer(required=True, min_value=0)
    supplier_id = Identifier()
    low_stock_threshold = Integer(min_value=0)
    is_bundle = Boolean(default=False)


@stockflow.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        current_domain.repository_for(Company).get(command.company_id)
        warehouse = current_domain.repository_for(Warehouse).get(command.warehouse_id)

        if command.supplier_id:
            supplier = current_domain.repository_for(Supplier).get(command.supplier_id)
            if str(supplier.company_id) != str(command.company_id):
                raise ValidationError({"supplier_id": ["Supplier does not belong to this company"]})

        products = current_domain.repository_for(Product)
        if products.find_by_sku(command.company_id, command.sku) is not None:
            raise ConflictError({"sku": ["SKU already exists for this company"]})

        product = Product.create(
            company_id=command.company_id,
            name=command.name,
            sku=command.sku,
            price=command.price,
            is_bundle=command.is_bundle,
            low_stock_threshold=command.low_stock_threshold,
            supplier_id=command.supplier_id,
        )
        products.add(product)
        open_stock_position(product, warehouse, command.initial_quantity)

        logger.info(
            "Product created",
            product_id=str(product.id),
            company_id=str(product.company_id),
            sku=product.sku,
        )
        return str(product.id)
