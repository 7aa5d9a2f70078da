"""Declaring which products a bundle consumes."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockflow.domain import stockflow
from stockflow.product.product import Product


@stockflow.command(part_of="Product")
class AddBundleComponent:
    bundle_product_id = Identifier(required=True)
    component_product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@stockflow.command_handler(part_of=Product)
class BundleCompositionHandler:
    @handle(AddBundleComponent)
    def add_bundle_component(self, command):
        repo = current_domain.repository_for(Product)
        bundle = repo.get(command.bundle_product_id)
        component = repo.get(command.component_product_id)

        if str(component.company_id) != str(bundle.company_id):
            raise ValidationError({"component_product_id": ["Component must belong to the bundle's company"]})

        bundle.add_component(component_product_id=component.id, quantity=command.quantity)
        repo.add(bundle)
