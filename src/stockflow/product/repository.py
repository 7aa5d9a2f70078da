"""Repository for the Product aggregate."""

from stockflow.domain import stockflow
from stockflow.product.product import Product, normalize_sku
from stockflow.shared.queries import fetch_all


@stockflow.repository(part_of=Product)
class ProductRepository:
    def find_by_sku(self, company_id, sku) -> Product | None:
        """Find a company's product by SKU (case and surrounding whitespace ignored)."""
        items = self._dao.query.filter(company_id=str(company_id), sku=normalize_sku(sku)).all().items
        return items[0] if items else None

    def for_company(self, company_id) -> list[Product]:
        return fetch_all(self._dao.query.filter(company_id=str(company_id)))

    def list_all(self) -> list[Product]:
        return fetch_all(self._dao.query)
