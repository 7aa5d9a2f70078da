"""Alert store backed by the domain's Protean repositories.

The domain is passed in rather than read from ``current_domain``; callers
choose which domain (and therefore which providers) the report reads from.
"""

from datetime import datetime

from stockflow.alerts.store import (
    AlertStore,
    CandidateRow,
    ProductSnapshot,
    SaleEvent,
    SupplierSnapshot,
    WarehouseSnapshot,
)
from stockflow.product.product import Product
from stockflow.shared.queries import fetch_all
from stockflow.stock.history import ChangeReason, InventoryChange
from stockflow.stock.inventory import InventoryRecord
from stockflow.supplier.supplier import Supplier
from stockflow.warehouse.warehouse import Warehouse


class RepositoryAlertStore(AlertStore):
    def __init__(self, domain) -> None:
        self.domain = domain

    def find_recent_sale_product_ids(self, since: datetime) -> set[str]:
        sales = self.domain.repository_for(InventoryChange).sales_since(since)
        return {str(sale.product_id) for sale in sales}

    def join_inventory_with_catalog(self, company_id: str) -> list[CandidateRow]:
        products = {str(p.id): p for p in self.domain.repository_for(Product).for_company(company_id)}
        if not products:
            return []

        records = self.domain.repository_for(InventoryRecord).for_products(products.keys())

        warehouse_ids = sorted({str(r.warehouse_id) for r in records})
        warehouses = {}
        if warehouse_ids:
            query = self.domain.repository_for(Warehouse)._dao.query.filter(id__in=warehouse_ids)
            warehouses = {str(w.id): w for w in fetch_all(query)}

        suppliers = {
            str(s.id): s
            for s in fetch_all(self.domain.repository_for(Supplier)._dao.query.filter(company_id=str(company_id)))
        }

        rows = []
        for record in records:
            product = products[str(record.product_id)]
            warehouse = warehouses.get(str(record.warehouse_id))
            if warehouse is None:
                continue

            supplier = suppliers.get(str(product.supplier_id)) if product.supplier_id else None
            rows.append(
                CandidateRow(
                    quantity=record.quantity,
                    product=ProductSnapshot(
                        id=str(product.id),
                        company_id=str(product.company_id),
                        name=product.name,
                        sku=product.sku,
                        low_stock_threshold=product.low_stock_threshold,
                    ),
                    warehouse=WarehouseSnapshot(id=str(warehouse.id), name=warehouse.name),
                    supplier=(
                        SupplierSnapshot(
                            id=str(supplier.id),
                            name=supplier.name,
                            contact_email=supplier.contact_email.address,
                        )
                        if supplier is not None
                        else None
                    ),
                )
            )
        return rows

    def find_sale_events(self, product_id: str, warehouse_id: str, since: datetime) -> list[SaleEvent]:
        entries = self.domain.repository_for(InventoryChange).history_for(
            product_id, warehouse_id, reason=ChangeReason.SALE, since=since
        )
        return [
            SaleEvent(
                product_id=str(entry.product_id),
                warehouse_id=str(entry.warehouse_id),
                change=entry.change,
                created_at=entry.created_at,
            )
            for entry in entries
        ]
