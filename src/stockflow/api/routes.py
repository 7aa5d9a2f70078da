"""FastAPI routes for the StockFlow domain — companies, catalog, stock and alerts.

Thin adapters: request schema -> command (or repository read) -> response.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from stockflow.alerts.generator import LowStockAlertGenerator
from stockflow.alerts.repository_store import RepositoryAlertStore
from stockflow.alerts.store import AlertStore
from stockflow.api.schemas import (
    AddBundleComponentRequest,
    AddSupplierRequest,
    CompanyIdResponse,
    CreateProductRequest,
    CreateWarehouseRequest,
    HistoryEntry,
    HistoryResponse,
    InitializeStockRequest,
    InventoryLevel,
    InventoryLevelsResponse,
    InventoryRecordIdResponse,
    LowStockAlertsResponse,
    ProductCreatedResponse,
    ProductListResponse,
    ProductSummary,
    RecordSaleRequest,
    RegisterCompanyRequest,
    RestockRequest,
    StatusResponse,
    StockChangedResponse,
    SupplierContact,
    SupplierIdResponse,
    UpdateWarehouseRequest,
    WarehouseIdResponse,
)
from stockflow.company.registration import RegisterCompany
from stockflow.product.bundles import AddBundleComponent
from stockflow.product.creation import CreateProduct
from stockflow.product.product import Product
from stockflow.shared.identifiers import validate_identifier
from stockflow.shared.queries import fetch_all
from stockflow.stock.history import InventoryChange
from stockflow.stock.initialization import InitializeStock
from stockflow.stock.inventory import InventoryRecord
from stockflow.stock.receiving import RestockInventory
from stockflow.stock.sales import RecordSale
from stockflow.supplier.management import AddSupplier
from stockflow.supplier.supplier import Supplier
from stockflow.utils.logging import add_context
from stockflow.warehouse.management import CreateWarehouse, UpdateWarehouse


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
async def get_alert_store() -> AlertStore:
    """Alert store reading from the domain bound to the current request."""
    return RepositoryAlertStore(current_domain)


async def get_now() -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Company Router
# ---------------------------------------------------------------------------
company_router = APIRouter(prefix="/companies", tags=["companies"])


@company_router.post("", status_code=201, response_model=CompanyIdResponse)
async def register_company(body: RegisterCompanyRequest) -> CompanyIdResponse:
    result = current_domain.process(RegisterCompany(name=body.name), asynchronous=False)
    return CompanyIdResponse(company_id=result)


@company_router.post("/{company_id}/warehouses", status_code=201, response_model=WarehouseIdResponse)
async def create_warehouse(company_id: str, body: CreateWarehouseRequest) -> WarehouseIdResponse:
    command = CreateWarehouse(
        company_id=company_id,
        name=body.name,
        location=body.location,
    )
    result = current_domain.process(command, asynchronous=False)
    return WarehouseIdResponse(warehouse_id=result)


@company_router.put("/{company_id}/warehouses/{warehouse_id}", response_model=StatusResponse)
async def update_warehouse(company_id: str, warehouse_id: str, body: UpdateWarehouseRequest) -> StatusResponse:
    command = UpdateWarehouse(
        company_id=company_id,
        warehouse_id=warehouse_id,
        name=body.name,
        location=body.location,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@company_router.post("/{company_id}/suppliers", status_code=201, response_model=SupplierIdResponse)
async def add_supplier(company_id: str, body: AddSupplierRequest) -> SupplierIdResponse:
    command = AddSupplier(
        company_id=company_id,
        name=body.name,
        contact_email=body.contact_email,
    )
    result = current_domain.process(command, asynchronous=False)
    return SupplierIdResponse(supplier_id=result)


@company_router.get("/{company_id}/alerts/low-stock", response_model=LowStockAlertsResponse)
async def get_low_stock_alerts(
    company_id: str,
    store: AlertStore = Depends(get_alert_store),
    now: datetime = Depends(get_now),
) -> LowStockAlertsResponse:
    """Products below threshold that sold in the last 30 days, with stockout projections."""
    add_context(company_id=company_id)
    report = LowStockAlertGenerator(store).generate(company_id, now=now)
    return LowStockAlertsResponse(**report.to_dict())


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductCreatedResponse)
async def create_product(body: CreateProductRequest) -> ProductCreatedResponse:
    command = CreateProduct(
        company_id=body.company_id,
        name=body.name,
        sku=body.sku,
        price=body.price,
        warehouse_id=body.warehouse_id,
        initial_quantity=body.initial_quantity,
        supplier_id=body.supplier_id,
        low_stock_threshold=body.threshold,
        is_bundle=body.is_bundle,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductCreatedResponse(product_id=product_id, sku=product.sku)


@product_router.get("", response_model=ProductListResponse)
async def list_products(company_id: str | None = None) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    if company_id is not None:
        products = repo.for_company(validate_identifier(company_id, "company_id", "company"))
    else:
        products = repo.list_all()

    supplier_ids = {str(p.supplier_id) for p in products if p.supplier_id}
    suppliers = {}
    if supplier_ids:
        supplier_repo = current_domain.repository_for(Supplier)
        suppliers = {
            str(s.id): s for s in fetch_all(supplier_repo._dao.query.filter(id__in=sorted(supplier_ids)))
        }

    summaries = []
    for product in products:
        supplier = suppliers.get(str(product.supplier_id)) if product.supplier_id else None
        summaries.append(
            ProductSummary(
                id=str(product.id),
                name=product.name,
                sku=product.sku,
                price=product.price,
                threshold=product.low_stock_threshold,
                is_bundle=product.is_bundle,
                supplier=(
                    SupplierContact(
                        id=str(supplier.id),
                        name=supplier.name,
                        contact_email=supplier.contact_email.address,
                    )
                    if supplier is not None
                    else None
                ),
                created_at=product.created_at,
            )
        )
    return ProductListResponse(products=summaries, count=len(summaries))


@product_router.post("/{product_id}/bundle-components", status_code=201, response_model=StatusResponse)
async def add_bundle_component(product_id: str, body: AddBundleComponentRequest) -> StatusResponse:
    command = AddBundleComponent(
        bundle_product_id=product_id,
        component_product_id=body.component_product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.post("/{product_id}/stock", status_code=201, response_model=InventoryRecordIdResponse)
async def initialize_stock(product_id: str, body: InitializeStockRequest) -> InventoryRecordIdResponse:
    command = InitializeStock(
        product_id=product_id,
        warehouse_id=body.warehouse_id,
        initial_quantity=body.initial_quantity,
    )
    result = current_domain.process(command, asynchronous=False)
    return InventoryRecordIdResponse(inventory_record_id=result)


@product_router.post("/{product_id}/sell", response_model=StockChangedResponse)
async def record_sale(product_id: str, body: RecordSaleRequest) -> StockChangedResponse:
    command = RecordSale(
        product_id=product_id,
        warehouse_id=body.warehouse_id,
        quantity=body.quantity,
    )
    new_quantity = current_domain.process(command, asynchronous=False)
    return StockChangedResponse(message="Sale recorded", new_quantity=new_quantity)


@product_router.post("/{product_id}/restock", response_model=StockChangedResponse)
async def restock(product_id: str, body: RestockRequest) -> StockChangedResponse:
    command = RestockInventory(
        product_id=product_id,
        warehouse_id=body.warehouse_id,
        quantity=body.quantity,
    )
    new_quantity = current_domain.process(command, asynchronous=False)
    return StockChangedResponse(message="Restock recorded", new_quantity=new_quantity)


@product_router.get("/{product_id}/inventory", response_model=InventoryLevelsResponse)
async def get_inventory_levels(product_id: str) -> InventoryLevelsResponse:
    records = current_domain.repository_for(InventoryRecord).for_product(product_id)
    return InventoryLevelsResponse(
        product_id=product_id,
        inventory=[
            InventoryLevel(
                warehouse_id=str(r.warehouse_id),
                quantity=r.quantity,
                updated_at=r.updated_at,
            )
            for r in records
        ],
    )


@product_router.get("/{product_id}/history", response_model=HistoryResponse)
async def get_history(product_id: str, warehouse_id: str) -> HistoryResponse:
    entries = current_domain.repository_for(InventoryChange).history_for(product_id, warehouse_id)
    return HistoryResponse(
        product_id=product_id,
        warehouse_id=warehouse_id,
        history=[
            HistoryEntry(
                change=e.change,
                reason=e.reason,
                previous_quantity=e.previous_quantity,
                new_quantity=e.new_quantity,
                created_at=e.created_at,
            )
            for e in entries
        ],
    )
