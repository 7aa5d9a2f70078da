"""Pydantic request/response schemas for the StockFlow API.

These are external contracts, kept separate from the internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalog Request Schemas
# ---------------------------------------------------------------------------
class RegisterCompanyRequest(BaseModel):
    name: str


class CreateWarehouseRequest(BaseModel):
    name: str
    location: str | None = None


class UpdateWarehouseRequest(BaseModel):
    name: str | None = None
    location: str | None = None


class AddSupplierRequest(BaseModel):
    name: str
    contact_email: str


class CreateProductRequest(BaseModel):
    company_id: str
    name: str
    sku: str
    price: float = Field(ge=0)
    warehouse_id: str
    initial_quantity: int = Field(ge=0)
    supplier_id: str | None = None
    threshold: int | None = Field(default=None, ge=0)
    is_bundle: bool = False


class AddBundleComponentRequest(BaseModel):
    component_product_id: str
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Stock Request Schemas
# ---------------------------------------------------------------------------
class InitializeStockRequest(BaseModel):
    warehouse_id: str
    initial_quantity: int = Field(ge=0, default=0)


class RecordSaleRequest(BaseModel):
    warehouse_id: str
    quantity: int = Field(ge=1)


class RestockRequest(BaseModel):
    warehouse_id: str
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CompanyIdResponse(BaseModel):
    company_id: str


class WarehouseIdResponse(BaseModel):
    warehouse_id: str


class SupplierIdResponse(BaseModel):
    supplier_id: str


class InventoryRecordIdResponse(BaseModel):
    inventory_record_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class ProductCreatedResponse(BaseModel):
    message: str = "Product created successfully"
    product_id: str
    sku: str


class StockChangedResponse(BaseModel):
    message: str
    new_quantity: int


class SupplierContact(BaseModel):
    id: str
    name: str
    contact_email: str


class ProductSummary(BaseModel):
    id: str
    name: str
    sku: str
    price: float
    threshold: int
    is_bundle: bool
    supplier: SupplierContact | None = None
    created_at: datetime | None = None


class ProductListResponse(BaseModel):
    products: list[ProductSummary]
    count: int


class InventoryLevel(BaseModel):
    warehouse_id: str
    quantity: int
    updated_at: datetime | None = None


class InventoryLevelsResponse(BaseModel):
    product_id: str
    inventory: list[InventoryLevel]


class HistoryEntry(BaseModel):
    change: int
    reason: str
    previous_quantity: int
    new_quantity: int
    created_at: datetime


class HistoryResponse(BaseModel):
    product_id: str
    warehouse_id: str
    history: list[HistoryEntry]


# ---------------------------------------------------------------------------
# Low-stock report
# ---------------------------------------------------------------------------
class LowStockAlertSchema(BaseModel):
    product_id: str
    product_name: str
    sku: str
    warehouse_id: str
    warehouse_name: str
    current_stock: int
    threshold: int
    supplier: SupplierContact | None
    days_until_stockout: int


class LowStockAlertsResponse(BaseModel):
    alerts: list[LowStockAlertSchema]
    total_alerts: int
