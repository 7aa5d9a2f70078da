"""StockFlow bounded context — multi-company inventory tracking.

Owns the catalog (companies, warehouses, suppliers, products), per-warehouse
stock levels with their append-only change history, and the low-stock alert
report built on top of them.
"""

from protean.domain import Domain

from stockflow.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

stockflow = Domain(name="stockflow")
