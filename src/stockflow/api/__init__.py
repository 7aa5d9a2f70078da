from stockflow.api.errors import register_error_handlers
from stockflow.api.routes import company_router, product_router

__all__ = ["company_router", "product_router", "register_error_handlers"]
