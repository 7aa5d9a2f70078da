"""StockFlow FastAPI application.

Web server that processes commands synchronously via HTTP. Every request runs
inside the StockFlow domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from stockflow/domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from stockflow.domain import stockflow
from stockflow.utils.logging import add_context, clear_context

stockflow.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="StockFlow API",
    description="Multi-company inventory tracking with low-stock alerts",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the StockFlow domain context and fresh log context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with stockflow.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from stockflow.api import company_router, product_router, register_error_handlers  # noqa: E402

app.include_router(company_router)
app.include_router(product_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": stockflow.name})
