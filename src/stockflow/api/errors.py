"""HTTP mapping for domain exceptions.

Protean's integration covers ValidationError (400) and ObjectNotFoundError
(404); the project exceptions are mapped here.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from stockflow.exceptions import AlertGenerationError, ConflictError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": exc.messages})

    @app.exception_handler(AlertGenerationError)
    async def alert_generation_error_handler(request: Request, exc: AlertGenerationError) -> JSONResponse:
        logger.error("Low stock report failed", path=request.url.path, cause=repr(exc.__cause__))
        return JSONResponse(status_code=500, content={"error": str(exc)})
