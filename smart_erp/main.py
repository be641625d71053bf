"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from smart_erp.api import auth, erp, notifications, websocket
from smart_erp.config import get_settings
from smart_erp.exceptions import Conflict, ErpError, ServerError

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Smart ERP API starting ({settings.environment})")
    yield


app = FastAPI(
    title="Smart ERP API",
    description="ERP backend with accounts, notifications and record modules",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def route_template(request: Request) -> str:
    """The matched route pattern, so path parameters such as reset tokens stay out of logs."""
    route = request.scope.get("route")
    return getattr(route, "path", "<unmatched>")


@app.exception_handler(ErpError)
async def erp_error_handler(request: Request, exc: ErpError) -> JSONResponse:
    """Render domain errors as {"detail": message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """A constraint violation that escaped the service layer is a conflict."""
    logger.warning(f"Integrity error on {request.method} {route_template(request)}: {exc.orig}")
    return await erp_error_handler(request, Conflict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    logger.error(
        f"Unhandled error on {request.method} {route_template(request)}: {exc}", exc_info=exc
    )
    return await erp_error_handler(request, ServerError())


# Register routers
app.include_router(auth.router)
app.include_router(notifications.router)
if settings.is_development:
    app.include_router(notifications.dev_router)
app.include_router(websocket.router)
for router in erp.routers:
    app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
