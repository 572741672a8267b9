"""
FastAPI application - receipt processor entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from receipt_processor.config import get_settings
from receipt_processor.core.logging import setup_logging, get_logger
from receipt_processor.api.router import api_router
from receipt_processor.api.dependencies import get_receipt_service
from receipt_processor.api.error_handlers import (
    generic_exception_handler,
    request_validation_exception_handler
)

# Logging is configured on import
settings = get_settings()
setup_logging(log_level=settings.LOG_LEVEL, is_debug=settings.DEBUG)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifecycle events
    Runs on application startup and shutdown
    """
    # Startup
    logger.info(
        "Starting receipt processor",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG
    )
    get_receipt_service()

    yield

    # Shutdown
    logger.info(
        "Shutting down receipt processor",
        receipts_stored=get_receipt_service().stored_count()
    )


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Scores purchase receipts with reward points",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root():
    """Redirect root to the docs"""
    return RedirectResponse(url="/docs")


@app.get("/ping", include_in_schema=False)
async def ping():
    return {"status": "pong"}


if __name__ == "__main__":
    import uvicorn

    logger.info(
        "Starting server",
        host=settings.HOST,
        port=settings.PORT
    )

    uvicorn.run(
        "receipt_processor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
