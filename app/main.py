import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.api_router import api_router
from app.core.config import settings
from app.core.sales_sync import SalesServiceSync
from app.core.startup import configure_logging, ensure_vehicles_table

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Vehicle Management API",
    description="Vehicle inventory CRUD with best-effort sync to the sales service",
    version="1.0.0",
    openapi_url="/openapi.json",
)

# Set up CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    configure_logging()
    logger.info("Starting server: environment=%s port=%s", settings.ENVIRONMENT, settings.PORT)
    await ensure_vehicles_table()
    app.state.sales_sync = SalesServiceSync()


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    sales_sync = getattr(app.state, "sales_sync", None)
    if sales_sync is not None:
        await sales_sync.aclose()


def _serializable_validation_errors(errors) -> list:
    """Flatten pydantic error dicts to {field, message, type} (ctx may contain an Exception)."""
    out = []
    for e in errors:
        out.append(
            {
                "field": ".".join(str(part) for part in e.get("loc", ())),
                "message": e.get("msg"),
                "type": e.get("type"),
            }
        )
    return out


def _validation_error_response(request: Request, errors: list) -> JSONResponse:
    issues = _serializable_validation_errors(errors)
    logger.info(
        "Validation error 400: method=%s path=%s errors=%s",
        request.method,
        request.url.path,
        issues,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation error", "details": {"issues": issues}},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error: method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return _validation_error_response(request, exc.errors())


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})
