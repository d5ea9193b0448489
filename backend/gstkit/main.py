from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from gstkit import __version__
from gstkit.core.config import settings
from gstkit.core.exceptions import GSTError, InvalidArgument, LookupMiss
from gstkit.core.logging_config import get_logger  # ensure file logging is registered at startup
from gstkit.api.v1.api import api_router

logger = get_logger("main")

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="India GST classification, calculation and formatting",
    version=__version__,
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Tenant-Id", "X-User-Id"],
)


def get_cors_headers(request: Request) -> dict:
    """Get CORS headers based on request origin"""
    origin = request.headers.get("origin")
    if origin and origin in settings.CORS_ORIGINS:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Tenant-Id, X-User-Id",
        }
    return {}


def _gst_error_response(request: Request, exc: GSTError, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=get_cors_headers(request)
    )


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    """Negative or non-numeric amounts and rates"""
    logger.info(f"Invalid argument on {request.url.path}: {exc.message}")
    return _gst_error_response(request, exc, status.HTTP_400_BAD_REQUEST)


@app.exception_handler(LookupMiss)
async def lookup_miss_handler(request: Request, exc: LookupMiss):
    """No rate for the HSN/SAC code or tax category"""
    logger.info(f"Rate lookup miss on {request.url.path}: {exc.message}")
    return _gst_error_response(request, exc, status.HTTP_404_NOT_FOUND)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to ensure CORS headers are always sent"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    cors_headers = get_cors_headers(request)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "error": str(exc) if settings.DEBUG else "An error occurred"},
        headers=cors_headers
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP exception handler with CORS headers"""
    cors_headers = get_cors_headers(request)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=cors_headers
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation exception handler with CORS headers."""
    cors_headers = get_cors_headers(request)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_errors(exc)},
        headers=cors_headers
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # Pydantic error contexts may hold Decimal or exception objects
    return jsonable_encoder(exc.errors(), custom_encoder={Exception: str})


app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info(f"=== {settings.APP_NAME} {__version__} startup complete ===")


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
