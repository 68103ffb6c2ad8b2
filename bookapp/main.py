"""FastAPI entrypoint for the book catalogue service."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookapp.config import settings
from bookapp.db.connection import SCHEMA_TABLES, DataAccessError, close_pool, fetchval
from bookapp.models.common_model import DOMAIN_ERROR_TYPES, ErrorResponse
from bookapp.routers import authors, books, categories, users
from bookapp.utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_ERROR = "An error occurred while processing the request."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting book catalogue API (%s)", settings.app_env)
    yield
    logger.info("Shutting down book catalogue API")
    await close_pool()


app = FastAPI(
    title="Book Catalogue API",
    version="0.1.0",
    description="Books, authors, categories, users and star ratings.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(exclude_none=True),
        headers=headers,
    )


def validation_message(error: dict) -> str:
    """Message of one validation error, prefixed with the offending field for generic errors."""
    message = error["msg"]
    if error["type"] in DOMAIN_ERROR_TYPES:
        return message
    loc = error.get("loc") or ()
    if not loc or not isinstance(loc[-1], str) or loc[-1] == "body":
        return message
    return f"{loc[-1]}: {message}"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = validation_message(errors[0]) if errors else "Invalid input"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(DataAccessError)
async def data_access_exception_handler(request: Request, exc: DataAccessError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


@app.exception_handler(ValidationError)
@app.exception_handler(ResponseValidationError)
async def serialization_exception_handler(request: Request, exc: Exception):
    # a stored row the response models reject
    logger.error("Could not serialize response for %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


@app.get("/health", tags=["health"])
async def healthcheck():
    """Basic health check."""
    return {"status": "ok", "env": settings.app_env}


@app.get("/health/db", tags=["health"])
async def db_healthcheck():
    """Database connectivity health check."""
    try:
        version = await fetchval("SELECT version()")
        counts = {}
        for table in SCHEMA_TABLES:
            counts[table] = await fetchval(f"SELECT COUNT(*) FROM {table}")
    except DataAccessError as e:
        logger.warning("Database health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "error": str(e)},
        )
    return {
        "status": "connected",
        "database": {
            "version": version.split(",")[0] if version else "unknown",
            "counts": counts,
        },
    }


app.include_router(books.router, prefix="/books", tags=["books"])
app.include_router(authors.router, prefix="/authors", tags=["authors"])
app.include_router(categories.router, prefix="/categories", tags=["categories"])
app.include_router(users.router, prefix="/users", tags=["users"])
