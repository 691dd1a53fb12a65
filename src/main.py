"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, finances, invoices, users
from src.config import get_settings
from src.services.errors import AuthenticationError, FieldErrors, ValidationError
from src.services.validation import required_message, string_message

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Invoice Desk API ({settings.environment})")
    yield


app = FastAPI(
    title="Invoice Desk API",
    description="Multi-tenant invoicing and finance records with token authentication",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def request_errors_to_fields(exc: RequestValidationError) -> FieldErrors:
    """Flatten pydantic errors into a field -> messages mapping."""
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        if error["type"] == "json_invalid" or len(loc) < 2:
            field = "body"
        else:
            field = str(loc[-1])

        if error["type"] == "json_invalid":
            message = "The request body must be valid JSON."
        elif error["type"] == "missing":
            message = required_message(field)
        elif error["type"] == "string_type":
            message = string_message(field)
        else:
            message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Field-level input errors, including duplicate emails."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": exc.errors},
    )


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    """Bad credentials or an unusable bearer token."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query parameters, in the same shape as field errors."""
    errors = request_errors_to_fields(exc)
    logger.debug(f"Rejected request to {request.url.path}: {list(errors)}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": errors},
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(invoices.router)
app.include_router(finances.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
