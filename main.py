#!/usr/bin/env python
import traceback
import uuid
from contextlib import asynccontextmanager
from datetime import datetime

import certifi
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from starlette.exceptions import HTTPException

from config import settings
from exceptions import ShopException
from logging_config import logger
from repositories import CustomerRepository, DepartmentRepository, EmployeeRepository
from routers.customers import router as customers_router
from routers.departments import router as departments_router
from routers.employees import router as employees_router
from routers.root import router as root_router


def _mongo_client_options(db_url: str) -> dict:
    # Atlas / TLS connections need the certifi CA bundle
    if db_url.startswith("mongodb+srv://") or "tls=true" in db_url.lower():
        return {"tlsCAFile": certifi.where()}
    return {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Online Shop API server...")
    logger.info(f"Connecting to MongoDB: {settings.DB_NAME}")
    app.state.client = AsyncIOMotorClient(settings.DB_URL, **_mongo_client_options(settings.DB_URL))
    app.state.mongodb = app.state.client[settings.DB_NAME]
    for repository_class in (EmployeeRepository, DepartmentRepository, CustomerRepository):
        await repository_class(app.state.mongodb).ensure_indexes()
    logger.info("MongoDB connection established")

    yield

    # Shutdown
    logger.info("Shutting down Online Shop API server...")
    app.state.client.close()
    logger.info("MongoDB connection closed")


app = FastAPI(
    lifespan=lifespan,
    title="Online Shop API",
    version="1.0.0",
    description="""
## Online Shop Staff & Customer API

CRUD management for employees, departments and customers.

### Error Handling

All errors return a standardized format with correlation IDs for debugging:

```json
{
  "error": {
    "message": "Employee with resource ID '99' not found",
    "status_code": 404,
    "correlation_id": "uuid",
    "timestamp": "ISO-8601",
    "path": "/api/employees/99"
  }
}
```

Invalid input is answered with 400, unknown ids with 404, conflicts with 409.
    """,
    openapi_tags=[
        {"name": "employees", "description": "Employee management including department and manager assignment"},
        {"name": "departments", "description": "Department management"},
        {"name": "customers", "description": "Customer management"},
    ],
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(
    request: Request, status_code: int, message, correlation_id: str, details: dict | None = None
) -> JSONResponse:
    error = {
        "message": message,
        "status_code": status_code,
        "correlation_id": correlation_id,
        "timestamp": datetime.utcnow().isoformat(),
        "path": request.url.path,
    }
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder({"error": error}))


# Exception Handlers
@app.exception_handler(ShopException)
async def shop_exception_handler(request: Request, exc: ShopException):
    """Handle all custom backend exceptions"""
    correlation_id = str(uuid.uuid4())

    # Log the error with correlation ID; bind() keeps braces in messages unformatted
    logger.bind(
        correlation_id=correlation_id,
        status_code=exc.status_code,
        path=request.url.path,
        details=exc.details,
    ).error(f"[{correlation_id}] {exc.__class__.__name__}: {exc.message}")

    return _error_response(request, exc.status_code, exc.message, correlation_id, exc.details)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and path parameters are client errors (400)"""
    correlation_id = str(uuid.uuid4())

    logger.bind(
        correlation_id=correlation_id, status_code=400, path=request.url.path
    ).error(f"[{correlation_id}] RequestValidationError: {exc.errors()}")

    return _error_response(
        request, 400, "Request validation failed", correlation_id, {"errors": exc.errors()}
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTPExceptions (including unknown routes) with consistent format"""
    correlation_id = str(uuid.uuid4())

    logger.bind(
        correlation_id=correlation_id, status_code=exc.status_code, path=request.url.path
    ).error(f"[{correlation_id}] HTTPException: {exc.detail}")

    return _error_response(request, exc.status_code, exc.detail, correlation_id)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected exceptions, including database failures"""
    correlation_id = str(uuid.uuid4())

    # Log full traceback for unexpected errors
    logger.bind(
        correlation_id=correlation_id,
        path=request.url.path,
        traceback=traceback.format_exc(),
    ).error(f"[{correlation_id}] Unhandled exception: {str(exc)}")

    return _error_response(request, 500, "An unexpected error occurred", correlation_id)


app.include_router(root_router, prefix="", tags=["root"])
app.include_router(employees_router, prefix="/api/employees", tags=["employees"])
app.include_router(departments_router, prefix="/api/departments", tags=["departments"])
app.include_router(customers_router, prefix="/api/customers", tags=["customers"])

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", reload=settings.DEBUG_LEVEL > 0)
