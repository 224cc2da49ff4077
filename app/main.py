# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Wedding Vendor Contracts API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    ContractsAPIException,
    contracts_exception_handler,
    validation_exception_handler,
)
from app.routers import ai_assist, contracts, health
from app.auth import routes as auth_routes
from lib.json_store import JsonStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Validate config, prepare the data directory and seed files
    - Shutdown: Log only, the store holds no open handles
    """
    # Startup
    logger.info(f"Starting Wedding Vendor Contracts API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    store = JsonStore.get_store()
    logger.info(f"Data directory: {store.data_dir.resolve()}")

    if not settings.has_ai_key:
        logger.warning("OPENROUTER_API_KEY not set; AI assist will serve template contracts")

    yield

    # Shutdown
    logger.info("Shutting down Wedding Vendor Contracts API")


# Create FastAPI application
app = FastAPI(
    title="Wedding Vendor Contracts API",
    description="""
## Contract Builder for Wedding Vendors

Photographers, caterers and florists draft, sign and export client contracts.

### How It Works

1. **Log In** - Demo vendor accounts, session kept in a cookie
2. **Draft** - Write the contract, optionally with AI assist
3. **Sign** - Client signs by drawing or typing their name
4. **Export** - Download the signed contract as a PDF

### Contract Lifecycle

| Status | Can edit | Can sign | Can delete |
|--------|----------|----------|------------|
| **draft** | yes | yes | yes |
| **signed** | no | no | yes |
| **deleted** | - | - | - |

### Quick Start

```bash
# 1. Log in
curl -c cookies.txt -X POST http://localhost:8000/api/auth/login \\
  -H "Content-Type: application/json" \\
  -d '{"email": "photographer@example.com", "password": "password123"}'

# 2. Create a contract
curl -b cookies.txt -X POST http://localhost:8000/api/contracts \\
  -H "Content-Type: application/json" \\
  -d '{"clientName": "Emma Wilson", "eventDate": "2030-06-14", ...}'

# 3. Export it
curl -b cookies.txt -o contract.pdf http://localhost:8000/api/contracts/{id}/pdf
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Vendor login, logout and session info",
        },
        {
            "name": "Contracts",
            "description": "Create, edit, sign, delete and export contracts",
        },
        {
            "name": "AI Assist",
            "description": "Draft contract text with a hosted model or templates",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - the session cookie needs credentials, so origins are explicit
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(ContractsAPIException)
async def handle_contracts_exception(request: Request, exc: ContractsAPIException):
    """Handle custom API exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return await contracts_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and query parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Contract endpoints
app.include_router(
    contracts.router,
    prefix="/api/contracts",
    tags=["Contracts"]
)

# AI drafting endpoints
app.include_router(
    ai_assist.router,
    prefix="/api/ai-assist",
    tags=["AI Assist"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Wedding Vendor Contracts API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
