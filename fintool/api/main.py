"""
FastAPI application for FinTool.

Provides stateless REST endpoints for the site's calculators:
- Mortgage amortization (summary, paginated schedule, yearly breakdown)
- Compound interest projections
- FIRE planning and goal seeking
- Budget allocation and summary
"""

import logging
import traceback
from typing import Dict, Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fintool import __version__
from fintool.config import get_settings
from fintool.utils.error_utils import InvalidParameterError

logger = logging.getLogger("fintool")

from fintool.api.routes import mortgage, compound_interest, fire, budget


# Create FastAPI application
app = FastAPI(
    title="FinTool API",
    description="Personal finance calculators - mortgage, compound interest, FIRE and budget",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS configuration for the site frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidParameterError)
async def invalid_parameter_handler(request: Request, exc: InvalidParameterError):
    """Report rejected calculator input as 422."""
    logger.info(f"Rejected input on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid parameter",
            "detail": exc.message,
            "type": type(exc).__name__,
        },
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    logger.error(traceback.format_exc())
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        },
    )


# Health check endpoint
@app.get("/health")
async def health_check() -> Dict[str, str]:
    """API health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "fintool-api",
    }


# Include routers
app.include_router(mortgage.router, prefix="/api/mortgage", tags=["Mortgage"])
app.include_router(compound_interest.router, prefix="/api/compound-interest", tags=["Compound Interest"])
app.include_router(fire.router, prefix="/api/fire", tags=["FIRE"])
app.include_router(budget.router, prefix="/api/budget", tags=["Budget"])


# Root endpoint
@app.get("/")
async def root() -> Dict[str, Any]:
    """API root endpoint with service information."""
    return {
        "service": "FinTool API",
        "version": __version__,
        "docs": "/api/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fintool.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
