"""
Main FastAPI application entry point.
"""

from fastapi import FastAPI

from loan_calc.config import get_settings, configure_logging
from loan_calc.api import router as api_router

settings = get_settings()
configure_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Mortgage, DSCR and buydown calculators for the loan officer portal",
    version="0.1.0",
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}
