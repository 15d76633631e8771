"""
API routes for the loan calculators.
"""

from fastapi import APIRouter

from loan_calc.api import calculations

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
