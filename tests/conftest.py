"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from loan_calc.main import app
from loan_calc.calculations.models import DSCRInputs, LoanTerms


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def thirty_year_terms():
    """$400k at 6.75% for 30 years (the portal's buydown default)."""
    return LoanTerms(principal=400000, annual_rate_percent=6.75, term_years=30)


@pytest.fixture
def dscr_inputs():
    """DSCR calculator defaults from the portal form."""
    return DSCRInputs(
        units=1,
        property_value=300000,
        avg_rent_per_unit=2500,
        annual_property_taxes=5000,
        annual_insurance=5000,
        monthly_hoa=0,
        vacancy_rate_percent=5,
        annual_repairs_and_maintenance=5000,
        loan_to_value_percent=75,
        interest_rate_percent=8,
        term_years=30,
    )
