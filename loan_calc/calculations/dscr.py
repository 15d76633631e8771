"""
Debt Service Coverage Ratio

Rental-property DSCR as shown on the portal's DSCR calculator: net
operating income from rents and expenses, divided by the annual debt
service on a loan sized by loan-to-value.
"""

import logging

from loan_calc.config import get_settings
from loan_calc.calculations.amortization import compute_monthly_payment
from loan_calc.calculations.models import DSCRInputs, DSCRResult, DSCRRating, LoanTerms
from loan_calc.calculations.validation import (
    require_non_negative,
    require_percent,
    require_whole,
)

logger = logging.getLogger(__name__)


def calculate_dscr(noi: float, debt_service: float) -> float:
    """
    Calculate Debt Service Coverage Ratio (DSCR).

    Args:
        noi: Net Operating Income for the period
        debt_service: Debt service for the period

    Returns:
        DSCR ratio, or 0.0 when there is no debt service
    """
    if debt_service <= 0:
        return 0.0
    return noi / debt_service


def rate_dscr(dscr: float, settings=None) -> DSCRRating:
    """Place a coverage ratio in its qualification band."""
    settings = settings or get_settings()
    if dscr >= settings.dscr_excellent_threshold:
        return DSCRRating.excellent
    if dscr >= settings.dscr_good_threshold:
        return DSCRRating.good
    if dscr >= settings.dscr_fair_threshold:
        return DSCRRating.fair
    return DSCRRating.poor


def _validate(inputs: DSCRInputs) -> None:
    require_whole("units", inputs.units)
    for name in (
        "property_value",
        "avg_rent_per_unit",
        "annual_property_taxes",
        "annual_insurance",
        "monthly_hoa",
        "annual_repairs_and_maintenance",
        "interest_rate_percent",
    ):
        require_non_negative(name, getattr(inputs, name))
    require_percent("vacancy_rate_percent", inputs.vacancy_rate_percent)
    require_percent("loan_to_value_percent", inputs.loan_to_value_percent)
    require_whole("term_years", inputs.term_years)


def evaluate_dscr(inputs: DSCRInputs) -> DSCRResult:
    """
    Evaluate NOI, annual debt service and DSCR for a rental property.

    A negative NOI is a valid (unprofitable) outcome. A loan of zero has
    no debt service and a DSCR of 0.

    Raises:
        InvalidInputError: If any input is out of range
    """
    _validate(inputs)

    gross_monthly_income = inputs.units * inputs.avg_rent_per_unit
    annual_gross_income = gross_monthly_income * 12
    vacancy_cost = annual_gross_income * inputs.vacancy_rate_percent / 100
    net_operating_income = (
        annual_gross_income
        - vacancy_cost
        - inputs.annual_property_taxes
        - inputs.annual_insurance
        - inputs.monthly_hoa * 12
        - inputs.annual_repairs_and_maintenance
    )

    loan_amount = inputs.property_value * inputs.loan_to_value_percent / 100
    monthly_payment = 0.0
    if loan_amount > 0:
        monthly_payment = compute_monthly_payment(
            LoanTerms(
                principal=loan_amount,
                annual_rate_percent=inputs.interest_rate_percent,
                term_years=inputs.term_years,
            )
        ).monthly_payment
    annual_debt_service = monthly_payment * 12

    dscr = calculate_dscr(net_operating_income, annual_debt_service)
    logger.debug(
        "DSCR %.4f (NOI %.2f, debt service %.2f)",
        dscr, net_operating_income, annual_debt_service,
    )

    return DSCRResult(
        net_operating_income=net_operating_income,
        annual_debt_service=annual_debt_service,
        dscr=dscr,
        gross_monthly_income=gross_monthly_income,
        annual_gross_income=annual_gross_income,
        vacancy_cost=vacancy_cost,
        loan_amount=loan_amount,
        monthly_payment=monthly_payment,
        rating=rate_dscr(dscr),
    )
