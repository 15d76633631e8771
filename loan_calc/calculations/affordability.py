"""
Home Affordability

Maximum loan and home price from income, debts and debt-to-income limits
(28% front-end / 36% back-end by default).
"""

from loan_calc.calculations.amortization import compound_growth
from loan_calc.calculations.models import AffordabilityInputs, AffordabilityResult
from loan_calc.calculations.validation import (
    require_non_negative,
    require_percent,
    require_whole,
)


def principal_from_payment(payment: float, annual_rate_percent: float, periods: int) -> float:
    """Reverse amortization: the loan a level payment retires over ``periods`` months."""
    monthly_rate = annual_rate_percent / 100 / 12
    discount = -compound_growth(monthly_rate, -periods)
    if discount == 0:
        return payment * periods
    return payment * discount / monthly_rate


def calculate_affordability(inputs: AffordabilityInputs) -> AffordabilityResult:
    """
    Calculate the maximum affordable home price.

    The housing budget is the lesser of the front-end limit and the
    back-end limit less existing debts. Taxes and insurance come out of
    that budget first; what remains (never below zero) pays P&I.
    """
    income = require_non_negative("monthly_income", inputs.monthly_income)
    debts = require_non_negative("monthly_debts", inputs.monthly_debts)
    down_payment = require_non_negative("down_payment", inputs.down_payment)
    rate = require_non_negative("interest_rate_percent", inputs.interest_rate_percent)
    term_years = require_whole("term_years", inputs.term_years)
    annual_tax = require_non_negative("annual_property_tax", inputs.annual_property_tax)
    annual_insurance = require_non_negative("annual_insurance", inputs.annual_insurance)
    front_end = require_percent("front_end_ratio_percent", inputs.front_end_ratio_percent)
    back_end = require_percent("back_end_ratio_percent", inputs.back_end_ratio_percent)

    max_housing_payment = income * front_end / 100
    max_total_payment = income * back_end / 100
    available_for_housing = min(max_housing_payment, max_total_payment - debts)

    monthly_tax = annual_tax / 12
    monthly_insurance = annual_insurance / 12
    available_for_pi = max(0.0, available_for_housing - monthly_tax - monthly_insurance)

    periods = term_years * 12
    max_loan_amount = principal_from_payment(available_for_pi, rate, periods)
    total_payment = available_for_pi * periods

    return AffordabilityResult(
        max_home_price=max_loan_amount + down_payment,
        max_loan_amount=max_loan_amount,
        principal_and_interest=available_for_pi,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        monthly_payment=available_for_pi + monthly_tax + monthly_insurance,
        total_interest=total_payment - max_loan_amount,
        total_payment=total_payment,
    )
