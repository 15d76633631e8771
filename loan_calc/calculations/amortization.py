"""
Loan Amortization Calculations

Fixed-rate loan payment and amortization schedule calculations.
Rates are whole-number percentages (6.75 for 6.75%), terms are whole years.
"""

from typing import List, Dict, Optional, Tuple
from datetime import date
import logging
import math

from dateutil.relativedelta import relativedelta

from loan_calc.calculations.models import LoanTerms, AmortizationResult, AmortizationRow
from loan_calc.calculations.validation import (
    require_positive,
    require_non_negative,
    require_whole,
)

logger = logging.getLogger(__name__)


def validate_terms(terms: LoanTerms) -> Tuple[float, float, int]:
    """Check loan terms and return (principal, annual_rate_percent, term_years)."""
    principal = require_positive("principal", terms.principal)
    rate = require_non_negative("annual_rate_percent", terms.annual_rate_percent)
    term_years = require_whole("term_years", terms.term_years)
    return principal, rate, term_years


def compound_growth(monthly_rate: float, periods: int) -> float:
    """``(1 + r) ** n - 1`` without cancellation for small rates."""
    return math.expm1(periods * math.log1p(monthly_rate))


def annuity_payment(principal: float, annual_rate_percent: float, periods: int) -> float:
    """
    Level monthly payment that retires ``principal`` over ``periods`` months.

    Inputs are assumed valid. When compounding over the term does not
    register in floating point (including a zero rate) the payment is
    straight-line principal.
    """
    monthly_rate = annual_rate_percent / 100 / 12
    growth_less_one = compound_growth(monthly_rate, periods)

    if growth_less_one == 0:
        return principal / periods

    return principal * monthly_rate * (growth_less_one + 1) / growth_less_one


def compute_monthly_payment(terms: LoanTerms) -> AmortizationResult:
    """
    Calculate the fully amortizing monthly payment for a loan.

    Args:
        terms: Principal, annual rate percent and term in years

    Returns:
        AmortizationResult with the monthly payment and lifetime totals

    Raises:
        InvalidInputError: If principal <= 0, the rate is negative or the
            term is not a positive whole number of years
    """
    principal, rate, term_years = validate_terms(terms)
    periods = term_years * 12

    payment = annuity_payment(principal, rate, periods)
    total_payment = payment * periods

    logger.debug(
        "Payment for %.2f at %.4f%% over %d years: %.2f",
        principal, rate, term_years, payment,
    )
    return AmortizationResult(
        monthly_payment=payment,
        number_of_payments=periods,
        total_payment=total_payment,
        total_interest=total_payment - principal,
    )


def calculate_payment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    """Monthly payment as a plain number."""
    return compute_monthly_payment(
        LoanTerms(principal, annual_rate_percent, term_years)
    ).monthly_payment


def calculate_remaining_balance(terms: LoanTerms, payments_completed: int) -> float:
    """Calculate remaining loan balance after N payments."""
    principal, rate, term_years = validate_terms(terms)
    payments_completed = require_whole("payments_completed", payments_completed, minimum=0)
    periods = term_years * 12
    if payments_completed >= periods:
        return 0.0

    monthly_rate = rate / 100 / 12
    payment = annuity_payment(principal, rate, periods)

    if compound_growth(monthly_rate, periods) == 0:
        return max(0.0, principal - payment * payments_completed)

    growth_less_one = compound_growth(monthly_rate, payments_completed)
    balance = principal * (growth_less_one + 1) - payment * (growth_less_one / monthly_rate)

    return max(0.0, balance)


def generate_amortization_schedule(
    terms: LoanTerms,
    start_date: Optional[date] = None,
) -> List[AmortizationRow]:
    """
    Generate a full month-by-month amortization schedule.

    Amounts are rounded to cents for display. The final payment absorbs
    whatever balance is left so the loan ends at exactly zero.

    Args:
        terms: Loan terms
        start_date: Date of first payment (defaults to today)

    Returns:
        List of amortization rows, one per month
    """
    principal, rate, term_years = validate_terms(terms)
    periods = term_years * 12
    monthly_rate = rate / 100 / 12
    level_payment = annuity_payment(principal, rate, periods)

    if start_date is None:
        start_date = date.today()

    schedule = []
    balance = principal

    for period in range(1, periods + 1):
        period_date = start_date + relativedelta(months=period - 1)

        interest = balance * monthly_rate
        principal_pmt = level_payment - interest

        if period == periods or principal_pmt > balance:
            principal_pmt = balance

        payment = principal_pmt + interest
        ending_balance = max(0.0, balance - principal_pmt)

        schedule.append(
            AmortizationRow(
                period=period,
                date=period_date.isoformat(),
                beginning_balance=round(balance, 2),
                payment=round(payment, 2),
                interest=round(interest, 2),
                principal=round(principal_pmt, 2),
                ending_balance=round(ending_balance, 2),
            )
        )

        balance = ending_balance

        if balance == 0:
            break

    return schedule


def summarize_by_year(schedule: List[AmortizationRow]) -> List[Dict]:
    """Aggregate a monthly schedule into loan years."""
    years: List[Dict] = []
    for row in schedule:
        year = (row.period - 1) // 12 + 1
        if not years or years[-1]["year"] != year:
            years.append({"year": year, "payment": 0.0, "interest": 0.0, "principal": 0.0})
        summary = years[-1]
        summary["payment"] = round(summary["payment"] + row.payment, 2)
        summary["interest"] = round(summary["interest"] + row.interest, 2)
        summary["principal"] = round(summary["principal"] + row.principal, 2)
        summary["ending_balance"] = row.ending_balance
    return years


def calculate_total_interest(schedule: List[AmortizationRow]) -> float:
    """Calculate total interest paid over loan term."""
    return round(sum(row.interest for row in schedule), 2)


def calculate_loan_constant(terms: LoanTerms) -> float:
    """Calculate loan constant (annual debt service / loan amount)."""
    result = compute_monthly_payment(terms)
    return result.monthly_payment * 12 / terms.principal
