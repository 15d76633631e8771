"""
Temporary Rate Buydown

Payment schedule for 2-1, 1-1, 3-1 and 1-0 buydowns. The rate is reduced
by whole points in the first years and steps up to the note rate; the
payment is always re-amortized over the full term at the reduced rate.
"""

import logging

from loan_calc.calculations.amortization import compute_monthly_payment
from loan_calc.calculations.models import (
    BuydownInputs,
    BuydownPlan,
    BuydownResult,
    LoanTerms,
    YearlyPayment,
)
from loan_calc.calculations.validation import (
    require_non_negative,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)


def schedule_buydown(inputs: BuydownInputs) -> BuydownResult:
    """
    Calculate the payment for each subsidized year and the steady-state payment.

    The effective rate for year k is ``max(base - offset[k], 0)``.

    Raises:
        InvalidInputError: If the loan terms are invalid or the plan is unknown
    """
    plan = BuydownPlan.from_label(inputs.plan)
    require_positive("loan_amount", inputs.loan_amount)
    require_non_negative("base_rate_percent", inputs.base_rate_percent)
    require_whole("term_years", inputs.term_years)
    steady = compute_monthly_payment(
        LoanTerms(
            principal=inputs.loan_amount,
            annual_rate_percent=inputs.base_rate_percent,
            term_years=inputs.term_years,
        )
    )
    base_rate = float(inputs.base_rate_percent)

    yearly_payments = []
    for year, offset in enumerate(plan.offsets, start=1):
        rate = max(base_rate - offset, 0.0)
        payment = compute_monthly_payment(
            LoanTerms(
                principal=inputs.loan_amount,
                annual_rate_percent=rate,
                term_years=inputs.term_years,
            )
        ).monthly_payment
        yearly_payments.append(YearlyPayment(year=year, rate_percent=rate, payment=payment))

    subsidy_cost = sum(
        (steady.monthly_payment - yp.payment) * 12 for yp in yearly_payments
    )
    logger.debug(
        "%s buydown on %.2f: subsidy %.2f", plan.value, inputs.loan_amount, subsidy_cost
    )

    return BuydownResult(
        yearly_payments=yearly_payments,
        steady_state_payment=steady.monthly_payment,
        plan=plan,
        subsidy_cost=subsidy_cost,
    )


def payment_for_year(result: BuydownResult, year: int) -> float:
    """Monthly payment in a given loan year (1-based)."""
    for yearly in result.yearly_payments:
        if yearly.year == year:
            return yearly.payment
    return result.steady_state_payment
