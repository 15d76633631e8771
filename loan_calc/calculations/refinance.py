"""
Refinance Savings

Compares the current payment against a new loan on the remaining balance.
"""

import math

from loan_calc.calculations.amortization import compute_monthly_payment
from loan_calc.calculations.models import LoanTerms, RefinanceInputs, RefinanceResult
from loan_calc.calculations.validation import (
    require_non_negative,
    require_positive,
    require_whole,
)


def calculate_refinance(inputs: RefinanceInputs) -> RefinanceResult:
    """
    Calculate monthly savings, break-even month and lifetime savings.

    Break-even is the number of whole months of savings needed to recover
    closing costs, or 0 when the new payment saves nothing.
    """
    current_payment = require_non_negative("current_payment", inputs.current_payment)
    closing_costs = require_non_negative("closing_costs", inputs.closing_costs)
    require_positive("current_loan_balance", inputs.current_loan_balance)
    require_non_negative("new_interest_rate_percent", inputs.new_interest_rate_percent)
    require_whole("new_term_years", inputs.new_term_years)

    new_loan = compute_monthly_payment(
        LoanTerms(
            principal=inputs.current_loan_balance,
            annual_rate_percent=inputs.new_interest_rate_percent,
            term_years=inputs.new_term_years,
        )
    )

    monthly_savings = current_payment - new_loan.monthly_payment
    break_even_months = 0
    if monthly_savings > 0:
        break_even_months = math.ceil(closing_costs / monthly_savings)
    lifetime_savings = monthly_savings * new_loan.number_of_payments - closing_costs

    return RefinanceResult(
        new_payment=new_loan.monthly_payment,
        monthly_savings=monthly_savings,
        break_even_months=break_even_months,
        lifetime_savings=lifetime_savings,
        total_interest=new_loan.total_interest,
        total_payment=new_loan.total_payment,
    )
