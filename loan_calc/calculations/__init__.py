"""
Loan Calculation Engine

Pure, side-effect free calculators behind the portal's mortgage tools.
All money and rate inputs are plain numbers; rates are whole percents.
"""

from loan_calc.calculations import (
    affordability,
    amortization,
    buydown,
    dscr,
    formatting,
    programs,
    proceeds,
    refinance,
    rent_vs_buy,
)
from loan_calc.calculations.amortization import compute_monthly_payment
from loan_calc.calculations.buydown import schedule_buydown
from loan_calc.calculations.dscr import evaluate_dscr
from loan_calc.calculations.formatting import format_currency, format_currency_with_cents
from loan_calc.calculations.models import (
    AmortizationResult,
    BuydownInputs,
    BuydownPlan,
    BuydownResult,
    DSCRInputs,
    DSCRResult,
    LoanTerms,
    YearlyPayment,
)
from loan_calc.calculations.validation import InvalidInputError

__all__ = [
    "affordability",
    "amortization",
    "buydown",
    "dscr",
    "formatting",
    "programs",
    "proceeds",
    "refinance",
    "rent_vs_buy",
    "compute_monthly_payment",
    "evaluate_dscr",
    "schedule_buydown",
    "format_currency",
    "format_currency_with_cents",
    "AmortizationResult",
    "BuydownInputs",
    "BuydownPlan",
    "BuydownResult",
    "DSCRInputs",
    "DSCRResult",
    "LoanTerms",
    "YearlyPayment",
    "InvalidInputError",
]
