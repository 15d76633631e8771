"""
Loan Program Payments

Monthly payment breakdowns (P&I, taxes, insurance, HOA and mortgage
insurance) for conventional, FHA and VA purchase loans.
"""

from typing import Optional
import logging

from loan_calc.config import get_settings
from loan_calc.calculations.amortization import compute_monthly_payment
from loan_calc.calculations.models import (
    LoanTerms,
    ProgramPaymentInputs,
    ProgramPaymentResult,
)
from loan_calc.calculations.validation import (
    InvalidInputError,
    require_non_negative,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)

DEFAULT_FHA_UPFRONT_MIP_PERCENT = 1.75
DEFAULT_FHA_ANNUAL_MIP_PERCENT = 0.85
DEFAULT_VA_FUNDING_FEE_PERCENT = 2.3


def _validate(inputs: ProgramPaymentInputs) -> float:
    """Check purchase inputs and return the base loan amount."""
    home_price = require_positive("home_price", inputs.home_price)
    down_payment = require_non_negative("down_payment", inputs.down_payment)
    if down_payment >= home_price:
        raise InvalidInputError("down_payment", "less than home_price")
    require_non_negative("interest_rate_percent", inputs.interest_rate_percent)
    require_whole("term_years", inputs.term_years)
    for name in ("annual_property_tax", "annual_insurance", "monthly_hoa"):
        require_non_negative(name, getattr(inputs, name))
    return home_price - down_payment


def _build_result(
    inputs: ProgramPaymentInputs,
    loan_amount: float,
    monthly_mortgage_insurance: float,
    monthly_hoa: float,
    upfront_fee: float = 0.0,
) -> ProgramPaymentResult:
    amortization = compute_monthly_payment(
        LoanTerms(loan_amount, inputs.interest_rate_percent, inputs.term_years)
    )
    monthly_tax = inputs.annual_property_tax / 12
    monthly_insurance = inputs.annual_insurance / 12
    monthly_payment = (
        amortization.monthly_payment
        + monthly_tax
        + monthly_insurance
        + monthly_hoa
        + monthly_mortgage_insurance
    )
    return ProgramPaymentResult(
        loan_amount=loan_amount,
        principal_and_interest=amortization.monthly_payment,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        monthly_hoa=monthly_hoa,
        monthly_mortgage_insurance=monthly_mortgage_insurance,
        monthly_payment=monthly_payment,
        total_interest=amortization.total_interest,
        total_payment=amortization.total_payment,
        down_payment_percent=inputs.down_payment / inputs.home_price * 100,
        upfront_fee=upfront_fee,
    )


def calculate_conventional(inputs: ProgramPaymentInputs, settings=None) -> ProgramPaymentResult:
    """
    Conventional loan payment.

    Private mortgage insurance is charged on the loan amount when the
    down payment is under the PMI threshold (20% by default).
    """
    settings = settings or get_settings()
    loan_amount = _validate(inputs)

    down_payment_percent = inputs.down_payment / inputs.home_price * 100
    monthly_pmi = 0.0
    if down_payment_percent < settings.pmi_down_payment_threshold_percent:
        monthly_pmi = loan_amount * settings.conventional_pmi_annual_percent / 100 / 12

    return _build_result(inputs, loan_amount, monthly_pmi, inputs.monthly_hoa)


def calculate_fha(
    inputs: ProgramPaymentInputs,
    upfront_mip_percent: float = DEFAULT_FHA_UPFRONT_MIP_PERCENT,
    annual_mip_percent: float = DEFAULT_FHA_ANNUAL_MIP_PERCENT,
) -> ProgramPaymentResult:
    """
    FHA loan payment.

    The upfront MIP is financed into the loan; the annual MIP is charged
    monthly on the base loan amount.
    """
    base_loan = _validate(inputs)
    require_non_negative("upfront_mip_percent", upfront_mip_percent)
    require_non_negative("annual_mip_percent", annual_mip_percent)

    upfront_mip = base_loan * upfront_mip_percent / 100
    monthly_mip = base_loan * annual_mip_percent / 100 / 12

    return _build_result(
        inputs, base_loan + upfront_mip, monthly_mip, inputs.monthly_hoa, upfront_mip
    )


def calculate_va(
    inputs: ProgramPaymentInputs,
    funding_fee_percent: Optional[float] = None,
) -> ProgramPaymentResult:
    """
    VA loan payment.

    The funding fee is financed into the loan. VA loans carry no mortgage
    insurance, and the VA calculator does not include HOA dues.
    """
    base_loan = _validate(inputs)
    if funding_fee_percent is None:
        funding_fee_percent = DEFAULT_VA_FUNDING_FEE_PERCENT
    require_non_negative("funding_fee_percent", funding_fee_percent)

    funding_fee = base_loan * funding_fee_percent / 100

    return _build_result(inputs, base_loan + funding_fee, 0.0, 0.0, funding_fee)
