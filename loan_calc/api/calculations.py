"""
Calculator API endpoints.

These endpoints accept raw calculator inputs and return results together
with display-ready strings. The portal calls them on every input change.
"""

from dataclasses import asdict
from datetime import date
from typing import Optional
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from loan_calc.calculations import (
    affordability,
    amortization,
    buydown,
    dscr,
    programs,
    proceeds,
    refinance,
    rent_vs_buy,
)
from loan_calc.calculations.formatting import (
    format_currency,
    format_currency_with_cents,
    format_percent,
    format_ratio,
)
from loan_calc.calculations.models import (
    AffordabilityInputs,
    BuydownInputs,
    BuydownPlan,
    DSCRInputs,
    LoanTerms,
    NetProceedsInputs,
    ProgramPaymentInputs,
    RefinanceInputs,
    RentVsBuyInputs,
)
from loan_calc.calculations.validation import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter()

# Upper bound on request horizons; lower bounds are checked by the calculators.
MAX_TERM_YEARS = 50


def _calculate(func, *args, **kwargs):
    """Run a calculator, turning invalid input into a 400 response."""
    try:
        return func(*args, **kwargs)
    except InvalidInputError as e:
        logger.info("Rejected %s input: %s", func.__name__, e)
        raise HTTPException(status_code=400, detail=e.to_dict())


class PaymentInput(BaseModel):
    """Input for a fixed-rate monthly payment."""

    principal: float
    annual_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)


@router.post("/payment")
async def calculate_payment(inputs: PaymentInput):
    """Calculate the monthly principal and interest payment."""
    result = _calculate(
        amortization.compute_monthly_payment,
        LoanTerms(inputs.principal, inputs.annual_rate_percent, inputs.term_years),
    )
    return {
        **asdict(result),
        "display": {
            "monthly_payment": format_currency_with_cents(result.monthly_payment),
            "total_payment": format_currency(result.total_payment),
            "total_interest": format_currency(result.total_interest),
        },
    }


class AmortizationInput(PaymentInput):
    """Input for amortization schedule."""

    start_date: Optional[date] = None
    annual_summary: bool = False


@router.post("/amortization")
async def calculate_amortization(inputs: AmortizationInput):
    """Generate loan amortization schedule."""
    terms = LoanTerms(inputs.principal, inputs.annual_rate_percent, inputs.term_years)
    schedule = _calculate(
        amortization.generate_amortization_schedule, terms, start_date=inputs.start_date
    )

    response = {
        "schedule": [asdict(row) for row in schedule],
        "total_interest": amortization.calculate_total_interest(schedule),
        "total_principal": round(sum(row.principal for row in schedule), 2),
    }
    if inputs.annual_summary:
        response["annual_summary"] = amortization.summarize_by_year(schedule)
    return response


class DSCRInput(BaseModel):
    """Input for the DSCR calculator (defaults match the portal form)."""

    units: int = 1
    property_value: float
    avg_rent_per_unit: float
    annual_property_taxes: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0
    vacancy_rate_percent: float = 5.0
    annual_repairs_and_maintenance: float = 0.0
    loan_to_value_percent: float = 75.0
    interest_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)


@router.post("/dscr")
async def calculate_dscr(inputs: DSCRInput):
    """Calculate NOI, annual debt service and DSCR."""
    result = _calculate(dscr.evaluate_dscr, DSCRInputs(**inputs.model_dump()))
    return {
        **asdict(result),
        "display": {
            "net_operating_income": format_currency(result.net_operating_income),
            "annual_debt_service": format_currency(result.annual_debt_service),
            "dscr": format_ratio(result.dscr),
            "dscr_percent": format_percent(result.dscr * 100, 2),
        },
    }


class BuydownInput(BaseModel):
    """Input for the temporary buydown calculator."""

    loan_amount: float
    base_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)
    plan: str = "2-1"


@router.get("/buydown/plans")
async def list_buydown_plans():
    """List supported buydown plans and their rate reductions."""
    return [
        {"plan": plan.value, "offsets": list(plan.offsets)} for plan in BuydownPlan
    ]


@router.post("/buydown")
async def calculate_buydown(inputs: BuydownInput):
    """Calculate subsidized-year and steady-state payments."""
    result = _calculate(
        buydown.schedule_buydown,
        BuydownInputs(
            loan_amount=inputs.loan_amount,
            base_rate_percent=inputs.base_rate_percent,
            term_years=inputs.term_years,
            plan=inputs.plan,
        ),
    )
    return {
        **asdict(result),
        "display": {
            "yearly_payments": [
                {
                    "year": yp.year,
                    "rate": format_percent(yp.rate_percent, 2),
                    "payment": format_currency(yp.payment),
                }
                for yp in result.yearly_payments
            ],
            "steady_state_payment": format_currency(result.steady_state_payment),
            "subsidy_cost": format_currency(result.subsidy_cost),
        },
    }


class ProgramInput(BaseModel):
    """Purchase inputs shared by the program calculators."""

    home_price: float
    down_payment: float
    interest_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0


class FHAInput(ProgramInput):
    upfront_mip_percent: float = programs.DEFAULT_FHA_UPFRONT_MIP_PERCENT
    annual_mip_percent: float = programs.DEFAULT_FHA_ANNUAL_MIP_PERCENT


class VAInput(ProgramInput):
    funding_fee_percent: float = programs.DEFAULT_VA_FUNDING_FEE_PERCENT


def _program_inputs(inputs: ProgramInput) -> ProgramPaymentInputs:
    return ProgramPaymentInputs(**inputs.model_dump(include=set(ProgramInput.model_fields)))


def _program_response(result) -> dict:
    return {
        **asdict(result),
        "display": {
            "monthly_payment": format_currency(result.monthly_payment),
            "principal_and_interest": format_currency(result.principal_and_interest),
            "loan_amount": format_currency(result.loan_amount),
            "down_payment_percent": format_percent(result.down_payment_percent),
        },
    }


@router.post("/conventional")
async def calculate_conventional(inputs: ProgramInput):
    """Conventional loan payment breakdown."""
    result = _calculate(programs.calculate_conventional, _program_inputs(inputs))
    return _program_response(result)


@router.post("/fha")
async def calculate_fha(inputs: FHAInput):
    """FHA loan payment breakdown."""
    result = _calculate(
        programs.calculate_fha,
        _program_inputs(inputs),
        upfront_mip_percent=inputs.upfront_mip_percent,
        annual_mip_percent=inputs.annual_mip_percent,
    )
    return _program_response(result)


@router.post("/va")
async def calculate_va(inputs: VAInput):
    """VA loan payment breakdown."""
    result = _calculate(
        programs.calculate_va,
        _program_inputs(inputs),
        funding_fee_percent=inputs.funding_fee_percent,
    )
    return _program_response(result)


class RefinanceInput(BaseModel):
    current_loan_balance: float
    current_payment: float
    new_interest_rate_percent: float
    new_term_years: int = Field(30, le=MAX_TERM_YEARS)
    closing_costs: float = 0.0


@router.post("/refinance")
async def calculate_refinance(inputs: RefinanceInput):
    """Refinance savings and break-even."""
    result = _calculate(refinance.calculate_refinance, RefinanceInputs(**inputs.model_dump()))
    return {
        **asdict(result),
        "display": {
            "new_payment": format_currency(result.new_payment),
            "monthly_savings": format_currency(result.monthly_savings),
            "lifetime_savings": format_currency(result.lifetime_savings),
        },
    }


class AffordabilityInput(BaseModel):
    monthly_income: float
    monthly_debts: float = 0.0
    down_payment: float = 0.0
    interest_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    front_end_ratio_percent: float = 28.0
    back_end_ratio_percent: float = 36.0


@router.post("/affordability")
async def calculate_affordability(inputs: AffordabilityInput):
    """Maximum affordable home price."""
    result = _calculate(
        affordability.calculate_affordability, AffordabilityInputs(**inputs.model_dump())
    )
    return {
        **asdict(result),
        "display": {
            "max_home_price": format_currency(result.max_home_price),
            "max_loan_amount": format_currency(result.max_loan_amount),
            "monthly_payment": format_currency(result.monthly_payment),
        },
    }


class NetProceedsInput(BaseModel):
    sale_price: float
    mortgage_balance: float = 0.0
    agent_commission_percent: float = 6.0
    closing_costs_percent: float = 3.0
    home_warranty: float = 0.0
    repairs: float = 0.0
    property_tax_proration: float = 0.0


@router.post("/net-proceeds")
async def calculate_net_proceeds(inputs: NetProceedsInput):
    """Seller net proceeds."""
    result = _calculate(proceeds.calculate_net_proceeds, NetProceedsInputs(**inputs.model_dump()))
    return {
        **asdict(result),
        "display": {
            "net_proceeds": format_currency(result.net_proceeds),
            "total_costs": format_currency(result.total_costs),
            "net_proceeds_percent": format_percent(result.net_proceeds_percent),
        },
    }


class RentVsBuyInput(BaseModel):
    home_price: float
    down_payment: float
    interest_rate_percent: float
    term_years: int = Field(30, le=MAX_TERM_YEARS)
    monthly_rent: float
    years_to_compare: int = Field(10, le=MAX_TERM_YEARS)
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0
    monthly_maintenance: float = 0.0
    home_appreciation_percent: float = 3.0
    annual_renters_insurance: float = 0.0
    rent_increase_percent: float = 3.0
    investment_return_percent: float = 7.0


@router.post("/rent-vs-buy")
async def calculate_rent_vs_buy(inputs: RentVsBuyInput):
    """Compare buying against renting over a holding period."""
    result = _calculate(rent_vs_buy.compare_rent_vs_buy, RentVsBuyInputs(**inputs.model_dump()))
    return {
        **asdict(result),
        "display": {
            "monthly_buy_cost": format_currency(result.monthly_buy_cost),
            "net_difference": format_currency(abs(result.net_difference)),
            "better_option": "buy" if result.buy_is_better else "rent",
        },
    }
