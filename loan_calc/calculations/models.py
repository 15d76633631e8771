"""
Calculator Value Types

Plain value records passed into and returned from the calculation engine.
All money and percentage fields are plain floats; percentages are whole
numbers (6.75 means 6.75%).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import enum

from loan_calc.calculations.validation import InvalidInputError


@dataclass(frozen=True)
class LoanTerms:
    """Fixed-rate, fixed-term loan."""

    principal: float
    annual_rate_percent: float
    term_years: int


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: float
    number_of_payments: int
    total_payment: float
    total_interest: float


@dataclass(frozen=True)
class AmortizationRow:
    """One monthly period of an amortization schedule."""

    period: int
    date: str
    beginning_balance: float
    payment: float
    interest: float
    principal: float
    ending_balance: float


@dataclass(frozen=True)
class DSCRInputs:
    """Rental property and financing inputs for a DSCR loan."""

    units: int
    property_value: float
    avg_rent_per_unit: float
    annual_property_taxes: float
    annual_insurance: float
    monthly_hoa: float
    vacancy_rate_percent: float
    annual_repairs_and_maintenance: float
    loan_to_value_percent: float
    interest_rate_percent: float
    term_years: int


class DSCRRating(str, enum.Enum):
    """Qualification band for a coverage ratio."""

    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"


@dataclass(frozen=True)
class DSCRResult:
    net_operating_income: float
    annual_debt_service: float
    dscr: float
    gross_monthly_income: float = 0.0
    annual_gross_income: float = 0.0
    vacancy_cost: float = 0.0
    loan_amount: float = 0.0
    monthly_payment: float = 0.0
    rating: DSCRRating = DSCRRating.poor


class BuydownPlan(str, enum.Enum):
    """Temporary rate buydown plans.

    Each plan knows the whole-point rate reductions applied to the first
    years of the loan. Years past the table pay the note rate.
    """

    two_one = "2-1"
    one_one = "1-1"
    three_one = "3-1"
    one_zero = "1-0"

    @property
    def offsets(self) -> Tuple[int, ...]:
        return _BUYDOWN_OFFSETS[self]

    @property
    def subsidized_years(self) -> int:
        return len(self.offsets)

    @classmethod
    def from_label(cls, label) -> "BuydownPlan":
        """Resolve a plan from its label, e.g. ``"2-1"``."""
        if isinstance(label, cls):
            return label
        key = str(label).strip() if label is not None else ""
        key = _BUYDOWN_ALIASES.get(key, key)
        for plan in cls:
            if plan.value == key:
                return plan
        raise InvalidInputError(
            "plan", "one of " + ", ".join(p.value for p in cls)
        )


_BUYDOWN_OFFSETS = {
    BuydownPlan.two_one: (2, 1),
    BuydownPlan.one_one: (1, 1),
    BuydownPlan.three_one: (3, 2, 1),
    BuydownPlan.one_zero: (1,),
}

# The portal labeled the three-year plan both ways.
_BUYDOWN_ALIASES = {"3-2-1": "3-1"}


@dataclass(frozen=True)
class BuydownInputs:
    loan_amount: float
    base_rate_percent: float
    term_years: int
    plan: BuydownPlan


@dataclass(frozen=True)
class YearlyPayment:
    year: int
    rate_percent: float
    payment: float


@dataclass(frozen=True)
class BuydownResult:
    yearly_payments: List[YearlyPayment]
    steady_state_payment: float
    plan: Optional[BuydownPlan] = None
    subsidy_cost: float = 0.0


@dataclass(frozen=True)
class ProgramPaymentInputs:
    """Purchase inputs shared by the conventional, FHA and VA calculators."""

    home_price: float
    down_payment: float
    interest_rate_percent: float
    term_years: int
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0


@dataclass(frozen=True)
class ProgramPaymentResult:
    loan_amount: float
    principal_and_interest: float
    monthly_tax: float
    monthly_insurance: float
    monthly_hoa: float
    monthly_mortgage_insurance: float
    monthly_payment: float
    total_interest: float
    total_payment: float
    down_payment_percent: float
    upfront_fee: float = 0.0


@dataclass(frozen=True)
class RefinanceInputs:
    current_loan_balance: float
    current_payment: float
    new_interest_rate_percent: float
    new_term_years: int
    closing_costs: float = 0.0


@dataclass(frozen=True)
class RefinanceResult:
    new_payment: float
    monthly_savings: float
    break_even_months: int
    lifetime_savings: float
    total_interest: float
    total_payment: float


@dataclass(frozen=True)
class AffordabilityInputs:
    monthly_income: float
    monthly_debts: float
    down_payment: float
    interest_rate_percent: float
    term_years: int
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    front_end_ratio_percent: float = 28.0
    back_end_ratio_percent: float = 36.0


@dataclass(frozen=True)
class AffordabilityResult:
    max_home_price: float
    max_loan_amount: float
    principal_and_interest: float
    monthly_tax: float
    monthly_insurance: float
    monthly_payment: float
    total_interest: float
    total_payment: float


@dataclass(frozen=True)
class NetProceedsInputs:
    sale_price: float
    mortgage_balance: float
    agent_commission_percent: float = 6.0
    closing_costs_percent: float = 3.0
    home_warranty: float = 0.0
    repairs: float = 0.0
    property_tax_proration: float = 0.0


@dataclass(frozen=True)
class NetProceedsResult:
    commission_amount: float
    closing_costs_amount: float
    total_costs: float
    net_proceeds: float
    net_proceeds_percent: float


@dataclass(frozen=True)
class RentVsBuyInputs:
    home_price: float
    down_payment: float
    interest_rate_percent: float
    term_years: int
    monthly_rent: float
    years_to_compare: int = 10
    annual_property_tax: float = 0.0
    annual_insurance: float = 0.0
    monthly_hoa: float = 0.0
    monthly_maintenance: float = 0.0
    home_appreciation_percent: float = 3.0
    annual_renters_insurance: float = 0.0
    rent_increase_percent: float = 3.0
    investment_return_percent: float = 7.0


@dataclass(frozen=True)
class RentVsBuyResult:
    monthly_buy_cost: float
    total_buy_costs: float
    total_rent_costs: float
    home_value: float
    remaining_balance: float
    equity_built: float
    invested_savings: float
    buy_net_position: float
    rent_net_position: float
    net_difference: float
    buy_is_better: bool
    yearly: List[dict] = field(default_factory=list)
