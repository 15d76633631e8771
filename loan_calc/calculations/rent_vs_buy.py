"""
Rent vs. Buy Comparison

Year-by-year comparison of buying a home against renting and investing
the down payment plus the monthly cost difference.
"""

from typing import List, Dict
import logging

import numpy as np

from loan_calc.calculations.amortization import (
    calculate_remaining_balance,
    compute_monthly_payment,
)
from loan_calc.calculations.models import LoanTerms, RentVsBuyInputs, RentVsBuyResult
from loan_calc.calculations.validation import (
    InvalidInputError,
    require_finite,
    require_non_negative,
    require_positive,
    require_whole,
)

logger = logging.getLogger(__name__)


def _validate(inputs: RentVsBuyInputs) -> None:
    home_price = require_positive("home_price", inputs.home_price)
    down_payment = require_non_negative("down_payment", inputs.down_payment)
    if down_payment >= home_price:
        raise InvalidInputError("down_payment", "less than home_price")
    require_non_negative("interest_rate_percent", inputs.interest_rate_percent)
    require_whole("term_years", inputs.term_years)
    for name in (
        "monthly_rent",
        "annual_property_tax",
        "annual_insurance",
        "monthly_hoa",
        "monthly_maintenance",
        "annual_renters_insurance",
    ):
        require_non_negative(name, getattr(inputs, name))
    for name in (
        "home_appreciation_percent",
        "rent_increase_percent",
        "investment_return_percent",
    ):
        if require_finite(name, getattr(inputs, name)) <= -100:
            raise InvalidInputError(name, "> -100")
    require_whole("years_to_compare", inputs.years_to_compare)


def compare_rent_vs_buy(inputs: RentVsBuyInputs) -> RentVsBuyResult:
    """
    Compare net positions of buying and renting after ``years_to_compare`` years.

    Buyer: pays the down payment and the full monthly housing cost; ends
    with equity (home value less remaining balance). Renter: pays rent
    growing each year plus renter's insurance; invests the down payment
    and each year's difference between the buy cost and the starting rent.
    """
    _validate(inputs)

    loan = LoanTerms(
        principal=inputs.home_price - inputs.down_payment,
        annual_rate_percent=inputs.interest_rate_percent,
        term_years=inputs.term_years,
    )
    monthly_pi = compute_monthly_payment(loan).monthly_payment
    monthly_buy_cost = (
        monthly_pi
        + inputs.annual_property_tax / 12
        + inputs.annual_insurance / 12
        + inputs.monthly_hoa
        + inputs.monthly_maintenance
    )

    years = np.arange(1, int(inputs.years_to_compare) + 1)
    rent_growth = (1 + inputs.rent_increase_percent / 100) ** (years - 1)
    investment_growth = 1 + inputs.investment_return_percent / 100

    total_buy_costs = inputs.down_payment + monthly_buy_cost * 12 * years
    total_rent_costs = np.cumsum(
        inputs.monthly_rent * 12 * rent_growth + inputs.annual_renters_insurance
    )
    home_values = inputs.home_price * (1 + inputs.home_appreciation_percent / 100) ** years

    yearly_contribution = (
        monthly_buy_cost - (inputs.monthly_rent + inputs.annual_renters_insurance / 12)
    ) * 12
    invested_savings = (
        inputs.down_payment * investment_growth ** years
        + yearly_contribution * np.cumsum(investment_growth ** (years - 1))
    )

    yearly: List[Dict] = []
    for i, year in enumerate(years):
        balance = calculate_remaining_balance(loan, int(year) * 12)
        equity = float(home_values[i]) - max(balance, 0.0)
        buy_net = equity - float(total_buy_costs[i])
        rent_net = float(invested_savings[i]) - float(total_rent_costs[i])
        yearly.append(
            {
                "year": int(year),
                "home_value": float(home_values[i]),
                "remaining_balance": balance,
                "equity_built": equity,
                "total_buy_costs": float(total_buy_costs[i]),
                "total_rent_costs": float(total_rent_costs[i]),
                "invested_savings": float(invested_savings[i]),
                "buy_net_position": buy_net,
                "rent_net_position": rent_net,
            }
        )

    final = yearly[-1]
    net_difference = final["buy_net_position"] - final["rent_net_position"]
    logger.debug("Rent vs buy after %d years: %.2f", final["year"], net_difference)

    return RentVsBuyResult(
        monthly_buy_cost=monthly_buy_cost,
        total_buy_costs=final["total_buy_costs"],
        total_rent_costs=final["total_rent_costs"],
        home_value=final["home_value"],
        remaining_balance=final["remaining_balance"],
        equity_built=final["equity_built"],
        invested_savings=final["invested_savings"],
        buy_net_position=final["buy_net_position"],
        rent_net_position=final["rent_net_position"],
        net_difference=net_difference,
        buy_is_better=net_difference > 0,
        yearly=yearly,
    )
