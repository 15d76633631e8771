"""
Seller Net Proceeds
"""

from loan_calc.calculations.models import NetProceedsInputs, NetProceedsResult
from loan_calc.calculations.validation import (
    require_non_negative,
    require_percent,
    require_positive,
)


def calculate_net_proceeds(inputs: NetProceedsInputs) -> NetProceedsResult:
    """
    Estimate what the seller walks away with.

    Net proceeds can be negative when the mortgage payoff and selling
    costs exceed the sale price.
    """
    sale_price = require_positive("sale_price", inputs.sale_price)
    mortgage_balance = require_non_negative("mortgage_balance", inputs.mortgage_balance)
    commission_pct = require_percent("agent_commission_percent", inputs.agent_commission_percent)
    closing_pct = require_percent("closing_costs_percent", inputs.closing_costs_percent)
    home_warranty = require_non_negative("home_warranty", inputs.home_warranty)
    repairs = require_non_negative("repairs", inputs.repairs)
    tax_proration = require_non_negative("property_tax_proration", inputs.property_tax_proration)

    commission_amount = sale_price * commission_pct / 100
    closing_costs_amount = sale_price * closing_pct / 100
    total_costs = (
        commission_amount
        + closing_costs_amount
        + home_warranty
        + repairs
        + tax_proration
        + mortgage_balance
    )
    net_proceeds = sale_price - total_costs

    return NetProceedsResult(
        commission_amount=commission_amount,
        closing_costs_amount=closing_costs_amount,
        total_costs=total_costs,
        net_proceeds=net_proceeds,
        net_proceeds_percent=net_proceeds / sale_price * 100,
    )
