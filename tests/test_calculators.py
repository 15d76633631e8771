"""
Tests for the program, refinance, affordability, net proceeds and
rent vs. buy calculators.
"""

import pytest

from loan_calc.calculations.affordability import calculate_affordability, principal_from_payment
from loan_calc.calculations.amortization import calculate_payment
from loan_calc.calculations.models import (
    AffordabilityInputs,
    NetProceedsInputs,
    ProgramPaymentInputs,
    RefinanceInputs,
    RentVsBuyInputs,
)
from loan_calc.calculations.proceeds import calculate_net_proceeds
from loan_calc.calculations.programs import (
    calculate_conventional,
    calculate_fha,
    calculate_va,
)
from loan_calc.calculations.refinance import calculate_refinance
from loan_calc.calculations.rent_vs_buy import compare_rent_vs_buy
from loan_calc.calculations.validation import InvalidInputError


class TestPrograms:
    """Conventional, FHA and VA payment breakdowns."""

    def test_conventional_twenty_percent_down_has_no_pmi(self):
        result = calculate_conventional(
            ProgramPaymentInputs(
                home_price=400000,
                down_payment=80000,
                interest_rate_percent=7,
                term_years=30,
                annual_property_tax=4800,
                annual_insurance=1200,
                monthly_hoa=50,
            )
        )
        assert result.loan_amount == 320000
        assert result.monthly_mortgage_insurance == 0
        assert result.down_payment_percent == pytest.approx(20)
        assert result.monthly_tax == 400
        assert result.monthly_insurance == 100
        assert result.monthly_payment == pytest.approx(
            result.principal_and_interest + 400 + 100 + 50
        )

    def test_conventional_low_down_payment_adds_pmi(self):
        result = calculate_conventional(
            ProgramPaymentInputs(400000, 40000, 7, 30)
        )
        assert result.loan_amount == 360000
        assert result.monthly_mortgage_insurance == pytest.approx(150.0)

    def test_fha_finances_upfront_mip(self):
        result = calculate_fha(ProgramPaymentInputs(300000, 10500, 6.5, 30))
        assert result.upfront_fee == pytest.approx(5066.25)
        assert result.loan_amount == pytest.approx(294566.25)
        assert result.monthly_mortgage_insurance == pytest.approx(205.0625)
        assert result.principal_and_interest == pytest.approx(
            calculate_payment(294566.25, 6.5, 30)
        )

    def test_va_funding_fee_and_no_insurance(self):
        result = calculate_va(
            ProgramPaymentInputs(300000, 0, 6.25, 30, monthly_hoa=75)
        )
        assert result.upfront_fee == pytest.approx(6900)
        assert result.loan_amount == pytest.approx(306900)
        assert result.monthly_mortgage_insurance == 0
        assert result.monthly_hoa == 0

    def test_va_custom_funding_fee(self):
        result = calculate_va(ProgramPaymentInputs(300000, 0, 6.25, 30), funding_fee_percent=0)
        assert result.loan_amount == 300000

    def test_down_payment_must_leave_a_loan(self):
        with pytest.raises(InvalidInputError) as exc:
            calculate_conventional(ProgramPaymentInputs(300000, 300000, 7, 30))
        assert exc.value.field == "down_payment"


class TestRefinance:
    def test_break_even(self):
        result = calculate_refinance(
            RefinanceInputs(
                current_loan_balance=300000,
                current_payment=2500,
                new_interest_rate_percent=6,
                new_term_years=30,
                closing_costs=5000,
            )
        )
        assert result.new_payment == pytest.approx(1798.65, abs=0.01)
        assert result.monthly_savings == pytest.approx(2500 - result.new_payment)
        assert result.break_even_months == 8
        assert result.lifetime_savings == pytest.approx(result.monthly_savings * 360 - 5000)

    def test_no_savings_never_breaks_even(self):
        result = calculate_refinance(RefinanceInputs(300000, 1000, 6, 30, 5000))
        assert result.monthly_savings < 0
        assert result.break_even_months == 0

    def test_rejects_negative_closing_costs(self):
        with pytest.raises(InvalidInputError) as exc:
            calculate_refinance(RefinanceInputs(300000, 2500, 6, 30, -1))
        assert exc.value.field == "closing_costs"


class TestAffordability:
    def test_front_end_limit(self):
        """28% of $10k income limits housing to $2,800."""
        result = calculate_affordability(
            AffordabilityInputs(
                monthly_income=10000,
                monthly_debts=500,
                down_payment=50000,
                interest_rate_percent=0,
                term_years=30,
            )
        )
        assert result.principal_and_interest == 2800
        assert result.max_loan_amount == 1008000
        assert result.max_home_price == 1058000

    def test_back_end_limit_with_taxes(self):
        """Heavy debts move the limit to the back-end ratio."""
        result = calculate_affordability(
            AffordabilityInputs(10000, 1500, 0, 6.5, 30, annual_property_tax=3600, annual_insurance=1200)
        )
        # 36% of 10000 - 1500 = 2100, less 300 tax and 100 insurance
        assert result.principal_and_interest == pytest.approx(1700)
        assert result.monthly_payment == pytest.approx(2100)
        assert calculate_payment(result.max_loan_amount, 6.5, 30) == pytest.approx(1700)

    def test_debts_exceed_budget(self):
        result = calculate_affordability(AffordabilityInputs(10000, 5000, 20000, 6.5, 30))
        assert result.max_loan_amount == 0
        assert result.max_home_price == 20000

    def test_principal_from_payment_inverts_payment(self):
        payment = calculate_payment(250000, 7.25, 15)
        assert principal_from_payment(payment, 7.25, 180) == pytest.approx(250000)

    def test_principal_from_payment_tiny_rate(self):
        assert principal_from_payment(1000, 1e-15, 360) == pytest.approx(360000)
        assert principal_from_payment(1000, 0, 360) == 360000


class TestNetProceeds:
    def test_portal_defaults(self):
        result = calculate_net_proceeds(
            NetProceedsInputs(
                sale_price=500000,
                mortgage_balance=300000,
                home_warranty=500,
                repairs=2000,
            )
        )
        assert result.commission_amount == 30000
        assert result.closing_costs_amount == 15000
        assert result.total_costs == 347500
        assert result.net_proceeds == 152500
        assert result.net_proceeds_percent == pytest.approx(30.5)

    def test_underwater_sale(self):
        result = calculate_net_proceeds(NetProceedsInputs(200000, 250000))
        assert result.net_proceeds < 0

    def test_rejects_zero_sale_price(self):
        with pytest.raises(InvalidInputError) as exc:
            calculate_net_proceeds(NetProceedsInputs(0, 0))
        assert exc.value.field == "sale_price"


class TestRentVsBuy:
    def test_flat_market(self):
        """No growth anywhere: rent costs are simple sums and equity is paid-down principal."""
        result = compare_rent_vs_buy(
            RentVsBuyInputs(
                home_price=300000,
                down_payment=60000,
                interest_rate_percent=0,
                term_years=30,
                monthly_rent=2000,
                years_to_compare=10,
                annual_renters_insurance=200,
                home_appreciation_percent=0,
                rent_increase_percent=0,
                investment_return_percent=0,
            )
        )
        assert result.monthly_buy_cost == pytest.approx(240000 / 360)
        assert result.total_rent_costs == pytest.approx(242000)
        assert result.total_buy_costs == pytest.approx(60000 + 240000 / 3)
        assert result.home_value == pytest.approx(300000)
        assert result.remaining_balance == pytest.approx(160000)
        assert result.equity_built == pytest.approx(140000)
        assert len(result.yearly) == 10
        assert result.buy_is_better == (result.net_difference > 0)

    def test_net_difference(self):
        result = compare_rent_vs_buy(
            RentVsBuyInputs(400000, 80000, 7, 30, monthly_rent=2500, monthly_maintenance=200)
        )
        assert result.net_difference == pytest.approx(
            result.buy_net_position - result.rent_net_position
        )
        assert result.yearly[-1]["year"] == 10
        assert result.home_value > 400000

    def test_horizon_past_payoff(self):
        result = compare_rent_vs_buy(
            RentVsBuyInputs(300000, 60000, 5, 15, monthly_rent=2000, years_to_compare=20)
        )
        assert result.remaining_balance == 0.0

    def test_rejects_zero_years(self):
        with pytest.raises(InvalidInputError) as exc:
            compare_rent_vs_buy(RentVsBuyInputs(300000, 60000, 5, 30, 2000, years_to_compare=0))
        assert exc.value.field == "years_to_compare"
