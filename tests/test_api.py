"""
Tests for the calculator API endpoints.
"""

import pytest


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPaymentAPI:
    """Test payment and amortization endpoints."""

    def test_payment(self, client):
        response = client.post(
            "/api/calculate/payment",
            json={"principal": 400000, "annual_rate_percent": 6.75, "term_years": 30},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["monthly_payment"] == pytest.approx(2594.39, abs=0.01)
        assert data["display"]["monthly_payment"] == "$2,594.39"

    def test_payment_invalid_principal(self, client):
        """Invalid input returns 400 naming the field."""
        response = client.post(
            "/api/calculate/payment",
            json={"principal": -1, "annual_rate_percent": 5, "term_years": 30},
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["field"] == "principal"
        assert detail["message"] == "principal must be > 0"

    def test_payment_tiny_rate(self, client):
        response = client.post(
            "/api/calculate/payment",
            json={"principal": 100000, "annual_rate_percent": 1e-15, "term_years": 30},
        )
        assert response.status_code == 200
        assert response.json()["monthly_payment"] == pytest.approx(100000 / 360)

    def test_amortization_term_too_long(self, client):
        """Request horizons are capped before any schedule is built."""
        response = client.post(
            "/api/calculate/amortization",
            json={"principal": 100000, "annual_rate_percent": 6, "term_years": 100000},
        )
        assert response.status_code == 422

    def test_amortization(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 100000,
                "annual_rate_percent": 6,
                "term_years": 5,
                "start_date": "2025-01-01",
                "annual_summary": True,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["schedule"]) == 60
        assert data["schedule"][0]["date"] == "2025-01-01"
        assert data["total_principal"] == pytest.approx(100000, abs=1)
        assert len(data["annual_summary"]) == 5


class TestDSCRAPI:
    def test_dscr(self, client):
        response = client.post(
            "/api/calculate/dscr",
            json={
                "units": 1,
                "property_value": 300000,
                "avg_rent_per_unit": 2500,
                "annual_property_taxes": 5000,
                "annual_insurance": 5000,
                "monthly_hoa": 0,
                "vacancy_rate_percent": 5,
                "annual_repairs_and_maintenance": 5000,
                "loan_to_value_percent": 75,
                "interest_rate_percent": 8,
                "term_years": 30,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["net_operating_income"] == 13500
        assert data["rating"] == "poor"
        assert data["display"]["net_operating_income"] == "$13,500"
        assert data["display"]["dscr"] == "0.68x"

    def test_dscr_bad_vacancy(self, client):
        response = client.post(
            "/api/calculate/dscr",
            json={
                "property_value": 300000,
                "avg_rent_per_unit": 2500,
                "vacancy_rate_percent": 150,
                "interest_rate_percent": 8,
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "vacancy_rate_percent"


class TestBuydownAPI:
    def test_plans(self, client):
        response = client.get("/api/calculate/buydown/plans")
        assert response.status_code == 200
        plans = {p["plan"]: p["offsets"] for p in response.json()}
        assert plans == {"2-1": [2, 1], "1-1": [1, 1], "3-1": [3, 2, 1], "1-0": [1]}

    def test_buydown(self, client):
        response = client.post(
            "/api/calculate/buydown",
            json={"loan_amount": 400000, "base_rate_percent": 6.75, "term_years": 30, "plan": "2-1"},
        )
        assert response.status_code == 200
        data = response.json()
        assert [y["rate_percent"] for y in data["yearly_payments"]] == [4.75, 5.75]
        assert data["plan"] == "2-1"
        assert data["display"]["yearly_payments"][0]["rate"] == "4.75%"
        assert data["display"]["steady_state_payment"] == "$2,594"

    def test_unknown_plan(self, client):
        response = client.post(
            "/api/calculate/buydown",
            json={"loan_amount": 400000, "base_rate_percent": 6.75, "plan": "5-5"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "plan"


class TestOtherCalculatorsAPI:
    def test_conventional(self, client):
        response = client.post(
            "/api/calculate/conventional",
            json={"home_price": 400000, "down_payment": 40000, "interest_rate_percent": 7},
        )
        assert response.status_code == 200
        assert response.json()["monthly_mortgage_insurance"] == pytest.approx(150)

    def test_fha(self, client):
        response = client.post(
            "/api/calculate/fha",
            json={"home_price": 300000, "down_payment": 10500, "interest_rate_percent": 6.5},
        )
        assert response.status_code == 200
        assert response.json()["loan_amount"] == pytest.approx(294566.25)

    def test_va(self, client):
        response = client.post(
            "/api/calculate/va",
            json={"home_price": 300000, "down_payment": 0, "interest_rate_percent": 6.25},
        )
        assert response.status_code == 200
        assert response.json()["upfront_fee"] == pytest.approx(6900)

    def test_refinance(self, client):
        response = client.post(
            "/api/calculate/refinance",
            json={
                "current_loan_balance": 300000,
                "current_payment": 2500,
                "new_interest_rate_percent": 6,
                "closing_costs": 5000,
            },
        )
        assert response.status_code == 200
        assert response.json()["break_even_months"] == 8

    def test_affordability(self, client):
        response = client.post(
            "/api/calculate/affordability",
            json={
                "monthly_income": 10000,
                "monthly_debts": 500,
                "down_payment": 50000,
                "interest_rate_percent": 0,
            },
        )
        assert response.status_code == 200
        assert response.json()["display"]["max_home_price"] == "$1,058,000"

    def test_net_proceeds(self, client):
        response = client.post(
            "/api/calculate/net-proceeds",
            json={"sale_price": 500000, "mortgage_balance": 300000, "home_warranty": 500, "repairs": 2000},
        )
        assert response.status_code == 200
        assert response.json()["display"]["net_proceeds"] == "$152,500"

    def test_rent_vs_buy(self, client):
        response = client.post(
            "/api/calculate/rent-vs-buy",
            json={
                "home_price": 400000,
                "down_payment": 80000,
                "interest_rate_percent": 7,
                "monthly_rent": 2500,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["yearly"]) == 10
        assert data["display"]["better_option"] in ("buy", "rent")

    def test_rent_vs_buy_horizon_too_long(self, client):
        response = client.post(
            "/api/calculate/rent-vs-buy",
            json={
                "home_price": 400000,
                "down_payment": 80000,
                "interest_rate_percent": 7,
                "monthly_rent": 2500,
                "years_to_compare": 1000,
            },
        )
        assert response.status_code == 422
