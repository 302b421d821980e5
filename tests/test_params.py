"""Tests for household constants and loan helpers."""

import pytest
from family_expense_jp import YearlyLoan
from family_expense_jp.params import (
    BASE_FOOD_EXPENSE,
    BASE_FUEL_LIGHT_WATER_EXPENSE,
    BASE_FURNITURE_EXPENSE,
    PERSON_FOOD_EXPENSE,
    PERSON_FUEL_LIGHT_WATER_EXPENSE,
    PERSON_FURNITURE_EXPENSE,
    _calc_equal_payment,
    validate_loan,
)


class TestCalcEqualPayment:
    def test_zero_rate(self):
        result = _calc_equal_payment(1200, 0, 12)
        assert result == pytest.approx(100.0)

    def test_normal_rate(self):
        # 1000万円, 月利0.5%, 360ヶ月 → 既知の元利均等返済額
        result = _calc_equal_payment(1000, 0.005, 360)
        assert result == pytest.approx(5.995505, rel=1e-4)

    def test_single_month(self):
        result = _calc_equal_payment(100, 0.01, 1)
        assert result == pytest.approx(101.0, rel=1e-4)


class TestYearlyLoan:
    def test_zero_rate_no_compounding(self):
        loan = YearlyLoan(interest_rate=0.0, payment_years=10, amount=1200000)
        assert loan.monthly_payment() == 10000
        assert loan.yearly_payment() == 1200000 // 10

    def test_monthly_payment_truncated(self):
        # 599.5505... → 599
        loan = YearlyLoan(interest_rate=0.06, payment_years=30, amount=100000)
        assert loan.monthly_payment() == 599

    def test_yearly_rounds_per_month(self):
        """Yearly payment is the truncated monthly payment × 12, not truncated yearly."""
        loan = YearlyLoan(interest_rate=0.06, payment_years=30, amount=100000)
        assert loan.yearly_payment() == 599 * 12
        assert loan.yearly_payment() != int(_calc_equal_payment(100000, 0.005, 360) * 12)

    def test_large_principal(self):
        loan = YearlyLoan(interest_rate=0.06, payment_years=30, amount=10000000)
        assert loan.monthly_payment() == 59955
        assert loan.yearly_payment() == 59955 * 12

    def test_is_paying_window(self):
        loan = YearlyLoan(interest_rate=0.01, payment_years=3, amount=1000000)
        assert not loan.is_paying(2025, 2024)
        assert loan.is_paying(2025, 2025)
        assert loan.is_paying(2025, 2027)
        assert not loan.is_paying(2025, 2028)


class TestValidateLoan:
    def test_valid(self):
        assert validate_loan(YearlyLoan(0.01, 10, 1000000), "車") == []

    def test_zero_years(self):
        errors = validate_loan(YearlyLoan(0.01, 0, 1000000), "車")
        assert len(errors) == 1
        assert "返済年数" in errors[0]

    def test_negative_amount_and_rate(self):
        errors = validate_loan(YearlyLoan(-0.01, 5, -1), "住居1")
        assert len(errors) == 2
        assert all(e.startswith("住居1") for e in errors)


class TestHouseholdSplit:
    """Base + per-person split reproduces the single-person household figure."""

    def test_food(self):
        assert PERSON_FOOD_EXPENSE == 313822
        assert BASE_FOOD_EXPENSE + PERSON_FOOD_EXPENSE == 39069 * 12

    def test_fuel_light_water(self):
        assert BASE_FUEL_LIGHT_WATER_EXPENSE + PERSON_FUEL_LIGHT_WATER_EXPENSE == 13098 * 12
        assert BASE_FUEL_LIGHT_WATER_EXPENSE > 0

    def test_furniture(self):
        assert PERSON_FURNITURE_EXPENSE == 39144
        assert BASE_FURNITURE_EXPENSE == 5487 * 12 - 39144
