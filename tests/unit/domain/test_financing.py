"""Unit tests for financing calculations."""

import math
from decimal import Decimal

import pytest

from proposal_pricing.domain.financing import (
    calculate_addon_monthly_impact,
    calculate_merchant_fee_amount,
    calculate_monthly_payment,
    calculate_monthly_payment_with_factor,
    calculate_total_with_adjustments,
)


def reference_amortization(principal: float, months: int, annual_rate_pct: float) -> float:
    """Independent float implementation of the amortization formula."""
    r = annual_rate_pct / 1200
    return principal * r / (1 - (1 + r) ** -months)


class TestMonthlyPaymentWithFactor:
    """Test cases for factor-based monthly payments."""

    def test_factor_is_percent_of_total(self) -> None:
        assert calculate_monthly_payment_with_factor(1000, 5.75) == Decimal("57.5")

    def test_result_is_not_rounded(self) -> None:
        assert calculate_monthly_payment_with_factor(333, 0.96) == Decimal("3.1968")

    def test_zero_total(self) -> None:
        assert calculate_monthly_payment_with_factor(0, 5.75) == 0

    def test_negative_total_for_credits(self) -> None:
        assert calculate_monthly_payment_with_factor(-200, 5) == Decimal("-10")


class TestMonthlyPayment:
    """Test cases for amortized monthly payments."""

    def test_zero_term_returns_zero(self) -> None:
        assert calculate_monthly_payment(1000, 0, 5) == 0

    def test_zero_rate_is_linear(self) -> None:
        assert calculate_monthly_payment(1200, 12, 0) == 100

    def test_matches_closed_form(self) -> None:
        payment = calculate_monthly_payment(10000, 60, 5.99)

        expected = reference_amortization(10000, 60, 5.99)
        assert math.isclose(float(payment), expected, rel_tol=1e-9)
        assert round(payment, 2) == Decimal("193.28")

    def test_long_pace_term(self) -> None:
        payment = calculate_monthly_payment(25000, 360, 9.99)

        expected = reference_amortization(25000, 360, 9.99)
        assert math.isclose(float(payment), expected, rel_tol=1e-9)

    def test_accepts_decimal_and_string_inputs(self) -> None:
        assert calculate_monthly_payment(Decimal("1200"), "12", "0") == 100

    def test_vanishing_rate_does_not_divide_by_zero(self) -> None:
        # (1 + r)^n rounds to exactly 1 at this precision
        assert calculate_monthly_payment(1000, 1, Decimal("1e-40")) == 0

    @pytest.mark.parametrize(
        "total,term,rate",
        [(0, 12, 5), (1, 1, 0), (5000, 18, 0), (18500, 240, 9.99), (999999, 360, 29.99)],
    )
    def test_non_negative_for_non_negative_inputs(self, total, term, rate) -> None:
        assert calculate_monthly_payment(total, term, rate) >= 0


class TestAddonMonthlyImpact:
    """Test cases for add-on monthly impact."""

    def test_factor_takes_precedence(self) -> None:
        assert calculate_addon_monthly_impact(600, 5.75, None) == (
            calculate_monthly_payment_with_factor(600, 5.75)
        )

    def test_factor_ignores_term(self) -> None:
        assert calculate_addon_monthly_impact(600, 5.75, 12) == Decimal("34.5")

    def test_defaults_to_sixty_months(self) -> None:
        assert calculate_addon_monthly_impact(600, None, None) == 600 / 60

    def test_uses_given_term_without_factor(self) -> None:
        assert calculate_addon_monthly_impact(600, None, 12) == 50

    def test_zero_factor_falls_back_to_term(self) -> None:
        assert calculate_addon_monthly_impact(600, 0, 24) == 25

    def test_zero_term_falls_back_to_default(self) -> None:
        assert calculate_addon_monthly_impact(600, None, 0) == 10


class TestTotalWithAdjustments:
    """Test cases for adjusted proposal totals."""

    def test_all_adjustments(self) -> None:
        assert calculate_total_with_adjustments(1000, 200, 50, 100) == 1050

    def test_defaults_are_identity(self) -> None:
        assert calculate_total_with_adjustments(1000) == 1000

    def test_no_clamping_to_zero(self) -> None:
        assert calculate_total_with_adjustments(100, 0, 150, 25) == -75

    def test_float_cents_stay_exact(self) -> None:
        assert calculate_total_with_adjustments(0.1, 0.2) == Decimal("0.3")


def test_merchant_fee_amount() -> None:
    """Merchant fee is a percent of the financed total."""
    assert calculate_merchant_fee_amount(10000, 17.5) == 1750
