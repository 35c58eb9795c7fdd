"""Financing calculations for proposal totals.

All functions are pure and never raise for finite numeric input. Results are
unrounded Decimals; rounding to cents is left to the caller.
"""

from decimal import Decimal
from typing import Optional

from proposal_pricing.domain.value_objects.money import Number, to_decimal

# Linear payoff term used for add-ons when neither a factor nor a term is known
DEFAULT_ADDON_TERM_MONTHS = 60

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)
_MONTHS_PER_YEAR = Decimal(12)


def calculate_monthly_payment_with_factor(total: Number, payment_factor: Number) -> Decimal:
    """
    Calculate the monthly payment from a provider payment factor.

    Args:
        total: Amount financed (zero or negative amounts are allowed for credits)
        payment_factor: Percent of principal charged per month (5.75 means 5.75%)

    Returns:
        Monthly payment
    """
    return to_decimal(total) * (to_decimal(payment_factor) / _HUNDRED)


def calculate_monthly_payment(total: Number, term: Number, rate: Number) -> Decimal:
    """
    Calculate the monthly payment with the standard amortization formula.

    M = P * r * (1 + r)^n / ((1 + r)^n - 1), where r is the monthly rate.

    Args:
        total: Principal
        term: Number of monthly payments
        rate: Annual interest rate in percent

    Returns:
        Monthly payment, 0 when the term is 0
    """
    principal = to_decimal(total)
    months = to_decimal(term)
    if months == 0:
        return _ZERO

    monthly_rate = to_decimal(rate) / _HUNDRED / _MONTHS_PER_YEAR
    if monthly_rate == 0:
        return principal / months

    growth = (1 + monthly_rate) ** months
    denominator = growth - 1
    if denominator == 0:
        return _ZERO
    return principal * monthly_rate * growth / denominator


def calculate_addon_monthly_impact(
    addon_price: Number,
    payment_factor: Optional[Number] = None,
    term_months: Optional[Number] = None,
) -> Decimal:
    """
    Calculate how much an add-on raises the monthly payment.

    A positive payment factor wins and the term is ignored, since the factor
    already encodes term and rate. Otherwise the price is spread linearly over
    term_months, or DEFAULT_ADDON_TERM_MONTHS when no term is given.

    Args:
        addon_price: Price of the add-on line item
        payment_factor: Optional plan payment factor in percent
        term_months: Optional term for the linear fallback

    Returns:
        Monthly impact of the add-on
    """
    if payment_factor is not None and to_decimal(payment_factor) > 0:
        return calculate_monthly_payment_with_factor(addon_price, payment_factor)

    term = to_decimal(term_months) if term_months else Decimal(DEFAULT_ADDON_TERM_MONTHS)
    return to_decimal(addon_price) / term


def calculate_total_with_adjustments(
    base_total: Number,
    additional_cost: Number = 0,
    savings: Number = 0,
    base_discount: Number = 0,
) -> Decimal:
    """Return base_total + additional_cost - savings - base_discount (may be negative)."""
    return (
        to_decimal(base_total)
        + to_decimal(additional_cost)
        - to_decimal(savings)
        - to_decimal(base_discount)
    )


def calculate_merchant_fee_amount(total: Number, merchant_fee: Number) -> Decimal:
    """Fee the provider charges the contractor on a financed total."""
    return to_decimal(total) * to_decimal(merchant_fee) / _HUNDRED
