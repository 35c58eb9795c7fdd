"""Proposal pricing DTOs."""

from typing import Optional

from pydantic import ConfigDict, Field

from proposal_pricing.application.dtos.base import DTO
from proposal_pricing.application.dtos.financing import FinancingPlanSnapshot


class AddonLineItem(DTO):
    """Optional extra line item priced separately from the base total."""

    name: str
    price: float


class PricingQuoteRequest(DTO):
    """Proposal pricing quote request."""

    base_total: float
    addons: list[AddonLineItem] = Field(default_factory=list)
    savings: float = 0.0
    base_discount: float = 0.0
    plan_ids: list[int] = Field(default_factory=list)
    default_term_months: Optional[int] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "base_total": 18500.0,
                "addons": [{"name": "Gutter guards", "price": 600.0}],
                "savings": 500.0,
                "base_discount": 250.0,
                "plan_ids": [1, 3],
            }
        },
    )


class AddonImpact(DTO):
    """Monthly payment impact of one add-on under one plan."""

    name: str
    price: float
    monthly_impact: float


class PlanQuote(DTO):
    """Monthly payment figures for one selected financing plan."""

    plan: FinancingPlanSnapshot
    calculation_method: str  # "payment_factor" or "amortization"
    monthly_payment: float
    merchant_fee_amount: float
    addon_impacts: list[AddonImpact]


class PricingQuote(DTO):
    """Proposal pricing quote response."""

    base_total: float
    additional_cost: float
    savings: float
    base_discount: float
    adjusted_total: float
    plans: list[PlanQuote]


class MonthlyPaymentRequest(DTO):
    """Standalone monthly payment calculation request."""

    total: float
    payment_factor: Optional[float] = None
    term_months: Optional[int] = None
    interest_rate: float = 0.0


class MonthlyPaymentResponse(DTO):
    """Standalone monthly payment calculation response."""

    total: float
    monthly_payment: float
    calculation_method: str
    formatted: str
