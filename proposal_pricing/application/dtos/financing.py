"""Financing plan DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from proposal_pricing.application.dtos.base import DTO


class FinancingPlan(DTO):
    """Provider-issued financing plan."""

    id: int
    plan_number: str
    provider: str
    plan_name: str
    interest_rate: float = 0.0  # Annual, percent
    term_months: int = 0
    payment_factor: float  # Percent of principal per month
    merchant_fee: float = 0.0  # Percent, charged to the contractor
    notes: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "plan_number": "1519",
                "provider": "Goodleap",
                "plan_name": "Same as Cash 18 months",
                "interest_rate": 0.0,
                "term_months": 18,
                "payment_factor": 5.75,
                "merchant_fee": 17.5,
                "notes": "No interest if paid in full within 18 months",
                "is_active": True,
            }
        },
    )


class FinancingPlanInput(DTO):
    """Create/update payload for a financing plan.

    Every field is optional so that missing required values are reported by the
    use case rather than by schema validation.
    """

    plan_number: Optional[str] = None
    provider: Optional[str] = None
    plan_name: Optional[str] = None
    interest_rate: Optional[float] = None
    term_months: Optional[int] = None
    payment_factor: Optional[float] = None
    merchant_fee: Optional[float] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class FinancingPlanSnapshot(DTO):
    """Plan values copied onto a proposal when the plan is selected."""

    plan_id: int
    plan_name: str
    provider: str
    payment_factor: float
    merchant_fee: float


class DeduplicationResult(DTO):
    """Outcome of collapsing duplicate financing plans."""

    before_count: int
    after_count: int
    duplicates_removed: int


class SeedResult(DTO):
    """Outcome of seeding the default financing plans."""

    seeded: bool
    count: int
