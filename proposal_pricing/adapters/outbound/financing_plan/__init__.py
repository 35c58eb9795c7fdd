"""Financing plan repository adapters."""

from proposal_pricing.adapters.outbound.financing_plan.in_memory_financing_plan_repository import (  # noqa: E501
    InMemoryFinancingPlanRepository,
)
from proposal_pricing.adapters.outbound.financing_plan.sql_financing_plan_repository import (
    SqlFinancingPlanRepository,
)

__all__ = [
    "InMemoryFinancingPlanRepository",
    "SqlFinancingPlanRepository",
]
