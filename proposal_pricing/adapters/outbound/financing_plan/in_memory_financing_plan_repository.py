"""In-memory financing plan repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from proposal_pricing.application.dtos.financing import FinancingPlan, FinancingPlanInput
from proposal_pricing.application.ports.financing_plan_repository import (
    FinancingPlanRepository,
)


class InMemoryFinancingPlanRepository(FinancingPlanRepository):
    """In-memory implementation of financing plan repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[int, FinancingPlan] = {}
        self._next_id = 1

    async def list(
        self, provider: Optional[str] = None, active_only: bool = False
    ) -> list[FinancingPlan]:
        """
        List financing plans ordered by provider, then plan name.

        Args:
            provider: Only return plans from this provider
            active_only: Only return active plans

        Returns:
            List of financing plans
        """
        plans = [
            plan
            for plan in self._storage.values()
            if (provider is None or plan.provider == provider)
            and (not active_only or plan.is_active)
        ]
        return sorted(plans, key=lambda plan: (plan.provider, plan.plan_name))

    async def get(self, plan_id: int) -> Optional[FinancingPlan]:
        return self._storage.get(plan_id)

    async def add(self, data: FinancingPlanInput) -> FinancingPlan:
        """
        Add a new financing plan with the next sequential id.

        Args:
            data: Normalized plan values

        Returns:
            Stored plan
        """
        now = datetime.now(timezone.utc)
        plan = FinancingPlan(
            id=self._next_id,
            created_at=now,
            updated_at=now,
            **data.model_dump(exclude_none=True),
        )
        self._storage[plan.id] = plan
        self._next_id += 1
        return plan

    async def update(self, plan_id: int, data: FinancingPlanInput) -> Optional[FinancingPlan]:
        """
        Replace the values of an existing plan.

        Args:
            plan_id: Plan identifier
            data: Normalized plan values

        Returns:
            Updated plan, or None if not found
        """
        existing = self._storage.get(plan_id)
        if existing is None:
            return None
        plan = FinancingPlan(
            id=plan_id,
            created_at=existing.created_at,
            updated_at=datetime.now(timezone.utc),
            **data.model_dump(exclude_none=True),
        )
        self._storage[plan_id] = plan
        return plan

    async def delete(self, plan_id: int) -> bool:
        return self._storage.pop(plan_id, None) is not None

    async def count(self) -> int:
        return len(self._storage)
