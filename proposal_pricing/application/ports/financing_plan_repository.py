"""Financing plan repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from proposal_pricing.application.dtos.financing import FinancingPlan, FinancingPlanInput


class FinancingPlanRepository(ABC):
    """Port interface for financing plan repository."""

    @abstractmethod
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
        pass

    @abstractmethod
    async def get(self, plan_id: int) -> Optional[FinancingPlan]:
        """
        Get a financing plan by id.

        Args:
            plan_id: Plan identifier

        Returns:
            FinancingPlan DTO, or None if not found
        """
        pass

    @abstractmethod
    async def add(self, data: FinancingPlanInput) -> FinancingPlan:
        """
        Add a new financing plan.

        Args:
            data: Normalized plan values (no missing fields)

        Returns:
            Stored plan with its assigned id
        """
        pass

    @abstractmethod
    async def update(self, plan_id: int, data: FinancingPlanInput) -> Optional[FinancingPlan]:
        """
        Replace the values of an existing plan.

        Args:
            plan_id: Plan identifier
            data: Normalized plan values

        Returns:
            Updated plan, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, plan_id: int) -> bool:
        """
        Delete a financing plan.

        Args:
            plan_id: Plan identifier

        Returns:
            True if a plan was deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored financing plans."""
        pass
