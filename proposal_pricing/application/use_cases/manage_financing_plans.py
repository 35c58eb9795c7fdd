"""Manage financing plans use case."""

from typing import Callable, Optional

from proposal_pricing.application.dtos.financing import (
    DeduplicationResult,
    FinancingPlan,
    FinancingPlanInput,
    FinancingPlanSnapshot,
    SeedResult,
)
from proposal_pricing.application.errors import (
    FinancingPlanNotFoundError,
    InvalidFinancingPlanError,
)
from proposal_pricing.application.ports.financing_plan_repository import (
    FinancingPlanRepository,
)

DEFAULT_PLANS = [
    FinancingPlanInput(
        plan_number="1519",
        provider="Goodleap",
        plan_name="Same as Cash 18 months",
        interest_rate=0.0,
        term_months=18,
        payment_factor=5.75,
        merchant_fee=17.5,
        notes="No interest if paid in full within 18 months",
        is_active=True,
    ),
    FinancingPlanInput(
        plan_number="4158",
        provider="Goodleap",
        plan_name="Deferred Interest 18 months",
        interest_rate=9.99,
        term_months=18,
        payment_factor=5.75,
        merchant_fee=17.5,
        notes="Deferred interest for 18 months",
        is_active=True,
    ),
    FinancingPlanInput(
        plan_number="HR20",
        provider="Homerun PACE",
        plan_name="9.99% APR for 20 years",
        interest_rate=9.99,
        term_months=240,
        payment_factor=0.96,
        merchant_fee=10.0,
        notes="PACE financing for 20 years",
        is_active=True,
    ),
    FinancingPlanInput(
        plan_number="HR25",
        provider="Homerun PACE",
        plan_name="9.99% APR for 25 years",
        interest_rate=9.99,
        term_months=300,
        payment_factor=0.88,
        merchant_fee=10.0,
        notes="PACE financing for 25 years",
        is_active=True,
    ),
    FinancingPlanInput(
        plan_number="HR30",
        provider="Homerun PACE",
        plan_name="9.99% APR for 30 years",
        interest_rate=9.99,
        term_months=360,
        payment_factor=0.84,
        merchant_fee=10.0,
        notes="PACE financing for 30 years",
        is_active=True,
    ),
]


class ManageFinancingPlans:
    """Use case for administering financing plans."""

    def __init__(
        self,
        repository: FinancingPlanRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize use case.

        Args:
            repository: Financing plan repository
            logger: Optional activity logger called with user_id, action and plan fields
        """
        self._repository = repository
        self._logger = logger

    def _log(self, user_id: Optional[str], action: str, plan: FinancingPlan) -> None:
        if self._logger:
            self._logger(
                user_id=user_id,
                action=action,
                plan_id=plan.id,
                plan_number=plan.plan_number,
                plan_name=plan.plan_name,
                provider=plan.provider,
            )

    @staticmethod
    def _normalize(data: FinancingPlanInput) -> FinancingPlanInput:
        """
        Validate a plan payload and fill in defaults.

        Raises:
            InvalidFinancingPlanError: If plan number, provider, plan name or
                payment factor is missing
        """
        required = (data.plan_number, data.provider, data.plan_name, data.payment_factor)
        if not all(required):
            raise InvalidFinancingPlanError(
                "Plan number, provider, plan name, and payment factor are required"
            )

        return data.model_copy(
            update={
                "interest_rate": data.interest_rate or 0.0,
                "term_months": data.term_months or 0,
                "merchant_fee": data.merchant_fee or 0.0,
                "notes": data.notes or "",
                "is_active": data.is_active if data.is_active is not None else True,
            }
        )

    async def list_plans(
        self, provider: Optional[str] = None, active_only: bool = False
    ) -> list[FinancingPlan]:
        """List plans ordered by provider, then plan name."""
        return await self._repository.list(provider=provider, active_only=active_only)

    async def get_plan(self, plan_id: int) -> FinancingPlan:
        """
        Get a plan by id.

        Raises:
            FinancingPlanNotFoundError: If the plan does not exist
        """
        plan = await self._repository.get(plan_id)
        if plan is None:
            raise FinancingPlanNotFoundError(plan_id)
        return plan

    async def create_plan(
        self, data: FinancingPlanInput, user_id: Optional[str] = None
    ) -> FinancingPlan:
        """
        Create a financing plan.

        Args:
            data: Plan payload
            user_id: Acting administrator, for the activity log

        Returns:
            Created plan

        Raises:
            InvalidFinancingPlanError: If required values are missing
        """
        plan = await self._repository.add(self._normalize(data))
        self._log(user_id, "create", plan)
        return plan

    async def update_plan(
        self, plan_id: int, data: FinancingPlanInput, user_id: Optional[str] = None
    ) -> FinancingPlan:
        """
        Update a financing plan.

        Raises:
            InvalidFinancingPlanError: If required values are missing
            FinancingPlanNotFoundError: If the plan does not exist
        """
        plan = await self._repository.update(plan_id, self._normalize(data))
        if plan is None:
            raise FinancingPlanNotFoundError(plan_id)
        self._log(user_id, "update", plan)
        return plan

    async def delete_plan(self, plan_id: int, user_id: Optional[str] = None) -> None:
        """
        Delete a financing plan.

        Raises:
            FinancingPlanNotFoundError: If the plan does not exist
        """
        plan = await self.get_plan(plan_id)
        await self._repository.delete(plan_id)
        self._log(user_id, "delete", plan)

    async def deduplicate_plans(self) -> DeduplicationResult:
        """
        Collapse plans sharing plan number, provider and payment factor.

        The plan with the highest id in each group is kept.

        Returns:
            Before/after counts
        """
        plans = await self._repository.list()
        before_count = len(plans)

        keep: dict[tuple[str, str, float], FinancingPlan] = {}
        for plan in plans:
            key = (plan.plan_number, plan.provider, plan.payment_factor)
            current = keep.get(key)
            if current is None or plan.id > current.id:
                keep[key] = plan

        kept_ids = {plan.id for plan in keep.values()}
        for plan in plans:
            if plan.id not in kept_ids:
                await self._repository.delete(plan.id)

        after_count = await self._repository.count()
        return DeduplicationResult(
            before_count=before_count,
            after_count=after_count,
            duplicates_removed=before_count - after_count,
        )

    async def seed_default_plans(self) -> SeedResult:
        """Insert DEFAULT_PLANS when no plans exist yet."""
        existing = await self._repository.count()
        if existing > 0:
            return SeedResult(seeded=False, count=existing)

        for data in DEFAULT_PLANS:
            await self._repository.add(data)
        return SeedResult(seeded=True, count=await self._repository.count())

    async def snapshot(self, plan_id: int) -> FinancingPlanSnapshot:
        """
        Copy the values a proposal keeps when this plan is selected.

        Raises:
            FinancingPlanNotFoundError: If the plan does not exist
        """
        return snapshot_plan(await self.get_plan(plan_id))


def snapshot_plan(plan: FinancingPlan) -> FinancingPlanSnapshot:
    """Build a by-value snapshot of a plan."""
    return FinancingPlanSnapshot(
        plan_id=plan.id,
        plan_name=plan.plan_name,
        provider=plan.provider,
        payment_factor=plan.payment_factor,
        merchant_fee=plan.merchant_fee,
    )
