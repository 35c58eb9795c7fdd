"""HTTP routes."""

from typing import Optional

from fastapi import APIRouter, Header, HTTPException, status

from proposal_pricing.application.dtos.financing import (
    DeduplicationResult,
    FinancingPlan,
    FinancingPlanInput,
    SeedResult,
)
from proposal_pricing.application.dtos.pricing import (
    MonthlyPaymentRequest,
    MonthlyPaymentResponse,
    PricingQuote,
    PricingQuoteRequest,
)
from proposal_pricing.application.errors import (
    FinancingPlanNotFoundError,
    InvalidFinancingPlanError,
)
from proposal_pricing.infrastructure.config.settings import settings
from proposal_pricing.infrastructure.logging.logger import log_event, logger
from proposal_pricing.infrastructure.wiring.dependencies import (
    create_financing_plan_repository,
    create_manage_financing_plans,
    create_quote_proposal_pricing,
)

router = APIRouter()

# Use cases share one repository instance
_plan_repository = create_financing_plan_repository()
_manage_financing_plans = create_manage_financing_plans(_plan_repository)
_quote_proposal_pricing = create_quote_proposal_pricing(_plan_repository)


def _not_found(err: FinancingPlanNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))


def _bad_request(err: InvalidFinancingPlanError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))


async def seed_default_plans_if_enabled() -> Optional[SeedResult]:
    """
    Seed the default financing plans when SEED_DEFAULT_PLANS is enabled.

    Returns:
        Seed result, or None when seeding is disabled
    """
    if not settings.seed_default_plans:
        return None
    result = await _manage_financing_plans.seed_default_plans()
    logger.info(f"Financing plan seeding: seeded={result.seeded} count={result.count}")
    return result


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/financing/plans", response_model=list[FinancingPlan])
async def list_financing_plans(
    provider: Optional[str] = None, active_only: bool = False
) -> list[FinancingPlan]:
    """
    List financing plans ordered by provider, then plan name.

    Args:
        provider: Optional provider filter
        active_only: Only return active plans
    """
    return await _manage_financing_plans.list_plans(provider=provider, active_only=active_only)


@router.get("/financing/plans/{plan_id}", response_model=FinancingPlan)
async def get_financing_plan(plan_id: int) -> FinancingPlan:
    """Get one financing plan."""
    try:
        return await _manage_financing_plans.get_plan(plan_id)
    except FinancingPlanNotFoundError as err:
        raise _not_found(err) from err


@router.post(
    "/admin/financing/plans",
    status_code=status.HTTP_201_CREATED,
    response_model=FinancingPlan,
)
async def create_financing_plan(
    data: FinancingPlanInput,
    x_user_id: Optional[str] = Header(default=None),
) -> FinancingPlan:
    """
    Create a financing plan.

    Args:
        data: Plan payload; plan number, provider, plan name and payment factor
            are required
        x_user_id: Acting administrator, recorded in the activity log
    """
    try:
        return await _manage_financing_plans.create_plan(data, user_id=x_user_id)
    except InvalidFinancingPlanError as err:
        raise _bad_request(err) from err


@router.put("/admin/financing/plans/{plan_id}", response_model=FinancingPlan)
async def update_financing_plan(
    plan_id: int,
    data: FinancingPlanInput,
    x_user_id: Optional[str] = Header(default=None),
) -> FinancingPlan:
    """Update a financing plan."""
    try:
        return await _manage_financing_plans.update_plan(plan_id, data, user_id=x_user_id)
    except InvalidFinancingPlanError as err:
        raise _bad_request(err) from err
    except FinancingPlanNotFoundError as err:
        raise _not_found(err) from err


@router.delete("/admin/financing/plans/{plan_id}")
async def delete_financing_plan(
    plan_id: int,
    x_user_id: Optional[str] = Header(default=None),
) -> dict[str, bool]:
    """Delete a financing plan."""
    try:
        await _manage_financing_plans.delete_plan(plan_id, user_id=x_user_id)
    except FinancingPlanNotFoundError as err:
        raise _not_found(err) from err
    return {"success": True}


@router.post("/admin/financing/plans/deduplicate", response_model=DeduplicationResult)
async def deduplicate_financing_plans() -> DeduplicationResult:
    """Remove plans duplicated by plan number, provider and payment factor."""
    result = await _manage_financing_plans.deduplicate_plans()
    log_event(
        component="http",
        action="deduplicate",
        duplicates_removed=result.duplicates_removed,
    )
    return result


@router.post("/admin/financing/plans/seed", response_model=SeedResult)
async def seed_financing_plans() -> SeedResult:
    """Insert the default plans if no plans exist."""
    return await _manage_financing_plans.seed_default_plans()


@router.post("/pricing/quote", response_model=PricingQuote)
async def quote_pricing(request: PricingQuoteRequest) -> PricingQuote:
    """
    Price a proposal against the selected financing plans.

    Args:
        request: Base total, add-ons, offer savings, discount and plan ids

    Returns:
        Adjusted total with monthly payment, merchant fee and add-on impact per plan
    """
    try:
        return await _quote_proposal_pricing.execute(request)
    except FinancingPlanNotFoundError as err:
        raise _not_found(err) from err


@router.post("/pricing/monthly-payment", response_model=MonthlyPaymentResponse)
async def monthly_payment(request: MonthlyPaymentRequest) -> MonthlyPaymentResponse:
    """Calculate a monthly payment from a factor, or from a term and rate."""
    return _quote_proposal_pricing.monthly_payment(request)
