"""Dependency injection factory functions."""

from proposal_pricing.adapters.outbound.financing_plan import (
    InMemoryFinancingPlanRepository,
    SqlFinancingPlanRepository,
)
from proposal_pricing.application.ports.financing_plan_repository import (
    FinancingPlanRepository,
)
from proposal_pricing.application.use_cases.manage_financing_plans import ManageFinancingPlans
from proposal_pricing.application.use_cases.quote_proposal_pricing import QuoteProposalPricing
from proposal_pricing.infrastructure.config.settings import settings
from proposal_pricing.infrastructure.logging.logger import (
    log_financing_calculation,
    log_plan_update,
)


def create_financing_plan_repository() -> FinancingPlanRepository:
    """
    Factory function to create financing plan repository.

    Returns:
        FinancingPlanRepository instance

    Raises:
        ValueError: If postgres is selected without DATABASE_URL
    """
    if settings.financing_plan_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when FINANCING_PLAN_REPOSITORY=postgres")
        return SqlFinancingPlanRepository()
    else:
        return InMemoryFinancingPlanRepository()


def create_manage_financing_plans(repository: FinancingPlanRepository) -> ManageFinancingPlans:
    """
    Factory function to create ManageFinancingPlans with the activity logger.

    Args:
        repository: Financing plan repository to share with other use cases

    Returns:
        ManageFinancingPlans instance
    """
    return ManageFinancingPlans(repository, logger=log_plan_update)


def create_quote_proposal_pricing(repository: FinancingPlanRepository) -> QuoteProposalPricing:
    """
    Factory function to create QuoteProposalPricing with the calculation logger.

    Args:
        repository: Financing plan repository to share with other use cases

    Returns:
        QuoteProposalPricing instance
    """
    return QuoteProposalPricing(
        repository,
        default_addon_term_months=settings.default_addon_term_months,
        logger=log_financing_calculation,
    )
