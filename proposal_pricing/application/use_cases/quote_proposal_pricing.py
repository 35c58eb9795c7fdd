"""Quote proposal pricing use case."""

from decimal import Decimal
from typing import Callable, Optional

from proposal_pricing.application.dtos.financing import FinancingPlan
from proposal_pricing.application.dtos.pricing import (
    AddonImpact,
    MonthlyPaymentRequest,
    MonthlyPaymentResponse,
    PlanQuote,
    PricingQuote,
    PricingQuoteRequest,
)
from proposal_pricing.application.errors import FinancingPlanNotFoundError
from proposal_pricing.application.ports.financing_plan_repository import (
    FinancingPlanRepository,
)
from proposal_pricing.application.use_cases.manage_financing_plans import snapshot_plan
from proposal_pricing.domain.financing import (
    DEFAULT_ADDON_TERM_MONTHS,
    calculate_addon_monthly_impact,
    calculate_merchant_fee_amount,
    calculate_monthly_payment,
    calculate_monthly_payment_with_factor,
    calculate_total_with_adjustments,
)
from proposal_pricing.domain.value_objects.money import (
    Number,
    format_currency,
    round_cents,
    to_decimal,
)

PAYMENT_FACTOR = "payment_factor"
AMORTIZATION = "amortization"


def calculate_plan_payment(
    total: Number,
    payment_factor: Optional[Number],
    term_months: Optional[Number],
    interest_rate: Number,
) -> tuple[Decimal, str]:
    """
    Calculate a monthly payment from whatever the plan provides.

    The payment factor is authoritative when positive; otherwise the term and
    rate are amortized.

    Returns:
        Tuple of (monthly payment, calculation method)
    """
    if payment_factor is not None and to_decimal(payment_factor) > 0:
        return calculate_monthly_payment_with_factor(total, payment_factor), PAYMENT_FACTOR
    return calculate_monthly_payment(total, term_months or 0, interest_rate), AMORTIZATION


def _money(value: Number) -> float:
    return float(round_cents(value))


class QuoteProposalPricing:
    """Use case for pricing a proposal against selected financing plans."""

    def __init__(
        self,
        repository: FinancingPlanRepository,
        default_addon_term_months: int = DEFAULT_ADDON_TERM_MONTHS,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize use case.

        Args:
            repository: Financing plan repository
            default_addon_term_months: Linear payoff term for add-ons when a plan
                has neither a factor nor a term
            logger: Optional calculation logger
        """
        self._repository = repository
        self._default_addon_term_months = default_addon_term_months
        self._logger = logger

    def _log(self, **kwargs) -> None:
        if self._logger:
            self._logger(**kwargs)

    async def _load_plans(self, plan_ids: list[int]) -> list[FinancingPlan]:
        plans = []
        for plan_id in plan_ids:
            plan = await self._repository.get(plan_id)
            if plan is None:
                raise FinancingPlanNotFoundError(plan_id)
            plans.append(plan)
        return plans

    async def execute(self, request: PricingQuoteRequest) -> PricingQuote:
        """
        Price a proposal.

        Args:
            request: Base total, add-ons, offers, discount and selected plan ids

        Returns:
            Adjusted total and per-plan monthly figures, rounded to cents

        Raises:
            FinancingPlanNotFoundError: If a selected plan does not exist
        """
        plans = await self._load_plans(request.plan_ids)

        additional_cost = sum((to_decimal(addon.price) for addon in request.addons), Decimal(0))
        adjusted_total = calculate_total_with_adjustments(
            request.base_total,
            additional_cost,
            request.savings,
            request.base_discount,
        )

        plan_quotes = []
        for plan in plans:
            monthly_payment, method = calculate_plan_payment(
                adjusted_total, plan.payment_factor, plan.term_months, plan.interest_rate
            )
            addon_term = (
                plan.term_months or request.default_term_months or self._default_addon_term_months
            )
            addon_impacts = [
                AddonImpact(
                    name=addon.name,
                    price=addon.price,
                    monthly_impact=_money(
                        calculate_addon_monthly_impact(
                            addon.price, plan.payment_factor, addon_term
                        )
                    ),
                )
                for addon in request.addons
            ]
            plan_quotes.append(
                PlanQuote(
                    plan=snapshot_plan(plan),
                    calculation_method=method,
                    monthly_payment=_money(monthly_payment),
                    merchant_fee_amount=_money(
                        calculate_merchant_fee_amount(adjusted_total, plan.merchant_fee)
                    ),
                    addon_impacts=addon_impacts,
                )
            )
            self._log(
                total=float(adjusted_total),
                plan_id=plan.id,
                method=method,
                monthly_payment=_money(monthly_payment),
            )

        return PricingQuote(
            base_total=request.base_total,
            additional_cost=_money(additional_cost),
            savings=request.savings,
            base_discount=request.base_discount,
            adjusted_total=_money(adjusted_total),
            plans=plan_quotes,
        )

    def monthly_payment(self, request: MonthlyPaymentRequest) -> MonthlyPaymentResponse:
        """
        Calculate a single monthly payment without a stored plan.

        Args:
            request: Total plus either a payment factor or a term and rate

        Returns:
            Monthly payment rounded to cents, with its display string
        """
        payment, method = calculate_plan_payment(
            request.total, request.payment_factor, request.term_months, request.interest_rate
        )
        self._log(total=request.total, plan_id=None, method=method, monthly_payment=_money(payment))
        return MonthlyPaymentResponse(
            total=request.total,
            monthly_payment=_money(payment),
            calculation_method=method,
            formatted=format_currency(payment),
        )
