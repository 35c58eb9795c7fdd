"""Unit tests for ManageFinancingPlans use case."""

import pytest

from proposal_pricing.adapters.outbound.financing_plan import InMemoryFinancingPlanRepository
from proposal_pricing.application.dtos.financing import FinancingPlanInput
from proposal_pricing.application.errors import (
    FinancingPlanNotFoundError,
    InvalidFinancingPlanError,
)
from proposal_pricing.application.use_cases.manage_financing_plans import (
    DEFAULT_PLANS,
    ManageFinancingPlans,
)


def plan_input(**overrides) -> FinancingPlanInput:
    values = {
        "plan_number": "1519",
        "provider": "Goodleap",
        "plan_name": "Same as Cash 18 months",
        "payment_factor": 5.75,
    }
    values.update(overrides)
    return FinancingPlanInput(**values)


@pytest.fixture
def activity():
    return []


@pytest.fixture
def use_case(activity):
    def _logger(**kwargs):
        activity.append(kwargs)

    return ManageFinancingPlans(InMemoryFinancingPlanRepository(), logger=_logger)


@pytest.mark.asyncio
async def test_create_plan_fills_defaults(use_case):
    """Missing optional values default to zero, empty notes and active."""
    plan = await use_case.create_plan(plan_input())

    assert plan.id == 1
    assert plan.interest_rate == 0.0
    assert plan.term_months == 0
    assert plan.merchant_fee == 0.0
    assert plan.notes == ""
    assert plan.is_active is True


@pytest.mark.asyncio
async def test_create_plan_keeps_inactive_flag(use_case):
    plan = await use_case.create_plan(plan_input(is_active=False))
    assert plan.is_active is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing",
    [
        {"plan_number": None},
        {"provider": ""},
        {"plan_name": None},
        {"payment_factor": None},
        {"payment_factor": 0.0},
    ],
)
async def test_create_plan_requires_fields(use_case, missing):
    with pytest.raises(InvalidFinancingPlanError, match="are required"):
        await use_case.create_plan(plan_input(**missing))


@pytest.mark.asyncio
async def test_create_plan_logs_activity(use_case, activity):
    plan = await use_case.create_plan(plan_input(), user_id="user_42")

    assert activity == [
        {
            "user_id": "user_42",
            "action": "create",
            "plan_id": plan.id,
            "plan_number": "1519",
            "plan_name": "Same as Cash 18 months",
            "provider": "Goodleap",
        }
    ]


@pytest.mark.asyncio
async def test_update_plan(use_case, activity):
    plan = await use_case.create_plan(plan_input())

    updated = await use_case.update_plan(
        plan.id, plan_input(payment_factor=6.1, merchant_fee=12.0), user_id="admin"
    )

    assert updated.id == plan.id
    assert updated.payment_factor == 6.1
    assert updated.merchant_fee == 12.0
    assert updated.created_at == plan.created_at
    assert activity[-1]["action"] == "update"


@pytest.mark.asyncio
async def test_update_missing_plan_raises(use_case):
    with pytest.raises(FinancingPlanNotFoundError):
        await use_case.update_plan(99, plan_input())


@pytest.mark.asyncio
async def test_update_validates_before_lookup(use_case):
    with pytest.raises(InvalidFinancingPlanError):
        await use_case.update_plan(99, plan_input(provider=None))


@pytest.mark.asyncio
async def test_delete_plan(use_case, activity):
    plan = await use_case.create_plan(plan_input())

    await use_case.delete_plan(plan.id)

    assert await use_case.list_plans() == []
    assert activity[-1]["action"] == "delete"
    with pytest.raises(FinancingPlanNotFoundError):
        await use_case.get_plan(plan.id)


@pytest.mark.asyncio
async def test_delete_missing_plan_raises(use_case):
    with pytest.raises(FinancingPlanNotFoundError, match="Financing plan 7 not found"):
        await use_case.delete_plan(7)


@pytest.mark.asyncio
async def test_list_plans_filters_provider_and_active(use_case):
    await use_case.create_plan(plan_input())
    await use_case.create_plan(
        plan_input(plan_number="HR20", provider="Homerun PACE", plan_name="20 years")
    )
    await use_case.create_plan(
        plan_input(plan_number="9999", plan_name="Retired", is_active=False)
    )

    goodleap = await use_case.list_plans(provider="Goodleap")
    active = await use_case.list_plans(active_only=True)

    assert [plan.plan_name for plan in goodleap] == ["Retired", "Same as Cash 18 months"]
    assert [plan.plan_number for plan in active] == ["1519", "HR20"]


@pytest.mark.asyncio
async def test_deduplicate_keeps_highest_id(use_case):
    await use_case.create_plan(plan_input(notes="first"))
    await use_case.create_plan(plan_input(notes="second"))
    await use_case.create_plan(plan_input(payment_factor=6.0))
    await use_case.create_plan(plan_input(provider="Other"))

    result = await use_case.deduplicate_plans()

    assert result.before_count == 4
    assert result.after_count == 3
    assert result.duplicates_removed == 1
    notes = {plan.notes for plan in await use_case.list_plans()}
    assert "first" not in notes
    assert "second" in notes


@pytest.mark.asyncio
async def test_deduplicate_without_duplicates(use_case):
    await use_case.create_plan(plan_input())

    result = await use_case.deduplicate_plans()

    assert result.duplicates_removed == 0
    assert result.after_count == 1


@pytest.mark.asyncio
async def test_seed_default_plans_once(use_case):
    first = await use_case.seed_default_plans()
    second = await use_case.seed_default_plans()

    assert first.seeded is True
    assert first.count == len(DEFAULT_PLANS)
    assert second.seeded is False
    assert second.count == len(DEFAULT_PLANS)


@pytest.mark.asyncio
async def test_seed_skipped_when_plans_exist(use_case):
    await use_case.create_plan(plan_input())

    result = await use_case.seed_default_plans()

    assert result.seeded is False
    assert result.count == 1


@pytest.mark.asyncio
async def test_snapshot_is_independent_of_later_edits(use_case):
    plan = await use_case.create_plan(plan_input(merchant_fee=17.5))

    snapshot = await use_case.snapshot(plan.id)
    await use_case.update_plan(plan.id, plan_input(payment_factor=7.0, merchant_fee=20.0))

    assert snapshot.plan_id == plan.id
    assert snapshot.payment_factor == 5.75
    assert snapshot.merchant_fee == 17.5
    assert snapshot.provider == "Goodleap"
