"""Unit tests for in-memory financing plan repository."""

import pytest

from proposal_pricing.adapters.outbound.financing_plan import InMemoryFinancingPlanRepository
from proposal_pricing.application.dtos.financing import FinancingPlanInput


def plan_input(**overrides) -> FinancingPlanInput:
    values = {
        "plan_number": "1519",
        "provider": "Goodleap",
        "plan_name": "Same as Cash 18 months",
        "payment_factor": 5.75,
    }
    values.update(overrides)
    return FinancingPlanInput(**values)


@pytest.mark.asyncio
async def test_ids_are_sequential_and_not_reused():
    repository = InMemoryFinancingPlanRepository()

    first = await repository.add(plan_input())
    await repository.delete(first.id)
    second = await repository.add(plan_input())

    assert first.id == 1
    assert second.id == 2


@pytest.mark.asyncio
async def test_update_preserves_created_at():
    repository = InMemoryFinancingPlanRepository()
    plan = await repository.add(plan_input())

    updated = await repository.update(plan.id, plan_input(plan_name="Renamed"))

    assert updated.plan_name == "Renamed"
    assert updated.created_at == plan.created_at
    assert updated.updated_at >= plan.updated_at


@pytest.mark.asyncio
async def test_update_and_delete_missing():
    repository = InMemoryFinancingPlanRepository()

    assert await repository.update(1, plan_input()) is None
    assert await repository.delete(1) is False
    assert await repository.count() == 0
