"""Application errors."""


class FinancingPlanError(ValueError):
    """Base error for financing plan operations."""


class FinancingPlanNotFoundError(FinancingPlanError):
    """Raised when a financing plan id does not exist."""

    def __init__(self, plan_id: int) -> None:
        super().__init__(f"Financing plan {plan_id} not found")
        self.plan_id = plan_id


class InvalidFinancingPlanError(FinancingPlanError):
    """Raised when a financing plan payload is missing required values."""
