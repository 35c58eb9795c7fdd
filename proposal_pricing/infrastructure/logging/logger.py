"""Structured logger for pricing and plan administration."""

import logging
from typing import Any, Optional

_logger = logging.getLogger("proposal_pricing")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'financing', 'activity')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_financing_calculation(
    total: float,
    method: str,
    monthly_payment: float,
    plan_id: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log a monthly payment calculation.

    Args:
        total: Amount financed
        method: 'payment_factor' or 'amortization'
        monthly_payment: Resulting monthly payment
        plan_id: Financing plan used, if any
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {
        "financing_inputs": {"total": total, "method": method},
        "monthly_payment": monthly_payment,
    }
    if plan_id is not None:
        fields["financing_inputs"]["plan_id"] = plan_id
    fields.update(kwargs)

    log_event(component="financing", **fields)


def log_plan_update(
    user_id: Optional[str],
    action: str,
    plan_id: int,
    plan_number: str,
    plan_name: str,
    provider: str,
    **kwargs: Any,
) -> None:
    """
    Log an administrative change to a financing plan.

    Args:
        user_id: Acting user, if known
        action: 'create', 'update' or 'delete'
        plan_id: Plan identifier
        plan_number: Provider plan number
        plan_name: Display name
        provider: Provider name
        **kwargs: Additional fields
    """
    log_event(
        component="activity",
        user_id=user_id,
        action=action,
        resource_type="financing_plan",
        plan_id=plan_id,
        plan_number=plan_number,
        plan_name=plan_name,
        provider=provider,
        **kwargs,
    )


logger = _logger
