"""SQL-backed financing plan repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from proposal_pricing.application.dtos.financing import FinancingPlan, FinancingPlanInput
from proposal_pricing.application.ports.financing_plan_repository import (
    FinancingPlanRepository,
)
from proposal_pricing.infrastructure.db import get_db_session
from proposal_pricing.infrastructure.logging.logger import logger

from .models import FinancingPlanModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite returns naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlFinancingPlanRepository(FinancingPlanRepository):
    """Postgres (SQLAlchemy) implementation of financing plan repository."""

    def _model_to_dto(self, model: FinancingPlanModel) -> FinancingPlan:
        """
        Convert FinancingPlanModel to FinancingPlan DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            FinancingPlan DTO
        """
        return FinancingPlan(
            id=model.id,
            plan_number=model.plan_number,
            provider=model.provider,
            plan_name=model.plan_name,
            interest_rate=model.interest_rate or 0.0,
            term_months=model.term_months or 0,
            payment_factor=model.payment_factor,
            merchant_fee=model.merchant_fee or 0.0,
            notes=model.notes or "",
            is_active=model.is_active,
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    @staticmethod
    def _apply(model: FinancingPlanModel, data: FinancingPlanInput) -> None:
        model.plan_number = data.plan_number
        model.provider = data.provider
        model.plan_name = data.plan_name
        model.interest_rate = data.interest_rate or 0
        model.term_months = data.term_months or 0
        model.payment_factor = data.payment_factor
        model.merchant_fee = data.merchant_fee or 0
        model.notes = data.notes
        model.is_active = data.is_active if data.is_active is not None else True

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
        db: Session = get_db_session()
        try:
            query = db.query(FinancingPlanModel)
            if provider is not None:
                query = query.filter(FinancingPlanModel.provider == provider)
            if active_only:
                query = query.filter(FinancingPlanModel.is_active.is_(True))
            models = query.order_by(
                FinancingPlanModel.provider, FinancingPlanModel.plan_name
            ).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing financing plans: {str(e)}")
            raise
        finally:
            db.close()

    async def get(self, plan_id: int) -> Optional[FinancingPlan]:
        """
        Get a financing plan by id.

        Args:
            plan_id: Plan identifier

        Returns:
            FinancingPlan DTO, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(FinancingPlanModel, plan_id)
            if model is None:
                return None
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting financing plan {plan_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def add(self, data: FinancingPlanInput) -> FinancingPlan:
        """
        Insert a financing plan.

        Args:
            data: Normalized plan values

        Returns:
            Stored plan with its assigned id
        """
        db: Session = get_db_session()
        try:
            model = FinancingPlanModel()
            self._apply(model, data)
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Database error while adding financing plan {data.plan_number}: {str(e)}"
            )
            raise
        finally:
            db.close()

    async def update(self, plan_id: int, data: FinancingPlanInput) -> Optional[FinancingPlan]:
        """
        Replace the values of an existing plan.

        Args:
            plan_id: Plan identifier
            data: Normalized plan values

        Returns:
            Updated plan, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(FinancingPlanModel, plan_id)
            if model is None:
                return None
            self._apply(model, data)
            model.updated_at = datetime.now(timezone.utc)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating financing plan {plan_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def delete(self, plan_id: int) -> bool:
        """
        Delete a financing plan.

        Args:
            plan_id: Plan identifier

        Returns:
            True if a row was deleted
        """
        db: Session = get_db_session()
        try:
            deleted = (
                db.query(FinancingPlanModel).filter(FinancingPlanModel.id == plan_id).delete()
            )
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting financing plan {plan_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def count(self) -> int:
        db: Session = get_db_session()
        try:
            return db.query(FinancingPlanModel).count()
        except SQLAlchemyError as e:
            logger.error(f"Database error while counting financing plans: {str(e)}")
            raise
        finally:
            db.close()
