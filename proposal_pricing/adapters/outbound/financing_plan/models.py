"""SQLAlchemy ORM models for financing plans."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class FinancingPlanModel(Base):
    """SQLAlchemy model for financing_plans table."""

    __tablename__ = "financing_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plan_number = Column(String(50), nullable=False)
    provider = Column(String(100), nullable=False, index=True)
    plan_name = Column(String(255), nullable=False)
    interest_rate = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)
    term_months = Column(Integer, nullable=False, default=0)
    payment_factor = Column(Numeric(8, 4, asdecimal=False), nullable=False)
    merchant_fee = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
