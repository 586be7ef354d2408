"""Rate model for reusable billing presets."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, DateTime, Integer, String

from factuurpro.db.base_class import Base
from factuurpro.db.types import ExactDecimal


class Rate(Base):
    __tablename__ = "rates"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), nullable=False, unique=True, index=True)
    description = Column(String(255), nullable=False)
    amount = Column(ExactDecimal(), nullable=False)
    period = Column(String(100), nullable=False)
    vat_rate = Column(ExactDecimal(), nullable=False)
    default_quantity = Column(ExactDecimal(), nullable=False, default=Decimal("1"))
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
