"""Invoice item model for billable lines."""

from sqlalchemy import Column, DateTime, Integer, String, func

from factuurpro.db.base_class import Base
from factuurpro.db.types import ExactDecimal


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, index=True)
    # NULL until the item is assigned to an invoice.
    invoice_id = Column(Integer, nullable=True, index=True)
    customer_id = Column(Integer, nullable=False, index=True)
    rate_id = Column(Integer, nullable=True)
    description = Column(String(255), nullable=False)
    quantity = Column(ExactDecimal(), nullable=False)
    unit_price = Column(ExactDecimal(), nullable=False)
    vat_rate = Column(ExactDecimal(), nullable=False)
    subtotal = Column(ExactDecimal(), nullable=False)
    vat_amount = Column(ExactDecimal(), nullable=False)
    total = Column(ExactDecimal(), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
