"""Invoice model for billing."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from factuurpro.db.base_class import Base
from factuurpro.db.types import ExactDecimal


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    invoice_number = Column(String(50), nullable=False, unique=True, index=True)
    # Plain column, no FK constraint: deleting a customer leaves its invoices in place.
    customer_id = Column(Integer, nullable=False, index=True)

    issue_date = Column(DateTime(timezone=True), nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=False)

    # Snapshot of the assigned items at creation time.
    subtotal = Column(ExactDecimal(), default=0, nullable=False)
    vat_amount = Column(ExactDecimal(), default=0, nullable=False)
    total = Column(ExactDecimal(), default=0, nullable=False)

    status = Column(String(20), default="draft", nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    items = relationship(
        "InvoiceItem",
        primaryjoin="Invoice.id == foreign(InvoiceItem.invoice_id)",
        order_by="InvoiceItem.id",
        viewonly=True,
    )
