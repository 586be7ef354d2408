"""Dashboard figures built from invoices, customers and pending items."""

from decimal import Decimal
from typing import Iterable

from sqlalchemy.orm import Session

from factuurpro.models.customer import Customer
from factuurpro.models.invoice import Invoice
from factuurpro.models.invoice_item import InvoiceItem

OPEN_STATUSES = ("pending", "sent")


def _sum(values: Iterable) -> Decimal:
    return sum((value for (value,) in values if value is not None), Decimal("0"))


def get_dashboard_summary(db: Session) -> dict:
    total_invoices = db.query(Invoice).count()
    total_customers = db.query(Customer).count()

    to_be_paid = _sum(db.query(Invoice.total).filter(Invoice.status.in_(OPEN_STATUSES)).all())
    paid = _sum(db.query(Invoice.total).filter(Invoice.status == "paid").all())

    unassigned = db.query(InvoiceItem.total).filter(InvoiceItem.invoice_id.is_(None)).all()

    return {
        "total_invoices": total_invoices,
        "total_customers": total_customers,
        "amount_to_be_paid": float(to_be_paid),
        "amount_paid": float(paid),
        "unassigned_item_count": len(unassigned),
        "unassigned_item_total": float(_sum(unassigned)),
    }
