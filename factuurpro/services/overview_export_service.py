"""CSV overview of invoices, invoice items and customers for bookkeeping."""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Dict, List, Literal

from sqlalchemy.orm import Session

from factuurpro.models.customer import Customer
from factuurpro.models.invoice import Invoice
from factuurpro.models.invoice_item import InvoiceItem
from factuurpro.services.invoice_export_service import format_amount, format_quantity

logger = logging.getLogger(__name__)

OverviewSection = Literal["invoices", "items", "customers"]

UNKNOWN_CUSTOMER = "Unknown"
NOT_INVOICED = "Not invoiced"

INVOICE_HEADERS = ["Invoice number", "Customer", "Issue date", "Due date", "Subtotal", "VAT", "Total", "Status"]
ITEM_HEADERS = ["Invoice number", "Customer", "Description", "Quantity", "Price", "VAT %", "Subtotal", "VAT", "Total"]
CUSTOMER_HEADERS = ["Name", "Email", "Address", "Phone"]


def _format_date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def _customer_names(db: Session) -> Dict[int, str]:
    return {customer_id: name for customer_id, name in db.query(Customer.id, Customer.name).all()}


def invoice_rows(db: Session) -> List[list]:
    names = _customer_names(db)
    invoices = db.query(Invoice).order_by(Invoice.issue_date.desc(), Invoice.id.desc()).all()
    return [
        [
            invoice.invoice_number,
            names.get(invoice.customer_id, UNKNOWN_CUSTOMER),
            _format_date(invoice.issue_date),
            _format_date(invoice.due_date),
            format_amount(invoice.subtotal),
            format_amount(invoice.vat_amount),
            format_amount(invoice.total),
            invoice.status,
        ]
        for invoice in invoices
    ]


def item_rows(db: Session) -> List[list]:
    names = _customer_names(db)
    numbers = {invoice_id: number for invoice_id, number in db.query(Invoice.id, Invoice.invoice_number).all()}
    items = db.query(InvoiceItem).order_by(InvoiceItem.id).all()
    rows = []
    for item in items:
        if item.invoice_id is None:
            invoice_number = NOT_INVOICED
        else:
            # An item can still point at a deleted invoice.
            invoice_number = numbers.get(item.invoice_id, NOT_INVOICED)
        rows.append(
            [
                invoice_number,
                names.get(item.customer_id, UNKNOWN_CUSTOMER),
                item.description,
                format_quantity(item.quantity),
                format_amount(item.unit_price),
                f"{format_quantity(item.vat_rate)}%",
                format_amount(item.subtotal),
                format_amount(item.vat_amount),
                format_amount(item.total),
            ]
        )
    return rows


def customer_rows(db: Session) -> List[list]:
    customers = db.query(Customer).order_by(Customer.name).all()
    return [
        [customer.name, customer.email, customer.address or "", customer.phone_number or ""]
        for customer in customers
    ]


SECTIONS = {
    "invoices": (INVOICE_HEADERS, invoice_rows),
    "items": (ITEM_HEADERS, item_rows),
    "customers": (CUSTOMER_HEADERS, customer_rows),
}


def build_overview_csv(db: Session, section: OverviewSection = "invoices") -> str:
    headers, build_rows = SECTIONS[section]
    rows = build_rows(db)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(headers)
    writer.writerows(rows)
    csv_data = output.getvalue()
    output.close()

    logger.info("Exported %d %s row(s) to CSV", len(rows), section)
    return csv_data


def get_overview_export(db: Session, *, section: OverviewSection = "invoices") -> tuple[str, str]:
    """Return ``(filename, csv_text)`` for one overview section."""
    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    return f"factuurpro_{section}_{today}.csv", build_overview_csv(db, section)
