"""Export an invoice as a plain-text document for preview and printing."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from factuurpro.core.errors import NotFoundError
from factuurpro.core.settings import get_settings
from factuurpro.models.customer import Customer
from factuurpro.models.invoice import Invoice
from factuurpro.models.invoice_item import InvoiceItem

CENT = Decimal("0.01")


def format_amount(value) -> str:
    return str(Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP))


def format_quantity(value) -> str:
    quantity = Decimal(str(value or 0))
    if quantity == quantity.to_integral_value():
        return str(quantity.to_integral_value())
    return str(quantity.normalize())


def _format_date(value) -> str:
    return value.strftime("%d-%m-%Y") if value else ""


def build_invoice_export_text(invoice: Invoice, customer: Optional[Customer], items: Iterable[InvoiceItem]) -> str:
    settings = get_settings()

    lines = []
    lines.append(f"{settings.app_name} - INVOICE")
    lines.append(f"Invoice number: {invoice.invoice_number}")
    lines.append(f"Issue date: {_format_date(invoice.issue_date)}")
    lines.append(f"Due date: {_format_date(invoice.due_date)}")
    lines.append(f"Status: {invoice.status}")
    lines.append("")
    lines.append("== Bill to ==")
    if customer:
        lines.append(customer.name)
        if customer.address:
            lines.append(customer.address)
        lines.append(customer.email)
        if customer.phone_number:
            lines.append(customer.phone_number)
    else:
        lines.append(f"Unknown customer (id {invoice.customer_id})")
    lines.append("")
    lines.append("== Items ==")
    lines.append(f"{'Description':<40} {'Qty':>8} {'Price':>12} {'VAT %':>7} {'Total':>12}")
    for item in items:
        lines.append(
            f"{item.description[:40]:<40} {format_quantity(item.quantity):>8} {format_amount(item.unit_price):>12} "
            f"{format_quantity(item.vat_rate):>7} {format_amount(item.total):>12}"
        )
    lines.append("")
    lines.append(f"Subtotal: {format_amount(invoice.subtotal)}")
    lines.append(f"VAT: {format_amount(invoice.vat_amount)}")
    lines.append(f"Total: {format_amount(invoice.total)}")
    if invoice.notes:
        lines.append("")
        lines.append("== Notes ==")
        lines.append(invoice.notes)
    lines.append("")

    return "\n".join(lines)


def get_invoice_export_bytes(db: Session, *, invoice_id: int) -> tuple[str, bytes]:
    """Return ``(filename, payload)`` for the invoice export."""
    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
    if not invoice:
        raise NotFoundError("Invoice")
    customer = db.query(Customer).filter(Customer.id == invoice.customer_id).first()
    text = build_invoice_export_text(invoice, customer, invoice.items)
    return f"invoice_{invoice.invoice_number}.txt", text.encode("utf-8")
