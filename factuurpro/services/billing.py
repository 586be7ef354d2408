"""Billing service utilities: line amounts, invoice numbering and assembly."""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, List, NamedTuple, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from factuurpro.core.errors import DuplicateRecordError, NotFoundError
from factuurpro.core.settings import get_settings
from factuurpro.models.invoice import Invoice
from factuurpro.models.invoice_item import InvoiceItem
from factuurpro.schemas.invoice import InvoiceCreate

logger = logging.getLogger(__name__)

DERIVATION_INPUTS = ("quantity", "unit_price", "vat_rate")


class ItemAmounts(NamedTuple):
    subtotal: Decimal
    vat_amount: Decimal
    total: Decimal


def _to_decimal(value: Decimal | float | int) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def derive(quantity: Decimal | float | int, unit_price: Decimal | float | int, vat_rate: Decimal | float | int) -> ItemAmounts:
    """Compute subtotal, VAT amount and total for a line.

    subtotal = quantity * unit_price, vat_amount = subtotal * vat_rate / 100,
    total = subtotal + vat_amount. Nothing is rounded; presentation code decides
    how many decimals to show.
    """
    subtotal = _to_decimal(quantity) * _to_decimal(unit_price)
    vat_amount = subtotal * (_to_decimal(vat_rate) / Decimal("100"))
    return ItemAmounts(subtotal=subtotal, vat_amount=vat_amount, total=subtotal + vat_amount)


def recompute_if_needed(existing: InvoiceItem, patch: dict) -> dict:
    """Return the update data for ``existing`` with derived amounts refreshed.

    When the patch touches any of quantity, unit_price or vat_rate, all three
    derived fields are recomputed from the patched value where present and the
    stored value otherwise. A patch without those fields leaves them alone.
    """
    update_data = dict(patch)
    if not any(field in patch for field in DERIVATION_INPUTS):
        return update_data

    quantity = patch["quantity"] if "quantity" in patch else existing.quantity
    unit_price = patch["unit_price"] if "unit_price" in patch else existing.unit_price
    vat_rate = patch["vat_rate"] if "vat_rate" in patch else existing.vat_rate
    update_data.update(derive(quantity, unit_price, vat_rate)._asdict())
    return update_data


def calculate_invoice_totals(items: Iterable[InvoiceItem]) -> ItemAmounts:
    subtotal = Decimal("0")
    vat_amount = Decimal("0")
    total = Decimal("0")
    for item in items:
        subtotal += _to_decimal(item.subtotal)
        vat_amount += _to_decimal(item.vat_amount)
        total += _to_decimal(item.total)
    return ItemAmounts(subtotal=subtotal, vat_amount=vat_amount, total=total)


def generate_invoice_number(db: Session, issue_date: datetime | None = None, prefix: str | None = None) -> str:
    """Next number in the ``F-<year>-<NNNN>`` series for the issue year."""
    prefix = prefix or get_settings().invoice_number_prefix
    year = (issue_date or datetime.now(timezone.utc)).year
    stem = f"{prefix}-{year}-"

    highest = 0
    rows = db.query(Invoice.invoice_number).filter(Invoice.invoice_number.like(f"{stem}%")).all()
    for (number,) in rows:
        suffix = number[len(stem):]
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return f"{stem}{highest + 1:04d}"


def _load_items(db: Session, item_ids: List[int]) -> List[InvoiceItem]:
    if not item_ids:
        return []
    return db.query(InvoiceItem).filter(InvoiceItem.id.in_(item_ids)).order_by(InvoiceItem.id).all()


def _split_found(item_ids: List[int], items: List[InvoiceItem]) -> Tuple[List[int], List[int]]:
    found = {item.id for item in items}
    assigned = [item_id for item_id in item_ids if item_id in found]
    skipped = [item_id for item_id in item_ids if item_id not in found]
    return assigned, skipped


def assemble_invoice(db: Session, invoice_in: InvoiceCreate) -> Invoice:
    """Create an invoice and bind the selected items to it in one transaction.

    Aggregates are a snapshot: the caller's subtotal/vat_amount/total when
    supplied, otherwise the sums of the selected items.
    """
    item_ids = list(dict.fromkeys(invoice_in.item_ids or []))
    items = _load_items(db, item_ids)
    _, skipped = _split_found(item_ids, items)
    if skipped:
        logger.warning("Skipping unknown invoice item ids %s during invoice assembly", skipped)

    if invoice_in.has_totals:
        amounts = ItemAmounts(invoice_in.subtotal, invoice_in.vat_amount, invoice_in.total)
    else:
        amounts = calculate_invoice_totals(items)

    invoice_number = invoice_in.invoice_number
    if invoice_number:
        if db.query(Invoice).filter(Invoice.invoice_number == invoice_number).first():
            raise DuplicateRecordError(f"Invoice number {invoice_number} already exists")
    else:
        invoice_number = generate_invoice_number(db, invoice_in.issue_date)

    invoice = Invoice(
        invoice_number=invoice_number,
        customer_id=invoice_in.customer_id,
        issue_date=invoice_in.issue_date,
        due_date=invoice_in.due_date,
        subtotal=amounts.subtotal,
        vat_amount=amounts.vat_amount,
        total=amounts.total,
        status=invoice_in.status,
        notes=invoice_in.notes,
    )
    try:
        db.add(invoice)
        db.flush()  # obtain invoice id for invoice_items
        for item in items:
            item.invoice_id = invoice.id
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateRecordError(f"Invoice number {invoice_number} already exists") from exc

    db.refresh(invoice)
    logger.info("Created invoice %s with %d item(s)", invoice.invoice_number, len(items))
    return invoice


def assign_items_to_invoice(db: Session, invoice_id: int, item_ids: List[int]) -> Tuple[List[int], List[int]]:
    """Point the given items at an existing invoice.

    Returns ``(assigned_ids, skipped_ids)``. Unknown item ids are skipped; the
    invoice aggregates are left untouched.
    """
    invoice = db.query(Invoice).filter(Invoice.id == invoice_id).first()
    if not invoice:
        raise NotFoundError("Invoice")

    item_ids = list(dict.fromkeys(item_ids))
    items = _load_items(db, item_ids)
    assigned, skipped = _split_found(item_ids, items)
    for item in items:
        item.invoice_id = invoice.id
    db.commit()

    if skipped:
        logger.warning("Skipped unknown invoice item ids %s for invoice %s", skipped, invoice.invoice_number)
    logger.info("Assigned %d item(s) to invoice %s", len(assigned), invoice.invoice_number)
    return assigned, skipped
