"""Invoice routes: CRUD, item assignment, status changes and export."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from factuurpro.crud.crud_invoice import invoice_crud
from factuurpro.crud.crud_invoice_item import invoice_item_crud
from factuurpro.db.session import get_db
from factuurpro.models.invoice import Invoice
from factuurpro.schemas.invoice import (
    InvoiceAssignmentRead,
    InvoiceCreate,
    InvoiceRead,
    InvoiceStatus,
    InvoiceStatusUpdate,
    InvoiceUpdate,
)
from factuurpro.schemas.invoice_item import InvoiceItemAssign, InvoiceItemRead
from factuurpro.services.billing import assemble_invoice, assign_items_to_invoice
from factuurpro.services.invoice_export_service import get_invoice_export_bytes
from factuurpro.services.overview_export_service import OverviewSection, get_overview_export

router = APIRouter(prefix="/invoices", tags=["invoices"])


def _get_invoice(db: Session, invoice_id: int) -> Invoice:
    invoice = invoice_crud.get(db, invoice_id=invoice_id)
    if not invoice:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return invoice


@router.get("", response_model=List[InvoiceRead])
async def list_invoices(
    customer_id: int | None = None,
    status: InvoiceStatus | None = None,
    db: Session = Depends(get_db),
):
    return invoice_crud.get_multi(db, customer_id=customer_id, status=status)


@router.get("/export", response_class=Response)
async def export_overview(section: OverviewSection = "invoices", db: Session = Depends(get_db)):
    filename, csv_data = get_overview_export(db, section=section)
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=csv_data, media_type="text/csv", headers=headers)


@router.post("", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
async def create_invoice(invoice_in: InvoiceCreate, db: Session = Depends(get_db)):
    return assemble_invoice(db, invoice_in)


@router.get("/{invoice_id}", response_model=InvoiceRead)
async def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    return _get_invoice(db, invoice_id)


@router.put("/{invoice_id}", response_model=InvoiceRead)
async def update_invoice(invoice_id: int, payload: InvoiceUpdate, db: Session = Depends(get_db)):
    invoice = _get_invoice(db, invoice_id)
    return invoice_crud.update(db, db_obj=invoice, obj_in=payload)


@router.put("/{invoice_id}/status", response_model=InvoiceRead)
async def update_invoice_status(invoice_id: int, payload: InvoiceStatusUpdate, db: Session = Depends(get_db)):
    invoice = _get_invoice(db, invoice_id)
    return invoice_crud.update_status(db, db_obj=invoice, status=payload.status)


@router.get("/{invoice_id}/items", response_model=List[InvoiceItemRead])
async def list_invoice_items_for_invoice(invoice_id: int, db: Session = Depends(get_db)):
    _get_invoice(db, invoice_id)
    return invoice_item_crud.get_by_invoice(db, invoice_id=invoice_id)


@router.post("/{invoice_id}/items", response_model=InvoiceAssignmentRead)
async def assign_items(invoice_id: int, payload: InvoiceItemAssign, db: Session = Depends(get_db)):
    assigned, skipped = assign_items_to_invoice(db, invoice_id, payload.item_ids)
    return InvoiceAssignmentRead(invoice_id=invoice_id, assigned_item_ids=assigned, skipped_item_ids=skipped)


@router.get("/{invoice_id}/export", response_class=Response)
async def export_invoice(invoice_id: int, db: Session = Depends(get_db)):
    filename, payload = get_invoice_export_bytes(db, invoice_id=invoice_id)
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=payload, media_type="text/plain; charset=utf-8", headers=headers)


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    if not invoice_crud.delete(db, invoice_id=invoice_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
