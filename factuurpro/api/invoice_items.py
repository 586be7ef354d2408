"""Invoice item endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from factuurpro.crud.crud_customer import customer_crud
from factuurpro.crud.crud_invoice_item import invoice_item_crud
from factuurpro.db.session import get_db
from factuurpro.schemas.invoice_item import InvoiceItemCreate, InvoiceItemRead, InvoiceItemUpdate

router = APIRouter(prefix="/invoice-items", tags=["invoice_items"])


@router.get("", response_model=List[InvoiceItemRead])
async def list_invoice_items(db: Session = Depends(get_db)):
    return invoice_item_crud.get_multi(db)


@router.get("/unassigned", response_model=List[InvoiceItemRead])
async def list_unassigned_invoice_items(db: Session = Depends(get_db)):
    return invoice_item_crud.get_unassigned(db)


@router.get("/customer/{customer_id}", response_model=List[InvoiceItemRead])
async def list_invoice_items_for_customer(customer_id: int, db: Session = Depends(get_db)):
    if not customer_crud.get(db, customer_id=customer_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return invoice_item_crud.get_by_customer(db, customer_id=customer_id)


@router.post("", response_model=InvoiceItemRead, status_code=status.HTTP_201_CREATED)
async def create_invoice_item(item_in: InvoiceItemCreate, db: Session = Depends(get_db)):
    return invoice_item_crud.create(db, obj_in=item_in)


@router.get("/{item_id}", response_model=InvoiceItemRead)
async def get_invoice_item(item_id: int, db: Session = Depends(get_db)):
    item = invoice_item_crud.get(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice item not found")
    return item


@router.put("/{item_id}", response_model=InvoiceItemRead)
async def update_invoice_item(item_id: int, item_in: InvoiceItemUpdate, db: Session = Depends(get_db)):
    item = invoice_item_crud.get(db, item_id=item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice item not found")
    return invoice_item_crud.update(db, db_obj=item, obj_in=item_in)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice_item(item_id: int, db: Session = Depends(get_db)):
    if not invoice_item_crud.delete(db, item_id=item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice item not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
