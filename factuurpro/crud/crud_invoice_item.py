"""CRUD operations for invoice items."""

from typing import List, Optional

from sqlalchemy.orm import Session

from factuurpro.models.invoice_item import InvoiceItem
from factuurpro.schemas.invoice_item import InvoiceItemCreate, InvoiceItemUpdate
from factuurpro.services.billing import derive, recompute_if_needed


class CRUDInvoiceItem:
    def create(self, db: Session, *, obj_in: InvoiceItemCreate) -> InvoiceItem:
        data = obj_in.model_dump()
        amounts = derive(obj_in.quantity, obj_in.unit_price, obj_in.vat_rate)
        obj = InvoiceItem(**data, **amounts._asdict())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, item_id: int) -> Optional[InvoiceItem]:
        return db.query(InvoiceItem).filter(InvoiceItem.id == item_id).first()

    def get_multi(self, db: Session) -> List[InvoiceItem]:
        return db.query(InvoiceItem).order_by(InvoiceItem.created_at.desc(), InvoiceItem.id.desc()).all()

    def get_unassigned(self, db: Session) -> List[InvoiceItem]:
        return (
            db.query(InvoiceItem)
            .filter(InvoiceItem.invoice_id.is_(None))
            .order_by(InvoiceItem.created_at.desc(), InvoiceItem.id.desc())
            .all()
        )

    def get_by_customer(self, db: Session, *, customer_id: int) -> List[InvoiceItem]:
        return (
            db.query(InvoiceItem)
            .filter(InvoiceItem.customer_id == customer_id)
            .order_by(InvoiceItem.created_at.desc(), InvoiceItem.id.desc())
            .all()
        )

    def get_by_invoice(self, db: Session, *, invoice_id: int) -> List[InvoiceItem]:
        return db.query(InvoiceItem).filter(InvoiceItem.invoice_id == invoice_id).order_by(InvoiceItem.id.asc()).all()

    def update(self, db: Session, *, db_obj: InvoiceItem, obj_in: InvoiceItemUpdate) -> InvoiceItem:
        update_data = recompute_if_needed(db_obj, obj_in.model_dump(exclude_unset=True))
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, item_id: int) -> bool:
        obj = self.get(db, item_id=item_id)
        if not obj:
            return False
        db.delete(obj)
        db.commit()
        return True


invoice_item_crud = CRUDInvoiceItem()
