"""CRUD operations for invoices.

Creation goes through ``services.billing.assemble_invoice`` so numbering and
item assignment happen in one place.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from factuurpro.core.errors import DuplicateRecordError, commit_or_conflict
from factuurpro.models.invoice import Invoice
from factuurpro.schemas.invoice import InvoiceUpdate


class CRUDInvoice:
    def get(self, db: Session, *, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    def get_multi(self, db: Session, *, customer_id: int | None = None, status: str | None = None) -> List[Invoice]:
        query = db.query(Invoice)
        if customer_id is not None:
            query = query.filter(Invoice.customer_id == customer_id)
        if status:
            query = query.filter(Invoice.status == status)
        return query.order_by(Invoice.issue_date.desc(), Invoice.id.desc()).all()

    def update(self, db: Session, *, db_obj: Invoice, obj_in: InvoiceUpdate) -> Invoice:
        update_data = obj_in.model_dump(exclude_unset=True)
        number = update_data.get("invoice_number")
        if number and number != db_obj.invoice_number:
            clash = db.query(Invoice).filter(Invoice.invoice_number == number, Invoice.id != db_obj.id).first()
            if clash:
                raise DuplicateRecordError(f"Invoice number {number} already exists")
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        commit_or_conflict(db, f"Invoice number {db_obj.invoice_number} already exists")
        db.refresh(db_obj)
        return db_obj

    def update_status(self, db: Session, *, db_obj: Invoice, status: str) -> Invoice:
        # Any status may follow any other, including paid -> draft.
        db_obj.status = status
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, invoice_id: int) -> bool:
        obj = self.get(db, invoice_id=invoice_id)
        if not obj:
            return False
        # Assigned items keep pointing at the deleted id.
        db.delete(obj)
        db.commit()
        return True


invoice_crud = CRUDInvoice()
