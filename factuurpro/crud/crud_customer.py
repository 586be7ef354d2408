"""CRUD operations for customers."""

from typing import List, Optional

from sqlalchemy.orm import Session

from factuurpro.models.customer import Customer
from factuurpro.schemas.customer import CustomerCreate, CustomerUpdate


class CRUDCustomer:
    def create(self, db: Session, *, obj_in: CustomerCreate) -> Customer:
        obj = Customer(**obj_in.model_dump())
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, customer_id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == customer_id).first()

    def get_multi(self, db: Session) -> List[Customer]:
        return db.query(Customer).order_by(Customer.name.asc(), Customer.id.asc()).all()

    def count(self, db: Session) -> int:
        return db.query(Customer).count()

    def update(self, db: Session, *, db_obj: Customer, obj_in: CustomerUpdate) -> Customer:
        update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, customer_id: int) -> bool:
        obj = self.get(db, customer_id=customer_id)
        if not obj:
            return False
        # Invoices and items keep their customer_id; nothing cascades.
        db.delete(obj)
        db.commit()
        return True


customer_crud = CRUDCustomer()
