"""CRUD operations for rates."""

from typing import List, Optional

from sqlalchemy.orm import Session

from factuurpro.core.errors import DuplicateRecordError, commit_or_conflict
from factuurpro.models.rate import Rate
from factuurpro.schemas.rate import RateCreate, RateUpdate


class CRUDRate:
    def _ensure_code_free(self, db: Session, code: str, rate_id: Optional[int] = None) -> None:
        existing = self.get_by_code(db, code=code)
        if existing and existing.id != rate_id:
            raise DuplicateRecordError(f"Rate code {code} already exists")

    def create(self, db: Session, *, obj_in: RateCreate) -> Rate:
        self._ensure_code_free(db, obj_in.code)
        obj = Rate(**obj_in.model_dump())
        db.add(obj)
        commit_or_conflict(db, f"Rate code {obj_in.code} already exists")
        db.refresh(obj)
        return obj

    def get(self, db: Session, *, rate_id: int) -> Optional[Rate]:
        return db.query(Rate).filter(Rate.id == rate_id).first()

    def get_by_code(self, db: Session, *, code: str) -> Optional[Rate]:
        return db.query(Rate).filter(Rate.code == code).first()

    def get_multi(self, db: Session) -> List[Rate]:
        return db.query(Rate).order_by(Rate.code.asc()).all()

    def update(self, db: Session, *, db_obj: Rate, obj_in: RateUpdate) -> Rate:
        update_data = obj_in.model_dump(exclude_unset=True)
        if "code" in update_data:
            self._ensure_code_free(db, update_data["code"], rate_id=db_obj.id)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        commit_or_conflict(db, f"Rate code {db_obj.code} already exists")
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, *, rate_id: int) -> bool:
        obj = self.get(db, rate_id=rate_id)
        if not obj:
            return False
        db.delete(obj)
        db.commit()
        return True


rate_crud = CRUDRate()
