"""Rate endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from factuurpro.crud.crud_rate import rate_crud
from factuurpro.db.session import get_db
from factuurpro.schemas.rate import RateCreate, RateRead, RateUpdate

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=List[RateRead])
async def list_rates(db: Session = Depends(get_db)):
    return rate_crud.get_multi(db)


@router.post("", response_model=RateRead, status_code=status.HTTP_201_CREATED)
async def create_rate(rate_in: RateCreate, db: Session = Depends(get_db)):
    return rate_crud.create(db, obj_in=rate_in)


@router.get("/code/{code}", response_model=RateRead)
async def get_rate_by_code(code: str, db: Session = Depends(get_db)):
    rate = rate_crud.get_by_code(db, code=code)
    if not rate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rate not found")
    return rate


@router.get("/{rate_id}", response_model=RateRead)
async def get_rate(rate_id: int, db: Session = Depends(get_db)):
    rate = rate_crud.get(db, rate_id=rate_id)
    if not rate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rate not found")
    return rate


@router.put("/{rate_id}", response_model=RateRead)
async def update_rate(rate_id: int, rate_in: RateUpdate, db: Session = Depends(get_db)):
    rate = rate_crud.get(db, rate_id=rate_id)
    if not rate:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rate not found")
    return rate_crud.update(db, db_obj=rate, obj_in=rate_in)


@router.delete("/{rate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_rate(rate_id: int, db: Session = Depends(get_db)):
    if not rate_crud.delete(db, rate_id=rate_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rate not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
