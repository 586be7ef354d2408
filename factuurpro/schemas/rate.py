"""Rate schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from factuurpro.schemas.common import (
    PRICE_DIGITS,
    PRICE_PLACES,
    QUANTITY_DIGITS,
    QUANTITY_PLACES,
    VAT_RATE_DIGITS,
    VAT_RATE_PLACES,
    ensure_utc,
)


class RateBase(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(ge=0, max_digits=PRICE_DIGITS, decimal_places=PRICE_PLACES)
    period: str = Field(min_length=1, max_length=100)
    vat_rate: Decimal = Field(ge=0, max_digits=VAT_RATE_DIGITS, decimal_places=VAT_RATE_PLACES)
    default_quantity: Decimal = Field(
        default=Decimal("1"), gt=0, max_digits=QUANTITY_DIGITS, decimal_places=QUANTITY_PLACES
    )


class RateCreate(RateBase):
    pass


class RateUpdate(BaseModel):
    code: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=PRICE_DIGITS, decimal_places=PRICE_PLACES)
    period: Optional[str] = Field(default=None, min_length=1, max_length=100)
    vat_rate: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=VAT_RATE_DIGITS, decimal_places=VAT_RATE_PLACES
    )
    default_quantity: Optional[Decimal] = Field(
        default=None, gt=0, max_digits=QUANTITY_DIGITS, decimal_places=QUANTITY_PLACES
    )

    @field_validator("code", "description", "amount", "period", "vat_rate", "default_quantity")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class RateRead(BaseModel):
    id: int
    code: str
    description: str
    amount: float
    period: str
    vat_rate: float
    default_quantity: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, value):
        return ensure_utc(value)
