"""Invoice item schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

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


class InvoiceItemBase(BaseModel):
    description: str = Field(min_length=1, max_length=255)
    quantity: Decimal = Field(gt=0, max_digits=QUANTITY_DIGITS, decimal_places=QUANTITY_PLACES)
    unit_price: Decimal = Field(ge=0, max_digits=PRICE_DIGITS, decimal_places=PRICE_PLACES)
    vat_rate: Decimal = Field(ge=0, max_digits=VAT_RATE_DIGITS, decimal_places=VAT_RATE_PLACES)


class InvoiceItemCreate(InvoiceItemBase):
    customer_id: int
    rate_id: Optional[int] = None
    invoice_id: Optional[int] = None


class InvoiceItemUpdate(BaseModel):
    """Patch for an invoice item; only fields that are set are applied."""

    invoice_id: Optional[int] = None
    customer_id: Optional[int] = None
    rate_id: Optional[int] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quantity: Optional[Decimal] = Field(
        default=None, gt=0, max_digits=QUANTITY_DIGITS, decimal_places=QUANTITY_PLACES
    )
    unit_price: Optional[Decimal] = Field(default=None, ge=0, max_digits=PRICE_DIGITS, decimal_places=PRICE_PLACES)
    vat_rate: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=VAT_RATE_DIGITS, decimal_places=VAT_RATE_PLACES
    )

    @field_validator("customer_id", "description", "quantity", "unit_price", "vat_rate")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class InvoiceItemRead(BaseModel):
    id: int
    invoice_id: Optional[int] = None
    customer_id: int
    rate_id: Optional[int] = None
    description: str
    quantity: float
    unit_price: float
    vat_rate: float
    subtotal: float
    vat_amount: float
    total: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def as_utc(cls, value):
        return ensure_utc(value)


class InvoiceItemAssign(BaseModel):
    item_ids: List[int]
