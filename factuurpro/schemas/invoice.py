"""Invoice schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from factuurpro.schemas.common import AMOUNT_DIGITS, AMOUNT_PLACES, ensure_utc

InvoiceStatus = Literal["draft", "pending", "sent", "paid"]


class InvoiceBase(BaseModel):
    customer_id: int
    issue_date: datetime
    due_date: datetime
    status: InvoiceStatus = "draft"
    notes: Optional[str] = None

    @field_validator("issue_date", "due_date")
    @classmethod
    def as_utc(cls, value):
        return ensure_utc(value)


class InvoiceCreate(InvoiceBase):
    invoice_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    subtotal: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    vat_amount: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    total: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    item_ids: Optional[List[int]] = None

    @model_validator(mode="after")
    def check_totals_supplied_together(self):
        supplied = [value is not None for value in (self.subtotal, self.vat_amount, self.total)]
        if any(supplied) and not all(supplied):
            raise ValueError("subtotal, vat_amount and total must be supplied together")
        return self

    @property
    def has_totals(self) -> bool:
        return self.subtotal is not None


class InvoiceUpdate(BaseModel):
    invoice_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    customer_id: Optional[int] = None
    issue_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    subtotal: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    vat_amount: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    total: Optional[Decimal] = Field(default=None, max_digits=AMOUNT_DIGITS, decimal_places=AMOUNT_PLACES)
    status: Optional[InvoiceStatus] = None
    notes: Optional[str] = None

    @field_validator(
        "invoice_number",
        "customer_id",
        "issue_date",
        "due_date",
        "subtotal",
        "vat_amount",
        "total",
        "status",
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value

    @field_validator("issue_date", "due_date")
    @classmethod
    def as_utc(cls, value):
        return ensure_utc(value)


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_number: str
    customer_id: int

    issue_date: datetime
    due_date: datetime
    subtotal: float
    vat_amount: float
    total: float
    status: str
    notes: Optional[str] = None

    created_at: datetime

    @field_validator("issue_date", "due_date", "created_at")
    @classmethod
    def as_utc(cls, value):
        return ensure_utc(value)


class InvoiceAssignmentRead(BaseModel):
    invoice_id: int
    assigned_item_ids: List[int]
    skipped_item_ids: List[int]
