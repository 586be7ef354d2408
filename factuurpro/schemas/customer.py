"""Customer schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class CustomerBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    address: Optional[str] = None
    phone_number: Optional[str] = None


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class CustomerRead(CustomerBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
