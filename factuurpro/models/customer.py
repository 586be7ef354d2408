"""Customer model."""

from sqlalchemy import Column, Integer, String

from factuurpro.db.base_class import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    phone_number = Column(String(50), nullable=True)
