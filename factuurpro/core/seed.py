import logging
import os
from decimal import Decimal

from sqlalchemy.orm import Session

from factuurpro.crud.crud_customer import customer_crud
from factuurpro.crud.crud_rate import rate_crud
from factuurpro.schemas.customer import CustomerCreate
from factuurpro.schemas.rate import RateCreate

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = [
    {
        "name": "Client A",
        "email": "client-a@example.com",
        "address": "Hoofdstraat 1, 1234 AB Amsterdam",
        "phone_number": "020-1234567",
    },
    {
        "name": "Company B",
        "email": "info@company-b.example.com",
        "address": "Zakenweg 10, 5678 CD Utrecht",
        "phone_number": "030-7654321",
    },
]

SAMPLE_RATES = [
    {"code": "CONSULT", "description": "Consultation 60 minutes", "amount": Decimal("85"), "period": "per session"},
    {"code": "MASSAGE", "description": "Massage treatment", "amount": Decimal("65"), "period": "per treatment"},
    {"code": "COACHING", "description": "Coaching session", "amount": Decimal("110"), "period": "per hour"},
    {"code": "TRAJECT", "description": "Complete guidance programme", "amount": Decimal("750"), "period": "per programme"},
]


def seed_sample_data(db: Session) -> bool:
    """
    Populate an empty database with sample customers and rates.
    Skips execution when running under pytest or when customers already exist.
    Returns True when data was created.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return False
    if customer_crud.count(db) > 0:
        return False

    logger.info("Initializing database with sample data")
    for customer in SAMPLE_CUSTOMERS:
        customer_crud.create(db, obj_in=CustomerCreate(**customer))
    for rate in SAMPLE_RATES:
        if rate_crud.get_by_code(db, code=rate["code"]):
            continue
        rate_crud.create(db, obj_in=RateCreate(vat_rate=Decimal("21"), default_quantity=Decimal("1"), **rate))
    logger.info("Sample data initialized")
    return True
