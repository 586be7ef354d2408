# FactuurPro invoicing backend entrypoint.

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from factuurpro.api import customers
from factuurpro.api import dashboard
from factuurpro.api import invoice_items
from factuurpro.api import invoices
from factuurpro.api import rates
from factuurpro.core.errors import register_exception_handlers
from factuurpro.core.logging import configure_logging
from factuurpro.core.seed import seed_sample_data
from factuurpro.core.settings import get_settings
from factuurpro.db.base import Base
from factuurpro.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(customers.router)
app.include_router(rates.router)
app.include_router(invoice_items.router)
app.include_router(invoices.router)
app.include_router(dashboard.router)


@app.get("/")
def read_root():
    return {"app": "FactuurPro backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    Base.metadata.create_all(bind=engine)
    if settings.seed_sample_data:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    logger.info("%s started (%s)", settings.app_name, settings.environment)
