from factuurpro.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from factuurpro.models.customer import Customer  # noqa: F401
from factuurpro.models.rate import Rate  # noqa: F401
from factuurpro.models.invoice import Invoice  # noqa: F401
from factuurpro.models.invoice_item import InvoiceItem  # noqa: F401
