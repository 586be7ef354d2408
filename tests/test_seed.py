import pytest

from factuurpro.core.seed import seed_sample_data
from factuurpro.db.base import Base
from factuurpro.db.session import SessionLocal, engine
from factuurpro.models.customer import Customer
from factuurpro.models.rate import Rate


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def test_seed_skipped_under_pytest():
    db = SessionLocal()
    try:
        assert seed_sample_data(db) is False
        assert db.query(Customer).count() == 0
    finally:
        db.close()


def test_seed_populates_empty_database_once(monkeypatch):
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    db = SessionLocal()
    try:
        assert seed_sample_data(db) is True
        assert db.query(Customer).count() == 2
        codes = sorted(code for (code,) in db.query(Rate.code).all())
        assert codes == ["COACHING", "CONSULT", "MASSAGE", "TRAJECT"]
        consult = db.query(Rate).filter(Rate.code == "CONSULT").first()
        assert float(consult.amount) == 85.0
        assert float(consult.vat_rate) == 21.0

        assert seed_sample_data(db) is False
        assert db.query(Customer).count() == 2
    finally:
        db.close()
