import pytest
from fastapi.testclient import TestClient

from factuurpro.db.base import Base
from factuurpro.db.session import engine
from factuurpro.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_rate(client: TestClient, code: str = "CONSULT", amount: float = 85.0) -> dict:
    resp = client.post(
        "/rates",
        json={
            "code": code,
            "description": "Consult 60 minutes",
            "amount": amount,
            "period": "per session",
            "vat_rate": 21,
        },
    )
    assert resp.status_code == 201
    return resp.json()


def test_create_rate_defaults_quantity():
    client = TestClient(app)
    data = create_rate(client)
    assert data["code"] == "CONSULT"
    assert data["amount"] == 85.0
    assert data["vat_rate"] == 21.0
    assert data["default_quantity"] == 1.0
    assert data["created_at"]


def test_list_and_get_rate():
    client = TestClient(app)
    coaching = create_rate(client, "COACHING", 110.0)
    create_rate(client, "CONSULT")

    resp = client.get("/rates")
    assert resp.status_code == 200
    assert [r["code"] for r in resp.json()] == ["COACHING", "CONSULT"]

    resp_one = client.get(f"/rates/{coaching['id']}")
    assert resp_one.status_code == 200
    assert resp_one.json()["amount"] == 110.0


def test_get_rate_by_code():
    client = TestClient(app)
    create_rate(client, "MASSAGE", 65.0)

    resp = client.get("/rates/code/MASSAGE")
    assert resp.status_code == 200
    assert resp.json()["amount"] == 65.0
    assert client.get("/rates/code/UNKNOWN").status_code == 404


def test_duplicate_rate_code_returns_409():
    client = TestClient(app)
    create_rate(client, "CONSULT")
    resp = client.post(
        "/rates",
        json={"code": "CONSULT", "description": "Other", "amount": 10, "period": "per hour", "vat_rate": 9},
    )
    assert resp.status_code == 409
    assert "CONSULT" in resp.json()["detail"]


def test_update_rate_to_existing_code_returns_409():
    client = TestClient(app)
    create_rate(client, "CONSULT")
    other = create_rate(client, "COACHING", 110.0)

    resp = client.put(f"/rates/{other['id']}", json={"code": "CONSULT"})
    assert resp.status_code == 409


def test_update_rate_partial():
    client = TestClient(app)
    rate = create_rate(client)

    resp = client.put(f"/rates/{rate['id']}", json={"amount": 90, "code": "CONSULT"})
    assert resp.status_code == 200
    assert resp.json()["amount"] == 90.0
    assert resp.json()["description"] == "Consult 60 minutes"


def test_rate_validation():
    client = TestClient(app)
    resp = client.post("/rates", json={"code": "X", "description": "Negative", "amount": -1, "period": "p", "vat_rate": 21})
    assert resp.status_code == 400


def test_delete_rate():
    client = TestClient(app)
    rate = create_rate(client)
    assert client.delete(f"/rates/{rate['id']}").status_code == 204
    assert client.get(f"/rates/{rate['id']}").status_code == 404
    assert client.delete(f"/rates/{rate['id']}").status_code == 404
