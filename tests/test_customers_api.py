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


def create_customer(client: TestClient, name: str = "Client A", email: str = "client-a@example.com") -> dict:
    resp = client.post(
        "/customers",
        json={"name": name, "email": email, "address": "Hoofdstraat 1", "phone_number": "020-1234567"},
    )
    assert resp.status_code == 201
    return resp.json()


def test_create_and_get_customer():
    client = TestClient(app)
    created = create_customer(client)
    assert created["id"]
    assert created["name"] == "Client A"

    resp = client.get(f"/customers/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_list_customers():
    client = TestClient(app)
    create_customer(client, "Bedrijf B", "info@bedrijfb.example.com")
    create_customer(client, "Client A")

    resp = client.get("/customers")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Bedrijf B", "Client A"]


def test_customer_email_is_not_unique():
    client = TestClient(app)
    create_customer(client, "First")
    create_customer(client, "Second")
    assert len(client.get("/customers").json()) == 2


def test_create_customer_validation_error_returns_400():
    client = TestClient(app)
    resp = client.post("/customers", json={"name": "No Mail"})
    assert resp.status_code == 400
    assert "email" in resp.json()["detail"]

    resp_bad_mail = client.post("/customers", json={"name": "Bad", "email": "not-an-email"})
    assert resp_bad_mail.status_code == 400


def test_update_customer_partial():
    client = TestClient(app)
    created = create_customer(client)

    resp = client.put(f"/customers/{created['id']}", json={"phone_number": "06-12345678"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["phone_number"] == "06-12345678"
    assert data["name"] == "Client A"
    assert data["email"] == "client-a@example.com"


def test_update_customer_rejects_null_name():
    client = TestClient(app)
    created = create_customer(client)
    resp = client.put(f"/customers/{created['id']}", json={"name": None})
    assert resp.status_code == 400


def test_update_missing_customer_returns_404():
    client = TestClient(app)
    resp = client.put("/customers/999", json={"name": "Ghost"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Customer not found"


def test_delete_customer():
    client = TestClient(app)
    created = create_customer(client)

    resp = client.delete(f"/customers/{created['id']}")
    assert resp.status_code == 204
    assert client.get(f"/customers/{created['id']}").status_code == 404


def test_delete_missing_customer_returns_404():
    client = TestClient(app)
    assert client.delete("/customers/999").status_code == 404


def test_non_integer_id_returns_400():
    client = TestClient(app)
    assert client.get("/customers/abc").status_code == 400


def test_delete_customer_leaves_items_in_place():
    client = TestClient(app)
    created = create_customer(client)
    item = client.post(
        "/invoice-items",
        json={
            "customer_id": created["id"],
            "description": "Consult",
            "quantity": 1,
            "unit_price": 85,
            "vat_rate": 21,
        },
    ).json()

    assert client.delete(f"/customers/{created['id']}").status_code == 204

    resp = client.get(f"/invoice-items/{item['id']}")
    assert resp.status_code == 200
    assert resp.json()["customer_id"] == created["id"]
