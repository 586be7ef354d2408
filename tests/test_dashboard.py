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


def create_invoice(client: TestClient, customer_id: int, total: float, status: str) -> dict:
    resp = client.post(
        "/invoices",
        json={
            "customer_id": customer_id,
            "issue_date": "2026-03-01T00:00:00Z",
            "due_date": "2026-03-15T00:00:00Z",
            "subtotal": total,
            "vat_amount": 0,
            "total": total,
            "status": status,
        },
    )
    assert resp.status_code == 201
    return resp.json()


def test_dashboard_summary_empty():
    client = TestClient(app)
    resp = client.get("/dashboard/summary")
    assert resp.status_code == 200
    assert resp.json() == {
        "total_invoices": 0,
        "total_customers": 0,
        "amount_to_be_paid": 0.0,
        "amount_paid": 0.0,
        "unassigned_item_count": 0,
        "unassigned_item_total": 0.0,
    }


def test_dashboard_summary_totals():
    client = TestClient(app)
    customer_id = client.post("/customers", json={"name": "Client A", "email": "client-a@example.com"}).json()["id"]
    create_invoice(client, customer_id, 100, "pending")
    create_invoice(client, customer_id, 50, "sent")
    create_invoice(client, customer_id, 200, "paid")
    create_invoice(client, customer_id, 999, "draft")
    client.post(
        "/invoice-items",
        json={"customer_id": customer_id, "description": "Consult", "quantity": 2, "unit_price": 85, "vat_rate": 21},
    )

    data = client.get("/dashboard/summary").json()
    assert data["total_invoices"] == 4
    assert data["total_customers"] == 1
    assert data["amount_to_be_paid"] == 150.0
    assert data["amount_paid"] == 200.0
    assert data["unassigned_item_count"] == 1
    assert data["unassigned_item_total"] == 205.7
