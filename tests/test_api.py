"""
HTTP tests for the report endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import store
from scripts.seed_data import seed

client = TestClient(app)


def payload():
    return {
        "sellers": [
            {"id": "S-1", "first_name": "Anna", "last_name": "Lee"},
            {"id": "S-2", "first_name": "Ben", "last_name": "Ng"},
        ],
        "products": [{"sku": "A", "purchase_price": 10}],
        "purchase_records": [
            {"seller_id": "S-1", "items": [
                {"sku": "A", "sale_price": 100, "discount": 10, "quantity": 2},
            ]},
            {"seller_id": "S-2", "items": [
                {"sku": "A", "sale_price": 20, "discount": 0, "quantity": 1},
            ]},
        ],
    }


@pytest.fixture(autouse=True)
def seeded_store():
    store.clear()
    seed(store)
    yield
    store.clear()


class TestPostedReport:
    def test_report_for_posted_data(self):
        resp = client.post("/api/v1/reports/sales", json=payload())
        assert resp.status_code == 200
        rows = resp.json()["sellers"]
        assert [r["seller_id"] for r in rows] == ["S-1", "S-2"]
        assert rows[0]["revenue"] == 180.0
        assert rows[0]["profit"] == 160.0
        assert rows[0]["bonus"] == 24.0
        assert rows[0]["top_products"] == [{"sku": "A", "quantity": 2}]

    def test_empty_collection_is_422(self):
        body = payload()
        body["products"] = []
        resp = client.post("/api/v1/reports/sales", json=body)
        assert resp.status_code == 422
        assert "products" in resp.json()["detail"]
        assert resp.json()["error"] == "ValidationError"

    def test_non_numeric_field_is_422(self):
        body = payload()
        body["purchase_records"][0]["items"][0]["quantity"] = "many"
        resp = client.post("/api/v1/reports/sales", json=body)
        assert resp.status_code == 422
        assert "quantity" in resp.json()["detail"]
        assert resp.json()["error"] == "NonNumericFieldError"

    def test_numeric_string_is_422(self):
        body = payload()
        body["purchase_records"][0]["items"][0]["sale_price"] = "100"
        resp = client.post("/api/v1/reports/sales", json=body)
        assert resp.status_code == 422
        assert resp.json()["error"] == "NonNumericFieldError"


class TestStoredReport:
    def test_seeded_report_is_ranked(self):
        resp = client.get("/api/v1/reports/sales")
        assert resp.status_code == 200
        rows = resp.json()["sellers"]
        assert 1 <= len(rows) <= 5
        profits = [r["profit"] for r in rows]
        assert profits == sorted(profits, reverse=True)
        assert all(len(r["top_products"]) <= 10 for r in rows)
        # receipts for the unknown seller never show up
        assert "seller_99" not in {r["seller_id"] for r in rows}

    def test_single_seller_row(self):
        rows = client.get("/api/v1/reports/sales").json()["sellers"]
        resp = client.get(f"/api/v1/reports/sales/{rows[0]['seller_id']}")
        assert resp.status_code == 200
        assert resp.json() == rows[0]

    def test_unknown_seller_row_is_404(self):
        assert client.get("/api/v1/reports/sales/nobody").status_code == 404

    def test_empty_store_is_422(self):
        store.clear()
        assert client.get("/api/v1/reports/sales").status_code == 422


class TestCatalog:
    def test_list_sellers(self):
        sellers = client.get("/api/v1/sellers").json()["sellers"]
        assert len(sellers) == 5

    def test_get_seller(self):
        resp = client.get("/api/v1/sellers/seller_1")
        assert resp.status_code == 200
        assert resp.json()["first_name"] == "Alexey"

    def test_get_unknown_seller(self):
        assert client.get("/api/v1/sellers/nobody").status_code == 404

    def test_list_products(self):
        assert len(client.get("/api/v1/products").json()["products"]) == 30

    def test_get_product(self):
        resp = client.get("/api/v1/products/SKU_001")
        assert resp.status_code == 200
        assert resp.json()["sku"] == "SKU_001"
        assert resp.json() == store.get_product("SKU_001").model_dump()

    def test_get_unknown_product(self):
        assert client.get("/api/v1/products/SKU_999").status_code == 404

    def test_reseed(self):
        store.clear()
        resp = client.post("/api/v1/admin/seed")
        assert resp.json() == {"status": "seeded", "sellers": 5, "products": 30, "receipts": 300}
