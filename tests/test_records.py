"""Tests for the ERP record collections."""

import pytest

from smart_erp.models import InventoryItem, Notification

INVENTORY_ITEM = {
    "item_name": "Standing Desk",
    "sku": "DSK-100",
    "current_stock": 42,
    "reorder_point": 10,
    "unit_price": 349.0,
    "supplier": "Northwind Furniture",
}

# One valid create payload and one valid partial update per module
MODULES = {
    "/api/inventory": (INVENTORY_ITEM, {"current_stock": 40}),
    "/api/orders": (
        {
            "customer_name": "Acme Corp",
            "email": "purchasing@acme.example",
            "items": [{"item_name": "Standing Desk", "quantity": 2, "price": 349.0}],
            "total_amount": 698.0,
            "shipping_address": "12 Industrial Way",
        },
        {"status": "Shipped"},
    ),
    "/api/jobs": (
        {
            "candidate_name": "Priya Raman",
            "position": "Backend Engineer",
            "email": "priya@mail.example",
            "resume_link": "https://files.example/priya.pdf",
        },
        {"status": "Interview"},
    ),
    "/api/complaints": (
        {
            "customer_name": "Acme Corp",
            "issue_type": "Damaged Goods",
            "description": "Broken casters",
        },
        {"status": "Resolved"},
    ),
    "/api/procurement": (
        {"item_name": "Toner", "department": "Finance", "quantity": 6, "budget": 420.0},
        {"status": "Approved"},
    ),
    "/api/incidents": (
        {"requester_name": "Sam", "issue_description": "VPN drops"},
        {"priority": "High"},
    ),
    "/api/vendors": (
        {
            "vendor_name": "Northwind",
            "service_type": "Furniture",
            "contact_email": "sales@northwind.example",
            "rating": 4,
        },
        {"status": "Approved"},
    ),
    "/api/training": (
        {"employee_name": "Jordan Lee", "training_topic": "Forklift Safety"},
        {"status": "Completed"},
    ),
    "/api/evaluations": (
        {"employee_name": "Jordan Lee", "review_period": "2025-H2", "score": 4.5},
        {"comments": "Great quarter"},
    ),
    "/api/crm": (
        {"customer_name": "Initech", "phone": "+1-555-0134"},
        {"interest_level": "Hot"},
    ),
}


@pytest.mark.parametrize("prefix", list(MODULES))
class TestRecordCollections:
    def test_requires_auth(self, client, prefix):
        assert client.get(prefix).status_code == 401
        assert client.post(prefix, json=MODULES[prefix][0]).status_code == 401

    def test_create_list_update_delete(self, client, auth_headers, prefix):
        payload, changes = MODULES[prefix]

        created = client.post(prefix, headers=auth_headers, json=payload)
        assert created.status_code == 201, created.text
        record = created.json()
        assert record["id"]
        assert "created_at" in record

        listed = client.get(prefix, headers=auth_headers)
        assert listed.status_code == 200
        assert [r["id"] for r in listed.json()] == [record["id"]]

        updated = client.put(f"{prefix}/{record['id']}", headers=auth_headers, json=changes)
        assert updated.status_code == 200
        for field, value in changes.items():
            assert updated.json()[field] == value

        deleted = client.delete(f"{prefix}/{record['id']}", headers=auth_headers)
        assert deleted.status_code == 200
        assert client.get(prefix, headers=auth_headers).json() == []

    def test_missing_record(self, client, auth_headers, prefix):
        _, changes = MODULES[prefix]
        assert client.put(f"{prefix}/99999", headers=auth_headers, json=changes).status_code == 404
        assert client.delete(f"{prefix}/99999", headers=auth_headers).status_code == 404


class TestBulkDelete:
    def test_deletes_listed_ids(self, client, auth_headers):
        ids = []
        for n in range(3):
            item = {**INVENTORY_ITEM, "sku": f"SKU-{n}"}
            ids.append(client.post("/api/inventory", headers=auth_headers, json=item).json()["id"])

        response = client.post(
            "/api/inventory/bulk-delete", headers=auth_headers, json={"ids": ids[:2] + [99999]}
        )
        assert response.status_code == 200
        assert response.json() == {"message": "Items deleted successfully", "deleted_count": 2}

        remaining = client.get("/api/inventory", headers=auth_headers).json()
        assert [r["id"] for r in remaining] == [ids[2]]

    def test_requires_ids(self, client, auth_headers):
        response = client.post("/api/inventory/bulk-delete", headers=auth_headers, json={"ids": []})
        assert response.status_code == 422


class TestInventory:
    def test_create_notifies_creator(self, client, db, auth_headers, other_auth_headers):
        client.post("/api/inventory", headers=auth_headers, json=INVENTORY_ITEM)

        db.expire_all()
        mine = db.query(Notification).filter(Notification.user_id == auth_headers.user_id).all()
        theirs = (
            db.query(Notification).filter(Notification.user_id == other_auth_headers.user_id).all()
        )
        added = [n for n in mine if n.title == "New Inventory Added"]
        assert len(added) == 1
        assert added[0].message == "Standing Desk has been added to inventory."
        assert all(n.title != "New Inventory Added" for n in theirs)

    def test_duplicate_sku_conflicts(self, client, db, auth_headers):
        client.post("/api/inventory", headers=auth_headers, json=INVENTORY_ITEM)
        response = client.post("/api/inventory", headers=auth_headers, json=INVENTORY_ITEM)

        assert response.status_code == 409
        assert response.json() == {"detail": "Inventory item already exists"}
        assert db.query(InventoryItem).count() == 1

    def test_explicit_null_leaves_required_field(self, client, auth_headers):
        item = client.post("/api/inventory", headers=auth_headers, json=INVENTORY_ITEM).json()

        response = client.put(
            f"/api/inventory/{item['id']}", headers=auth_headers, json={"supplier": None}
        )
        assert response.status_code == 200
        assert response.json()["supplier"] == "Northwind Furniture"

    def test_negative_stock_rejected(self, client, auth_headers):
        response = client.post(
            "/api/inventory", headers=auth_headers, json={**INVENTORY_ITEM, "current_stock": -1}
        )
        assert response.status_code == 422


class TestVendors:
    def test_rating_out_of_range(self, client, auth_headers):
        payload = {**MODULES["/api/vendors"][0], "rating": 6}
        assert client.post("/api/vendors", headers=auth_headers, json=payload).status_code == 422

    def test_rating_can_be_cleared(self, client, auth_headers):
        vendor = client.post(
            "/api/vendors", headers=auth_headers, json=MODULES["/api/vendors"][0]
        ).json()

        response = client.put(
            f"/api/vendors/{vendor['id']}", headers=auth_headers, json={"rating": None}
        )
        assert response.json()["rating"] is None


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
