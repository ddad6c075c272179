"""Behaviour shared by every collection endpoint set."""

import pytest

COLLECTIONS = [
    ("initiatives", {"name": "sync", "type": "agent"}, {"status": "running"}, "Initiative not found"),
    ("franchise-groups", {"name": "Maui One"}, {"progress": 15}, "Franchise group not found"),
    ("deliverables", {"title": "Playbook", "type": "document"}, {"status": "review"}, "Deliverable not found"),
    ("issues", {"title": "Printer offline"}, {"priority": "high"}, "Issue not found"),
]


@pytest.fixture(params=COLLECTIONS, ids=[c[0] for c in COLLECTIONS])
def collection(request):
    return request.param


def test_crud_cycle(client, collection):
    path, create_body, update_body, _ = collection

    created = client.post(f"/api/{path}", json=create_body)
    assert created.status_code == 201
    record = created.json()

    listed = client.get(f"/api/{path}").json()
    assert listed == [record]

    updated = client.patch(f"/api/{path}/{record['id']}", json=update_body)
    assert updated.status_code == 200
    for key, value in update_body.items():
        assert updated.json()[key] == value
    for key, value in create_body.items():
        assert updated.json()[key] == value

    assert client.delete(f"/api/{path}/{record['id']}").status_code == 204
    assert client.get(f"/api/{path}").json() == []


@pytest.mark.parametrize("method", ["get", "delete"])
def test_missing_id_is_404(client, collection, method):
    path, _, _, message = collection

    response = getattr(client, method)(f"/api/{path}/badid")

    assert response.status_code == 404
    assert response.json() == {"error": message}


def test_patch_missing_id_is_404(client, collection):
    path, _, update_body, message = collection

    response = client.patch(f"/api/{path}/badid", json=update_body)

    assert response.status_code == 404
    assert response.json() == {"error": message}


def test_empty_patch_is_400(client, store, collection):
    path, create_body, _, _ = collection
    record = client.post(f"/api/{path}", json=create_body).json()

    response = client.patch(f"/api/{path}/{record['id']}", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert any("at least one field is required" in d["message"] for d in body["details"])
    assert client.get(f"/api/{path}/{record['id']}").json() == record


def test_franchise_group_not_found_message(client):
    response = client.get("/api/franchise-groups/badid")

    assert response.status_code == 404
    assert response.json() == {"error": "Franchise group not found"}


def test_issue_keeps_dangling_franchise_reference(client):
    response = client.post(
        "/api/issues", json={"title": "Menu sync", "franchiseGroupId": "no-such-group"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["franchiseGroupId"] == "no-such-group"
    assert data["priority"] == "medium"
    assert data["status"] == "open"


def test_franchise_progress_out_of_range(client):
    response = client.post("/api/franchise-groups", json={"name": "Mera", "progress": 150})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "progress"


def test_deliverable_category_enum(client):
    ok = client.post(
        "/api/deliverables",
        json={"title": "Templates", "type": "document", "category": "communication"},
    )
    bad = client.post(
        "/api/deliverables",
        json={"title": "Templates", "type": "document", "category": "marketing"},
    )

    assert ok.status_code == 201
    assert ok.json()["status"] == "draft"
    assert bad.status_code == 400
    assert bad.json()["details"][0]["field"] == "category"


def test_franchise_counts_reject_coerced_values(client, store):
    response = client.post(
        "/api/franchise-groups", json={"name": "Mera", "progress": True, "locationCount": "3"}
    )

    assert response.status_code == 400
    fields = {d["field"] for d in response.json()["details"]}
    assert fields == {"progress", "locationCount"}
    assert len(store.list_franchise_groups()) == 0
