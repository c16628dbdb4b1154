"""HTTP surface for the service catalog."""
from factories import auth_headers, create_expert, create_service


def _body(**overrides):
    body = {"name": "Tax review", "price": 120.0, "duration": 45, "description": "One-on-one"}
    body.update(overrides)
    return body


def test_create_and_list(client, db):
    create_expert(db, "expert-a", name="Dr. Ada")

    created = client.post("/api/services", json=_body(), headers=auth_headers("expert-a"))

    assert created.status_code == 200
    service = created.json()
    assert service["expert_id"] == "expert-a"
    assert service["duration"] == 45
    assert service["is_active"] is True

    listed = client.get("/api/services").json()
    assert [s["id"] for s in listed] == [service["id"]]
    assert listed[0]["expert_name"] == "Dr. Ada"


def test_public_listing_is_newest_first_and_active_only(client, db):
    create_expert(db, "expert-a")
    create_expert(db, "expert-b")
    older = create_service(db, "expert-a", name="Older")
    create_service(db, "expert-a", name="Hidden", is_active=False)
    newer = create_service(db, "expert-b", name="Newer")

    listed = client.get("/api/services").json()
    assert [s["id"] for s in listed] == [newer.id, older.id]

    mine = client.get("/api/experts/expert-a/services").json()
    assert [s["name"] for s in mine] == ["Older"]
    assert "expert_name" not in mine[0]


def test_update_own_service(client, db):
    create_expert(db, "expert-a")
    sid = create_service(db, "expert-a").id

    r = client.put(f"/api/services/{sid}", json=_body(name="Renamed", duration=90), headers=auth_headers("expert-a"))

    assert r.status_code == 200
    assert r.json()["name"] == "Renamed"
    assert r.json()["duration"] == 90


def test_update_someone_elses_service_is_404(client, db):
    create_expert(db, "expert-a")
    sid = create_service(db, "expert-a").id

    r = client.put(f"/api/services/{sid}", json=_body(), headers=auth_headers("expert-b"))

    assert r.status_code == 404
    assert r.json() == {"error": "Service not found or unauthorized"}


def test_delete_is_soft_and_scoped(client, db):
    create_expert(db, "expert-a")
    sid = create_service(db, "expert-a").id

    assert client.delete(f"/api/services/{sid}", headers=auth_headers("expert-b")).json() == {"success": True}
    assert len(client.get("/api/services").json()) == 1

    assert client.delete(f"/api/services/{sid}", headers=auth_headers("expert-a")).json() == {"success": True}
    assert client.get("/api/services").json() == []
    # soft delete keeps the row, so the owner can still edit it
    assert client.put(f"/api/services/{sid}", json=_body(), headers=auth_headers("expert-a")).status_code == 200


def test_invalid_service_payload_is_400(client):
    headers = auth_headers("expert-a")

    assert client.post("/api/services", json=_body(price=0), headers=headers).status_code == 400
    assert client.post("/api/services", json=_body(duration=0), headers=headers).status_code == 400
    assert client.post("/api/services", json=_body(name=""), headers=headers).status_code == 400
