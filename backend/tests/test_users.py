"""Tests for POST /api/users and PATCH /api/users/{id}"""
from datetime import datetime

from backend.app.models.user import User


def test_create_user_returns_201(client):
    """Optional contact fields default to null; id and timestamps are generated."""
    r = client.post(
        "/api/users",
        json={"email": "a@x.com", "first_name": "Ann", "last_name": "Lee"},
    )
    assert r.status_code == 201
    data = r.json()
    assert data["id"] > 0
    assert data["email"] == "a@x.com"
    assert data["phone"] is None
    assert data["country"] is None
    assert data["created_at"] and data["updated_at"]


def test_create_user_persists(client, db_session):
    r = client.post(
        "/api/users",
        json={"email": "a@x.com", "first_name": "Ann", "last_name": "Lee", "city": "Austin"},
    )
    user = db_session.query(User).filter(User.id == r.json()["id"]).first()
    assert user is not None
    assert user.city == "Austin"


def test_create_user_duplicate_email_conflict(client, test_user):
    """Unique email: 409 with a readable detail."""
    r = client.post(
        "/api/users",
        json={"email": test_user.email, "first_name": "Other", "last_name": "Person"},
    )
    assert r.status_code == 409
    assert "email" in r.json()["detail"]


def test_create_user_malformed_email(client, db_session):
    """Rejected before anything is written."""
    r = client.post(
        "/api/users",
        json={"email": "not-an-email", "first_name": "Ann", "last_name": "Lee"},
    )
    assert r.status_code == 422
    assert db_session.query(User).count() == 0


def test_create_user_missing_required_field(client):
    r = client.post("/api/users", json={"email": "a@x.com", "first_name": "Ann"})
    assert r.status_code == 422


def test_update_user_partial(client, test_user):
    """Only sent fields change."""
    r = client.patch(f"/api/users/{test_user.id}", json={"first_name": "Johnny"})
    assert r.status_code == 200
    data = r.json()
    assert data["first_name"] == "Johnny"
    assert data["last_name"] == "Doe"
    assert data["phone"] == "+1-555-123-4567"


def test_update_user_null_vs_omitted(client, test_user):
    """Explicit null clears the field; omitting it keeps the stored value."""
    kept = client.patch(f"/api/users/{test_user.id}", json={}).json()
    assert kept["phone"] == "+1-555-123-4567"

    cleared = client.patch(f"/api/users/{test_user.id}", json={"phone": None}).json()
    assert cleared["phone"] is None
    assert cleared["city"] == "San Francisco"


def test_update_user_touches_updated_at(client, db_session, test_user):
    """An empty update still moves updated_at forward."""
    stale = datetime(2000, 1, 1)
    created_at = test_user.created_at
    test_user.updated_at = stale
    db_session.commit()

    after = client.patch(f"/api/users/{test_user.id}", json={}).json()
    assert datetime.fromisoformat(after["updated_at"]) > stale
    assert datetime.fromisoformat(after["created_at"]) == created_at


def test_update_user_not_found(client, db_session):
    r = client.patch("/api/users/9999", json={"first_name": "Ghost"})
    assert r.status_code == 404


def test_update_user_rejects_null_required_field(client, test_user):
    r = client.patch(f"/api/users/{test_user.id}", json={"last_name": None})
    assert r.status_code == 422


def test_update_user_email_taken(client, db_session, test_user):
    other = User(email="other@example.com", first_name="O", last_name="P")
    db_session.add(other)
    db_session.commit()
    r = client.patch(f"/api/users/{other.id}", json={"email": test_user.email})
    assert r.status_code == 409


def test_update_user_keeps_own_email(client, test_user):
    r = client.patch(f"/api/users/{test_user.id}", json={"email": "john.doe@example.com"})
    assert r.status_code == 200
