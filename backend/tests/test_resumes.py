"""Tests for the /api/resumes endpoints"""
from datetime import datetime

from backend.app.models.education import Education
from backend.app.models.resume import Resume
from backend.app.models.skill import Skill
from backend.app.models.user import User
from backend.app.models.work_experience import WorkExperience


def test_create_resume_defaults(client, test_user):
    r = client.post("/api/resumes", json={"user_id": test_user.id, "title": "Draft"})
    assert r.status_code == 201
    data = r.json()
    assert data["title"] == "Draft"
    assert data["summary"] is None
    assert data["template_id"] is None
    assert data["is_public"] is False


def test_create_resume_with_template(client, test_user, test_template):
    r = client.post(
        "/api/resumes",
        json={
            "user_id": test_user.id,
            "title": "Public",
            "summary": "Hello",
            "template_id": test_template.id,
            "is_public": True,
        },
    )
    assert r.status_code == 201
    assert r.json()["template_id"] == test_template.id
    assert r.json()["is_public"] is True


def test_create_resume_unknown_user(client, db_session):
    """Missing parent user -> 400, nothing written."""
    r = client.post("/api/resumes", json={"user_id": 9999, "title": "Orphan"})
    assert r.status_code == 400
    assert "user_id" in r.json()["detail"]
    assert db_session.query(Resume).count() == 0


def test_create_resume_unknown_template(client, test_user):
    r = client.post(
        "/api/resumes",
        json={"user_id": test_user.id, "title": "Draft", "template_id": 9999},
    )
    assert r.status_code == 400


def test_get_resume_by_id(client, test_resume):
    r = client.get(f"/api/resumes/{test_resume.id}")
    assert r.status_code == 200
    assert r.json()["title"] == "Senior Software Engineer"


def test_get_resume_missing_returns_null(client, db_session):
    """Absence is a normal outcome: 200 with null body."""
    r = client.get("/api/resumes/9999")
    assert r.status_code == 200
    assert r.json() is None


def test_list_resumes_by_user(client, db_session, test_user, test_resume):
    other = User(email="other@example.com", first_name="O", last_name="P")
    db_session.add(other)
    db_session.commit()
    db_session.add_all([
        Resume(user_id=test_user.id, title="Second"),
        Resume(user_id=other.id, title="Not mine"),
    ])
    db_session.commit()

    r = client.get("/api/resumes", params={"user_id": test_user.id})
    assert r.status_code == 200
    titles = [item["title"] for item in r.json()]
    assert titles == ["Senior Software Engineer", "Second"]


def test_list_resumes_unknown_user_is_empty(client, db_session):
    r = client.get("/api/resumes", params={"user_id": 9999})
    assert r.status_code == 200
    assert r.json() == []


def test_update_resume_partial(client, test_resume):
    r = client.patch(f"/api/resumes/{test_resume.id}", json={"title": "Staff Engineer"})
    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Staff Engineer"
    assert data["summary"] == "Experienced engineer with 5+ years in full-stack development"


def test_update_resume_empty_body_only_touches_timestamp(client, db_session, test_resume):
    stale = datetime(2000, 1, 1)
    test_resume.updated_at = stale
    db_session.commit()

    before = client.get(f"/api/resumes/{test_resume.id}").json()
    assert datetime.fromisoformat(before["updated_at"]) == stale
    after = client.patch(f"/api/resumes/{test_resume.id}", json={}).json()

    assert datetime.fromisoformat(after["updated_at"]) > stale
    for key in ("id", "user_id", "title", "summary", "template_id", "is_public", "created_at"):
        assert after[key] == before[key]


def test_update_resume_null_vs_omitted(client, test_resume):
    """summary omitted keeps the value; summary=null clears it."""
    omitted = client.patch(f"/api/resumes/{test_resume.id}", json={"is_public": True}).json()
    assert omitted["summary"] is not None

    cleared = client.patch(f"/api/resumes/{test_resume.id}", json={"summary": None}).json()
    assert cleared["summary"] is None
    assert cleared["is_public"] is True


def test_update_resume_set_and_clear_template(client, test_resume, test_template):
    r = client.patch(f"/api/resumes/{test_resume.id}", json={"template_id": test_template.id})
    assert r.json()["template_id"] == test_template.id
    r = client.patch(f"/api/resumes/{test_resume.id}", json={"template_id": None})
    assert r.json()["template_id"] is None


def test_update_resume_unknown_template(client, test_resume):
    r = client.patch(f"/api/resumes/{test_resume.id}", json={"template_id": 9999})
    assert r.status_code == 400


def test_update_resume_null_title_rejected(client, test_resume):
    r = client.patch(f"/api/resumes/{test_resume.id}", json={"title": None})
    assert r.status_code == 422


def test_update_resume_not_found(client, db_session):
    r = client.patch("/api/resumes/9999", json={"title": "Ghost"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Resume with id 9999 not found"


def test_delete_resume_missing_returns_false(client, db_session):
    r = client.delete("/api/resumes/9999")
    assert r.status_code == 200
    assert r.json() is False


def test_delete_resume_cascades_to_sections(client, db_session, populated_resume):
    resume_id = populated_resume.id
    r = client.delete(f"/api/resumes/{resume_id}")
    assert r.status_code == 200
    assert r.json() is True

    assert client.get(f"/api/resumes/{resume_id}").json() is None
    assert client.get("/api/work-experiences", params={"resume_id": resume_id}).json() == []
    assert client.get("/api/educations", params={"resume_id": resume_id}).json() == []
    assert client.get("/api/skills", params={"resume_id": resume_id}).json() == []
    for model in (WorkExperience, Education, Skill):
        assert db_session.query(model).filter(model.resume_id == resume_id).count() == 0


def test_delete_resume_leaves_other_resumes_alone(client, db_session, test_user, populated_resume):
    keep = Resume(user_id=test_user.id, title="Keep me")
    db_session.add(keep)
    db_session.commit()
    db_session.add(Skill(resume_id=keep.id, name="Go"))
    db_session.commit()
    keep_id = keep.id

    assert client.delete(f"/api/resumes/{populated_resume.id}").json() is True
    assert client.get(f"/api/resumes/{keep_id}").json()["title"] == "Keep me"
    assert [s["name"] for s in client.get("/api/skills", params={"resume_id": keep_id}).json()] == ["Go"]


def test_delete_resume_twice(client, test_resume):
    assert client.delete(f"/api/resumes/{test_resume.id}").json() is True
    assert client.delete(f"/api/resumes/{test_resume.id}").json() is False


def test_resume_lifecycle(client, db_session):
    """User -> resume -> two work experiences out of order -> ordered listing -> cascade delete."""
    user = client.post(
        "/api/users", json={"email": "a@x.com", "first_name": "Ann", "last_name": "Lee"}
    ).json()
    resume = client.post("/api/resumes", json={"user_id": user["id"], "title": "Draft"}).json()
    for index, company in ((1, "Second Co"), (0, "First Co")):
        r = client.post(
            "/api/work-experiences",
            json={
                "resume_id": resume["id"],
                "company_name": company,
                "job_title": "Engineer",
                "start_date": "2020-01-01",
                "order_index": index,
            },
        )
        assert r.status_code == 201

    listed = client.get("/api/work-experiences", params={"resume_id": resume["id"]}).json()
    assert [w["order_index"] for w in listed] == [0, 1]
    assert listed[0]["company_name"] == "First Co"

    assert client.delete(f"/api/resumes/{resume['id']}").json() is True
    assert db_session.query(WorkExperience).count() == 0
