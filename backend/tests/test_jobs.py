# File: tests/test_jobs.py


def _user_id(client, token):
    resp = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    return resp.json()["id"]


def test_list_jobs_empty(client):
    resp = client.get("/api/jobs")
    assert resp.status_code == 200
    assert resp.json() == []


def test_created_job_is_listed_with_employer_name(client, register):
    alice_id = _user_id(client, register().json()["token"])

    resp = client.post("/api/jobs", json={
        "title": "Build a landing page",
        "description": "Static site, two pages",
        "employerId": alice_id,
    })
    assert resp.status_code == 201
    job = resp.json()
    assert job["title"] == "Build a landing page"
    assert job["employer"] == {"id": alice_id, "name": "Alice"}
    assert job["bids"] == []
    assert "createdAt" in job

    listed = client.get("/api/jobs").json()
    assert [j["id"] for j in listed] == [job["id"]]
    assert listed[0]["employer"]["name"] == "Alice"


def test_listing_count_matches_creations(client, register):
    alice_id = _user_id(client, register().json()["token"])
    bob_id = _user_id(client, register(name="Bob", email="bob@acme.io", role="freelancer").json()["token"])

    for i in range(3):
        client.post("/api/jobs", json={"title": f"Job {i}", "description": "d", "employerId": alice_id})
    # Role is not enforced: a freelancer can post too
    resp = client.post("/api/jobs", json={"title": "Bob's", "description": "d", "employerId": bob_id})
    assert resp.status_code == 201

    listed = client.get("/api/jobs").json()
    assert len(listed) == 4
    assert sorted(j["employer"]["name"] for j in listed) == ["Alice", "Alice", "Alice", "Bob"]


def test_job_with_unknown_employer_lists_null_employer(client):
    # SQLite does not enforce the foreign key, so the row is stored as sent
    resp = client.post("/api/jobs", json={"title": "Orphan", "description": "d", "employerId": 999})
    assert resp.status_code == 201
    assert resp.json()["employer"] is None

    listed = client.get("/api/jobs").json()
    assert len(listed) == 1
    assert listed[0]["title"] == "Orphan"
    assert listed[0]["employer"] is None


def test_create_job_missing_fields(client):
    resp = client.post("/api/jobs", json={"title": "No description"})
    assert resp.status_code == 422


def test_create_job_database_failure_is_500(client, broken_db):
    resp = client.post("/api/jobs", json={"title": "t", "description": "d", "employerId": 1})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Server error"


def test_list_jobs_database_failure_is_500(client, broken_db):
    resp = client.get("/api/jobs")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Server error"
