from __future__ import annotations

from fastapi.testclient import TestClient

from house_major.api.main import app


def _career(title: str = "Backend Engineer") -> dict:
    return {
        "title": title,
        "department": "Engineering",
        "type": "Full-time",
        "location": "Kigali",
        "description": "Build APIs",
        "requirements": ["Python", "SQL"],
    }


def test_careers_are_public_and_carry_application_counts(admin_headers: dict[str, str]) -> None:
    client = TestClient(app)
    career_id = client.post("/careers", json=_career(), headers=admin_headers).json()["data"]["id"]
    client.post("/careers", json=_career("Designer"), headers=admin_headers)

    for name in ("Ada", "Grace"):
        response = client.post(
            "/applications",
            json={"fullName": name, "email": f"{name.lower()}@example.com", "careerId": career_id},
        )
        assert response.status_code == 201

    careers = client.get("/careers").json()
    counts = {c["title"]: c["applicationCount"] for c in careers}
    assert counts == {"Backend Engineer": 2, "Designer": 0}

    one = client.get(f"/careers/{career_id}").json()
    assert one["requirements"] == ["Python", "SQL"]
    assert one["applicationCount"] is None


def test_update_career(admin_headers: dict[str, str]) -> None:
    client = TestClient(app)
    career_id = client.post("/careers", json=_career(), headers=admin_headers).json()["data"]["id"]
    response = client.put(
        f"/careers/{career_id}", json={"salary": "Competitive"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["data"]["salary"] == "Competitive"
    assert response.json()["data"]["title"] == "Backend Engineer"


def test_deleting_career_keeps_its_applications(admin_headers: dict[str, str]) -> None:
    client = TestClient(app)
    career_id = client.post("/careers", json=_career(), headers=admin_headers).json()["data"]["id"]
    client.post(
        "/applications",
        json={"fullName": "Ada", "email": "ada@example.com", "careerId": career_id},
    )

    assert client.delete(f"/careers/{career_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/careers/{career_id}").status_code == 404

    applications = client.get("/applications", headers=admin_headers).json()
    assert len(applications) == 1
    assert applications[0]["careerId"] is None
    assert applications[0]["jobTitle"] == "Backend Engineer"


def test_missing_career() -> None:
    client = TestClient(app)
    response = client.get("/careers/5")
    assert response.status_code == 404
    assert response.json()["message"] == "Career not found"


def test_career_writes_require_auth() -> None:
    client = TestClient(app)
    assert client.post("/careers", json=_career()).status_code == 401
