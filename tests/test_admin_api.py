import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_admin_routes_require_a_session(api_client: AsyncClient):
    assert (await api_client.get("/api/admin/projects")).status_code == 401
    response = await api_client.post(
        "/api/admin/projects", json={"title": "Rover", "description": "Robot"}
    )
    assert response.status_code == 401


async def test_invalid_token_is_rejected(api_client: AsyncClient):
    response = await api_client.get(
        "/api/admin/projects", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


async def test_project_crud(api_client: AsyncClient, admin_headers):
    created = await api_client.post(
        "/api/admin/projects",
        json={
            "title": "Rover",
            "description": "Line follower",
            "technologies": ["Arduino", "C++"],
            "github_url": "https://github.com/club/rover",
        },
        headers=admin_headers,
    )
    assert created.status_code == 201
    project = created.json()["data"]
    assert project["id"]
    assert project["created_at"]

    updated = await api_client.put(
        f"/api/admin/projects/{project['id']}",
        json={"title": "Rover v2", "description": "Now with lidar", "technologies": ["Python"]},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Rover v2"
    assert updated.json()["data"]["technologies"] == ["Python"]
    assert updated.json()["data"]["github_url"] is None

    listed = await api_client.get("/api/admin/projects", headers=admin_headers)
    assert [item["title"] for item in listed.json()["data"]] == ["Rover v2"]

    deleted = await api_client.delete(f"/api/admin/projects/{project['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    listed = await api_client.get("/api/admin/projects", headers=admin_headers)
    assert listed.json()["data"] == []


async def test_executive_derived_fields_come_from_grade(api_client: AsyncClient, admin_headers, clock):
    response = await api_client.post(
        "/api/admin/executives",
        json={"name": "A", "grade": 12, "role": "President", "graduation_year": 1990, "is_alumni": False},
        headers=admin_headers,
    )

    assert response.status_code == 201
    executive = response.json()["data"]
    assert executive["graduation_year"] == clock().year
    assert executive["is_alumni"] is True


async def test_invalid_grade_is_unprocessable(api_client: AsyncClient, admin_headers):
    response = await api_client.post(
        "/api/admin/executives",
        json={"name": "A", "grade": 7, "role": "Member"},
        headers=admin_headers,
    )
    assert response.status_code == 422


async def test_update_of_missing_record_is_not_found(api_client: AsyncClient, admin_headers):
    response = await api_client.put(
        "/api/admin/executives/does-not-exist",
        json={"name": "A", "grade": 10, "role": "Member"},
        headers=admin_headers,
    )
    assert response.status_code == 404


async def test_admin_announcement_list_is_not_limited(api_client: AsyncClient, admin_headers):
    for index in range(8):
        response = await api_client.post(
            "/api/admin/announcements",
            json={"title": f"A{index}", "content": "body", "type": "project", "retention_days": 14},
            headers=admin_headers,
        )
        assert response.status_code == 201

    listed = await api_client.get("/api/admin/announcements", headers=admin_headers)
    assert len(listed.json()["data"]) == 8


async def test_quick_add_project_with_image(api_client: AsyncClient, admin_headers):
    response = await api_client.post(
        "/api/admin/quick-add/projects",
        data={"title": "Drone", "description": "Quadcopter", "technologies": "Python, ROS, Python, "},
        files={"image": ("drone.png", b"\x89PNG\r\n", "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 201
    project = response.json()["data"]
    assert project["technologies"] == ["Python", "ROS"]
    assert project["image_url"].startswith("/uploads/")


async def test_quick_add_executive_rejects_non_image(api_client: AsyncClient, admin_headers):
    response = await api_client.post(
        "/api/admin/quick-add/executives",
        data={"name": "B", "role": "Secretary", "grade": "10"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )

    assert response.status_code == 422
    listed = await api_client.get("/api/admin/executives", headers=admin_headers)
    assert listed.json()["data"] == []


async def test_quick_add_announcement_sets_expiry(api_client: AsyncClient, admin_headers):
    response = await api_client.post(
        "/api/admin/quick-add/announcements",
        data={"title": "Meeting", "content": "Lab 3", "type": "meeting", "retention_days": "5"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["data"]["expires_at"].startswith("2025-07-06")


async def test_upload_image_endpoint(api_client: AsyncClient, admin_headers):
    response = await api_client.post(
        "/api/admin/uploads/image",
        files={"file": ("logo.webp", b"RIFF", "image/webp")},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["url"].endswith(".webp")
