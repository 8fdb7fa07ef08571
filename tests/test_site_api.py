from datetime import timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_root_routes(api_client: AsyncClient):
    assert (await api_client.get("/")).json() == {"message": "Hello World"}
    assert (await api_client.get("/api")).status_code == 200


async def test_site_groups_roster_and_filters_announcements(api_client: AsyncClient, sql_store, clock):
    now = clock()
    for name, role, graduation_year in [
        ("Pat", "Treasurer", now.year + 1),
        ("Sam", "President", now.year + 2),
        ("Lee", "Vice President", now.year + 1),
        ("Old", "President", now.year - 2),
        ("Grad", "Secretary", now.year),
    ]:
        await sql_store.insert(
            "executives",
            {
                "name": name,
                "role": role,
                "grade": 12,
                "graduation_year": graduation_year,
                "is_alumni": False,
            },
        )
    await sql_store.insert(
        "projects", {"title": "Rover", "description": "Robot", "technologies": ["C++"]}
    )
    await sql_store.insert(
        "announcements",
        {"title": "Expired", "content": "x", "type": "general", "expires_at": now - timedelta(days=1)},
    )
    await sql_store.insert(
        "announcements",
        {"title": "Live", "content": "y", "type": "meeting", "expires_at": now + timedelta(days=3)},
    )

    response = await api_client.get("/api/site")

    assert response.status_code == 200
    body = response.json()
    data = body["data"]
    assert body["unavailable"] == []
    assert [executive["name"] for executive in data["executives"]["current"]] == ["Sam", "Lee", "Pat"]
    # alumni status comes from the date, not the stored flag
    assert [executive["name"] for executive in data["executives"]["alumni"]] == ["Grad", "Old"]
    assert [announcement["title"] for announcement in data["announcements"]] == ["Live"]
    assert data["projects"][0]["technologies"] == ["C++"]
    assert data["stats"] == {"projects": 1, "current_executives": 3, "alumni": 2}


async def test_site_feed_takes_six_newest_before_filtering(api_client: AsyncClient, sql_store, clock):
    now = clock()
    for index in range(8):
        await sql_store.insert(
            "announcements",
            {
                "title": f"A{index}",
                "content": "body",
                "type": "general",
                "created_at": now - timedelta(hours=8 - index),
                # the two newest are already expired
                "expires_at": now - timedelta(minutes=1) if index >= 6 else None,
            },
        )

    response = await api_client.get("/api/site")

    titles = [announcement["title"] for announcement in response.json()["data"]["announcements"]]
    assert titles == ["A5", "A4", "A3", "A2"]
