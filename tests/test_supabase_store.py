import json
from datetime import datetime, timezone

import httpx
import pytest

from services.errors import RecordNotFound, StoreUnavailable
from services.supabase_store import SupabaseRecordStore

pytestmark = pytest.mark.asyncio

BASE_URL = "https://example.supabase.co/rest/v1"


def make_store(handler):
    client = httpx.AsyncClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        headers={"apikey": "anon", "Authorization": "Bearer anon"},
    )
    return SupabaseRecordStore("https://example.supabase.co", "anon", client=client)


async def test_select_orders_and_limits():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["apikey"] = request.headers["apikey"]
        return httpx.Response(200, json=[{"id": "1"}])

    store = make_store(handler)
    rows = await store.select("announcements", limit=6)
    await store.aclose()

    assert rows == [{"id": "1"}]
    assert seen["path"] == "/rest/v1/announcements"
    assert seen["params"] == {"select": "*", "order": "created_at.desc", "limit": "6"}
    assert seen["apikey"] == "anon"


async def test_insert_returns_representation():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["prefer"] = request.headers["Prefer"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json=[{"id": "new-id", **seen["body"][0]}])

    store = make_store(handler)
    expires_at = datetime(2025, 8, 1, tzinfo=timezone.utc)
    row = await store.insert(
        "announcements", {"title": "T", "content": "C", "type": "general", "expires_at": expires_at}
    )

    assert seen["method"] == "POST"
    assert seen["prefer"] == "return=representation"
    assert seen["body"][0]["expires_at"].startswith("2025-08-01T00:00:00")
    assert row["id"] == "new-id"


async def test_update_filters_by_id_and_drops_read_only_columns():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["params"] = dict(request.url.params)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"id": "abc", "title": "New"}])

    store = make_store(handler)
    row = await store.update("projects", "abc", {"id": "abc", "created_at": "x", "title": "New"})

    assert seen["method"] == "PATCH"
    assert seen["params"] == {"id": "eq.abc"}
    assert seen["body"] == {"title": "New"}
    assert row["title"] == "New"


async def test_update_of_missing_row_raises_record_not_found():
    store = make_store(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(RecordNotFound):
        await store.update("projects", "gone", {"title": "New"})


async def test_rejected_request_raises_store_unavailable():
    store = make_store(
        lambda request: httpx.Response(400, json={"message": "invalid input syntax for type uuid"})
    )

    with pytest.raises(StoreUnavailable):
        await store.update("projects", "not-a-uuid", {"title": "New"})


async def test_network_failure_raises_store_unavailable():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    store = make_store(handler)

    with pytest.raises(StoreUnavailable):
        await store.select("projects")


async def test_delete_filters_by_id():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["params"] = dict(request.url.params)
        return httpx.Response(204)

    store = make_store(handler)
    await store.delete("executives", "abc")

    assert seen == {"method": "DELETE", "params": {"id": "eq.abc"}}


async def test_missing_configuration_is_rejected():
    with pytest.raises(ValueError):
        SupabaseRecordStore("", "")
