import logging
from typing import Optional

import httpx
from fastapi.encoders import jsonable_encoder

from services.errors import RecordNotFound, StoreUnavailable
from services.record_store import READ_ONLY_COLUMNS, RecordStore

logger = logging.getLogger(__name__)


class SupabaseRecordStore(RecordStore):
    """Record store backed by a hosted Supabase project (PostgREST API)."""

    def __init__(
        self,
        url: str,
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        if not url or not api_key:
            raise ValueError("Supabase URL and key are required")
        self.client = client or httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
            },
            timeout=timeout,
        )

    async def aclose(self):
        await self.client.aclose()

    async def _request(self, method: str, table: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, f"/{table}", **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Supabase {method} {table} failed with {e.response.status_code}: {e.response.text}"
            )
            raise StoreUnavailable(f"{table} request rejected") from e
        except httpx.HTTPError as e:
            logger.error(f"Supabase {method} {table} failed: {str(e)}")
            raise StoreUnavailable(f"{table} unreachable") from e

    async def select(self, table, order_by="created_at", descending=True, limit=None):
        params = {
            "select": "*",
            "order": f"{order_by}.{'desc' if descending else 'asc'}",
        }
        if limit is not None:
            params["limit"] = str(limit)
        response = await self._request("GET", table, params=params)
        return response.json()

    async def insert(self, table, row):
        response = await self._request(
            "POST",
            table,
            json=[jsonable_encoder(row)],
            headers={"Prefer": "return=representation"},
        )
        rows = response.json()
        if not rows:
            raise StoreUnavailable(f"{table} insert returned no row")
        return rows[0]

    async def update(self, table, record_id, row):
        body = {key: value for key, value in row.items() if key not in READ_ONLY_COLUMNS}
        response = await self._request(
            "PATCH",
            table,
            params={"id": f"eq.{record_id}"},
            json=jsonable_encoder(body),
            headers={"Prefer": "return=representation"},
        )
        rows = response.json()
        if not rows:
            raise RecordNotFound(f"No {table} row with id {record_id}")
        return rows[0]

    async def delete(self, table, record_id):
        await self._request("DELETE", table, params={"id": f"eq.{record_id}"})
