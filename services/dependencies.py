from typing import Callable, List

from fastapi import Depends
from sqlalchemy.orm import Session

from config import get_db, settings
from services.content_repository import ContentRepository
from services.image_storage import LocalImageStorage
from services.record_store import SqlRecordStore
from services.supabase_store import SupabaseRecordStore

# app-wide listeners handed to every repository instance
refresh_callbacks: List[Callable] = []


def register_refresh_callback(callback: Callable):
    refresh_callbacks.append(callback)


def get_image_storage() -> LocalImageStorage:
    return LocalImageStorage(settings.UPLOAD_DIR, base_url=settings.BASE_URL)


async def get_content_repository(
    db: Session = Depends(get_db),
    image_storage: LocalImageStorage = Depends(get_image_storage),
):
    if settings.STORE_BACKEND == "supabase":
        store = SupabaseRecordStore(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            timeout=settings.STORE_TIMEOUT_SECONDS,
        )
        try:
            yield ContentRepository(
                store, image_storage=image_storage, refresh_callbacks=refresh_callbacks
            )
        finally:
            await store.aclose()
    else:
        yield ContentRepository(
            SqlRecordStore(db), image_storage=image_storage, refresh_callbacks=refresh_callbacks
        )
