"""Load, save and delete the site's three record collections.

The repository sits between the HTTP layer and a ``RecordStore``. It owns the
write-time rules (derived executive fields, announcement expiry, image upload
before the row write), validates every row read back from the store into a
typed record, and tells registered listeners when a collection changed.
"""

import asyncio
import inspect
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from schemas.adminSchema.announcementSchema import (
    DEFAULT_RETENTION_DAYS,
    AnnouncementRecord,
    AnnouncementWrite,
)
from schemas.adminSchema.executiveSchema import ExecutiveRecord, ExecutiveWrite
from schemas.adminSchema.projectSchema import ProjectRecord, ProjectWrite
from services.announcement_lifecycle import FEED_LIMIT, compute_expiry, is_live
from services.errors import StoreUnavailable, UploadFailed, ValidationFailed
from services.image_storage import ImageUpload
from services.membership import derive_graduation
from utils.utils import site_today, utc_now

logger = logging.getLogger(__name__)


class ContentKind(str, Enum):
    PROJECTS = "projects"
    EXECUTIVES = "executives"
    ANNOUNCEMENTS = "announcements"


WRITE_SCHEMAS = {
    ContentKind.PROJECTS: ProjectWrite,
    ContentKind.EXECUTIVES: ExecutiveWrite,
    ContentKind.ANNOUNCEMENTS: AnnouncementWrite,
}

RECORD_SCHEMAS = {
    ContentKind.PROJECTS: ProjectRecord,
    ContentKind.EXECUTIVES: ExecutiveRecord,
    ContentKind.ANNOUNCEMENTS: AnnouncementRecord,
}

# display limits applied when loading for the public feed
FEED_LIMITS = {
    ContentKind.ANNOUNCEMENTS: FEED_LIMIT,
}

# kinds whose rows carry an image_url
IMAGE_KINDS = (ContentKind.PROJECTS, ContentKind.EXECUTIVES)


def _error_list(e: ValidationError) -> List[dict]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in e.errors()
    ]


class ContentRepository:
    def __init__(
        self,
        store,
        image_storage=None,
        clock: Callable = utc_now,
        refresh_callbacks: Optional[List[Callable]] = None,
    ):
        self.store = store
        self.image_storage = image_storage
        self.clock = clock
        self.refresh_callbacks = list(refresh_callbacks or [])
        self.collections: Dict[ContentKind, list] = {kind: [] for kind in ContentKind}
        self._feed_mode: Dict[ContentKind, bool] = {kind: True for kind in ContentKind}

    def register_refresh(self, callback: Callable):
        self.refresh_callbacks.append(callback)

    def _deserialize(self, kind: ContentKind, row: dict):
        try:
            return RECORD_SCHEMAS[kind].model_validate(row)
        except ValidationError as e:
            logger.error(f"Malformed {kind.value} row from store: {str(e)}")
            raise StoreUnavailable(f"Store returned a malformed {kind.value} row") from e

    async def load_all(self, kind, feed: bool = True) -> list:
        """Newest first. In feed mode announcements are capped at ``FEED_LIMIT``.

        On failure the collection for ``kind`` is emptied before the error
        propagates, so it never holds stale rows.
        """
        kind = ContentKind(kind)
        self._feed_mode[kind] = feed
        limit = FEED_LIMITS.get(kind) if feed else None
        try:
            rows = await self.store.select(
                kind.value, order_by="created_at", descending=True, limit=limit
            )
            records = [self._deserialize(kind, row) for row in rows]
        except StoreUnavailable as e:
            self.collections[kind] = []
            logger.error(f"Error loading {kind.value}: {str(e)}")
            raise

        self.collections[kind] = records
        return records

    async def load_everything(self, feed: bool = True) -> List[ContentKind]:
        """Load all kinds concurrently. Returns the kinds that failed to load."""
        kinds = list(ContentKind)
        results = await asyncio.gather(
            *(self.load_all(kind, feed=feed) for kind in kinds),
            return_exceptions=True,
        )
        failed = []
        for kind, result in zip(kinds, results):
            if isinstance(result, StoreUnavailable):
                failed.append(kind)
            elif isinstance(result, BaseException):
                raise result
        return failed

    def _validate(self, kind: ContentKind, payload):
        if isinstance(payload, BaseModel):
            data = payload.model_dump()
        else:
            data = dict(payload or {})

        record_id = data.pop("id", None) or None
        try:
            write = WRITE_SCHEMAS[kind].model_validate(data)
        except ValidationError as e:
            raise ValidationFailed(f"Invalid {kind.value} payload", errors=_error_list(e)) from e
        return record_id, write

    async def save(self, kind, payload, image: Optional[ImageUpload] = None):
        """Insert when ``payload`` has no id, full update-by-id otherwise."""
        kind = ContentKind(kind)
        record_id, write = self._validate(kind, payload)
        now = self.clock()
        row = write.model_dump(exclude={"retention_days"})

        if image is not None:
            if kind not in IMAGE_KINDS:
                raise ValidationFailed(f"{kind.value} do not take an image")
            if self.image_storage is None:
                raise UploadFailed("No image storage configured")
            try:
                row["image_url"] = self.image_storage.store(image)
            except UploadFailed as e:
                logger.error(f"Image upload for {kind.value} failed, write aborted: {str(e)}")
                raise

        if kind is ContentKind.EXECUTIVES:
            row["graduation_year"], row["is_alumni"] = derive_graduation(write.grade, site_today(now))
        elif kind is ContentKind.ANNOUNCEMENTS:
            if write.retention_days is not None:
                row["expires_at"] = compute_expiry(write.retention_days, now)
            elif record_id is None:
                row["expires_at"] = compute_expiry(DEFAULT_RETENTION_DAYS, now)

        try:
            if record_id is None:
                saved = await self.store.insert(kind.value, row)
            else:
                saved = await self.store.update(kind.value, record_id, row)
        except StoreUnavailable as e:
            logger.error(f"Error saving {kind.value} {record_id or '(new)'}: {str(e)}")
            raise

        record = self._deserialize(kind, saved)
        logger.info(f"Saved {kind.value} {record.id}")
        await self._after_write(kind)
        return record

    async def delete(self, kind, record_id: str):
        kind = ContentKind(kind)
        try:
            await self.store.delete(kind.value, record_id)
        except StoreUnavailable as e:
            logger.error(f"Error deleting {kind.value} {record_id}: {str(e)}")
            raise

        logger.info(f"Deleted {kind.value} {record_id}")
        await self._after_write(kind)

    async def purge_expired(self, now=None) -> int:
        """Delete every announcement whose expiry has passed.

        Rows deleted before a failing delete stay deleted, so listeners are
        notified whenever at least one row went away.
        """
        now = now or self.clock()
        kind = ContentKind.ANNOUNCEMENTS
        purged = 0
        try:
            rows = await self.store.select(kind.value, order_by="created_at", descending=True)
            expired = [
                record
                for record in (self._deserialize(kind, row) for row in rows)
                if not is_live(record, now)
            ]
            for record in expired:
                await self.store.delete(kind.value, record.id)
                purged += 1
        except StoreUnavailable as e:
            logger.error(f"Error purging expired announcements after {purged} deletes: {str(e)}")
            raise
        finally:
            if purged:
                logger.info(f"Purged {purged} expired announcements")
                await self._after_write(kind)
        return purged

    async def _after_write(self, kind: ContentKind):
        try:
            await self.load_all(kind, feed=self._feed_mode[kind])
        except StoreUnavailable:
            logger.warning(f"Reload of {kind.value} after write failed; collection left empty")

        for callback in self.refresh_callbacks:
            try:
                result = callback(kind)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(f"Refresh callback {callback!r} failed for {kind.value}")
