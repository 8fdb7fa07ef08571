from datetime import datetime, timedelta
from typing import Iterable, List

from schemas.adminSchema.announcementSchema import MAX_RETENTION_DAYS, MIN_RETENTION_DAYS
from services.errors import ValidationFailed

# the landing page shows the six newest announcements
FEED_LIMIT = 6


def compute_expiry(retention_days: int, now: datetime) -> datetime:
    if isinstance(retention_days, bool) or not isinstance(retention_days, int):
        raise ValidationFailed("retention_days must be an integer")
    if not MIN_RETENTION_DAYS <= retention_days <= MAX_RETENTION_DAYS:
        raise ValidationFailed(
            f"retention_days must be between {MIN_RETENTION_DAYS} and {MAX_RETENTION_DAYS}"
        )
    return now + timedelta(days=retention_days)


def is_live(announcement, now: datetime) -> bool:
    expires_at = announcement.expires_at
    return expires_at is None or expires_at > now


def live_feed(announcements: Iterable, now: datetime) -> List:
    return [announcement for announcement in announcements if is_live(announcement, now)]
