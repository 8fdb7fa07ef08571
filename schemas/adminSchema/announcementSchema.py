# schemas/adminSchema/announcementSchema.py

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.utils import ensure_utc

AnnouncementType = Literal["meeting", "project", "competition", "general"]

MIN_RETENTION_DAYS = 1
MAX_RETENTION_DAYS = 90
DEFAULT_RETENTION_DAYS = 30


class AnnouncementWrite(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    type: AnnouncementType = "general"
    # None on update keeps the stored expiry
    retention_days: Optional[int] = Field(
        default=None, ge=MIN_RETENTION_DAYS, le=MAX_RETENTION_DAYS
    )


class AnnouncementRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    content: str
    type: AnnouncementType
    created_at: datetime
    expires_at: Optional[datetime] = None

    @field_validator("created_at", "expires_at")
    @classmethod
    def _utc(cls, value):
        return ensure_utc(value)
