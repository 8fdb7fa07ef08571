# schemas/adminSchema/projectSchema.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.utils import ensure_utc


class ProjectBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    image_url: str = ""
    technologies: List[str] = []
    github_url: Optional[str] = None
    demo_url: Optional[str] = None


class ProjectWrite(ProjectBase):
    pass


class ProjectRecord(ProjectBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value):
        return ensure_utc(value)
