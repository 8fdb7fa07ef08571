from uuid import uuid4
from sqlalchemy import Column, String, Text, DateTime
from config import Base
from utils.utils import utc_now


class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, default="general")  # meeting | project | competition | general
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)
