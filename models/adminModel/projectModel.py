from uuid import uuid4
from sqlalchemy import Column, String, Text, DateTime, JSON
from config import Base
from utils.utils import utc_now


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False, default="")
    technologies = Column(JSON, nullable=False, default=list)
    github_url = Column(String(500), nullable=True)
    demo_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
