from uuid import uuid4
from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime
from config import Base
from utils.utils import utc_now


class Executive(Base):
    __tablename__ = "executives"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    grade = Column(Integer, nullable=False)
    role = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=False, default="")
    # derived from grade on every write
    graduation_year = Column(Integer, nullable=False)
    is_alumni = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
