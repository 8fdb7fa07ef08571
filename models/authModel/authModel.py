from sqlalchemy import Column, Integer, String, DateTime
from config import Base
from utils.utils import utc_now


class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # passlib hash
    created_at = Column(DateTime(timezone=True), default=utc_now)
