from datetime import datetime
from pydantic import BaseModel, EmailStr


class SignInAdmin(BaseModel):
    email: EmailStr
    password: str


class AdminCreate(BaseModel):
    email: EmailStr
    password: str
    confirm_password: str


class AdminSession(BaseModel):
    """Explicit session context handed to admin routes."""

    email: str
    is_admin: bool = False
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
