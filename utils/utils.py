from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import HTTPException, Request, status
from jose import JWTError, jwt
from passlib.context import CryptContext

from config import settings
from schemas.authSchema.authSchema import AdminSession


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive datetimes coming back from the store as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def site_today(now: Optional[datetime] = None) -> date:
    """Calendar date at ``now`` in the site's configured timezone."""
    now = ensure_utc(now or utc_now())
    if settings.SITE_TIMEZONE.upper() == "UTC":
        return now.date()
    return now.astimezone(ZoneInfo(settings.SITE_TIMEZONE)).date()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = utc_now() + (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.SESSION_TTL_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str):
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")


def create_admin_session_token(email: str) -> str:
    return create_access_token(data={"sub": email, "is_admin": True})


def _token_from_request(request: Request) -> Optional[str]:
    token = request.cookies.get("access_token")
    if token:
        return token
    header = request.headers.get("Authorization")
    if header and header.lower().startswith("bearer "):
        return header[7:].strip()
    return header


async def get_admin_session(request: Request) -> AdminSession:
    token = _token_from_request(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No access token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(token)
    email = payload.get("sub")
    if not email or not payload.get("is_admin"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AdminSession(
        email=email,
        is_admin=True,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
