from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

import os
from dotenv import load_dotenv

load_dotenv()  # loads from .env


class Settings:
    DB_USERNAME = os.getenv("DB_USERNAME")
    DB_PASSWORD = os.getenv("DB_PASSWORD")
    DB_NAME = os.getenv("DB_NAME")
    DB_HOST = os.getenv("DB_HOSTNAME")
    DB_PORT = os.getenv("DB_PORT", "3306")

    # MySQL when DB_* is configured, local SQLite otherwise
    if DB_HOST and DB_NAME:
        SQLALCHEMY_DATABASE_URL = (
            f"mysql+pymysql://{DB_USERNAME}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
        )
    else:
        SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./clubsite.db")

    # "sql" or "supabase"
    STORE_BACKEND = os.getenv("STORE_BACKEND", "sql").lower()
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
    STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "10"))

    # JWT config
    SECRET_KEY = os.getenv("SECRET_KEY")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    SESSION_TTL_MINUTES = int(os.getenv("SESSION_TTL_MINUTES", "720"))

    # Bootstrap admin account, used by seed.py
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    BASE_URL = os.getenv("BASE_URL", "")

    # Static front end rebuild trigger, optional
    BUILD_HOOK_URL = os.getenv("BUILD_HOOK_URL")

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
        if origin.strip()
    ]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Calendar the school-year cutoff is read in, an IANA zone name
    SITE_TIMEZONE = os.getenv("SITE_TIMEZONE", "UTC")


def check_settings(settings):
    """Refuse to serve requests with settings that would leave the admin open."""
    if not settings.SECRET_KEY:
        raise RuntimeError("SECRET_KEY is not set; admin sessions cannot be signed")


settings = Settings()

if settings.SQLALCHEMY_DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
    # one shared connection so every session sees the same in-memory database
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
elif settings.SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URL,
        pool_pre_ping=True,
        pool_recycle=280,
        pool_size=10,
        max_overflow=20,
    )
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


async def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
