import os
import tempfile
from datetime import datetime, timezone

# Configure an isolated environment before the app modules read settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_HOSTNAME"] = ""
os.environ["STORE_BACKEND"] = "sql"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BUILD_HOOK_URL"] = ""
os.environ["SITE_TIMEZONE"] = "UTC"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="clubsite-uploads-")

import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient

from config import Base, SessionLocal, engine, get_db
from main import app
from models.authModel.authModel import AdminUser
from services.content_repository import ContentRepository
from services.dependencies import get_content_repository, get_image_storage
from services.image_storage import LocalImageStorage
from services.record_store import SqlRecordStore
from utils.utils import create_admin_session_token, hash_password

# after the June 20 school-year cutoff
FIXED_NOW = datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)

ADMIN_EMAIL = "exec@roboticsclub.org"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture(autouse=True)
def db_session():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def image_storage(tmp_path):
    return LocalImageStorage(str(tmp_path / "uploads"))


@pytest.fixture
def sql_store(db_session):
    return SqlRecordStore(db_session)


@pytest.fixture
def repo(sql_store, image_storage, clock):
    return ContentRepository(sql_store, image_storage=image_storage, clock=clock)


@pytest.fixture
def admin_user(db_session):
    user = AdminUser(email=ADMIN_EMAIL, password=hash_password(ADMIN_PASSWORD))
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_admin_session_token(admin_user.email)}"}


@pytest_asyncio.fixture
async def api_client(clock, image_storage):
    async def _repository(db=Depends(get_db)):
        yield ContentRepository(SqlRecordStore(db), image_storage=image_storage, clock=clock)

    app.dependency_overrides[get_content_repository] = _repository
    app.dependency_overrides[get_image_storage] = lambda: image_storage
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
