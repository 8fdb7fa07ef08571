import asyncio
import sys

from sqlalchemy.orm import Session

from config import Base, SessionLocal, engine, settings
from models.authModel.authModel import AdminUser
from services.content_repository import ContentKind, ContentRepository
from services.record_store import SqlRecordStore
from utils.utils import hash_password


def seed_admin(db: Session):
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        print("ADMIN_EMAIL / ADMIN_PASSWORD not set, skipping admin account")
        return

    email = settings.ADMIN_EMAIL.strip().lower()
    existing = db.query(AdminUser).filter_by(email=email).first()
    if existing:
        existing.password = hash_password(settings.ADMIN_PASSWORD)
    else:
        db.add(AdminUser(email=email, password=hash_password(settings.ADMIN_PASSWORD)))


async def seed_sample_content(db: Session):
    repo = ContentRepository(SqlRecordStore(db))
    if await repo.load_all(ContentKind.PROJECTS, feed=False):
        print("Content already present, skipping sample content")
        return

    await repo.save(
        ContentKind.PROJECTS,
        {
            "title": "Autonomous Rover",
            "description": "A line-following rover built for the regional robotics meet.",
            "technologies": ["Arduino", "C++", "3D Printing"],
        },
    )
    for name, role, grade in [
        ("Sample President", "President", 12),
        ("Sample Vice President", "Vice President", 11),
        ("Sample Treasurer", "Treasurer", 10),
    ]:
        await repo.save(ContentKind.EXECUTIVES, {"name": name, "role": role, "grade": grade})
    await repo.save(
        ContentKind.ANNOUNCEMENTS,
        {
            "title": "First meeting",
            "content": "Kick-off meeting in the engineering lab after school.",
            "type": "meeting",
            "retention_days": 30,
        },
    )


def main():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        seed_admin(db)
        db.commit()
        if "--sample" in sys.argv:
            asyncio.run(seed_sample_content(db))
    finally:
        db.close()
    print("✅ All seeds applied successfully.")


if __name__ == "__main__":
    main()
