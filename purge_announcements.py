import asyncio

from sqlalchemy.orm import Session

from config import SessionLocal
from services.content_repository import ContentRepository
from services.record_store import SqlRecordStore


async def purge(db: Session) -> int:
    repo = ContentRepository(SqlRecordStore(db))
    return await repo.purge_expired()


def main():
    db: Session = SessionLocal()
    try:
        purged = asyncio.run(purge(db))
        print(f"✅ Removed {purged} expired announcements.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
