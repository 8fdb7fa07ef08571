import logging
from typing import List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.adminModel.announcementModel import Announcement
from models.adminModel.executiveModel import Executive
from models.adminModel.projectModel import Project
from services.errors import RecordNotFound, StoreUnavailable

logger = logging.getLogger(__name__)

# store-assigned columns, never written by callers on update
READ_ONLY_COLUMNS = ("id", "created_at")


class RecordStore:
    """Per-table row storage: select, insert, update-by-id and delete-by-id.

    Rows are plain dicts keyed by column name. Every failure is raised as
    ``StoreUnavailable``; updating an id the store does not hold raises
    ``RecordNotFound``.
    """

    async def select(
        self,
        table: str,
        order_by: str = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[dict]:
        raise NotImplementedError

    async def insert(self, table: str, row: dict) -> dict:
        raise NotImplementedError

    async def update(self, table: str, record_id: str, row: dict) -> dict:
        raise NotImplementedError

    async def delete(self, table: str, record_id: str) -> None:
        raise NotImplementedError


class SqlRecordStore(RecordStore):
    TABLES = {
        "projects": Project,
        "executives": Executive,
        "announcements": Announcement,
    }

    def __init__(self, db: Session):
        self.db = db

    def _model(self, table: str):
        try:
            return self.TABLES[table]
        except KeyError:
            raise ValueError(f"Unknown table: {table}")

    @staticmethod
    def _as_row(obj) -> dict:
        return {column.name: getattr(obj, column.name) for column in obj.__table__.columns}

    async def select(self, table, order_by="created_at", descending=True, limit=None):
        model = self._model(table)
        try:
            column = getattr(model, order_by)
            query = self.db.query(model).order_by(desc(column) if descending else asc(column))
            if limit is not None:
                query = query.limit(limit)
            return [self._as_row(obj) for obj in query.all()]
        except SQLAlchemyError as e:
            logger.error(f"Error selecting from {table}: {str(e)}")
            raise StoreUnavailable(f"Could not load {table}") from e

    async def insert(self, table, row):
        model = self._model(table)
        columns = model.__table__.columns.keys()
        try:
            obj = model(**{key: value for key, value in row.items() if key in columns})
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            return self._as_row(obj)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error inserting into {table}: {str(e)}")
            raise StoreUnavailable(f"Could not insert into {table}") from e

    async def update(self, table, record_id, row):
        model = self._model(table)
        columns = model.__table__.columns.keys()
        try:
            obj = self.db.query(model).filter(model.id == record_id).first()
            if not obj:
                raise RecordNotFound(f"No {table} row with id {record_id}")

            for key, value in row.items():
                if key in columns and key not in READ_ONLY_COLUMNS:
                    setattr(obj, key, value)
            self.db.commit()
            self.db.refresh(obj)
            return self._as_row(obj)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating {table} {record_id}: {str(e)}")
            raise StoreUnavailable(f"Could not update {table}") from e

    async def delete(self, table, record_id):
        model = self._model(table)
        try:
            self.db.query(model).filter(model.id == record_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting {table} {record_id}: {str(e)}")
            raise StoreUnavailable(f"Could not delete from {table}") from e
