import logging

from fastapi import APIRouter, Depends

from routes.admin.common import content_http_error
from schemas.adminSchema.announcementSchema import AnnouncementWrite
from schemas.authSchema.authSchema import AdminSession
from services.content_repository import ContentKind, ContentRepository
from services.dependencies import get_content_repository
from services.errors import ContentError
from utils.utils import get_admin_session

router = APIRouter()
logger = logging.getLogger(__name__)


# GET All Announcements, expired ones included
@router.get("/announcements")
async def fetch_announcements(
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        announcements = await repo.load_all(ContentKind.ANNOUNCEMENTS, feed=False)
        return {"message": "Announcements fetched successfully", "data": announcements}
    except ContentError as e:
        raise content_http_error(e)


# CREATE Announcement
@router.post("/announcements", status_code=201)
async def create_announcement(
    payload: AnnouncementWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        announcement = await repo.save(ContentKind.ANNOUNCEMENTS, payload)
        logger.info(f"{session.email} created announcement {announcement.id}")
        return {"message": "Announcement created successfully", "data": announcement}
    except ContentError as e:
        raise content_http_error(e)


# UPDATE Announcement by ID
@router.put("/announcements/{announcement_id}")
async def update_announcement(
    announcement_id: str,
    payload: AnnouncementWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        announcement = await repo.save(
            ContentKind.ANNOUNCEMENTS, {**payload.model_dump(), "id": announcement_id}
        )
        logger.info(f"{session.email} updated announcement {announcement_id}")
        return {"message": "Announcement updated successfully", "data": announcement}
    except ContentError as e:
        raise content_http_error(e)


# DELETE Announcement by ID
@router.delete("/announcements/{announcement_id}")
async def delete_announcement(
    announcement_id: str,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        await repo.delete(ContentKind.ANNOUNCEMENTS, announcement_id)
        logger.info(f"{session.email} deleted announcement {announcement_id}")
        return {"message": "Announcement deleted successfully", "id": announcement_id}
    except ContentError as e:
        raise content_http_error(e)


# DELETE every expired Announcement
@router.post("/announcements/purge-expired")
async def purge_expired_announcements(
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        purged = await repo.purge_expired()
        logger.info(f"{session.email} purged {purged} expired announcements")
        return {"message": "Expired announcements purged", "count": purged}
    except ContentError as e:
        raise content_http_error(e)
