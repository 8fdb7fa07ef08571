import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from routes.admin.common import content_http_error, read_image
from schemas.adminSchema.announcementSchema import DEFAULT_RETENTION_DAYS
from schemas.authSchema.authSchema import AdminSession
from services.content_repository import ContentKind, ContentRepository
from services.dependencies import get_content_repository
from services.errors import ContentError
from utils.utils import get_admin_session

router = APIRouter(prefix="/quick-add", tags=["Quick Add"])
logger = logging.getLogger(__name__)


def split_technologies(raw: str) -> List[str]:
    """Comma separated input, blanks dropped, first occurrence kept."""
    technologies = []
    for item in raw.split(","):
        item = item.strip()
        if item and item not in technologies:
            technologies.append(item)
    return technologies


@router.post("/announcements", status_code=201)
async def quick_add_announcement(
    title: str = Form(...),
    content: str = Form(...),
    type: str = Form("general"),
    retention_days: int = Form(DEFAULT_RETENTION_DAYS),
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        announcement = await repo.save(
            ContentKind.ANNOUNCEMENTS,
            {
                "title": title,
                "content": content,
                "type": type,
                "retention_days": retention_days,
            },
        )
        logger.info(f"{session.email} quick-added announcement {announcement.id}")
        return {"message": "Announcement added", "data": announcement}
    except ContentError as e:
        raise content_http_error(e)


@router.post("/projects", status_code=201)
async def quick_add_project(
    title: str = Form(...),
    description: str = Form(...),
    technologies: str = Form(""),
    github_url: Optional[str] = Form(None),
    demo_url: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        project = await repo.save(
            ContentKind.PROJECTS,
            {
                "title": title,
                "description": description,
                "technologies": split_technologies(technologies),
                "github_url": github_url or None,
                "demo_url": demo_url or None,
            },
            image=await read_image(image),
        )
        logger.info(f"{session.email} quick-added project {project.id}")
        return {"message": "Project added", "data": project}
    except ContentError as e:
        raise content_http_error(e)


@router.post("/executives", status_code=201)
async def quick_add_executive(
    name: str = Form(...),
    role: str = Form(...),
    grade: int = Form(9),
    image: Optional[UploadFile] = File(None),
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        executive = await repo.save(
            ContentKind.EXECUTIVES,
            {"name": name, "role": role, "grade": grade},
            image=await read_image(image),
        )
        logger.info(f"{session.email} quick-added executive {executive.id}")
        return {"message": "Executive added", "data": executive}
    except ContentError as e:
        raise content_http_error(e)
