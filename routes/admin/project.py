import logging

from fastapi import APIRouter, Depends

from routes.admin.common import content_http_error
from schemas.adminSchema.projectSchema import ProjectWrite
from schemas.authSchema.authSchema import AdminSession
from services.content_repository import ContentKind, ContentRepository
from services.dependencies import get_content_repository
from services.errors import ContentError
from utils.utils import get_admin_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/projects")
async def fetch_projects(
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        projects = await repo.load_all(ContentKind.PROJECTS, feed=False)
        return {"message": "Projects fetched successfully", "data": projects}
    except ContentError as e:
        raise content_http_error(e)


@router.post("/projects", status_code=201)
async def create_project(
    payload: ProjectWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        project = await repo.save(ContentKind.PROJECTS, payload)
        logger.info(f"{session.email} created project {project.id}")
        return {"message": "Project created successfully", "data": project}
    except ContentError as e:
        raise content_http_error(e)


@router.put("/projects/{project_id}")
async def update_project(
    project_id: str,
    payload: ProjectWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        project = await repo.save(ContentKind.PROJECTS, {**payload.model_dump(), "id": project_id})
        logger.info(f"{session.email} updated project {project_id}")
        return {"message": "Project updated successfully", "data": project}
    except ContentError as e:
        raise content_http_error(e)


@router.delete("/projects/{project_id}")
async def delete_project(
    project_id: str,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        await repo.delete(ContentKind.PROJECTS, project_id)
        logger.info(f"{session.email} deleted project {project_id}")
        return {"message": "Project deleted successfully", "id": project_id}
    except ContentError as e:
        raise content_http_error(e)
