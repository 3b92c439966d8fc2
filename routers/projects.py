# routers/projects.py
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from models import User, Project
from schemas import (
    ProjectCreate, ProjectUpdate, ProjectRead, ProjectPage, ProjectDetail,
    ProjectOptions, ProjectMutationResult,
)
from enums import ProjectStatus, ProjectPriority
from api_utils import respond_item
from dependencies import ListParams
from deps import get_current_active_user, get_owned_project
from services.project_query import ProjectFilters, fetch_project_page
from services.flash import flash_success, pop_flash

router = APIRouter(prefix="/projects", tags=["projects"])
logger = logging.getLogger("uvicorn")

def _options() -> dict:
    return {"statuses": ProjectStatus.options(), "priorities": ProjectPriority.options()}

def to_project_read(m: Project) -> ProjectRead:
    return ProjectRead.model_validate(m)

@router.get("", response_model=ProjectPage)
async def list_projects(
    params: ListParams = Depends(),
    user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_session),
):
    filters = ProjectFilters.from_params(params.as_dict())
    items, pagination = await fetch_project_page(session, user.id, filters)
    logger.debug(f"[projects] user={user.id} filters={filters} total={pagination['total']}")
    return {
        "data": [to_project_read(p) for p in items],
        "pagination": pagination,
        "filters": filters.echo(page=pagination["current_page"]),
        "flash": pop_flash(user.id),
        **_options(),
    }

@router.get("/options", response_model=ProjectOptions)
async def project_options(user: User = Depends(get_current_active_user)):
    return _options()

@router.post("", response_model=ProjectMutationResult, status_code=201)
async def create_project(
    payload: ProjectCreate,
    user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_session),
):
    obj = Project(user_id=user.id, **payload.model_dump())
    session.add(obj)
    await session.commit()
    message = "Project succesvol aangemaakt."
    flash_success(user.id, message)
    logger.info(f"[projects] created #{obj.id} for user {user.id}")
    return {"message": message, "project": to_project_read(obj)}

@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project: Project = Depends(get_owned_project)):
    return respond_item(project, lambda m: ProjectDetail(project=to_project_read(m), **_options()))

@router.put("/{project_id}", response_model=ProjectMutationResult)
async def update_project(
    payload: ProjectUpdate,
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
):
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(project, k, v)
    await session.commit()
    message = "Project succesvol bijgewerkt."
    flash_success(project.user_id, message)
    logger.info(f"[projects] updated #{project.id}")
    return {"message": message, "project": to_project_read(project)}

@router.delete("/{project_id}", response_model=ProjectMutationResult)
async def delete_project(
    project: Project = Depends(get_owned_project),
    session: AsyncSession = Depends(get_session),
):
    project_id, owner_id = project.id, project.user_id
    await session.delete(project)
    await session.commit()
    message = "Project succesvol verwijderd."
    flash_success(owner_id, message)
    logger.info(f"[projects] deleted #{project_id}")
    return {"message": message}
