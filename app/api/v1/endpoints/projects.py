"""Project API: thin routes delegating to ProjectCreateService, ProjectQueryService and ProjectRepository."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from app.api.v1.dependencies import (
    get_project_create_service,
    get_project_query_service,
    get_project_repo_for_write,
)
from app.application.dtos.project import ProjectAssets, ProjectDetails
from app.application.dtos.upload import UploadRequest
from app.application.use_cases.projects import (
    ProjectCreateService,
    ProjectQueryService,
)
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.infrastructure.persistence.repositories import ProjectRepository
from app.schemas.project import (
    ProjectDeleteResponse,
    ProjectResponse,
    ProjectSummaryResponse,
)

router = APIRouter()


async def _read_upload(file: UploadFile | None) -> UploadRequest | None:
    """Read a multipart part into memory. Missing or nameless parts count as absent."""
    if file is None or not file.filename:
        return None
    return UploadRequest(
        data=await file.read(),
        original_name=file.filename,
        mime_type=file.content_type or "application/octet-stream",
    )


def _parse_area(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValidationException("areaSqFt must be a number", field="areaSqFt") from e


@router.get("", response_model=list[ProjectSummaryResponse])
async def list_projects(
    query_svc: ProjectQueryService = Depends(get_project_query_service),
):
    """List projects (newest first) with inline base64 thumbnails."""
    items = await query_svc.list_projects()
    return [ProjectSummaryResponse.from_item(i) for i in items]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    query_svc: ProjectQueryService = Depends(get_project_query_service),
):
    """Get full project details."""
    try:
        project = await query_svc.get_project(project_id)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=404, detail="Project not found") from e
    return ProjectResponse.from_result(project)


@router.post("", response_model=ProjectResponse, status_code=201)
@limit_writes
async def create_project(
    request: Request,
    title: Annotated[str, Form()],
    location: Annotated[str, Form()],
    architect_name: Annotated[str | None, Form(alias="architectName")] = None,
    area_sq_ft: Annotated[str | None, Form(alias="areaSqFt")] = None,
    description: Annotated[str | None, Form()] = None,
    youtube_url: Annotated[str | None, Form(alias="youtubeUrl")] = None,
    thumbnail: Annotated[UploadFile | None, File()] = None,
    main_image: Annotated[UploadFile | None, File(alias="mainImage")] = None,
    images: Annotated[list[UploadFile] | None, File()] = None,
    model: Annotated[UploadFile | None, File()] = None,
    video: Annotated[UploadFile | None, File()] = None,
    create_svc: ProjectCreateService = Depends(get_project_create_service),
):
    """Create a project: thumbnail stored inline, other assets uploaded to storage."""
    try:
        details = ProjectDetails(
            title=title,
            location=location,
            architect_name=architect_name or None,
            area_sq_ft=_parse_area(area_sq_ft),
            description=description,
            youtube_url=youtube_url or None,
        )
        gallery = [await _read_upload(f) for f in images or []]
        assets = ProjectAssets(
            thumbnail=await _read_upload(thumbnail),
            main_image=await _read_upload(main_image),
            images=[g for g in gallery if g is not None],
            model=await _read_upload(model),
            video=await _read_upload(video),
        )
        created = await create_svc.create_project(details, assets)
    except ValidationException as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    return ProjectResponse.from_result(created)


@router.delete("/{project_id}", response_model=ProjectDeleteResponse)
@limit_writes
async def delete_project(
    request: Request,
    project_id: str,
    project_repo: ProjectRepository = Depends(get_project_repo_for_write),
):
    """Delete the project record. Uploaded assets stay in storage."""
    deleted = await project_repo.delete_by_id(project_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectDeleteResponse()
