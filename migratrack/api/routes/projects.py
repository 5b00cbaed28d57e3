"""Project management API routes (FastAPI).

Provides CRUD operations, display reordering, the progress dashboard and
cloning of one project's checklists into another.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..core import NotFoundError, ValidationError
from ..deps import (
    get_dashboard_aggregator,
    get_project_cloner,
    get_project_manager,
)
from ..schemas import (
    CloneResponse,
    DashboardResponse,
    ProjectCreate,
    ProjectOrder,
    ProjectResponse,
    ProjectUpdate,
    ReorderResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


# ── Routes ───────────────────────────────────────────────────────────────

@router.get("", response_model=list[ProjectResponse])
async def list_projects(pm=Depends(get_project_manager)):
    """List active projects in display order."""
    return [ProjectResponse(**p) for p in pm.list_projects()]


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(data: ProjectCreate, pm=Depends(get_project_manager)):
    """Create a new project at the top of the list."""
    try:
        project = pm.create_project(data.model_dump(exclude_none=True))
    except ValueError as e:
        raise ValidationError(str(e))
    return ProjectResponse(**project)


@router.put("/reorder", response_model=ReorderResponse)
async def reorder_projects(orders: list[ProjectOrder], pm=Depends(get_project_manager)):
    """Persist a new display order for the given projects."""
    pairs = [(o.project_id, o.display_order) for o in orders]
    if not pm.reorder_projects(pairs):
        raise HTTPException(status_code=500, detail="Failed to reorder projects")
    return ReorderResponse(success=True, updated=[pid for pid, _ in pairs])


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: int, pm=Depends(get_project_manager)):
    """Get project details by ID."""
    project = pm.get_project(project_id)
    if not project:
        raise NotFoundError("Project", project_id)
    return ProjectResponse(**project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    pm=Depends(get_project_manager),
):
    """Update project details. Only supplied fields change."""
    if data.project_id is not None and data.project_id != project_id:
        raise ValidationError("Project id in body does not match the URL")

    changes = data.model_dump(exclude_unset=True)
    changes.pop("project_id", None)
    try:
        project = pm.update_project(project_id, changes)
    except ValueError as e:
        raise ValidationError(str(e))
    if not project:
        raise NotFoundError("Project", project_id)
    return ProjectResponse(**project)


@router.delete("/{project_id}", status_code=204)
async def delete_project(project_id: int, pm=Depends(get_project_manager)):
    """Deactivate a project. Its records are kept."""
    if not pm.delete_project(project_id):
        raise NotFoundError("Project", project_id)
    return Response(status_code=204)


@router.get("/{project_id}/dashboard", response_model=DashboardResponse)
async def project_dashboard(
    project_id: int,
    pm=Depends(get_project_manager),
    aggregator=Depends(get_dashboard_aggregator),
):
    """Transfer, verification and issue progress for one project."""
    if not pm.project_exists(project_id):
        raise NotFoundError("Project", project_id)
    return DashboardResponse(**aggregator.summarize(project_id))


@router.post("/{source_project_id}/clone/{target_project_id}", response_model=CloneResponse)
async def clone_project(
    source_project_id: int,
    target_project_id: int,
    cloner=Depends(get_project_cloner),
):
    """Copy checks, verifications, customizations and issues into another project."""
    try:
        cloned = cloner.clone(source_project_id, target_project_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Clone failed: {e}")

    if not cloned:
        raise HTTPException(status_code=404, detail="Source or target project not found")

    return CloneResponse(
        success=True,
        message=f"Project {source_project_id} cloned into {target_project_id}",
        source_project_id=source_project_id,
        target_project_id=target_project_id,
    )
