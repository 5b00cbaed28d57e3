"""Project request/response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .base import EntitySchema


class ProjectCreate(EntitySchema):
    """Create project request."""
    client_name: str = Field(..., description="Client name", min_length=1, max_length=200)
    client_code: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    project_type: Optional[str] = Field(None, max_length=100)
    status: str = Field("Active", max_length=50)
    start_date: Optional[datetime] = None
    target_completion_date: Optional[datetime] = None
    actual_completion_date: Optional[datetime] = None
    live_date: Optional[datetime] = None
    project_manager: Optional[str] = Field(None, max_length=200)
    technical_lead: Optional[str] = Field(None, max_length=200)
    budget: Optional[float] = None
    implementation_coordinator: Optional[str] = Field(None, max_length=200)
    coordinator_email: Optional[str] = Field(None, max_length=200)
    server_id_desktop: Optional[int] = None
    database_id_desktop: Optional[int] = None
    server_id_web: Optional[int] = None
    database_id_web: Optional[int] = None


class ProjectUpdate(EntitySchema):
    """Update project request. Only supplied fields change."""
    project_id: Optional[int] = Field(None, description="Must match the route id when given")
    client_name: Optional[str] = Field(None, min_length=1, max_length=200)
    client_code: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    project_type: Optional[str] = Field(None, max_length=100)
    status: Optional[str] = Field(None, max_length=50)
    start_date: Optional[datetime] = None
    target_completion_date: Optional[datetime] = None
    actual_completion_date: Optional[datetime] = None
    live_date: Optional[datetime] = None
    project_manager: Optional[str] = Field(None, max_length=200)
    technical_lead: Optional[str] = Field(None, max_length=200)
    budget: Optional[float] = None
    implementation_coordinator: Optional[str] = Field(None, max_length=200)
    coordinator_email: Optional[str] = Field(None, max_length=200)
    server_id_desktop: Optional[int] = None
    database_id_desktop: Optional[int] = None
    server_id_web: Optional[int] = None
    database_id_web: Optional[int] = None


class ProjectResponse(BaseModel):
    """Project response model."""
    project_id: int
    client_name: str
    client_code: Optional[str] = None
    description: str = ""
    project_type: Optional[str] = None
    status: str = "Active"
    start_date: Optional[str] = None
    target_completion_date: Optional[str] = None
    actual_completion_date: Optional[str] = None
    live_date: Optional[str] = None
    project_manager: Optional[str] = None
    technical_lead: Optional[str] = None
    budget: Optional[float] = None
    implementation_coordinator: Optional[str] = None
    coordinator_email: Optional[str] = None
    server_id_desktop: Optional[int] = None
    database_id_desktop: Optional[int] = None
    server_id_web: Optional[int] = None
    database_id_web: Optional[int] = None
    display_order: int = 0
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProjectOrder(BaseModel):
    project_id: int
    display_order: int


class DashboardResponse(BaseModel):
    """Progress summary for one project."""
    total_modules: int
    completed_migrations: int
    pending_migrations: int
    total_issues: int
    completion_percentage: float
    total_transfers: int
    completed_transfers: int
    transfer_progress: float
    total_verifications: int
    completed_verifications: int
    verification_progress: float


class CloneResponse(BaseModel):
    success: bool = True
    message: str
    source_project_id: int
    target_project_id: int


class ReorderResponse(BaseModel):
    success: bool
    updated: List[int] = Field(default_factory=list)
