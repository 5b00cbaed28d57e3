"""Transfer check, verification, customization and issue schemas."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import EntitySchema
from ...core.constants import (
    CustomizationStatus,
    CustomizationType,
    IssuePriority,
    IssueStatus,
    TransferStatus,
    VerificationStatus,
)


# ── Data transfer checks ─────────────────────────────────────────────────

class TransferCheckCreate(EntitySchema):
    project_id: int
    module_name: str = Field(..., min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    condition: Optional[str] = Field(None, max_length=500)
    table_name_desktop: str = Field(..., min_length=1, max_length=200)
    table_name_web: str = Field(..., min_length=1, max_length=200)
    record_count_desktop: Optional[int] = None
    record_count_web: Optional[int] = None
    match_percentage: Optional[float] = Field(None, ge=0, le=999.99)
    status: TransferStatus = TransferStatus.NOT_STARTED
    is_completed: bool = False
    is_transfer_successful: bool = False
    migrated_date: Optional[datetime] = None
    verified_by: Optional[str] = Field(None, max_length=200)
    comments: Optional[str] = None


class TransferCheckUpdate(EntitySchema):
    transfer_id: Optional[int] = None
    project_id: Optional[int] = None
    module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    condition: Optional[str] = Field(None, max_length=500)
    table_name_desktop: Optional[str] = Field(None, min_length=1, max_length=200)
    table_name_web: Optional[str] = Field(None, min_length=1, max_length=200)
    record_count_desktop: Optional[int] = None
    record_count_web: Optional[int] = None
    match_percentage: Optional[float] = Field(None, ge=0, le=999.99)
    status: Optional[TransferStatus] = None
    is_completed: Optional[bool] = None
    is_transfer_successful: Optional[bool] = None
    migrated_date: Optional[datetime] = None
    verified_by: Optional[str] = Field(None, max_length=200)
    comments: Optional[str] = None


# ── Verification records ─────────────────────────────────────────────────

class VerificationCreate(EntitySchema):
    project_id: int
    module_name: str = Field(..., min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    field_name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    sql_query: Optional[str] = None
    expected_result: Optional[str] = None
    actual_result: Optional[str] = None
    status: VerificationStatus = VerificationStatus.PENDING
    is_verified: bool = False
    verified_by: Optional[str] = Field(None, max_length=200)
    verified_date: Optional[datetime] = None
    comments: Optional[str] = None


class VerificationUpdate(EntitySchema):
    verification_id: Optional[int] = None
    project_id: Optional[int] = None
    module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    field_name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    sql_query: Optional[str] = None
    expected_result: Optional[str] = None
    actual_result: Optional[str] = None
    status: Optional[VerificationStatus] = None
    is_verified: Optional[bool] = None
    verified_by: Optional[str] = Field(None, max_length=200)
    verified_date: Optional[datetime] = None
    comments: Optional[str] = None


# ── Customization points ─────────────────────────────────────────────────

class CustomizationCreate(EntitySchema):
    project_id: int
    requirement_id: Optional[str] = Field(None, max_length=50)
    module_name: Optional[str] = Field(None, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    type: CustomizationType = CustomizationType.OTHER
    status: CustomizationStatus = CustomizationStatus.NOT_STARTED
    is_billable: bool = False
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    priority: Optional[str] = Field(None, max_length=50)
    requested_by: Optional[str] = Field(None, max_length=200)
    approved_by: Optional[str] = Field(None, max_length=200)
    developed_by: Optional[str] = Field(None, max_length=200)
    requested_date: Optional[datetime] = None
    approved_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None


class CustomizationUpdate(EntitySchema):
    customization_id: Optional[int] = None
    project_id: Optional[int] = None
    requirement_id: Optional[str] = Field(None, max_length=50)
    module_name: Optional[str] = Field(None, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    type: Optional[CustomizationType] = None
    status: Optional[CustomizationStatus] = None
    is_billable: Optional[bool] = None
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    priority: Optional[str] = Field(None, max_length=50)
    requested_by: Optional[str] = Field(None, max_length=200)
    approved_by: Optional[str] = Field(None, max_length=200)
    developed_by: Optional[str] = Field(None, max_length=200)
    requested_date: Optional[datetime] = None
    approved_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None


# ── Migration issues ─────────────────────────────────────────────────────

class IssueCreate(EntitySchema):
    issue_id: Optional[str] = Field(None, max_length=50, description="Generated when omitted")
    issue_number: Optional[str] = Field(None, max_length=50)
    project_id: int
    module_name: Optional[str] = Field(None, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    root_cause: Optional[str] = None
    solution: Optional[str] = None
    status: IssueStatus = IssueStatus.OPEN
    priority: IssuePriority = IssuePriority.MEDIUM
    severity: Optional[str] = Field(None, max_length=50)
    category: Optional[str] = Field(None, max_length=100)
    assigned_to: Optional[str] = Field(None, max_length=200)
    reported_by: Optional[str] = Field(None, max_length=200)
    reported_date: Optional[datetime] = None
    resolved_date: Optional[datetime] = None
    closed_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    remarks: Optional[str] = None


class IssueUpdate(EntitySchema):
    issue_id: Optional[str] = None
    issue_number: Optional[str] = Field(None, max_length=50)
    project_id: Optional[int] = None
    module_name: Optional[str] = Field(None, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    root_cause: Optional[str] = None
    solution: Optional[str] = None
    status: Optional[IssueStatus] = None
    priority: Optional[IssuePriority] = None
    severity: Optional[str] = Field(None, max_length=50)
    category: Optional[str] = Field(None, max_length=100)
    assigned_to: Optional[str] = Field(None, max_length=200)
    reported_by: Optional[str] = Field(None, max_length=200)
    reported_date: Optional[datetime] = None
    resolved_date: Optional[datetime] = None
    closed_date: Optional[datetime] = None
    estimated_hours: Optional[float] = None
    actual_hours: Optional[float] = None
    remarks: Optional[str] = None


# ── Manual configurations ────────────────────────────────────────────────

class ManualConfigurationCreate(EntitySchema):
    project_id: int
    module_name: str = Field(..., min_length=1, max_length=200)
    sub_module_name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None


class ManualConfigurationUpdate(EntitySchema):
    id: Optional[int] = None
    module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
