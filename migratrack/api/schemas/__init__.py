"""Pydantic schemas for API request/response models."""

from .project import (
    CloneResponse,
    DashboardResponse,
    ProjectCreate,
    ProjectOrder,
    ProjectResponse,
    ProjectUpdate,
    ReorderResponse,
)
from .checklist import (
    CustomizationCreate,
    CustomizationUpdate,
    IssueCreate,
    IssueUpdate,
    ManualConfigurationCreate,
    ManualConfigurationUpdate,
    TransferCheckCreate,
    TransferCheckUpdate,
    VerificationCreate,
    VerificationUpdate,
)
from .fields import FieldMasterCreate, FieldMasterUpdate, ModuleDataCreate, ModuleDataUpdate
from .reference import (
    ModuleGroupCreate,
    ModuleGroupUpdate,
    ModuleMasterCreate,
    ModuleMasterUpdate,
    QuickWorkCreate,
    QuickWorkUpdate,
    WebTableCreate,
    WebTableUpdate,
)
from .registry import DatabaseDetailCreate, DatabaseDetailUpdate, ServerCreate, ServerUpdate
from .document import EmailUpdate

__all__ = [
    'CloneResponse',
    'DashboardResponse',
    'ProjectCreate',
    'ProjectOrder',
    'ProjectResponse',
    'ProjectUpdate',
    'ReorderResponse',
    'CustomizationCreate',
    'CustomizationUpdate',
    'IssueCreate',
    'IssueUpdate',
    'ManualConfigurationCreate',
    'ManualConfigurationUpdate',
    'TransferCheckCreate',
    'TransferCheckUpdate',
    'VerificationCreate',
    'VerificationUpdate',
    'FieldMasterCreate',
    'FieldMasterUpdate',
    'ModuleDataCreate',
    'ModuleDataUpdate',
    'ModuleMasterCreate',
    'ModuleMasterUpdate',
    'WebTableCreate',
    'WebTableUpdate',
    'ModuleGroupCreate',
    'ModuleGroupUpdate',
    'QuickWorkCreate',
    'QuickWorkUpdate',
    'ServerCreate',
    'ServerUpdate',
    'DatabaseDetailCreate',
    'DatabaseDetailUpdate',
    'EmailUpdate',
]
