"""
Entity data-access services.

Exports:
- BaseService: Shared logging and row conversion
- EntityRepository: Generic CRUD over one ORM model
- Checklist services: TransferCheckService, VerificationService,
  CustomizationService, IssueService, ManualConfigurationService
- Field services: FieldMasterService, LookupService, ModuleDataService
- Reference services: ModuleMasterService, ModuleGroupService,
  WebTableService, QuickWorkService
- Registry services: ServerDataService, DatabaseDetailService
- Document services: EmailService, ExcelDataService
"""

from .base import BaseService
from .repository import EntityRepository
from .checklists import (
    TransferCheckService,
    VerificationService,
    CustomizationService,
    IssueService,
    ManualConfigurationService,
    make_issue_id,
)
from .fields import (
    FieldKind,
    FieldMasterService,
    LookupService,
    ModuleDataService,
    coerce_field_value,
    resolve_field_kind,
)
from .reference import ModuleGroupService, ModuleMasterService, QuickWorkService, WebTableService
from .registry import DatabaseDetailService, ServerDataService
from .documents import EmailService, ExcelDataService

__all__ = [
    "BaseService",
    "EntityRepository",
    "TransferCheckService",
    "VerificationService",
    "CustomizationService",
    "IssueService",
    "ManualConfigurationService",
    "make_issue_id",
    "FieldKind",
    "FieldMasterService",
    "LookupService",
    "ModuleDataService",
    "coerce_field_value",
    "resolve_field_kind",
    "ModuleMasterService",
    "WebTableService",
    "ModuleGroupService",
    "QuickWorkService",
    "ServerDataService",
    "DatabaseDetailService",
    "EmailService",
    "ExcelDataService",
]
