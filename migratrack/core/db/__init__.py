"""
Database module for MigraTrack.

Exports:
- DatabaseManager: Database connection and session management
- wait_for_db: Database availability checker with retry logic
- Models: Project, DataTransferCheck, VerificationRecord, CustomizationPoint,
  MigrationIssue, FieldMaster, LookupData, DynamicModuleData, ModuleMaster,
  WebTable, ProjectEmail, ExcelData, ModuleGroup, ManualConfiguration,
  QuickWork, ServerData, DatabaseDetail
- Base: SQLAlchemy declarative base
"""

from .db import DatabaseManager, wait_for_db
from .models import (
    Base,
    Project,
    DataTransferCheck,
    VerificationRecord,
    CustomizationPoint,
    MigrationIssue,
    FieldMaster,
    LookupData,
    DynamicModuleData,
    ModuleMaster,
    WebTable,
    ProjectEmail,
    ExcelData,
    ModuleGroup,
    ManualConfiguration,
    QuickWork,
    ServerData,
    DatabaseDetail,
)

__all__ = [
    # Database management
    "DatabaseManager",
    "wait_for_db",

    # ORM models
    "Base",
    "Project",
    "DataTransferCheck",
    "VerificationRecord",
    "CustomizationPoint",
    "MigrationIssue",
    "FieldMaster",
    "LookupData",
    "DynamicModuleData",
    "ModuleMaster",
    "WebTable",
    "ProjectEmail",
    "ExcelData",
    "ModuleGroup",
    "ManualConfiguration",
    "QuickWork",
    "ServerData",
    "DatabaseDetail",
]
