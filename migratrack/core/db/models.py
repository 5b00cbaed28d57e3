"""
SQLAlchemy ORM Models for MigraTrack

Migration engagement tracking models:
- Project: Client migration engagement (root aggregate)
- DataTransferCheck: Desktop-table vs web-table row count comparison
- VerificationRecord: Field/logic correctness check after migration
- CustomizationPoint: Client-specific change request
- MigrationIssue: Defect/blocker keyed by a human-readable string id
- FieldMaster, LookupData: Field definitions and lookup values for dynamic forms
- DynamicModuleData: Field-driven records keyed by module group
- ModuleMaster, WebTable: Module and table reference data
- ProjectEmail, ExcelData: Correspondence and uploaded spreadsheets
- ManualConfiguration: Manual setup steps recorded per project
- ModuleGroup, QuickWork: Field-group catalogue and the SQL snippet library
- ServerData, DatabaseDetail: Server and database registry projects point at
"""

from sqlalchemy import (
    Column, String, Integer, Text, TIMESTAMP, ForeignKey, BigInteger,
    Index, Boolean, Numeric, JSON,
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.dialects import sqlite
from sqlalchemy.dialects.postgresql import JSONB
from datetime import datetime

Base = declarative_base()


# Sequential identity: BIGINT on server databases, INTEGER on SQLite so that
# rowid autoincrement applies.
BigIntId = BigInteger().with_variant(sqlite.INTEGER(), "sqlite")

# JSON document column: JSONB on PostgreSQL, plain JSON elsewhere.
JSONDoc = JSON().with_variant(JSONB(), "postgresql")


# =============================================================================
# Project
# =============================================================================

class Project(Base):
    """Client migration engagement."""
    __tablename__ = "projects"
    __table_args__ = (
        Index('idx_projects_active_order', 'is_active', 'display_order'),
    )

    project_id = Column(BigIntId, primary_key=True, autoincrement=True)
    client_name = Column(String(200), nullable=False)
    client_code = Column(String(50))
    description = Column(Text)
    project_type = Column(String(100))
    status = Column(String(50), default='Active', nullable=False)
    start_date = Column(TIMESTAMP, nullable=True)
    target_completion_date = Column(TIMESTAMP, nullable=True)
    actual_completion_date = Column(TIMESTAMP, nullable=True)
    live_date = Column(TIMESTAMP, nullable=True)
    project_manager = Column(String(200))
    technical_lead = Column(String(200))
    budget = Column(Numeric(18, 2), nullable=True)
    implementation_coordinator = Column(String(200))
    coordinator_email = Column(String(200))
    server_id_desktop = Column(Integer, ForeignKey("server_data.server_id", ondelete="SET NULL"), nullable=True)
    database_id_desktop = Column(Integer, ForeignKey("database_details.database_id", ondelete="SET NULL"), nullable=True)
    server_id_web = Column(Integer, ForeignKey("server_data.server_id", ondelete="SET NULL"), nullable=True)
    database_id_web = Column(Integer, ForeignKey("database_details.database_id", ondelete="SET NULL"), nullable=True)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    transfer_checks = relationship("DataTransferCheck", back_populates="project", cascade="all, delete-orphan")
    verifications = relationship("VerificationRecord", back_populates="project", cascade="all, delete-orphan")
    customizations = relationship("CustomizationPoint", back_populates="project", cascade="all, delete-orphan")
    issues = relationship("MigrationIssue", back_populates="project", cascade="all, delete-orphan")
    emails = relationship("ProjectEmail", back_populates="project", cascade="all, delete-orphan")
    excel_files = relationship("ExcelData", back_populates="project", cascade="all, delete-orphan")
    manual_configurations = relationship("ManualConfiguration", back_populates="project", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Project(project_id={self.project_id}, client='{self.client_name}', status='{self.status}')>"


# =============================================================================
# Per-project checklist models
# =============================================================================

class DataTransferCheck(Base):
    """One source-table-to-target-table row count comparison."""
    __tablename__ = "data_transfer_checks"
    __table_args__ = (
        Index('idx_transfer_checks_project', 'project_id'),
    )

    transfer_id = Column(BigIntId, primary_key=True, autoincrement=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200), nullable=False)
    sub_module_name = Column(String(200))
    condition = Column(String(500))
    table_name_desktop = Column(String(200), nullable=False)
    table_name_web = Column(String(200), nullable=False)
    record_count_desktop = Column(BigInteger, nullable=True)
    record_count_web = Column(BigInteger, nullable=True)
    match_percentage = Column(Numeric(5, 2), nullable=True)
    status = Column(String(50), default='Not Started', nullable=False)  # Not Started, Pending, Completed
    is_completed = Column(Boolean, default=False, nullable=False)
    is_transfer_successful = Column(Boolean, default=False, nullable=False)
    migrated_date = Column(TIMESTAMP, nullable=True)
    verified_by = Column(String(200))
    comments = Column(Text)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="transfer_checks")

    def __repr__(self):
        return f"<DataTransferCheck(transfer_id={self.transfer_id}, {self.table_name_desktop} -> {self.table_name_web})>"


class VerificationRecord(Base):
    """Manual or SQL-backed assertion about post-migration data."""
    __tablename__ = "verification_records"
    __table_args__ = (
        Index('idx_verification_records_project', 'project_id'),
    )

    verification_id = Column(BigIntId, primary_key=True, autoincrement=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200), nullable=False)
    sub_module_name = Column(String(200))
    field_name = Column(String(200), nullable=False)
    description = Column(Text)
    sql_query = Column(Text)
    expected_result = Column(Text)
    actual_result = Column(Text)
    status = Column(String(50), default='Pending', nullable=False)  # Pending, Correct, Incorrect, Re-verify
    is_verified = Column(Boolean, default=False, nullable=False)
    verified_by = Column(String(200))
    verified_date = Column(TIMESTAMP, nullable=True)
    comments = Column(Text)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="verifications")

    def __repr__(self):
        return f"<VerificationRecord(verification_id={self.verification_id}, field='{self.field_name}')>"


class CustomizationPoint(Base):
    """Tracked client-specific change request, optionally billable."""
    __tablename__ = "customization_points"
    __table_args__ = (
        Index('idx_customization_points_project', 'project_id'),
    )

    customization_id = Column(BigIntId, primary_key=True, autoincrement=True)
    requirement_id = Column(String(50))
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200))
    sub_module_name = Column(String(200))
    title = Column(String(500), nullable=False)
    description = Column(Text)
    type = Column(String(100), nullable=False)                          # UI, Report, Database, Workflow, Other
    status = Column(String(50), default='Not Started', nullable=False)  # Not Started, In Progress, Completed, Dropped
    is_billable = Column(Boolean, default=False, nullable=False)
    estimated_cost = Column(Numeric(18, 2), nullable=True)
    actual_cost = Column(Numeric(18, 2), nullable=True)
    estimated_hours = Column(Numeric(10, 2), nullable=True)
    actual_hours = Column(Numeric(10, 2), nullable=True)
    priority = Column(String(50))
    requested_by = Column(String(200))
    approved_by = Column(String(200))
    developed_by = Column(String(200))
    requested_date = Column(TIMESTAMP, nullable=True)
    approved_date = Column(TIMESTAMP, nullable=True)
    completed_date = Column(TIMESTAMP, nullable=True)
    notes = Column(Text)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="customizations")

    def __repr__(self):
        return f"<CustomizationPoint(customization_id={self.customization_id}, title='{self.title}')>"


class MigrationIssue(Base):
    """Migration defect or blocker, keyed by an externally visible id."""
    __tablename__ = "migration_issues"
    __table_args__ = (
        Index('idx_migration_issues_project', 'project_id'),
        Index('idx_migration_issues_status', 'project_id', 'status'),
    )

    issue_id = Column(String(50), primary_key=True)                 # ISS-<projectId>-<suffix>
    issue_number = Column(String(50))
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200))
    sub_module_name = Column(String(200))
    title = Column(String(500), nullable=False)
    description = Column(Text)
    root_cause = Column(Text)
    solution = Column(Text)
    status = Column(String(50), default='Open', nullable=False)      # Open, In Progress, Resolved, Closed
    priority = Column(String(50), default='Medium', nullable=False)  # Low, Medium, High, Critical
    severity = Column(String(50))
    category = Column(String(100))
    assigned_to = Column(String(200))
    reported_by = Column(String(200))
    reported_date = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    resolved_date = Column(TIMESTAMP, nullable=True)
    closed_date = Column(TIMESTAMP, nullable=True)
    estimated_hours = Column(Numeric(10, 2), nullable=True)
    actual_hours = Column(Numeric(10, 2), nullable=True)
    remarks = Column(Text)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="issues")

    def __repr__(self):
        return f"<MigrationIssue(issue_id='{self.issue_id}', status='{self.status}')>"


# =============================================================================
# Dynamic form models
# =============================================================================

class ModuleGroup(Base):
    """Named group of dynamic fields, e.g. one data-entry screen."""
    __tablename__ = "module_groups"
    __table_args__ = (
        Index('idx_module_groups_active_order', 'is_active', 'display_order'),
    )

    module_group_id = Column(Integer, primary_key=True, autoincrement=True)
    module_group_name = Column(String(100), nullable=False)
    description = Column(String(500))
    icon_name = Column(String(50))
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<ModuleGroup(module_group_id={self.module_group_id}, name='{self.module_group_name}')>"


class FieldMaster(Base):
    """Field definition for a module group's dynamic form."""
    __tablename__ = "field_master"
    __table_args__ = (
        Index('idx_field_master_group', 'module_group_id', 'display_order'),
    )

    field_id = Column(Integer, primary_key=True, autoincrement=True)
    field_name = Column(String(100), nullable=False)
    field_label = Column(String(200), nullable=False)
    field_description = Column(String(500))
    module_group_id = Column(Integer, nullable=False)   # module_groups.module_group_id, not enforced
    data_type = Column(String(50), nullable=False)       # text, textarea, number, decimal, date, boolean, select, email
    max_length = Column(Integer, nullable=True)
    default_value = Column(String(500))
    select_query_db = Column(Text)                       # lookup_type for select fields
    is_required = Column(Boolean, default=False, nullable=False)
    is_unique = Column(Boolean, default=False, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    validation_regex = Column(String(500))
    placeholder_text = Column(String(200))
    help_text = Column(String(500))
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<FieldMaster(field_id={self.field_id}, name='{self.field_name}', type='{self.data_type}')>"


class LookupData(Base):
    """Lookup values backing select fields."""
    __tablename__ = "lookup_data"
    __table_args__ = (
        Index('idx_lookup_data_type', 'lookup_type', 'display_order'),
    )

    lookup_id = Column(Integer, primary_key=True, autoincrement=True)
    lookup_type = Column(String(100), nullable=False)
    lookup_key = Column(String(100), nullable=False)
    lookup_value = Column(String(500), nullable=False)
    parent_lookup_id = Column(Integer, ForeignKey("lookup_data.lookup_id", ondelete="SET NULL"), nullable=True)
    display_order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<LookupData(type='{self.lookup_type}', key='{self.lookup_key}')>"


class DynamicModuleData(Base):
    """Field-driven record for a module group within a project."""
    __tablename__ = "dynamic_module_data"
    __table_args__ = (
        Index('idx_module_data_project_group', 'project_id', 'module_group_id'),
    )

    record_id = Column(String(50), primary_key=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_group_id = Column(Integer, nullable=False)   # module_groups.module_group_id, not enforced
    data = Column(JSONDoc, nullable=False, default=dict)
    status = Column(String(50))
    is_completed = Column(Boolean, default=False, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<DynamicModuleData(record_id='{self.record_id}', group={self.module_group_id})>"


# =============================================================================
# Reference data
# =============================================================================

class ModuleMaster(Base):
    """Module / sub-module catalogue."""
    __tablename__ = "module_master"

    module_id = Column(Integer, primary_key=True, autoincrement=True)
    module_name = Column(String(200), nullable=False)
    sub_module_name = Column(String(200), nullable=False)
    group_index = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<ModuleMaster(module_id={self.module_id}, '{self.module_name}/{self.sub_module_name}')>"


class WebTable(Base):
    """Target web table and its desktop counterpart."""
    __tablename__ = "web_tables"

    web_table_id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(200), nullable=False)
    desktop_table_name = Column(String(200))
    module_name = Column(String(200))
    group_index = Column(Integer, nullable=True)
    description = Column(Text)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<WebTable(web_table_id={self.web_table_id}, table='{self.table_name}')>"


# =============================================================================
# Documents
# =============================================================================

class ProjectEmail(Base):
    """Email correspondence filed against a project."""
    __tablename__ = "project_emails"
    __table_args__ = (
        Index('idx_project_emails_project', 'project_id', 'email_date'),
    )

    email_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    subject = Column(String(500), nullable=False)
    sender = Column(String(200), default='')
    receivers = Column(String(500), default='')
    email_date = Column(TIMESTAMP, nullable=False)
    body_content = Column(Text, default='')
    category = Column(String(50), default='General')    # Approval, Clarification, ...
    attachment_path = Column(String(1000), nullable=True)  # relative to the upload root
    related_module = Column(String(100))
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="emails")

    def __repr__(self):
        return f"<ProjectEmail(email_id={self.email_id}, subject='{self.subject}')>"


class ExcelData(Base):
    """Uploaded spreadsheet attached to a project module."""
    __tablename__ = "excel_data"
    __table_args__ = (
        Index('idx_excel_data_project', 'project_id', 'uploaded_at'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200), nullable=False)
    sub_module_name = Column(String(200), nullable=False)
    description = Column(Text)
    file_path = Column(String(500), nullable=False)     # relative to the upload root
    file_name = Column(String(255), nullable=False)
    uploaded_by = Column(Integer, nullable=True)
    uploaded_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="excel_files")

    def __repr__(self):
        return f"<ExcelData(id={self.id}, file='{self.file_name}')>"


# =============================================================================
# Project configuration and work library
# =============================================================================

class ManualConfiguration(Base):
    """Configuration step that has to be done by hand for a project."""
    __tablename__ = "manual_configurations"
    __table_args__ = (
        Index('idx_manual_configurations_project', 'project_id', 'created_at'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(BigIntId, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    module_name = Column(String(200), nullable=False)
    sub_module_name = Column(String(200), nullable=False)
    description = Column(Text)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, nullable=True)

    project = relationship("Project", back_populates="manual_configurations")

    def __repr__(self):
        return f"<ManualConfiguration(id={self.id}, '{self.module_name}/{self.sub_module_name}')>"


class QuickWork(Base):
    """Reusable SQL snippet filed by module and table."""
    __tablename__ = "quick_works"

    id = Column(Integer, primary_key=True, autoincrement=True)
    module_name = Column(String(200))
    sub_module_name = Column(String(200))
    table_name = Column(String(200))
    description = Column(Text)
    sql_query = Column(Text)
    created_at = Column(TIMESTAMP, default=datetime.utcnow, nullable=False)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<QuickWork(id={self.id}, table='{self.table_name}')>"


# =============================================================================
# Server registry
# =============================================================================

class ServerData(Base):
    """Database server a client's desktop or web data lives on."""
    __tablename__ = "server_data"

    server_id = Column(Integer, primary_key=True, autoincrement=True)
    server_name = Column(String(200), nullable=False)
    host_name = Column(String(200), nullable=False)
    server_index = Column(String(50), nullable=False)

    databases = relationship("DatabaseDetail", back_populates="server", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<ServerData(server_id={self.server_id}, host='{self.host_name}')>"


class DatabaseDetail(Base):
    """One client database on a registered server."""
    __tablename__ = "database_details"
    __table_args__ = (
        Index('idx_database_details_server', 'server_id'),
    )

    database_id = Column(Integer, primary_key=True, autoincrement=True)
    database_name = Column(String(200), nullable=False)
    server_id = Column(Integer, ForeignKey("server_data.server_id", ondelete="CASCADE"), nullable=False)
    server_index = Column(String(50), nullable=False)
    client_name = Column(String(200), nullable=False)
    database_category = Column(String(10))               # Desktop, Web

    server = relationship("ServerData", back_populates="databases")

    def __repr__(self):
        return f"<DatabaseDetail(database_id={self.database_id}, name='{self.database_name}')>"
