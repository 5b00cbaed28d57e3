"""Per-project checklist services.

Transfer checks, verification records and customization points are
soft-deleted; migration issues are keyed by a string id and hard-deleted,
as are manual configuration steps.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from .repository import EntityRepository
from ..constants import ISSUE_ID_PREFIX, TransferStatus
from ..db import DatabaseManager
from ..db.models import (
    CustomizationPoint,
    DataTransferCheck,
    FieldMaster,
    ManualConfiguration,
    MigrationIssue,
    Project,
    VerificationRecord,
)

logger = logging.getLogger(__name__)


def make_issue_id(project_id: int, moment: datetime, sequence: int) -> str:
    """Format ``ISS-<projectId>-<HHMMSS>-<NNN>``."""
    return f"{ISSUE_ID_PREFIX}-{project_id}-{moment.strftime('%H%M%S')}-{sequence:03d}"


class TransferCheckService(EntityRepository):
    """Data transfer checks, seeded from FieldMaster on first listing."""

    def __init__(self, db_manager: DatabaseManager, seed_group_id: int = 1):
        super().__init__(
            db_manager,
            DataTransferCheck,
            "transfer_id",
            soft_delete_field="is_deleted",
        )
        self.seed_group_id = seed_group_id

    def list_by_project(self, project_id: int) -> List[Dict]:
        self.seed_from_field_master(project_id)
        return super().list_by_project(project_id)

    def seed_from_field_master(self, project_id: int) -> int:
        """Create the project's checklist from the reserved FieldMaster group.

        Runs only for an existing project that has never had a transfer
        check (soft-deleted rows count). Returns the number of rows created.
        """
        with self.db.get_session() as session:
            project = session.query(Project.project_id).filter(
                Project.project_id == project_id
            ).first()
            if not project:
                return 0

            has_checks = session.query(DataTransferCheck.transfer_id).filter(
                DataTransferCheck.project_id == project_id
            ).first()
            if has_checks:
                return 0

            fields = session.query(FieldMaster).filter(
                FieldMaster.module_group_id == self.seed_group_id,
                FieldMaster.is_active.is_(True),
            ).order_by(FieldMaster.display_order, FieldMaster.field_id).all()

            now = datetime.utcnow()
            for field in fields:
                session.add(self._check_from_field(project_id, field, now))

            if fields:
                self._log_operation(
                    "Seeded transfer checks",
                    project_id=project_id,
                    count=len(fields),
                )
            return len(fields)

    @staticmethod
    def _check_from_field(project_id: int, field: FieldMaster, now: datetime) -> DataTransferCheck:
        return DataTransferCheck(
            project_id=project_id,
            module_name=field.field_label,
            sub_module_name=field.field_description,
            table_name_desktop=field.field_name,
            table_name_web=field.default_value or field.field_name,
            status=TransferStatus.NOT_STARTED.value,
            is_completed=False,
            created_at=now,
            updated_at=now,
        )


class VerificationService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            VerificationRecord,
            "verification_id",
            soft_delete_field="is_deleted",
        )


class CustomizationService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            CustomizationPoint,
            "customization_id",
            soft_delete_field="is_deleted",
            order_by=("-created_at", "-customization_id"),
        )


class IssueService(EntityRepository):
    """Migration issues with caller-supplied or generated string ids."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            MigrationIssue,
            "issue_id",
            order_by=("-issue_id",),
            generated_id=False,
        )

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        issue_id = values.get("issue_id")
        if issue_id:
            if session.get(MigrationIssue, issue_id) is not None:
                raise ValueError(f"Issue {issue_id} already exists")
        else:
            issue_id = self._next_issue_id(session, values["project_id"])
            values["issue_id"] = issue_id
        if not values.get("issue_number"):
            values["issue_number"] = issue_id
        return values

    @staticmethod
    def _next_issue_id(session: Session, project_id: int) -> str:
        moment = datetime.utcnow()
        sequence = 1
        while True:
            candidate = make_issue_id(project_id, moment, sequence)
            if session.get(MigrationIssue, candidate) is None:
                return candidate
            sequence += 1


class ManualConfigurationService(EntityRepository):
    """Manual setup steps; hard-deleted, always stay in their project."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            ManualConfiguration,
            "id",
            order_by=("-created_at", "-id"),
        )

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        values.pop("project_id", None)
        return values
