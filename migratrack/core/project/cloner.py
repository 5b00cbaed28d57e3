"""Project data cloning.

Copies a source project's transfer checks, verification records,
customization points and migration issues into a target project so the
target can start from the same checklist. The whole copy is one
transaction: either every category lands or none does.

Issue ids are business keys of the form ``ISS-<target>-<HHMMSS>-<NNN>``
where the sequence restarts at 001 on every call. Two clones into the
same target within the same second therefore collide on the primary key;
the second clone then fails and rolls back.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from ..db import DatabaseManager
from ..db.models import (
    CustomizationPoint,
    DataTransferCheck,
    MigrationIssue,
    Project,
    VerificationRecord,
)
from ..services.checklists import make_issue_id

logger = logging.getLogger(__name__)

# (model, identity attribute) in copy order; issues are handled last
CLONED_CATEGORIES = (
    (DataTransferCheck, "transfer_id"),
    (VerificationRecord, "verification_id"),
    (CustomizationPoint, "customization_id"),
)


def _now() -> datetime:
    return datetime.utcnow()


def copy_row(row: Any, id_field: str, overrides: Dict[str, Any]) -> Any:
    """Build a new, unattached instance with the row's column values.

    The identity is left unset unless ``overrides`` supplies one.
    """
    model = type(row)
    values = {
        attr.key: getattr(row, attr.key)
        for attr in inspect(model).column_attrs
        if attr.key != id_field
    }
    values.update(overrides)
    return model(**values)


class ProjectCloner:
    """Copies per-project records from one project into another."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def clone(self, source_project_id: int, target_project_id: int) -> bool:
        """Copy all four record categories from source into target.

        Returns:
            False (with no side effects) if either project does not exist,
            True once everything is committed.

        Raises:
            Exception: Any failure during the copy, after rollback
        """
        if not self._both_exist(source_project_id, target_project_id):
            logger.warning(
                f"Clone skipped: project {source_project_id} or {target_project_id} not found"
            )
            return False

        now = _now()
        try:
            with self.db.get_session() as session:
                counts = {}
                for model, id_field in CLONED_CATEGORIES:
                    counts[model.__tablename__] = self._clone_rows(
                        session, model, id_field, source_project_id, target_project_id, now
                    )
                counts[MigrationIssue.__tablename__] = self._clone_issues(
                    session, source_project_id, target_project_id, now
                )
                session.flush()

        except Exception as e:
            logger.error(
                f"Clone {source_project_id} -> {target_project_id} rolled back: "
                f"{e.__class__.__name__}: {e}",
                exc_info=True,
            )
            raise

        logger.info(f"Cloned project {source_project_id} -> {target_project_id}: {counts}")
        return True

    def _both_exist(self, source_project_id: int, target_project_id: int) -> bool:
        with self.db.get_session() as session:
            found = {
                pid for (pid,) in session.query(Project.project_id).filter(
                    Project.project_id.in_([source_project_id, target_project_id])
                ).all()
            }
        return source_project_id in found and target_project_id in found

    @staticmethod
    def _source_rows(session: Session, model, id_field: str, source_project_id: int):
        query = session.query(model).filter(
            model.project_id == source_project_id
        ).order_by(getattr(model, id_field))
        if hasattr(model, "is_deleted"):
            query = query.filter(model.is_deleted.is_(False))
        return query.all()

    def _clone_rows(
        self,
        session: Session,
        model,
        id_field: str,
        source_project_id: int,
        target_project_id: int,
        now: datetime,
    ) -> int:
        rows = self._source_rows(session, model, id_field, source_project_id)
        for row in rows:
            session.add(copy_row(row, id_field, {
                "project_id": target_project_id,
                "created_at": now,
                "updated_at": now,
            }))
        return len(rows)

    def _clone_issues(
        self,
        session: Session,
        source_project_id: int,
        target_project_id: int,
        now: datetime,
    ) -> int:
        rows = self._source_rows(session, MigrationIssue, "issue_id", source_project_id)
        for sequence, row in enumerate(rows, start=1):
            issue_id = make_issue_id(target_project_id, now, sequence)
            session.add(copy_row(row, "issue_id", {
                "issue_id": issue_id,
                "issue_number": issue_id,
                "project_id": target_project_id,
                "created_at": now,
                "updated_at": now,
            }))
        return len(rows)
