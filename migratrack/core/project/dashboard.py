"""Project dashboard aggregation.

Every call re-runs five independent count queries; nothing is cached.
An unknown project simply yields zero counts.
"""

import logging
from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..constants import OPEN_ISSUE_STATUSES
from ..db import DatabaseManager
from ..db.models import DataTransferCheck, MigrationIssue, VerificationRecord

logger = logging.getLogger(__name__)


def percentage(part: int, total: int) -> float:
    """``part / total * 100`` rounded to two decimals, 0 when total is 0."""
    if total <= 0:
        return 0.0
    return round(part / total * 100, 2)


class DashboardAggregator:
    """Computes summary counts and progress percentages for one project."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def summarize(self, project_id: int) -> Dict:
        with self.db.get_session() as session:
            total_transfers = self._count_transfers(session, project_id)
            completed_transfers = self._count_transfers(session, project_id, completed=True)
            total_issues = session.query(func.count(MigrationIssue.issue_id)).filter(
                MigrationIssue.project_id == project_id,
                MigrationIssue.status.in_(OPEN_ISSUE_STATUSES),
            ).scalar() or 0
            total_verifications = self._count_verifications(session, project_id)
            completed_verifications = self._count_verifications(session, project_id, verified=True)

        transfer_progress = percentage(completed_transfers, total_transfers)

        return {
            "total_modules": total_transfers + total_verifications,
            "completed_migrations": completed_transfers,
            "pending_migrations": total_transfers - completed_transfers,
            "total_issues": total_issues,
            "completion_percentage": transfer_progress,
            # Detailed stats
            "total_transfers": total_transfers,
            "completed_transfers": completed_transfers,
            "transfer_progress": transfer_progress,
            "total_verifications": total_verifications,
            "completed_verifications": completed_verifications,
            "verification_progress": percentage(completed_verifications, total_verifications),
        }

    @staticmethod
    def _count_transfers(session: Session, project_id: int, completed: bool = False) -> int:
        query = session.query(func.count(DataTransferCheck.transfer_id)).filter(
            DataTransferCheck.project_id == project_id,
            DataTransferCheck.is_deleted.is_(False),
        )
        if completed:
            query = query.filter(DataTransferCheck.is_completed.is_(True))
        return query.scalar() or 0

    @staticmethod
    def _count_verifications(session: Session, project_id: int, verified: bool = False) -> int:
        query = session.query(func.count(VerificationRecord.verification_id)).filter(
            VerificationRecord.project_id == project_id,
            VerificationRecord.is_deleted.is_(False),
        )
        if verified:
            query = query.filter(VerificationRecord.is_verified.is_(True))
        return query.scalar() or 0
