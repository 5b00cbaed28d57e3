"""Tests for project dashboard aggregation.

Tests cover:
- percentage() rounding and the empty-total case
- Counting with soft-deleted rows excluded
- Open-issue counting by status
- Unknown projects yield zeros
"""

from unittest.mock import MagicMock

import pytest

from migratrack.core.db import (
    DatabaseManager,
    DataTransferCheck,
    MigrationIssue,
    Project,
    VerificationRecord,
)
from migratrack.core.project.dashboard import DashboardAggregator, percentage


# ── Fixtures ──────────────────────────────────────────────────────────────


def _make_db() -> DatabaseManager:
    db = DatabaseManager("sqlite://")
    db.init_db()
    return db


def _add_project(db, name="Acme") -> int:
    with db.get_session() as session:
        project = Project(client_name=name)
        session.add(project)
        session.flush()
        return project.project_id


def _add_transfers(db, project_id, total, completed, deleted=0):
    with db.get_session() as session:
        for i in range(total + deleted):
            session.add(DataTransferCheck(
                project_id=project_id,
                module_name=f"Module {i}",
                table_name_desktop=f"tbl_{i}",
                table_name_web=f"web_{i}",
                is_completed=i < completed,
                is_deleted=i >= total,
            ))


def _add_verifications(db, project_id, total, verified, deleted=0):
    with db.get_session() as session:
        for i in range(total + deleted):
            session.add(VerificationRecord(
                project_id=project_id,
                module_name="Billing",
                field_name=f"field_{i}",
                is_verified=i < verified,
                is_deleted=i >= total,
            ))


def _add_issues(db, project_id, statuses):
    with db.get_session() as session:
        for i, status in enumerate(statuses, start=1):
            session.add(MigrationIssue(
                issue_id=f"ISS-{project_id}-000000-{i:03d}",
                project_id=project_id,
                title=f"Issue {i}",
                status=status,
            ))


# ── Tests: percentage ────────────────────────────────────────────────────


class TestPercentage:

    def test_rounds_to_two_decimals(self):
        assert percentage(1, 3) == 33.33
        assert percentage(2, 3) == 66.67

    def test_whole_values(self):
        assert percentage(6, 10) == 60.0
        assert percentage(10, 10) == 100.0

    def test_zero_total_is_zero(self):
        assert percentage(0, 0) == 0.0
        assert percentage(5, 0) == 0.0


# ── Tests: summarize ─────────────────────────────────────────────────────


class TestSummarize:

    def test_progress_figures(self):
        db = _make_db()
        pid = _add_project(db)
        _add_transfers(db, pid, total=10, completed=6)
        _add_verifications(db, pid, total=4, verified=2)

        summary = DashboardAggregator(db).summarize(pid)

        assert summary["total_transfers"] == 10
        assert summary["completed_transfers"] == 6
        assert summary["pending_migrations"] == 4
        assert summary["transfer_progress"] == 60.0
        assert summary["completion_percentage"] == 60.0
        assert summary["total_verifications"] == 4
        assert summary["completed_verifications"] == 2
        assert summary["verification_progress"] == 50.0
        assert summary["total_modules"] == 14

    def test_soft_deleted_rows_not_counted(self):
        db = _make_db()
        pid = _add_project(db)
        _add_transfers(db, pid, total=2, completed=1, deleted=3)
        _add_verifications(db, pid, total=1, verified=1, deleted=2)

        summary = DashboardAggregator(db).summarize(pid)

        assert summary["total_transfers"] == 2
        assert summary["total_verifications"] == 1
        assert summary["total_modules"] == 3

    def test_only_open_issues_counted(self):
        db = _make_db()
        pid = _add_project(db)
        _add_issues(db, pid, ["Open", "In Progress", "Resolved", "Closed", "Open"])

        summary = DashboardAggregator(db).summarize(pid)

        assert summary["total_issues"] == 3

    def test_other_projects_ignored(self):
        db = _make_db()
        pid = _add_project(db, "Acme")
        other = _add_project(db, "Globex")
        _add_transfers(db, other, total=5, completed=5)

        summary = DashboardAggregator(db).summarize(pid)

        assert summary["total_transfers"] == 0

    def test_empty_project_all_zero(self):
        db = _make_db()
        pid = _add_project(db)

        summary = DashboardAggregator(db).summarize(pid)

        assert summary["transfer_progress"] == 0.0
        assert summary["verification_progress"] == 0.0
        assert summary["total_modules"] == 0
        assert summary["total_issues"] == 0

    def test_unknown_project_all_zero(self):
        summary = DashboardAggregator(_make_db()).summarize(999)

        assert all(value == 0 for value in summary.values())

    def test_uses_single_session(self):
        db = MagicMock()
        session = MagicMock()
        db.get_session.return_value.__enter__ = MagicMock(return_value=session)
        db.get_session.return_value.__exit__ = MagicMock(return_value=False)
        session.query.return_value.filter.return_value.scalar.return_value = 0
        session.query.return_value.filter.return_value.filter.return_value.scalar.return_value = 0

        summary = DashboardAggregator(db).summarize(1)

        db.get_session.assert_called_once()
        assert summary["completion_percentage"] == 0.0


@pytest.mark.parametrize("completed,expected", [(0, 0.0), (1, 33.33), (3, 100.0)])
def test_completion_tracks_transfers(completed, expected):
    db = _make_db()
    pid = _add_project(db)
    _add_transfers(db, pid, total=3, completed=completed)

    assert DashboardAggregator(db).summarize(pid)["completion_percentage"] == expected
