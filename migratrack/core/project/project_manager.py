"""Project Manager for MigraTrack.

Provides CRUD operations for migration projects. Projects are never
hard-deleted here: deleting one clears ``is_active``.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from datetime import datetime

from sqlalchemy import func

from ..constants import DEFAULT_PROJECT_STATUS
from ..db import DatabaseManager
from ..db.models import DatabaseDetail, Project, ServerData

logger = logging.getLogger(__name__)

# Fields a general edit may change. display_order is only set by reorder.
EDITABLE_FIELDS = (
    "client_name",
    "client_code",
    "description",
    "status",
    "project_type",
    "start_date",
    "target_completion_date",
    "actual_completion_date",
    "live_date",
    "project_manager",
    "technical_lead",
    "budget",
    "implementation_coordinator",
    "coordinator_email",
    "server_id_desktop",
    "database_id_desktop",
    "server_id_web",
    "database_id_web",
)


class ProjectManager:
    """Manages migration projects with database persistence."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager
        logger.info("ProjectManager initialized")

    # =========================================================================
    # Project CRUD
    # =========================================================================

    def create_project(self, data: Dict[str, Any]) -> Dict:
        """Create a new project at the top of the display order."""
        if not (data.get("client_name") or "").strip():
            raise ValueError("client_name is required")

        try:
            with self.db.get_session() as session:
                min_order = session.query(func.min(Project.display_order)).scalar()

                values = {k: data[k] for k in EDITABLE_FIELDS if k in data}
                values.setdefault("status", DEFAULT_PROJECT_STATUS)
                self._check_connections(session, values)
                now = datetime.utcnow()

                project = Project(
                    **values,
                    display_order=(min_order or 0) - 1,
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                )

                session.add(project)
                session.flush()

                logger.info(f"Created project: {project.project_id} ({project.client_name})")
                return self._project_to_dict(project)

        except Exception as e:
            logger.error(f"Failed to create project: {e}")
            raise

    def get_project(self, project_id: int) -> Optional[Dict]:
        """Retrieve project details by ID (inactive projects included)."""
        with self.db.get_session() as session:
            project = session.get(Project, project_id)
            if not project:
                return None
            return self._project_to_dict(project)

    def project_exists(self, project_id: int) -> bool:
        with self.db.get_session() as session:
            return session.query(Project.project_id).filter(
                Project.project_id == project_id
            ).first() is not None

    def list_projects(self) -> List[Dict]:
        """List active projects by display order, newest first within a tie."""
        with self.db.get_session() as session:
            projects = session.query(Project).filter(
                Project.is_active.is_(True)
            ).order_by(
                Project.display_order.asc(),
                Project.created_at.desc(),
            ).all()

            return [self._project_to_dict(p) for p in projects]

    def update_project(self, project_id: int, data: Dict[str, Any]) -> Optional[Dict]:
        """Merge editable fields into a project. Returns None if missing."""
        if "client_name" in data and not (data["client_name"] or "").strip():
            raise ValueError("client_name cannot be empty")

        try:
            with self.db.get_session() as session:
                project = session.get(Project, project_id)
                if not project:
                    return None

                self._check_connections(session, data, project)

                for key in EDITABLE_FIELDS:
                    if key in data:
                        setattr(project, key, data[key])

                project.updated_at = datetime.utcnow()
                session.flush()
                logger.info(f"Updated project: {project_id}")
                return self._project_to_dict(project)

        except Exception as e:
            logger.error(f"Failed to update project {project_id}: {e}")
            raise

    def delete_project(self, project_id: int) -> bool:
        """Deactivate a project. Child rows are kept."""
        with self.db.get_session() as session:
            project = session.get(Project, project_id)
            if not project:
                return False

            project.is_active = False
            project.updated_at = datetime.utcnow()
            logger.info(f"Deactivated project: {project_id} ({project.client_name})")
            return True

    def reorder_projects(self, orders: Iterable[Tuple[int, int]]) -> bool:
        """Apply (project_id, display_order) pairs in one transaction.

        Unknown project ids are skipped. Returns False if the transaction
        fails.
        """
        try:
            with self.db.get_session() as session:
                updated = 0
                for project_id, display_order in orders:
                    project = session.get(Project, project_id)
                    if project:
                        project.display_order = display_order
                        updated += 1
                logger.info(f"Reordered {updated} projects")
                return True

        except Exception as e:
            logger.error(f"Failed to reorder projects: {e}")
            return False

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _check_connections(session, values: Dict[str, Any], project: Optional[Project] = None) -> None:
        """Validate the desktop and web server/database references."""
        for side in ("desktop", "web"):
            server_key, database_key = f"server_id_{side}", f"database_id_{side}"
            if server_key not in values and database_key not in values:
                continue
            server_id = values.get(server_key, getattr(project, server_key, None))
            database_id = values.get(database_key, getattr(project, database_key, None))

            if server_id is not None and session.get(ServerData, server_id) is None:
                raise ValueError(f"Server {server_id} does not exist")
            if database_id is not None:
                database = session.get(DatabaseDetail, database_id)
                if database is None:
                    raise ValueError(f"Database {database_id} does not exist")
                if server_id is not None and database.server_id != server_id:
                    raise ValueError(f"Database {database_id} is not on server {server_id}")

    @staticmethod
    def _project_to_dict(project: Project) -> Dict:
        """Convert a Project ORM object to a dict."""
        def iso(value):
            return value.isoformat() if value else None

        return {
            "project_id": project.project_id,
            "client_name": project.client_name,
            "client_code": project.client_code,
            "description": project.description or "",
            "project_type": project.project_type,
            "status": project.status or DEFAULT_PROJECT_STATUS,
            "start_date": iso(project.start_date),
            "target_completion_date": iso(project.target_completion_date),
            "actual_completion_date": iso(project.actual_completion_date),
            "live_date": iso(project.live_date),
            "project_manager": project.project_manager,
            "technical_lead": project.technical_lead,
            "budget": float(project.budget) if project.budget is not None else None,
            "implementation_coordinator": project.implementation_coordinator,
            "coordinator_email": project.coordinator_email,
            "server_id_desktop": project.server_id_desktop,
            "database_id_desktop": project.database_id_desktop,
            "server_id_web": project.server_id_web,
            "database_id_web": project.database_id_web,
            "display_order": project.display_order or 0,
            "is_active": bool(project.is_active),
            "created_at": iso(project.created_at),
            "updated_at": iso(project.updated_at),
        }
