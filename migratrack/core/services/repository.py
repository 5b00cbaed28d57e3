"""Generic per-entity data access.

``EntityRepository`` is parameterized by an ORM model, the name of its
identity attribute and, for soft-deletable entities, the name of the
deleted flag. Flagged rows are invisible to every read this class makes.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set

from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session

from .base import BaseService
from ..db import DatabaseManager
from ..db.models import Project

logger = logging.getLogger(__name__)

# Columns the repository maintains itself
MANAGED_FIELDS = {"created_at", "updated_at"}


class EntityRepository(BaseService):
    """CRUD operations for one entity type.

    Args:
        db_manager: DatabaseManager instance
        model: ORM model class
        id_field: Name of the primary key attribute
        soft_delete_field: Boolean attribute flipped by ``delete()``; hard delete when None
        order_by: Attribute names for list ordering, prefix ``-`` for descending
        generated_id: True when the store assigns the identity on insert
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        model,
        id_field: str,
        soft_delete_field: Optional[str] = None,
        order_by: Iterable[str] = (),
        generated_id: bool = True,
    ):
        super().__init__(db_manager)
        self.model = model
        self.id_field = id_field
        self.soft_delete_field = soft_delete_field
        self.order_by = tuple(order_by) or (f"-{id_field}",)
        self.generated_id = generated_id
        self._columns: Set[str] = {a.key for a in inspect(model).column_attrs}

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    # =========================================================================
    # Query helpers
    # =========================================================================

    def _query(self, session: Session) -> Query:
        query = session.query(self.model)
        if self.soft_delete_field:
            query = query.filter(getattr(self.model, self.soft_delete_field).is_(False))
        return query

    def _ordered(self, query: Query) -> Query:
        clauses = []
        for name in self.order_by:
            if name.startswith("-"):
                clauses.append(getattr(self.model, name[1:]).desc())
            else:
                clauses.append(getattr(self.model, name).asc())
        return query.order_by(*clauses)

    def _find(self, session: Session, entity_id: Any):
        return self._query(session).filter(
            getattr(self.model, self.id_field) == entity_id
        ).first()

    def _writable(self, data: Dict[str, Any], include_id: bool = False) -> Dict[str, Any]:
        """Keep only known column values the caller may set."""
        blocked = set(MANAGED_FIELDS)
        if self.soft_delete_field:
            blocked.add(self.soft_delete_field)
        if not include_id:
            blocked.add(self.id_field)
        return {k: v for k, v in data.items() if k in self._columns and k not in blocked}

    @staticmethod
    def _require_project(session: Session, project_id: Any) -> None:
        if project_id is None:
            raise ValueError("project_id is required")
        exists = session.query(Project.project_id).filter(
            Project.project_id == project_id
        ).first()
        if not exists:
            raise ValueError(f"Project {project_id} does not exist")

    # Hooks for subclasses ---------------------------------------------------

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    # =========================================================================
    # CRUD
    # =========================================================================

    def list_all(self) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(self._query(session)).all()
            return [self._row_to_dict(r) for r in rows]

    def list_by_project(self, project_id: int) -> List[Dict]:
        """List every visible row belonging to one project."""
        with self.db.get_session() as session:
            rows = self._ordered(
                self._query(session).filter(self.model.project_id == project_id)
            ).all()
            return [self._row_to_dict(r) for r in rows]

    def get(self, entity_id: Any) -> Optional[Dict]:
        with self.db.get_session() as session:
            row = self._find(session, entity_id)
            return self._row_to_dict(row) if row else None

    def create(self, data: Dict[str, Any]) -> Dict:
        """Insert a new row and return it.

        Raises:
            ValueError: If the owning project does not exist or input is invalid
        """
        try:
            with self.db.get_session() as session:
                values = self._writable(data, include_id=not self.generated_id)
                if "project_id" in self._columns:
                    self._require_project(session, values.get("project_id"))
                values = self._before_create(session, values)

                now = datetime.utcnow()
                if "created_at" in self._columns:
                    values["created_at"] = now
                if "updated_at" in self._columns:
                    values["updated_at"] = now

                row = self.model(**values)
                session.add(row)
                session.flush()

                self._log_operation(
                    f"Created {self.entity_name}",
                    id=getattr(row, self.id_field),
                )
                return self._row_to_dict(row)

        except ValueError:
            raise
        except Exception as e:
            self._log_error(f"Create {self.entity_name}", e)
            raise

    def update(self, entity_id: Any, data: Dict[str, Any]) -> Optional[Dict]:
        """Merge known fields into an existing row.

        Returns:
            Updated row as dict, or None when no visible row has this id
        """
        try:
            with self.db.get_session() as session:
                row = self._find(session, entity_id)
                if not row:
                    return None

                values = self._before_update(session, row, self._writable(data))
                if "project_id" in values and values["project_id"] != row.project_id:
                    self._require_project(session, values["project_id"])

                for key, value in values.items():
                    setattr(row, key, value)
                if "updated_at" in self._columns:
                    row.updated_at = datetime.utcnow()

                session.flush()
                self._log_operation(f"Updated {self.entity_name}", id=entity_id)
                return self._row_to_dict(row)

        except ValueError:
            raise
        except Exception as e:
            self._log_error(f"Update {self.entity_name}", e, id=entity_id)
            raise

    def delete(self, entity_id: Any) -> bool:
        """Delete a row (soft when the entity has a deleted flag)."""
        try:
            with self.db.get_session() as session:
                row = self._find(session, entity_id)
                if not row:
                    return False

                if self.soft_delete_field:
                    setattr(row, self.soft_delete_field, True)
                    if "updated_at" in self._columns:
                        row.updated_at = datetime.utcnow()
                else:
                    session.delete(row)

                self._log_operation(
                    f"Deleted {self.entity_name}",
                    id=entity_id,
                    soft=bool(self.soft_delete_field),
                )
                return True

        except Exception as e:
            self._log_error(f"Delete {self.entity_name}", e, id=entity_id)
            raise
