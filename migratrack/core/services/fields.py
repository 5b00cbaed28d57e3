"""Field definitions and field-driven module records.

``FieldMaster.data_type`` is stored as free text for compatibility with
existing rows (``int``, ``varchar``, ``bit``, ``dropdown``, ...). Every
accepted spelling resolves to one ``FieldKind``, and values submitted for
dynamic module records are coerced per kind.
"""

import logging
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from .repository import EntityRepository
from ..db import DatabaseManager
from ..db.models import DynamicModuleData, FieldMaster, LookupData

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class FieldKind(str, Enum):
    """Normalized kinds a field value can take."""
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    CHOICE = "choice"
    EMAIL = "email"


# Accepted data_type spellings
DATA_TYPE_KINDS: Dict[str, FieldKind] = {
    "varchar": FieldKind.TEXT,
    "text": FieldKind.TEXT,
    "textarea": FieldKind.TEXT,
    "int": FieldKind.INTEGER,
    "bigint": FieldKind.INTEGER,
    "number": FieldKind.DECIMAL,
    "decimal": FieldKind.DECIMAL,
    "float": FieldKind.DECIMAL,
    "date": FieldKind.DATE,
    "datetime": FieldKind.DATETIME,
    "bit": FieldKind.BOOLEAN,
    "checkbox": FieldKind.BOOLEAN,
    "dropdown": FieldKind.CHOICE,
    "select": FieldKind.CHOICE,
    "email": FieldKind.EMAIL,
}


def resolve_field_kind(data_type: Optional[str]) -> FieldKind:
    """Map a stored data_type to its FieldKind.

    Raises:
        ValueError: If the data type is not recognized
    """
    kind = DATA_TYPE_KINDS.get((data_type or "").strip().lower())
    if kind is None:
        allowed = ", ".join(sorted(DATA_TYPE_KINDS))
        raise ValueError(f"Unknown field data type '{data_type}'. Allowed: {allowed}")
    return kind


def compile_validation_regex(pattern: Optional[str], label: str = "validation_regex"):
    """Compile a field's validation pattern.

    Raises:
        ValueError: If the pattern is not a valid regular expression
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"{label} has an invalid validation pattern: {e}")


def parse_date(value: Any) -> date:
    """Accept a date or a full ISO date/datetime string, nothing looser."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()


def coerce_field_value(field: FieldMaster, value: Any, choices: Optional[set] = None) -> Any:
    """Validate one submitted value against its field definition.

    Returns the JSON-storable value. Raises ValueError with a message that
    names the field's label.
    """
    label = field.field_label or field.field_name
    if value is None or (isinstance(value, str) and value.strip() == ""):
        if field.is_required:
            raise ValueError(f"{label} is required")
        return None

    kind = resolve_field_kind(field.data_type)

    if kind is FieldKind.TEXT:
        text = str(value)
        if field.max_length and len(text) > field.max_length:
            raise ValueError(f"{label} exceeds {field.max_length} characters")
        pattern = compile_validation_regex(field.validation_regex, label)
        if pattern and not pattern.fullmatch(text):
            raise ValueError(f"{label} has an invalid format")
        return text

    if kind is FieldKind.INTEGER:
        if isinstance(value, bool):
            raise ValueError(f"{label} must be a whole number")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{label} must be a whole number")
        if not number.is_integer():
            raise ValueError(f"{label} must be a whole number")
        return int(number)

    if kind is FieldKind.DECIMAL:
        if isinstance(value, bool):
            raise ValueError(f"{label} must be a number")
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{label} must be a number")

    if kind is FieldKind.DATE:
        try:
            return parse_date(value).isoformat()
        except ValueError:
            raise ValueError(f"{label} must be a date (YYYY-MM-DD)")

    if kind is FieldKind.DATETIME:
        try:
            return datetime.fromisoformat(str(value)).isoformat()
        except ValueError:
            raise ValueError(f"{label} must be a date and time")

    if kind is FieldKind.BOOLEAN:
        if isinstance(value, bool):
            return value
        lowered = str(value).strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        raise ValueError(f"{label} must be true or false")

    if kind is FieldKind.CHOICE:
        choice = str(value)
        if choices and choice not in choices:
            raise ValueError(f"{label} must be one of: {', '.join(sorted(choices))}")
        return choice

    if kind is FieldKind.EMAIL:
        address = str(value).strip()
        if not EMAIL_PATTERN.match(address):
            raise ValueError(f"{label} must be an email address")
        return address

    raise ValueError(f"Unhandled field kind {kind}")


class FieldMasterService(EntityRepository):
    """Field definitions; delete deactivates."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            FieldMaster,
            "field_id",
            order_by=("module_group_id", "display_order", "field_id"),
        )

    def list_all(self) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(
                session.query(FieldMaster).filter(FieldMaster.is_active.is_(True))
            ).all()
            return [self._row_to_dict(r) for r in rows]

    def list_by_group(self, module_group_id: int) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self.active_fields(session, module_group_id)
            return [self._row_to_dict(r) for r in rows]

    @staticmethod
    def active_fields(session: Session, module_group_id: int) -> List[FieldMaster]:
        return session.query(FieldMaster).filter(
            FieldMaster.module_group_id == module_group_id,
            FieldMaster.is_active.is_(True),
        ).order_by(FieldMaster.display_order, FieldMaster.field_id).all()

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        resolve_field_kind(values.get("data_type"))
        compile_validation_regex(values.get("validation_regex"))
        return values

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        if "data_type" in values:
            resolve_field_kind(values["data_type"])
        if "validation_regex" in values:
            compile_validation_regex(values["validation_regex"])
        return values

    def delete(self, entity_id: Any) -> bool:
        with self.db.get_session() as session:
            field = session.get(FieldMaster, entity_id)
            if not field:
                return False
            field.is_active = False
            field.updated_at = datetime.utcnow()
            self._log_operation("Deactivated FieldMaster", id=entity_id)
            return True


class LookupService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            LookupData,
            "lookup_id",
            order_by=("lookup_type", "display_order", "lookup_id"),
        )

    def list_by_type(self, lookup_type: str) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(
                session.query(LookupData).filter(
                    LookupData.lookup_type == lookup_type,
                    LookupData.is_active.is_(True),
                )
            ).all()
            return [self._row_to_dict(r) for r in rows]


class ModuleDataService(EntityRepository):
    """Dynamic records validated against their module group's fields."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            DynamicModuleData,
            "record_id",
            soft_delete_field="is_deleted",
            order_by=("-created_at", "record_id"),
            generated_id=False,
        )

    def list_for_group(self, project_id: int, module_group_id: int) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(
                self._query(session).filter(
                    DynamicModuleData.project_id == project_id,
                    DynamicModuleData.module_group_id == module_group_id,
                )
            ).all()
            return [self._row_to_dict(r) for r in rows]

    def validate_data(
        self,
        session: Session,
        module_group_id: int,
        data: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Coerce ``data`` against the group's active fields.

        Keys without a field definition are kept unchanged.
        """
        if not isinstance(data, dict):
            raise ValueError("data must be an object")

        cleaned = dict(data)
        for field in FieldMasterService.active_fields(session, module_group_id):
            choices = self._choices(session, field)
            cleaned[field.field_name] = coerce_field_value(
                field, data.get(field.field_name), choices
            )
        return cleaned

    @staticmethod
    def _choices(session: Session, field: FieldMaster) -> Optional[set]:
        if not field.select_query_db:
            return None
        rows = session.query(LookupData.lookup_key, LookupData.lookup_value).filter(
            LookupData.lookup_type == field.select_query_db,
            LookupData.is_active.is_(True),
        ).all()
        if not rows:
            return None
        return {key for key, _ in rows} | {value for _, value in rows}

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        if values.get("module_group_id") is None:
            raise ValueError("module_group_id is required")
        values["record_id"] = values.get("record_id") or str(uuid4())
        if session.get(DynamicModuleData, values["record_id"]) is not None:
            raise ValueError(f"Record {values['record_id']} already exists")
        values["data"] = self.validate_data(
            session, values["module_group_id"], values.get("data") or {}
        )
        return values

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        # Records stay in their project and group
        values.pop("project_id", None)
        values.pop("module_group_id", None)
        if "data" in values:
            values["data"] = self.validate_data(session, row.module_group_id, values["data"] or {})
        return values
