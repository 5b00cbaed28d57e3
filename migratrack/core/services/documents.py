"""Project emails and uploaded spreadsheets.

Both keep their files in a ``FileStore`` and persist only the relative
path. A failed insert or update removes the file it just stored.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from .repository import EntityRepository
from ..constants import DEFAULT_EMAIL_CATEGORY, EMAIL_ATTACHMENT_DIR, EXCEL_DATA_DIR
from ..db import DatabaseManager
from ..db.models import ExcelData, ProjectEmail
from ..storage import FileStore

logger = logging.getLogger(__name__)


class EmailService(EntityRepository):
    """Email correspondence with an optional attachment."""

    def __init__(self, db_manager: DatabaseManager, file_store: FileStore):
        super().__init__(
            db_manager,
            ProjectEmail,
            "email_id",
            order_by=("-email_date", "-email_id"),
        )
        self.file_store = file_store

    def create_with_attachment(
        self,
        data: Dict[str, Any],
        attachment: Optional[BinaryIO] = None,
        file_name: Optional[str] = None,
    ) -> Dict:
        """Store the attachment (if any) and insert the email."""
        stored = None
        if attachment is not None and file_name:
            stored = self.file_store.save(attachment, file_name, EMAIL_ATTACHMENT_DIR)
            data = {**data, "attachment_path": stored.relative_path}
        else:
            data = {k: v for k, v in data.items() if k != "attachment_path"}

        try:
            return self.create(data)
        except Exception:
            if stored:
                self.file_store.delete(stored.relative_path)
            raise

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        if not (values.get("subject") or "").strip():
            raise ValueError("subject is required")
        if not values.get("email_date"):
            values["email_date"] = datetime.utcnow()
        if not values.get("category"):
            values["category"] = DEFAULT_EMAIL_CATEGORY
        return values

    def update(self, entity_id: Any, data: Dict[str, Any]) -> Optional[Dict]:
        # Attachments are only replaced through a new upload
        data = {k: v for k, v in data.items() if k != "attachment_path"}
        return super().update(entity_id, data)

    def delete(self, entity_id: Any) -> bool:
        email = self.get(entity_id)
        if not email:
            return False
        deleted = super().delete(entity_id)
        if deleted and email.get("attachment_path"):
            self.file_store.delete(email["attachment_path"])
        return deleted

    def attachment_file(self, entity_id: Any) -> Optional[Tuple[Path, str]]:
        email = self.get(entity_id)
        if not email or not email.get("attachment_path"):
            return None
        relative = email["attachment_path"]
        if not self.file_store.exists(relative):
            return None
        return self.file_store.resolve(relative), Path(relative).name.split("_", 1)[-1]


class ExcelDataService(EntityRepository):
    """Spreadsheets uploaded against a project module."""

    def __init__(self, db_manager: DatabaseManager, file_store: FileStore):
        super().__init__(
            db_manager,
            ExcelData,
            "id",
            order_by=("-uploaded_at", "-id"),
        )
        self.file_store = file_store

    def upload(
        self,
        project_id: int,
        module_name: str,
        sub_module_name: str,
        stream: BinaryIO,
        file_name: str,
        description: Optional[str] = None,
        uploaded_by: Optional[int] = None,
    ) -> Dict:
        stored = self.file_store.save(stream, file_name, EXCEL_DATA_DIR)
        try:
            return self.create({
                "project_id": project_id,
                "module_name": module_name,
                "sub_module_name": sub_module_name,
                "description": description,
                "file_name": stored.file_name,
                "file_path": stored.relative_path,
                "uploaded_by": uploaded_by,
                "uploaded_at": datetime.utcnow(),
            })
        except Exception:
            self.file_store.delete(stored.relative_path)
            raise

    def update_file(
        self,
        entity_id: int,
        data: Dict[str, Any],
        stream: Optional[BinaryIO] = None,
        file_name: Optional[str] = None,
    ) -> Optional[Dict]:
        """Change a spreadsheet's metadata and optionally replace its file.

        The previous file is removed only once the row points at the new
        one. Returns None when no row has this id.
        """
        current = self.get(entity_id)
        if not current:
            return None

        changes = {k: v for k, v in data.items() if k not in ("file_name", "file_path", "uploaded_at")}
        stored = None
        if stream is not None and file_name:
            stored = self.file_store.save(stream, file_name, EXCEL_DATA_DIR)
            changes.update(
                file_name=stored.file_name,
                file_path=stored.relative_path,
                uploaded_at=datetime.utcnow(),
            )

        try:
            updated = self.update(entity_id, changes)
        except Exception:
            if stored:
                self.file_store.delete(stored.relative_path)
            raise

        if stored:
            if updated is None:
                self.file_store.delete(stored.relative_path)
            else:
                self.file_store.delete(current["file_path"])
        return updated

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        values.pop("project_id", None)
        return values

    def download(self, entity_id: int) -> Optional[Tuple[Path, str]]:
        """Absolute path and uploaded file name, or None when row or file is missing."""
        row = self.get(entity_id)
        if not row or not self.file_store.exists(row["file_path"]):
            return None
        return self.file_store.resolve(row["file_path"]), row["file_name"]

    def delete(self, entity_id: Any) -> bool:
        row = self.get(entity_id)
        if not row:
            return False
        deleted = super().delete(entity_id)
        if deleted:
            self.file_store.delete(row["file_path"])
        return deleted
