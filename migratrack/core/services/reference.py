"""Module catalogue, field groups, web tables and the SQL snippet library."""

from datetime import datetime
from typing import Any, Dict, List

from .repository import EntityRepository
from ..db import DatabaseManager
from ..db.models import ModuleGroup, ModuleMaster, QuickWork, WebTable


class ModuleMasterService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            ModuleMaster,
            "module_id",
            order_by=("group_index", "module_name", "sub_module_name"),
        )


class ModuleGroupService(EntityRepository):
    """Field groups; delete deactivates so existing records keep their group."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            ModuleGroup,
            "module_group_id",
            order_by=("display_order", "module_group_name"),
        )

    def list_all(self) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(
                session.query(ModuleGroup).filter(ModuleGroup.is_active.is_(True))
            ).all()
            return [self._row_to_dict(r) for r in rows]

    def delete(self, entity_id: Any) -> bool:
        with self.db.get_session() as session:
            group = session.get(ModuleGroup, entity_id)
            if not group:
                return False
            group.is_active = False
            group.updated_at = datetime.utcnow()
            self._log_operation("Deactivated ModuleGroup", id=entity_id)
            return True


class WebTableService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            WebTable,
            "web_table_id",
            order_by=("group_index", "table_name"),
        )


class QuickWorkService(EntityRepository):
    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            QuickWork,
            "id",
            order_by=("module_name", "sub_module_name", "table_name", "id"),
        )
