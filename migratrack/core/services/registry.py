"""Registry of database servers and the client databases on them.

Projects reference a desktop and a web server/database pair from here.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from .repository import EntityRepository
from ..db import DatabaseManager
from ..db.models import DatabaseDetail, ServerData

logger = logging.getLogger(__name__)


class ServerDataService(EntityRepository):
    """Servers; deleting one removes its databases."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            ServerData,
            "server_id",
            order_by=("server_name", "server_id"),
        )


class DatabaseDetailService(EntityRepository):
    """Client databases, returned with a summary of their server."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(
            db_manager,
            DatabaseDetail,
            "database_id",
            order_by=("database_name", "database_id"),
        )

    def list_by_server(self, server_id: int) -> List[Dict]:
        with self.db.get_session() as session:
            rows = self._ordered(
                self._query(session).filter(DatabaseDetail.server_id == server_id)
            ).all()
            return [self._row_to_dict(r) for r in rows]

    @staticmethod
    def _require_server(session: Session, server_id: Optional[int]) -> None:
        if server_id is None:
            raise ValueError("server_id is required")
        if session.get(ServerData, server_id) is None:
            raise ValueError(f"Server {server_id} does not exist")

    def _before_create(self, session: Session, values: Dict[str, Any]) -> Dict[str, Any]:
        self._require_server(session, values.get("server_id"))
        return values

    def _before_update(self, session: Session, row, values: Dict[str, Any]) -> Dict[str, Any]:
        if "server_id" in values and values["server_id"] != row.server_id:
            self._require_server(session, values["server_id"])
        return values

    def _row_to_dict(self, row: DatabaseDetail) -> Dict[str, Any]:
        result = super()._row_to_dict(row)
        server = row.server
        result["server"] = {
            "server_id": server.server_id,
            "server_name": server.server_name,
            "host_name": server.host_name,
        } if server else None
        return result
