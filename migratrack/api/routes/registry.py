"""Server and database registry API routes."""

from fastapi import Depends

from .crud import build_crud_router
from ..deps import get_database_detail_service, get_server_data_service
from ..schemas import DatabaseDetailCreate, DatabaseDetailUpdate, ServerCreate, ServerUpdate

server_data_router = build_crud_router(
    prefix="/ServerData",
    tag="server-data",
    entity="Server",
    get_service=get_server_data_service,
    create_model=ServerCreate,
    update_model=ServerUpdate,
    id_field="server_id",
    by_project=False,
)

database_detail_router = build_crud_router(
    prefix="/DatabaseDetail",
    tag="database-detail",
    entity="Database",
    get_service=get_database_detail_service,
    create_model=DatabaseDetailCreate,
    update_model=DatabaseDetailUpdate,
    id_field="database_id",
    by_project=False,
)


@database_detail_router.get("/server/{server_id}")
async def list_server_databases(server_id: int, service=Depends(get_database_detail_service)):
    """Databases registered on one server."""
    return service.list_by_server(server_id)
