"""Manual configuration step API routes."""

from .crud import build_crud_router
from ..deps import get_manual_configuration_service
from ..schemas import ManualConfigurationCreate, ManualConfigurationUpdate

router = build_crud_router(
    prefix="/ManualConfigurations",
    tag="manual-configurations",
    entity="Manual configuration",
    get_service=get_manual_configuration_service,
    create_model=ManualConfigurationCreate,
    update_model=ManualConfigurationUpdate,
    id_field="id",
)
