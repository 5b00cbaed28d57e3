"""Field definition and lookup API routes."""

import logging

from fastapi import Depends

from .crud import build_crud_router
from ..deps import get_field_master_service, get_lookup_service
from ..schemas import FieldMasterCreate, FieldMasterUpdate

logger = logging.getLogger(__name__)

router = build_crud_router(
    prefix="/FieldMaster",
    tag="field-master",
    entity="Field",
    get_service=get_field_master_service,
    create_model=FieldMasterCreate,
    update_model=FieldMasterUpdate,
    id_field="field_id",
    by_project=False,
)


@router.get("/group/{module_group_id}")
async def list_group_fields(module_group_id: int, service=Depends(get_field_master_service)):
    """Active fields of one module group in display order."""
    return service.list_by_group(module_group_id)


@router.get("/lookup/{lookup_type}")
async def list_lookup_values(lookup_type: str, lookups=Depends(get_lookup_service)):
    """Active choices for a dropdown field."""
    return lookups.list_by_type(lookup_type)
