"""Dynamic module record API routes.

Records hold a JSON document validated against the module group's
field definitions.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response

from ..core import NotFoundError, ValidationError
from ..deps import get_module_data_service
from ..schemas import ModuleDataCreate, ModuleDataUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ModuleData", tags=["module-data"])


@router.get("")
async def list_records(
    project_id: int = Query(..., alias="projectId"),
    module_group_id: int = Query(..., alias="moduleGroupId"),
    service=Depends(get_module_data_service),
):
    """Records of one project and module group, newest first."""
    return service.list_for_group(project_id, module_group_id)


@router.get("/{record_id}")
async def get_record(record_id: str, service=Depends(get_module_data_service)):
    record = service.get(record_id)
    if not record:
        raise NotFoundError("Record", record_id)
    return record


@router.post("", status_code=201)
async def create_record(data: ModuleDataCreate, service=Depends(get_module_data_service)):
    try:
        return service.create(data.model_dump(exclude_none=True))
    except ValueError as e:
        raise ValidationError(str(e))


@router.put("/{record_id}")
async def update_record(
    record_id: str,
    data: ModuleDataUpdate,
    service=Depends(get_module_data_service),
):
    changes = data.model_dump(exclude_unset=True)
    body_id = changes.pop("record_id", None)
    if body_id is not None and body_id != record_id:
        raise ValidationError("Record id in body does not match the URL")
    try:
        record = service.update(record_id, changes)
    except ValueError as e:
        raise ValidationError(str(e))
    if not record:
        raise NotFoundError("Record", record_id)
    return record


@router.delete("/{record_id}", status_code=204)
async def delete_record(record_id: str, service=Depends(get_module_data_service)):
    if not service.delete(record_id):
        raise NotFoundError("Record", record_id)
    return Response(status_code=204)
