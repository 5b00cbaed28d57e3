"""Router builder for entities served by an ``EntityRepository``.

Produces the standard list / list-by-project / get / create / update /
delete endpoints. Entity-specific routers add their own endpoints to the
returned router.
"""

import logging
from typing import Callable, Type

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from ..core import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def build_crud_router(
    prefix: str,
    tag: str,
    entity: str,
    get_service: Callable,
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
    id_field: str,
    id_type: type = int,
    by_project: bool = True,
) -> APIRouter:
    """Build a router exposing one entity's CRUD endpoints.

    Args:
        prefix: Router path prefix, e.g. ``/Issues``
        tag: OpenAPI tag
        entity: Display name used in error messages
        get_service: Dependency returning the entity's repository
        create_model: Request body for POST
        update_model: Request body for PUT (all fields optional)
        id_field: Identity attribute; a body value must match the URL
        id_type: Python type of the identity
        by_project: Add ``GET /project/{project_id}``
    """
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("")
    async def list_items(service=Depends(get_service)):
        return service.list_all()

    if by_project:
        @router.get("/project/{project_id}")
        async def list_project_items(project_id: int, service=Depends(get_service)):
            return service.list_by_project(project_id)

    @router.get("/{item_id}")
    async def get_item(item_id: id_type, service=Depends(get_service)):
        item = service.get(item_id)
        if not item:
            raise NotFoundError(entity, item_id)
        return item

    @router.post("", status_code=201)
    async def create_item(data: create_model, service=Depends(get_service)):
        try:
            return service.create(data.model_dump(exclude_none=True))
        except ValueError as e:
            raise ValidationError(str(e))

    @router.put("/{item_id}")
    async def update_item(item_id: id_type, data: update_model, service=Depends(get_service)):
        changes = data.model_dump(exclude_unset=True)
        body_id = changes.pop(id_field, None)
        if body_id is not None and body_id != item_id:
            raise ValidationError(f"{entity} id in body does not match the URL")
        try:
            item = service.update(item_id, changes)
        except ValueError as e:
            raise ValidationError(str(e))
        if not item:
            raise NotFoundError(entity, item_id)
        return item

    @router.delete("/{item_id}", status_code=204)
    async def delete_item(item_id: id_type, service=Depends(get_service)):
        if not service.delete(item_id):
            raise NotFoundError(entity, item_id)
        return Response(status_code=204)

    return router
