"""Customization point API routes."""

from .crud import build_crud_router
from ..deps import get_customization_service
from ..schemas import CustomizationCreate, CustomizationUpdate

router = build_crud_router(
    prefix="/Customization",
    tag="customization",
    entity="Customization",
    get_service=get_customization_service,
    create_model=CustomizationCreate,
    update_model=CustomizationUpdate,
    id_field="customization_id",
)
