"""Verification record API routes."""

from .crud import build_crud_router
from ..deps import get_verification_service
from ..schemas import VerificationCreate, VerificationUpdate

router = build_crud_router(
    prefix="/Verification",
    tag="verification",
    entity="Verification",
    get_service=get_verification_service,
    create_model=VerificationCreate,
    update_model=VerificationUpdate,
    id_field="verification_id",
)
