"""Data transfer checklist API routes.

Listing a project's checks seeds its checklist from the transfer field
group the first time.
"""

from .crud import build_crud_router
from ..deps import get_transfer_service
from ..schemas import TransferCheckCreate, TransferCheckUpdate

router = build_crud_router(
    prefix="/DataTransfer",
    tag="data-transfer",
    entity="Transfer check",
    get_service=get_transfer_service,
    create_model=TransferCheckCreate,
    update_model=TransferCheckUpdate,
    id_field="transfer_id",
)
