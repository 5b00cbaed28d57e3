"""Migration issue API routes. Issue ids are strings like ``ISS-12-093015-001``."""

from .crud import build_crud_router
from ..deps import get_issue_service
from ..schemas import IssueCreate, IssueUpdate

router = build_crud_router(
    prefix="/Issues",
    tag="issues",
    entity="Issue",
    get_service=get_issue_service,
    create_model=IssueCreate,
    update_model=IssueUpdate,
    id_field="issue_id",
    id_type=str,
)
