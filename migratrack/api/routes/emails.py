"""Project email correspondence API routes.

Emails are created from a multipart form so an attachment can travel
with them; later edits are plain JSON and never touch the attachment.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import FileResponse

from ..core import NotFoundError, ValidationError
from ..deps import get_email_service
from ..schemas import EmailUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Emails", tags=["emails"])


@router.get("")
async def list_emails(service=Depends(get_email_service)):
    return service.list_all()


@router.get("/project/{project_id}")
async def list_project_emails(project_id: int, service=Depends(get_email_service)):
    """Emails of one project, most recent first."""
    return service.list_by_project(project_id)


@router.get("/{email_id}")
async def get_email(email_id: int, service=Depends(get_email_service)):
    email = service.get(email_id)
    if not email:
        raise NotFoundError("Email", email_id)
    return email


@router.get("/{email_id}/attachment")
async def download_attachment(email_id: int, service=Depends(get_email_service)):
    found = service.attachment_file(email_id)
    if not found:
        raise NotFoundError("Attachment for email", email_id)
    path, file_name = found
    return FileResponse(path, filename=file_name)


@router.post("", status_code=201)
async def create_email(
    project_id: int = Form(...),
    subject: str = Form(...),
    sender: str = Form(""),
    receivers: str = Form(""),
    email_date: Optional[datetime] = Form(None),
    body_content: str = Form(""),
    category: Optional[str] = Form(None),
    related_module: Optional[str] = Form(None),
    attachment: Optional[UploadFile] = File(None),
    service=Depends(get_email_service),
):
    """Record an email, storing the attachment when one is sent."""
    data = {
        "project_id": project_id,
        "subject": subject,
        "sender": sender,
        "receivers": receivers,
        "email_date": email_date,
        "body_content": body_content,
        "category": category,
        "related_module": related_module,
    }

    stream, file_name = None, None
    if attachment is not None and attachment.filename:
        stream, file_name = attachment.file, attachment.filename

    try:
        email = service.create_with_attachment(data, stream, file_name)
    except ValueError as e:
        raise ValidationError(str(e))

    logger.info(f"Email {email['email_id']} recorded for project {project_id}")
    return email


@router.put("/{email_id}")
async def update_email(email_id: int, data: EmailUpdate, service=Depends(get_email_service)):
    changes = data.model_dump(exclude_unset=True)
    body_id = changes.pop("email_id", None)
    if body_id is not None and body_id != email_id:
        raise ValidationError("Email id in body does not match the URL")
    try:
        email = service.update(email_id, changes)
    except ValueError as e:
        raise ValidationError(str(e))
    if not email:
        raise NotFoundError("Email", email_id)
    return email


@router.delete("/{email_id}", status_code=204)
async def delete_email(email_id: int, service=Depends(get_email_service)):
    """Delete an email and its stored attachment."""
    if not service.delete(email_id):
        raise NotFoundError("Email", email_id)
    return Response(status_code=204)
