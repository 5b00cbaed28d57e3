"""Uploaded spreadsheet API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import FileResponse

from ..core import NotFoundError, ValidationError
from ..deps import get_excel_data_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ExcelData", tags=["excel-data"])


@router.get("/project/{project_id}")
async def list_project_files(project_id: int, service=Depends(get_excel_data_service)):
    return service.list_by_project(project_id)


@router.post("/upload", status_code=201)
async def upload_file(
    project_id: int = Form(...),
    module_name: str = Form(...),
    sub_module_name: str = Form(...),
    description: Optional[str] = Form(None),
    uploaded_by: Optional[int] = Form(None),
    file: UploadFile = File(...),
    service=Depends(get_excel_data_service),
):
    """Store a spreadsheet against a project module."""
    if not file.filename:
        raise ValidationError("No file uploaded.")
    try:
        return service.upload(
            project_id=project_id,
            module_name=module_name,
            sub_module_name=sub_module_name,
            stream=file.file,
            file_name=file.filename,
            description=description,
            uploaded_by=uploaded_by,
        )
    except ValueError as e:
        raise ValidationError(str(e))


@router.put("/{file_id}")
async def update_file(
    file_id: int,
    module_name: str = Form(...),
    sub_module_name: str = Form(...),
    description: Optional[str] = Form(None),
    uploaded_by: Optional[int] = Form(None),
    file: Optional[UploadFile] = File(None),
    service=Depends(get_excel_data_service),
):
    """Edit a spreadsheet's details; a new file replaces the stored one."""
    data = {
        "module_name": module_name,
        "sub_module_name": sub_module_name,
        "description": description,
        "uploaded_by": uploaded_by,
    }
    replace = file is not None and bool(file.filename)
    try:
        updated = service.update_file(
            file_id,
            data,
            stream=file.file if replace else None,
            file_name=file.filename if replace else None,
        )
    except ValueError as e:
        raise ValidationError(str(e))
    if not updated:
        raise NotFoundError("File", file_id)
    return updated


@router.get("/download/{file_id}")
async def download_file(file_id: int, service=Depends(get_excel_data_service)):
    found = service.download(file_id)
    if not found:
        raise NotFoundError("File", file_id)
    path, file_name = found
    return FileResponse(path, filename=file_name)


@router.delete("/{file_id}", status_code=204)
async def delete_file(file_id: int, service=Depends(get_excel_data_service)):
    """Delete the record and its stored file."""
    if not service.delete(file_id):
        raise NotFoundError("File", file_id)
    return Response(status_code=204)
