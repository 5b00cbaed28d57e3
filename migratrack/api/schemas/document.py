"""Email correspondence schemas. Creation is multipart, see routes/emails.py."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import EntitySchema


class EmailUpdate(EntitySchema):
    email_id: Optional[int] = None
    project_id: Optional[int] = None
    subject: Optional[str] = Field(None, min_length=1, max_length=500)
    sender: Optional[str] = Field(None, max_length=200)
    receivers: Optional[str] = Field(None, max_length=500)
    email_date: Optional[datetime] = None
    body_content: Optional[str] = None
    category: Optional[str] = Field(None, max_length=50)
    related_module: Optional[str] = Field(None, max_length=100)
