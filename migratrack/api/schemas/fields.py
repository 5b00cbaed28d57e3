"""Field definition, lookup and dynamic module record schemas."""

from typing import Any, Dict, Optional

from pydantic import Field

from .base import EntitySchema


class FieldMasterCreate(EntitySchema):
    field_name: str = Field(..., min_length=1, max_length=100)
    field_label: str = Field(..., min_length=1, max_length=200)
    field_description: Optional[str] = Field(None, max_length=500)
    module_group_id: int
    data_type: str = Field(..., description="varchar, int, decimal, date, bit, dropdown, email, ...")
    max_length: Optional[int] = Field(None, ge=1)
    default_value: Optional[str] = Field(None, max_length=500)
    select_query_db: Optional[str] = Field(None, description="Lookup type supplying dropdown choices")
    is_required: bool = False
    is_unique: bool = False
    display_order: int = 0
    is_active: bool = True
    validation_regex: Optional[str] = Field(None, max_length=500)
    placeholder_text: Optional[str] = Field(None, max_length=200)
    help_text: Optional[str] = Field(None, max_length=500)


class FieldMasterUpdate(EntitySchema):
    field_id: Optional[int] = None
    field_name: Optional[str] = Field(None, min_length=1, max_length=100)
    field_label: Optional[str] = Field(None, min_length=1, max_length=200)
    field_description: Optional[str] = Field(None, max_length=500)
    module_group_id: Optional[int] = None
    data_type: Optional[str] = None
    max_length: Optional[int] = Field(None, ge=1)
    default_value: Optional[str] = Field(None, max_length=500)
    select_query_db: Optional[str] = None
    is_required: Optional[bool] = None
    is_unique: Optional[bool] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None
    validation_regex: Optional[str] = Field(None, max_length=500)
    placeholder_text: Optional[str] = Field(None, max_length=200)
    help_text: Optional[str] = Field(None, max_length=500)


class ModuleDataCreate(EntitySchema):
    record_id: Optional[str] = Field(None, max_length=50, description="Generated when omitted")
    project_id: int
    module_group_id: int
    data: Dict[str, Any] = Field(default_factory=dict)
    status: Optional[str] = Field(None, max_length=50)
    is_completed: bool = False


class ModuleDataUpdate(EntitySchema):
    record_id: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    status: Optional[str] = Field(None, max_length=50)
    is_completed: Optional[bool] = None
