"""Module catalogue and web table reference schemas."""

from typing import Optional

from pydantic import Field

from .base import EntitySchema


class ModuleMasterCreate(EntitySchema):
    module_name: str = Field(..., min_length=1, max_length=200)
    sub_module_name: str = Field(..., min_length=1, max_length=200)
    group_index: Optional[int] = None


class ModuleMasterUpdate(EntitySchema):
    module_id: Optional[int] = None
    module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    sub_module_name: Optional[str] = Field(None, min_length=1, max_length=200)
    group_index: Optional[int] = None


class WebTableCreate(EntitySchema):
    table_name: str = Field(..., min_length=1, max_length=200)
    desktop_table_name: Optional[str] = Field(None, max_length=200)
    module_name: Optional[str] = Field(None, max_length=200)
    group_index: Optional[int] = None
    description: Optional[str] = None


class WebTableUpdate(EntitySchema):
    web_table_id: Optional[int] = None
    table_name: Optional[str] = Field(None, min_length=1, max_length=200)
    desktop_table_name: Optional[str] = Field(None, max_length=200)
    module_name: Optional[str] = Field(None, max_length=200)
    group_index: Optional[int] = None
    description: Optional[str] = None


class ModuleGroupCreate(EntitySchema):
    module_group_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    icon_name: Optional[str] = Field(None, max_length=50)
    display_order: int = 0
    is_active: bool = True


class ModuleGroupUpdate(EntitySchema):
    module_group_id: Optional[int] = None
    module_group_name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    icon_name: Optional[str] = Field(None, max_length=50)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class QuickWorkCreate(EntitySchema):
    module_name: Optional[str] = Field(None, max_length=200)
    sub_module_name: Optional[str] = Field(None, max_length=200)
    table_name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    sql_query: Optional[str] = None


class QuickWorkUpdate(QuickWorkCreate):
    id: Optional[int] = None
