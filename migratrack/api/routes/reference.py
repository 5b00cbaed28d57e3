"""Module catalogue, field group, web table and SQL snippet routes."""

from .crud import build_crud_router
from ..deps import (
    get_module_group_service,
    get_module_master_service,
    get_quick_work_service,
    get_web_table_service,
)
from ..schemas import (
    ModuleGroupCreate,
    ModuleGroupUpdate,
    ModuleMasterCreate,
    ModuleMasterUpdate,
    QuickWorkCreate,
    QuickWorkUpdate,
    WebTableCreate,
    WebTableUpdate,
)

module_master_router = build_crud_router(
    prefix="/ModuleMaster",
    tag="module-master",
    entity="Module",
    get_service=get_module_master_service,
    create_model=ModuleMasterCreate,
    update_model=ModuleMasterUpdate,
    id_field="module_id",
    by_project=False,
)

web_tables_router = build_crud_router(
    prefix="/WebTables",
    tag="web-tables",
    entity="Web table",
    get_service=get_web_table_service,
    create_model=WebTableCreate,
    update_model=WebTableUpdate,
    id_field="web_table_id",
    by_project=False,
)

module_groups_router = build_crud_router(
    prefix="/ModuleGroups",
    tag="module-groups",
    entity="Module group",
    get_service=get_module_group_service,
    create_model=ModuleGroupCreate,
    update_model=ModuleGroupUpdate,
    id_field="module_group_id",
    by_project=False,
)

quick_works_router = build_crud_router(
    prefix="/QuickWorks",
    tag="quick-works",
    entity="Quick work",
    get_service=get_quick_work_service,
    create_model=QuickWorkCreate,
    update_model=QuickWorkUpdate,
    id_field="id",
    by_project=False,
)
