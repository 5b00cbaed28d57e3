"""FastAPI dependencies for MigraTrack.

Provides shared services via FastAPI's Depends() injection system. Services
are created on first use and cached on ``app.state``.
"""

import logging
from typing import Any, Callable

from fastapi import Request

from ..core.project import DashboardAggregator, ProjectCloner, ProjectManager
from ..core.services import (
    CustomizationService,
    DatabaseDetailService,
    EmailService,
    ExcelDataService,
    FieldMasterService,
    IssueService,
    LookupService,
    ManualConfigurationService,
    ModuleDataService,
    ModuleGroupService,
    ModuleMasterService,
    QuickWorkService,
    ServerDataService,
    TransferCheckService,
    VerificationService,
    WebTableService,
)

logger = logging.getLogger(__name__)


def _cached(request: Request, name: str, factory: Callable[[Any], Any]):
    """Return ``app.state.<name>``, building it from the app state if unset."""
    state = request.app.state
    service = getattr(state, name, None)
    if service is None:
        service = factory(state)
        setattr(state, name, service)
        logger.debug(f"Created {name}")
    return service


async def get_project_manager(request: Request) -> ProjectManager:
    return _cached(request, "project_manager", lambda s: ProjectManager(s.db_manager))


async def get_dashboard_aggregator(request: Request) -> DashboardAggregator:
    return _cached(request, "dashboard_aggregator", lambda s: DashboardAggregator(s.db_manager))


async def get_project_cloner(request: Request) -> ProjectCloner:
    return _cached(request, "project_cloner", lambda s: ProjectCloner(s.db_manager))


async def get_transfer_service(request: Request) -> TransferCheckService:
    return _cached(
        request,
        "transfer_service",
        lambda s: TransferCheckService(s.db_manager, seed_group_id=s.settings.transfer_group_id),
    )


async def get_verification_service(request: Request) -> VerificationService:
    return _cached(request, "verification_service", lambda s: VerificationService(s.db_manager))


async def get_customization_service(request: Request) -> CustomizationService:
    return _cached(request, "customization_service", lambda s: CustomizationService(s.db_manager))


async def get_issue_service(request: Request) -> IssueService:
    return _cached(request, "issue_service", lambda s: IssueService(s.db_manager))


async def get_field_master_service(request: Request) -> FieldMasterService:
    return _cached(request, "field_master_service", lambda s: FieldMasterService(s.db_manager))


async def get_lookup_service(request: Request) -> LookupService:
    return _cached(request, "lookup_service", lambda s: LookupService(s.db_manager))


async def get_module_data_service(request: Request) -> ModuleDataService:
    return _cached(request, "module_data_service", lambda s: ModuleDataService(s.db_manager))


async def get_module_master_service(request: Request) -> ModuleMasterService:
    return _cached(request, "module_master_service", lambda s: ModuleMasterService(s.db_manager))


async def get_web_table_service(request: Request) -> WebTableService:
    return _cached(request, "web_table_service", lambda s: WebTableService(s.db_manager))


async def get_email_service(request: Request) -> EmailService:
    return _cached(request, "email_service", lambda s: EmailService(s.db_manager, s.file_store))


async def get_excel_data_service(request: Request) -> ExcelDataService:
    return _cached(request, "excel_data_service", lambda s: ExcelDataService(s.db_manager, s.file_store))


async def get_manual_configuration_service(request: Request) -> ManualConfigurationService:
    return _cached(
        request,
        "manual_configuration_service",
        lambda s: ManualConfigurationService(s.db_manager),
    )


async def get_module_group_service(request: Request) -> ModuleGroupService:
    return _cached(request, "module_group_service", lambda s: ModuleGroupService(s.db_manager))


async def get_quick_work_service(request: Request) -> QuickWorkService:
    return _cached(request, "quick_work_service", lambda s: QuickWorkService(s.db_manager))


async def get_server_data_service(request: Request) -> ServerDataService:
    return _cached(request, "server_data_service", lambda s: ServerDataService(s.db_manager))


async def get_database_detail_service(request: Request) -> DatabaseDetailService:
    return _cached(request, "database_detail_service", lambda s: DatabaseDetailService(s.db_manager))
