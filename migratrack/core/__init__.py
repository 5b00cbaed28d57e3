# Lazy imports to avoid triggering the full service chain.
# This allows targeted imports like `from migratrack.core.db.models import Base`
# (e.g. from Alembic) without pulling in every service module.

__all__ = [
    "DatabaseManager",
    "ProjectManager",
    "DashboardAggregator",
    "ProjectCloner",
    "EntityRepository",
    "FileStore",
]

_IMPORT_MAP = {
    "DatabaseManager": ".db",
    "ProjectManager": ".project",
    "DashboardAggregator": ".project",
    "ProjectCloner": ".project",
    "EntityRepository": ".services",
    "FileStore": ".storage",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'migratrack.core' has no attribute {name}")
