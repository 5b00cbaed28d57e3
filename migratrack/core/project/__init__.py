"""
Project Management Module for MigraTrack

Exports:
- ProjectManager: CRUD operations for migration projects
- DashboardAggregator: Per-project progress counts and percentages
- ProjectCloner: Transactional copy of a project's checklists and issues
"""

from .project_manager import ProjectManager
from .dashboard import DashboardAggregator
from .cloner import ProjectCloner

__all__ = [
    "ProjectManager",
    "DashboardAggregator",
    "ProjectCloner",
]
