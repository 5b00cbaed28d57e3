"""Shared constants for MigraTrack.

Fixed status labels and reserved identifiers used across services and
routes.
"""

from enum import Enum


# =============================================================================
# Status labels
# =============================================================================

class TransferStatus(str, Enum):
    NOT_STARTED = "Not Started"
    PENDING = "Pending"
    COMPLETED = "Completed"


class VerificationStatus(str, Enum):
    PENDING = "Pending"
    CORRECT = "Correct"
    INCORRECT = "Incorrect"
    REVERIFY = "Re-verify"


class IssueStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class IssuePriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CustomizationType(str, Enum):
    UI = "UI"
    REPORT = "Report"
    DATABASE = "Database"
    WORKFLOW = "Workflow"
    OTHER = "Other"


class CustomizationStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DROPPED = "Dropped"


# Issues counted as outstanding on the project dashboard
OPEN_ISSUE_STATUSES = (IssueStatus.OPEN.value, IssueStatus.IN_PROGRESS.value)

# =============================================================================
# Identifiers
# =============================================================================

ISSUE_ID_PREFIX = "ISS"

DEFAULT_PROJECT_STATUS = "Active"

DEFAULT_EMAIL_CATEGORY = "General"

# =============================================================================
# File storage categories (sub-directories of the upload root)
# =============================================================================

EMAIL_ATTACHMENT_DIR = "emails"
EXCEL_DATA_DIR = "excel_data"
