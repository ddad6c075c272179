"""Pydantic schemas for dashboard entities (initiatives, franchise groups, deliverables, issues)."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator
from pydantic.alias_generators import to_camel

EMPTY_UPDATE_MESSAGE = "at least one field is required for update"


# ============================================================================
# Enums
# ============================================================================


class InitiativeType(str, Enum):
    """What kind of thing an initiative tracks."""
    AGENT = "agent"
    WORKFLOW = "workflow"
    INTEGRATION = "integration"


class InitiativeStatus(str, Enum):
    """Lifecycle status of an initiative (agent status)."""
    RUNNING = "running"
    LOADED = "loaded"
    ERROR = "error"
    PENDING = "pending"
    STOPPED = "stopped"


class FranchiseStatus(str, Enum):
    """Rollout status of a franchise group."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"


class DeliverableType(str, Enum):
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"
    REPORT = "report"
    OTHER = "other"


class DeliverableStatus(str, Enum):
    DRAFT = "draft"
    REVIEW = "review"
    FINAL = "final"


class DeliverableCategory(str, Enum):
    PLAYBOOK = "playbook"
    TRACKING = "tracking"
    COMMUNICATION = "communication"
    TRAINING = "training"


class IssuePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class IssueStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


# ============================================================================
# Base models
# ============================================================================


class CamelModel(BaseModel):
    """Base model exposing snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict[str, Any]:
        """Dump only the fields the client actually sent, keyed by wire name."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class PartialUpdate(CamelModel):
    """Base for update payloads: every field optional, but at least one required."""

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_fields_set:
            raise ValueError(EMPTY_UPDATE_MESSAGE)
        return self


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("cannot be null")
    return value


# ============================================================================
# Initiatives
# ============================================================================


class InitiativeCreate(CamelModel):
    """Request body for creating an initiative."""

    name: str = Field(..., min_length=1, description="Initiative name")
    type: InitiativeType = Field(..., description="agent, workflow or integration")
    status: InitiativeStatus = Field(InitiativeStatus.PENDING, description="Lifecycle status")
    description: str | None = None
    category: str | None = Field(None, description="e.g. google, goose, dropbox")
    purpose: str | None = None
    pid: str | None = Field(None, description="Process id when running")
    last_updated: str | None = None
    scripts: list[str] | None = None


class InitiativeUpdate(PartialUpdate):
    """Request body for updating an initiative."""

    name: str | None = Field(None, min_length=1)
    type: InitiativeType | None = None
    status: InitiativeStatus | None = None
    description: str | None = None
    category: str | None = None
    purpose: str | None = None
    pid: str | None = None
    last_updated: str | None = None
    scripts: list[str] | None = None

    @field_validator("name", "type", "status", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class InitiativeOut(CamelModel):
    """Response model for an initiative."""

    id: str
    name: str
    type: str
    status: str
    description: str | None
    category: str | None
    purpose: str | None
    pid: str | None
    last_updated: str | None
    scripts: list[str] | None


# ============================================================================
# Franchise groups
# ============================================================================


class FranchiseGroupCreate(CamelModel):
    """Request body for creating a franchise group."""

    name: str = Field(..., min_length=1, description="Franchise group name")
    status: FranchiseStatus = Field(FranchiseStatus.PENDING, description="Rollout status")
    progress: StrictInt = Field(0, ge=0, le=100, description="Rollout progress percentage")
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    location_count: StrictInt = Field(0, ge=0, description="Number of locations")
    accounting_system: str | None = None
    labor_payroll_system: str | None = None
    notes: str | None = None


class FranchiseGroupUpdate(PartialUpdate):
    """Request body for updating a franchise group."""

    name: str | None = Field(None, min_length=1)
    status: FranchiseStatus | None = None
    progress: StrictInt | None = Field(None, ge=0, le=100)
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    location_count: StrictInt | None = Field(None, ge=0)
    accounting_system: str | None = None
    labor_payroll_system: str | None = None
    notes: str | None = None

    @field_validator("name", "status", "progress", "location_count", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class FranchiseGroupOut(CamelModel):
    """Response model for a franchise group."""

    id: str
    name: str
    status: str
    progress: int
    contact_name: str | None
    contact_email: str | None
    contact_phone: str | None
    location_count: int
    accounting_system: str | None
    labor_payroll_system: str | None
    notes: str | None


# ============================================================================
# Deliverables
# ============================================================================


class DeliverableCreate(CamelModel):
    """Request body for creating a deliverable."""

    title: str = Field(..., min_length=1, description="Deliverable title")
    type: DeliverableType = Field(..., description="Kind of artifact")
    status: DeliverableStatus = Field(DeliverableStatus.DRAFT, description="Review status")
    description: str | None = None
    category: DeliverableCategory | None = None
    file_url: str | None = None
    sheet_url: str | None = Field(None, description="Shared sheet link")
    # Free-text dates, not parsed
    created_at: str | None = None
    updated_at: str | None = None


class DeliverableUpdate(PartialUpdate):
    """Request body for updating a deliverable."""

    title: str | None = Field(None, min_length=1)
    type: DeliverableType | None = None
    status: DeliverableStatus | None = None
    description: str | None = None
    category: DeliverableCategory | None = None
    file_url: str | None = None
    sheet_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("title", "type", "status", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class DeliverableOut(CamelModel):
    """Response model for a deliverable."""

    id: str
    title: str
    type: str
    status: str
    description: str | None
    category: str | None
    file_url: str | None
    sheet_url: str | None
    created_at: str | None
    updated_at: str | None


# ============================================================================
# Issues
# ============================================================================


class IssueCreate(CamelModel):
    """Request body for creating an issue."""

    title: str = Field(..., min_length=1, description="Issue title")
    priority: IssuePriority = Field(IssuePriority.MEDIUM, description="Priority")
    status: IssueStatus = Field(IssueStatus.OPEN, description="Resolution status")
    description: str | None = None
    assignee: str | None = None
    franchise_group_id: str | None = Field(
        None, description="Franchise group this issue relates to (not checked)"
    )
    created_at: str | None = None
    resolved_at: str | None = None


class IssueUpdate(PartialUpdate):
    """Request body for updating an issue."""

    title: str | None = Field(None, min_length=1)
    priority: IssuePriority | None = None
    status: IssueStatus | None = None
    description: str | None = None
    assignee: str | None = None
    franchise_group_id: str | None = None
    created_at: str | None = None
    resolved_at: str | None = None

    @field_validator("title", "priority", "status", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _reject_null(value)


class IssueOut(CamelModel):
    """Response model for an issue."""

    id: str
    title: str
    priority: str
    status: str
    description: str | None
    assignee: str | None
    franchise_group_id: str | None
    created_at: str | None
    resolved_at: str | None


# ============================================================================
# Stats
# ============================================================================


class DashboardStats(CamelModel):
    """Aggregate counts computed from the four collections."""

    total_initiatives: int
    running_agents: int
    franchise_groups_total: int
    franchise_groups_completed: int
    open_issues: int
    deliverables: int
