"""In-memory entity store for the dashboard collections.

Every collection is a plain dict keyed by id. Reads are full linear scans;
the dataset is small and lives only as long as the process.
"""

from typing import Any
from uuid import uuid4

from rollout.core.logging import get_logger

logger = get_logger(__name__)

# Field -> default for every non-id field of each entity type.
# Wire (camelCase) names are used so records serialize as-is.
INITIATIVE_FIELDS: dict[str, Any] = {
    "name": None,
    "type": None,
    "status": "pending",
    "description": None,
    "category": None,
    "purpose": None,
    "pid": None,
    "lastUpdated": None,
    "scripts": None,
}

FRANCHISE_GROUP_FIELDS: dict[str, Any] = {
    "name": None,
    "status": "pending",
    "progress": 0,
    "contactName": None,
    "contactEmail": None,
    "contactPhone": None,
    "locationCount": 0,
    "accountingSystem": None,
    "laborPayrollSystem": None,
    "notes": None,
}

DELIVERABLE_FIELDS: dict[str, Any] = {
    "title": None,
    "type": None,
    "status": "draft",
    "description": None,
    "category": None,
    "fileUrl": None,
    "sheetUrl": None,
    "createdAt": None,
    "updatedAt": None,
}

ISSUE_FIELDS: dict[str, Any] = {
    "title": None,
    "priority": "medium",
    "status": "open",
    "description": None,
    "assignee": None,
    "franchiseGroupId": None,
    "createdAt": None,
    "resolvedAt": None,
}

USER_FIELDS: dict[str, Any] = {
    "username": None,
    "password": None,
}

OPEN_ISSUE_STATUSES = frozenset({"open", "in_progress"})


def _copy_value(value: Any) -> Any:
    # List fields (scripts) must not alias stored state
    return list(value) if isinstance(value, list) else value


def _copy(record: dict[str, Any]) -> dict[str, Any]:
    return {k: _copy_value(v) for k, v in record.items()}


class Collection:
    """Keyed records of one entity type with create/read/update/delete."""

    def __init__(self, name: str, fields: dict[str, Any]):
        self.name = name
        self.fields = fields
        self._records: dict[str, dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> list[dict[str, Any]]:
        """All records in insertion order."""
        return [_copy(r) for r in self._records.values()]

    def get(self, record_id: str) -> dict[str, Any] | None:
        record = self._records.get(record_id)
        return _copy(record) if record is not None else None

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Store a new record, filling absent fields with their defaults.

        Args:
            fields: Field values keyed by wire name; unknown keys are dropped

        Returns:
            The full stored record, including its new id
        """
        record_id = str(uuid4())
        record: dict[str, Any] = {"id": record_id}
        for key, default in self.fields.items():
            value = fields.get(key, default)
            record[key] = _copy_value(value)

        self._records[record_id] = record
        logger.debug(f"Created {self.name} {record_id}")
        return _copy(record)

    def update(self, record_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        """
        Shallow-merge known fields onto an existing record.

        Keys absent from ``updates`` are left untouched. The id never changes.

        Args:
            record_id: Record id
            updates: Partial field values keyed by wire name

        Returns:
            The updated record, or None if no record has this id
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None

        for key, value in updates.items():
            if key not in self.fields:
                continue
            existing[key] = _copy_value(value)

        logger.debug(f"Updated {self.name} {record_id}: {sorted(k for k in updates if k in self.fields)}")
        return _copy(existing)

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns False if it did not exist."""
        if self._records.pop(record_id, None) is None:
            return False
        logger.debug(f"Deleted {self.name} {record_id}")
        return True


class MemoryStore:
    """Process-lifetime storage for every dashboard collection."""

    def __init__(self):
        self.users = Collection("user", USER_FIELDS)
        self.initiatives = Collection("initiative", INITIATIVE_FIELDS)
        self.franchise_groups = Collection("franchise_group", FRANCHISE_GROUP_FIELDS)
        self.deliverables = Collection("deliverable", DELIVERABLE_FIELDS)
        self.issues = Collection("issue", ISSUE_FIELDS)

    # Users
    def get_user(self, user_id: str) -> dict[str, Any] | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        return next((u for u in self.users.all() if u["username"] == username), None)

    def create_user(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self.users.create(fields)

    # Initiatives
    def list_initiatives(self) -> list[dict[str, Any]]:
        return self.initiatives.all()

    def get_initiative(self, initiative_id: str) -> dict[str, Any] | None:
        return self.initiatives.get(initiative_id)

    def create_initiative(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self.initiatives.create(fields)

    def update_initiative(self, initiative_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.initiatives.update(initiative_id, updates)

    def delete_initiative(self, initiative_id: str) -> bool:
        return self.initiatives.delete(initiative_id)

    # Franchise groups
    def list_franchise_groups(self) -> list[dict[str, Any]]:
        return self.franchise_groups.all()

    def get_franchise_group(self, group_id: str) -> dict[str, Any] | None:
        return self.franchise_groups.get(group_id)

    def create_franchise_group(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self.franchise_groups.create(fields)

    def update_franchise_group(self, group_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.franchise_groups.update(group_id, updates)

    def delete_franchise_group(self, group_id: str) -> bool:
        return self.franchise_groups.delete(group_id)

    # Deliverables
    def list_deliverables(self) -> list[dict[str, Any]]:
        return self.deliverables.all()

    def get_deliverable(self, deliverable_id: str) -> dict[str, Any] | None:
        return self.deliverables.get(deliverable_id)

    def create_deliverable(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self.deliverables.create(fields)

    def update_deliverable(self, deliverable_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.deliverables.update(deliverable_id, updates)

    def delete_deliverable(self, deliverable_id: str) -> bool:
        return self.deliverables.delete(deliverable_id)

    # Issues
    def list_issues(self) -> list[dict[str, Any]]:
        return self.issues.all()

    def get_issue(self, issue_id: str) -> dict[str, Any] | None:
        return self.issues.get(issue_id)

    def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self.issues.create(fields)

    def update_issue(self, issue_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        return self.issues.update(issue_id, updates)

    def delete_issue(self, issue_id: str) -> bool:
        return self.issues.delete(issue_id)

    # Stats
    def get_stats(self) -> dict[str, int]:
        """
        Compute dashboard counts from the current collections.

        Returns:
            Dict keyed by the DashboardStats wire names
        """
        initiatives = self.list_initiatives()
        franchises = self.list_franchise_groups()
        issues = self.list_issues()

        return {
            "totalInitiatives": len(initiatives),
            "runningAgents": sum(1 for i in initiatives if i["status"] == "running"),
            "franchiseGroupsTotal": len(franchises),
            "franchiseGroupsCompleted": sum(1 for f in franchises if f["status"] == "completed"),
            "openIssues": sum(1 for i in issues if i["status"] in OPEN_ISSUE_STATUSES),
            "deliverables": len(self.deliverables),
        }
