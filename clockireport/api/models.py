"""Workspace, User and TimeEntry projections of Clockify API responses.

Missing or null fields fall back to empty values. Fields of the wrong JSON
type raise ValueError.
"""
from typing import Dict, Any, List


def _require_object(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object for {what}, got {type(value).__name__}")
    return value


def _object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    return _require_object(value, key)


def _array(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected a JSON array for {key}, got {type(value).__name__}")
    return value


def _string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a JSON string for {key}, got {type(value).__name__}")
    return value


class Workspace:
    """A Clockify workspace."""

    def __init__(self, data: Dict[str, Any]):
        """Initialize a Workspace from the raw API object.

        Args:
            data: Raw workspace data from the Clockify API

        Raises:
            ValueError: If data or one of its fields has the wrong JSON type
        """
        self.raw_data = _require_object(data, "workspace")
        self.id = _string(data, "id")
        self.name = _string(data, "name")
        hourly_rate = _object(data, "hourlyRate")
        self.hourly_rate_amount = hourly_rate.get("amount") or 0
        self.hourly_rate_currency = _string(hourly_rate, "currency")
        self.memberships = _array(data, "memberships")
        self.settings = _object(data, "workspaceSettings")
        self.image_url = _string(data, "imageUrl")
        self.feature_subscription_type = _string(data, "featureSubscriptionType")

    def __repr__(self) -> str:
        return f"Workspace(id={self.id!r}, name={self.name!r})"


class User:
    """The authenticated Clockify user."""

    def __init__(self, data: Dict[str, Any]):
        self.raw_data = _require_object(data, "user")
        self.id = _string(data, "id")
        self.email = _string(data, "email")
        self.name = _string(data, "name")
        self.memberships = _array(data, "memberships")
        self.profile_picture = _string(data, "profilePicture")
        self.active_workspace = _string(data, "activeWorkspace")
        self.default_workspace = _string(data, "defaultWorkspace")
        self.settings = _object(data, "settings")
        self.status = _string(data, "status")
        self.custom_fields = _array(data, "customFields")

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"


class TimeEntry:
    """Class representing a Clockify time entry."""

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Clockify API

        Raises:
            ValueError: If entry_data or one of its fields has the wrong JSON type
        """
        self.raw_data = _require_object(entry_data, "time entry")
        self.id = _string(entry_data, "id")
        self.description = _string(entry_data, "description")
        self.tag_ids = _array(entry_data, "tagIds")
        self.user_id = _string(entry_data, "userId")
        self.billable = bool(entry_data.get("billable"))
        self.task_id = _string(entry_data, "taskId")
        self.project_id = _string(entry_data, "projectId")
        self.workspace_id = _string(entry_data, "workspaceId")
        self.is_locked = bool(entry_data.get("isLocked"))
        self.custom_field_values = _array(entry_data, "customFieldValues")
        self.type = _string(entry_data, "type")
        self.kiosk_id = _string(entry_data, "kioskId")

        # Time information (ISO-8601 strings; end and duration are empty while running)
        interval = _object(entry_data, "timeInterval")
        self.start = _string(interval, "start")
        self.end = _string(interval, "end")
        self.duration = _string(interval, "duration")

    def __repr__(self) -> str:
        return f"TimeEntry(id={self.id!r}, description={self.description!r})"
