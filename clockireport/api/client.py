"""
ClockifyClient: read-only accessors for the Clockify API.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from .http_client import HttpClient, HTTPResponse
from .models import Workspace, User, TimeEntry
from ..utils.config_utils import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class ClockifyAPIError(Exception):
    """Raised when the Clockify API answers with an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class WorkspaceNotFoundError(ClockifyAPIError):
    """Raised when no workspace matches the configured name."""


class ClockifyClient:
    """A client for interacting with the Clockify API."""

    def __init__(self, http_client: HttpClient, base_url: str = DEFAULT_BASE_URL):
        """Initialize the ClockifyClient.

        Args:
            http_client: HttpClient carrying the API key
            base_url: Clockify API base URL
        """
        self.http = http_client
        self.base_url = base_url.rstrip("/")

    def api_get(self, url: str, what: str) -> HTTPResponse:
        """Make a GET request to the Clockify API and check its status.

        Args:
            url: API endpoint URL
            what: Name of the resource, used in error messages

        Returns:
            Response with status 200

        Raises:
            requests.RequestException: If the request cannot be completed
            ClockifyAPIError: If the status is not 200
        """
        resp = self.http.get(url)
        if resp.status != 200:
            raise ClockifyAPIError(
                f"failed get {what}, got non 200 status ({resp.status})", resp.status
            )
        return resp

    @staticmethod
    def decode_list(resp: HTTPResponse, what: str) -> List[Dict[str, Any]]:
        data = json.loads(resp.body)
        if not isinstance(data, list):
            raise ValueError(f"failed decode {what}, expected a JSON array, got {type(data).__name__}")
        return data

    def get_all_workspaces(self) -> List[Workspace]:
        """Get all workspaces of the authenticated user.

        Returns:
            List of workspaces
        """
        resp = self.api_get(f"{self.base_url}/workspaces", "workspaces")
        data = self.decode_list(resp, "workspaces")
        logger.debug("Fetched %d workspaces", len(data))
        return [Workspace(w) for w in data]

    def get_current_user(self) -> User:
        """Get the user owning the API key.

        Returns:
            Current user
        """
        resp = self.api_get(f"{self.base_url}/user", "user")
        return User(self.http.as_json(resp.body))

    def get_time_entries(self, workspace_id: str, user_id: str, start: str, end: str) -> List[TimeEntry]:
        """Get the user's time entries within a date range.

        Args:
            workspace_id: Clockify workspace ID
            user_id: Clockify user ID
            start: RFC 3339 start of the range
            end: RFC 3339 end of the range

        Returns:
            List of time entries
        """
        url = (f"{self.base_url}/workspaces/{workspace_id}/user/{user_id}"
               f"/time-entries?start={start}&end={end}")
        resp = self.api_get(url, "time-entries")
        data = self.decode_list(resp, "time-entries")
        logger.debug("Fetched %d time entries between %s and %s", len(data), start, end)
        return [TimeEntry(e) for e in data]
