"""Clockify API access for clockiReport."""

from .http_client import HttpClient, HTTPResponse
from .client import ClockifyClient, ClockifyAPIError, WorkspaceNotFoundError
from .models import Workspace, User, TimeEntry

__all__ = [
    'HttpClient', 'HTTPResponse',
    'ClockifyClient', 'ClockifyAPIError', 'WorkspaceNotFoundError',
    'Workspace', 'User', 'TimeEntry'
]
