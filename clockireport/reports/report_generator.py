"""ReportGenerator class for the daily task summary."""
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence

from ..api.client import ClockifyClient, WorkspaceNotFoundError
from ..api.models import Workspace, TimeEntry
from ..utils.config_utils import Config
from ..utils.date_utils import day_window, report_date_str

logger = logging.getLogger(__name__)


def resolve_workspace_id(workspaces: Sequence[Workspace], name: str) -> Optional[str]:
    """Find the id of the first workspace called `name`.

    Args:
        workspaces: Workspaces in server order
        name: Exact workspace name

    Returns:
        Workspace ID, or None if no workspace has that name
    """
    for ws in workspaces:
        if ws.name == name:
            return ws.id
    return None


def build_task_list(entries: Sequence[TimeEntry]) -> List[str]:
    """Collect the distinct entry descriptions in first-seen order."""
    seen = set()
    tasks = []
    for entry in entries:
        if entry.description in seen:
            continue
        seen.add(entry.description)
        tasks.append(entry.description)
    return tasks


class ReportGenerator:
    """Class for generating the daily task report."""

    def __init__(self, entries: List[TimeEntry], report_day: date):
        """Initialize a ReportGenerator.

        Args:
            entries: Time entries of the reported day
            report_day: Day shown in the header
        """
        self.entries = entries
        self.report_day = report_day
        self.task_list = sorted(build_task_list(entries))

    def header(self) -> str:
        return f"============= {report_date_str(self.report_day)} ============="

    def generate_report(self) -> str:
        """Generate the report text.

        Returns:
            Header line followed by one "- task" line per distinct task
        """
        lines = [self.header()]
        lines.extend(f"- {task}" for task in self.task_list)
        return "\n".join(lines)


def run_report(client: ClockifyClient, config: Config, day_offset: int = 0,
               now: Optional[datetime] = None) -> str:
    """Fetch the day's time entries and build the report.

    Args:
        client: Clockify API client
        config: Run configuration (workspace name)
        day_offset: Signed day offset from today
        now: Reference instant (optional, defaults to the current time)

    Returns:
        Report text

    Raises:
        WorkspaceNotFoundError: If no workspace is named config.workspace_name
    """
    workspaces = client.get_all_workspaces()
    user = client.get_current_user()

    workspace_id = resolve_workspace_id(workspaces, config.workspace_name)
    if workspace_id is None:
        raise WorkspaceNotFoundError(
            f"workspace {config.workspace_name!r} not found among {len(workspaces)} workspaces"
        )

    report_day, start, end = day_window(day_offset, now)
    logger.info("Reporting %s for %s in workspace %s", report_day, user.email or user.id, workspace_id)

    entries = client.get_time_entries(workspace_id, user.id, start, end)
    return ReportGenerator(entries, report_day).generate_report()
