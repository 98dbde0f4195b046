"""Report generation modules for clockiReport."""

from .report_generator import ReportGenerator, build_task_list, resolve_workspace_id, run_report

__all__ = ['ReportGenerator', 'build_task_list', 'resolve_workspace_id', 'run_report']
