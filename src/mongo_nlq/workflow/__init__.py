"""Workflow orchestration package."""

from mongo_nlq.workflow.engine import ProgressReporter, QueryWorkflow

__all__ = [
    "ProgressReporter",
    "QueryWorkflow",
]
