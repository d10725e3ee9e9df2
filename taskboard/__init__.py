"""Taskboard: task and subtask API for a kanban board client."""

__version__ = "1.0.0"
