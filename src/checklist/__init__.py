"""Local checklist manager: tasks, filters, edit sessions, snapshot persistence."""

__version__ = "0.1.0"
