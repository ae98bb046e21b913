"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, EditSession)
- task_list.py: pure transformations over the task sequence
- task_view.py: filter projection, counters, view model
- task_store.py: slot stores + snapshot persistence (load/save)
"""
