"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, BulkOutcome)
- task_errors.py: validation errors raised by the store
- task_store.py: in-memory ordered collection + mutation/query helpers
"""
