"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskState)
- errors.py: error taxonomy (ValidationError, NotFoundError, PersistenceError, ...)
- task_store.py: in-memory store with subscriptions and the startup load gate
- task_persistence.py: JSON file backend
"""
