"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Outcome, TaskListing, ValidationError)
- task_store.py: in-memory ordered store + query/update operations
- task_api.py: small rendering helpers used by the menu handlers
"""
