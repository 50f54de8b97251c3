"""
Task subsystem.

Components:
- task_models.py: TaskRecord and field parsers
- active_store.py: bounded list of pending tasks + the two sorts
- completed_history.py: linked history of completed tasks, newest first
- urgent_queue.py: FIFO of urgent tasks (view-only)
- task_api.py: small helpers used by the menu (build records, format rows)
"""
