"""
Task Rotation - fair round-robin distribution of tasks across users.

A pool of discrete tasks is passed between a changing pool of users:
- no user holds more than three active tasks at once
- no user receives the same task twice in a row
- a task is done once every current user has held it

Rotation happens on request-driven events (users or tasks added, users
removed) and on a periodic background sweep.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
