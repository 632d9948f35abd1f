"""Core business logic layer.

Subpackages:
- program: program-week arithmetic and enrollment
- schedule: per-day schedule resolution
- progress: task completion tracking
- catalog: the fixed workout/meal/schedule tables handed out at enrollment
"""
__all__ = ["program", "schedule", "progress", "catalog"]
