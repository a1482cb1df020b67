"""Concrete repository implementations."""

from .habit import HabitStore

__all__ = ["HabitStore"]
