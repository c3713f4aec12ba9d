"""Concurrency helpers shared by the in-memory repositories."""

from .rwlock import RWLock

__all__ = [
    "RWLock",
]
