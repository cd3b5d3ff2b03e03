"""Data Transfer Objects for application layer."""

from .sync import SyncReport

__all__ = [
    "SyncReport",
]
