"""In-process caches."""

from .dedup_cache import DedupCache

__all__ = ["DedupCache"]
