"""Data transfer objects for order synchronization."""

from dataclasses import dataclass


@dataclass
class SyncReport:
    """Counters describing one sync pass."""

    fetched: int = 0
    persisted: int = 0
    skipped: int = 0
    failed: int = 0
    aborted: bool = False

    def to_dict(self) -> dict:
        return {
            "fetched": self.fetched,
            "persisted": self.persisted,
            "skipped": self.skipped,
            "failed": self.failed,
            "aborted": self.aborted,
        }
