"""
Central configuration for the lazyscroll service.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class StorageSettings:
    """Settings for SQLite storage."""

    # Database file name, resolved under data/db at runtime
    db_name: str = "lazyscroll.db"

    # SQLite journal mode
    journal_mode: str = "WAL"

    # SQLite busy timeout (milliseconds)
    busy_timeout_ms: int = 5000


@dataclass(frozen=True)
class PaginationSettings:
    """Settings for the page cursor."""

    # Rows per page. The cursor asks the store for one more than this.
    page_size: int = 25

    # Upper bound accepted from configuration or callers
    max_page_size: int = 100


@dataclass(frozen=True)
class DeliverySettings:
    """Settings for how pages are shipped back to the browser."""

    # "full_frame" or "append_delta"
    strategy: str = "append_delta"

    # Persistent container that stream deliveries append rows into
    container_id: str = "items"

    # Placeholder swapped on every stream delivery
    placeholder_id: str = "items_pagination"

    # Frame ids for chained full-frame deliveries are "<prefix><page_index>"
    frame_prefix: str = "items_page_"

    # Media type for append/replace stream responses
    stream_media_type: str = "text/vnd.turbo-stream.html"

    # How a lazy trigger activates; "lazy" loads when scrolled into view
    trigger_activation: str = "lazy"

    # Document title used by the full-page layout
    page_title: str = "Items"


@dataclass(frozen=True)
class LoggingSettings:
    """Settings for the lazyscroll logger."""

    # Level name, e.g. "DEBUG" or "WARNING"
    level: str = "INFO"

    # Rotating log file, written under data/logs when to_file is set
    log_file: str = "lazyscroll.log"
    to_file: bool = True
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass
class Settings:
    """
    Top-level settings container. Aggregates all subsystem settings.

    Usage:
        settings = get_settings()
        print(settings.pagination.page_size)
        print(settings.delivery.strategy)
    """

    project_root: Path = field(default_factory=_project_root)
    storage: StorageSettings = field(default_factory=StorageSettings)
    pagination: PaginationSettings = field(default_factory=PaginationSettings)
    delivery: DeliverySettings = field(default_factory=DeliverySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for all runtime data (DB, logs)."""
        return self.project_root / "data"

    @property
    def db_path(self) -> Path:
        """Full path to the SQLite database file."""
        return self.data_dir / "db" / self.storage.db_name

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create all required data directories if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
