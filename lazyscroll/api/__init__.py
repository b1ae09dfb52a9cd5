"""FastAPI service serving the infinite-scroll item listing."""

from lazyscroll.api.app import create_app

__all__ = ["create_app"]
