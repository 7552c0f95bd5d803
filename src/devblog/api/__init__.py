"""HTTP surface."""

from __future__ import annotations

from devblog.api.app import cache_control_header, create_app

__all__ = ["cache_control_header", "create_app"]
