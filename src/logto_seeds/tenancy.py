"""Well-known tenant identifiers."""

from __future__ import annotations

from typing import Final

DEFAULT_TENANT_ID: Final = "default"
ADMIN_TENANT_ID: Final = "admin"

__all__ = ["ADMIN_TENANT_ID", "DEFAULT_TENANT_ID"]
