"""Seed data exception types."""

from __future__ import annotations


class SeedError(Exception):
    """Base error type."""


class BundleIntegrityError(SeedError, ValueError):
    """Raised when a scope does not reference the resource of its bundle."""

    def __init__(self, resource_id: str, scope_resource_id: str) -> None:
        super().__init__(
            f"Scope references resource {scope_resource_id!r} but the bundle resource is {resource_id!r}"
        )
        self.resource_id = resource_id
        self.scope_resource_id = scope_resource_id


class ConfigurationError(SeedError, ValueError):
    """Raised when environment configuration cannot be parsed."""
