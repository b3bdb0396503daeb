"""Record types for Management API resources, scopes, and roles."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Iterator

import msgspec
from msgspec import structs

from .exceptions import BundleIntegrityError


class PredefinedScope(str, Enum):
    ALL = "all"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Record(msgspec.Struct, frozen=True, kw_only=True, rename="camel"):
    """Base class for seed records.

    Attribute names are snake_case and double as table column names, while the
    JSON form uses camelCase keys.
    """

    table: ClassVar[str]

    tenant_id: str
    id: str

    def to_row(self) -> dict[str, Any]:
        """Return the record as a column mapping for its table."""

        return structs.asdict(self)


class Resource(Record, frozen=True, kw_only=True, rename="camel"):
    table: ClassVar[str] = "resources"

    indicator: str
    name: str


class Scope(Record, frozen=True, kw_only=True, rename="camel"):
    table: ClassVar[str] = "scopes"

    name: str
    description: str
    resource_id: str


class Role(Record, frozen=True, kw_only=True, rename="camel"):
    table: ClassVar[str] = "roles"

    name: str
    description: str


class AdminData(msgspec.Struct, frozen=True, kw_only=True):
    """A resource, its wildcard scope, and the role seeded alongside them."""

    resource: Resource
    scope: Scope
    role: Role

    def __post_init__(self) -> None:
        if self.scope.resource_id != self.resource.id:
            raise BundleIntegrityError(self.resource.id, self.scope.resource_id)

    def records(self) -> Iterator[Record]:
        """Yield the records in foreign-key safe insertion order."""

        yield self.resource
        yield self.scope
        yield self.role

    def to_rows(self) -> dict[str, dict[str, Any]]:
        return {record.table: record.to_row() for record in self.records()}


TABLE_NAMES: tuple[str, ...] = (Resource.table, Scope.table, Role.table)


__all__ = [
    "TABLE_NAMES",
    "AdminData",
    "PredefinedScope",
    "Record",
    "Resource",
    "Role",
    "Scope",
    "UserRole",
]
