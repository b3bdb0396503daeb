"""Bootstrap data for the Management API resource of each tenant."""

from __future__ import annotations

import logging
from typing import Callable, Final

from .ids import generate_standard_id
from .models import AdminData, PredefinedScope, Resource, Role, Scope, UserRole
from .tenancy import ADMIN_TENANT_ID, DEFAULT_TENANT_ID

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

MANAGEMENT_API_NAME: Final = "Logto Management API"
MANAGEMENT_API_SCOPE_DESCRIPTION: Final = "Default scope for Management API, allows all permissions."
ME_API_NAME: Final = "Logto Me API"
ME_API_SCOPE_DESCRIPTION: Final = "Default scope for Me API, allows all permissions."
ADMIN_ROLE_DESCRIPTION: Final = "Admin role for Logto."
ME_ROLE_DESCRIPTION: Final = "Default role for admin tenant."

# Persisted rows of the default tenant reference these literals.
LEGACY_RESOURCE_ID: Final = "management-api"
LEGACY_SCOPE_ALL_ID: Final = "management-api-all"
LEGACY_ADMIN_ROLE_ID: Final = "admin-role"


def get_management_api_resource_indicator(tenant_id: str, path: str = "api") -> str:
    """Return the resource indicator of ``tenant_id``'s API at ``path``."""

    return f"https://{tenant_id}.logto.app/{path}"


def get_management_api_admin_name(tenant_id: str) -> str:
    """Return the admin tenant role name that manages ``tenant_id``."""

    return f"{tenant_id}:{UserRole.ADMIN.value}"


DEFAULT_MANAGEMENT_API: Final = AdminData(
    resource=Resource(
        tenant_id=DEFAULT_TENANT_ID,
        id=LEGACY_RESOURCE_ID,
        indicator=get_management_api_resource_indicator(DEFAULT_TENANT_ID),
        name=MANAGEMENT_API_NAME,
    ),
    scope=Scope(
        tenant_id=DEFAULT_TENANT_ID,
        id=LEGACY_SCOPE_ALL_ID,
        name=PredefinedScope.ALL.value,
        description=MANAGEMENT_API_SCOPE_DESCRIPTION,
        resource_id=LEGACY_RESOURCE_ID,
    ),
    role=Role(
        tenant_id=DEFAULT_TENANT_ID,
        id=LEGACY_ADMIN_ROLE_ID,
        name=UserRole.ADMIN.value,
        description=ADMIN_ROLE_DESCRIPTION,
    ),
)
"""The fixed Management API bundle of the ``default`` tenant.

Kept for databases seeded before identifiers were generated; new tenants use
:func:`create_admin_data`.
"""


def _assemble(
    *,
    tenant_id: str,
    indicator: str,
    resource_name: str,
    scope_description: str,
    role_name: str,
    role_description: str,
    generate_id: IdFactory | None,
) -> AdminData:
    new_id = generate_id or generate_standard_id
    resource_id = new_id()
    data = AdminData(
        resource=Resource(
            tenant_id=tenant_id,
            id=resource_id,
            indicator=indicator,
            name=resource_name,
        ),
        scope=Scope(
            tenant_id=tenant_id,
            id=new_id(),
            name=PredefinedScope.ALL.value,
            description=scope_description,
            resource_id=resource_id,
        ),
        role=Role(
            tenant_id=tenant_id,
            id=new_id(),
            name=role_name,
            description=role_description,
        ),
    )
    logger.debug(
        "Built admin data for %s in tenant %s (resource=%s scope=%s role=%s)",
        indicator,
        tenant_id,
        data.resource.id,
        data.scope.id,
        data.role.id,
    )
    return data


def create_admin_data(tenant_id: str, *, generate_id: IdFactory | None = None) -> AdminData:
    """Create the Management API admin data owned by ``tenant_id`` itself."""

    return _assemble(
        tenant_id=tenant_id,
        indicator=get_management_api_resource_indicator(tenant_id),
        resource_name=MANAGEMENT_API_NAME,
        scope_description=MANAGEMENT_API_SCOPE_DESCRIPTION,
        role_name=UserRole.ADMIN.value,
        role_description=ADMIN_ROLE_DESCRIPTION,
        generate_id=generate_id,
    )


def create_admin_data_in_admin_tenant(tenant_id: str, *, generate_id: IdFactory | None = None) -> AdminData:
    """Create admin data in the admin tenant for managing ``tenant_id``'s Management API.

    The records belong to the admin tenant, but the indicator still targets
    ``tenant_id``'s API.
    """

    return _assemble(
        tenant_id=ADMIN_TENANT_ID,
        indicator=get_management_api_resource_indicator(tenant_id),
        resource_name=f"{MANAGEMENT_API_NAME} for tenant {tenant_id}",
        scope_description=MANAGEMENT_API_SCOPE_DESCRIPTION,
        role_name=get_management_api_admin_name(tenant_id),
        role_description=ADMIN_ROLE_DESCRIPTION,
        generate_id=generate_id,
    )


def create_me_api_in_admin_tenant(*, generate_id: IdFactory | None = None) -> AdminData:
    """Create the self-service Me API data in the admin tenant."""

    return _assemble(
        tenant_id=ADMIN_TENANT_ID,
        indicator=get_management_api_resource_indicator(ADMIN_TENANT_ID, "me"),
        resource_name=ME_API_NAME,
        scope_description=ME_API_SCOPE_DESCRIPTION,
        role_name=UserRole.USER.value,
        role_description=ME_ROLE_DESCRIPTION,
        generate_id=generate_id,
    )


__all__ = [
    "DEFAULT_MANAGEMENT_API",
    "IdFactory",
    "create_admin_data",
    "create_admin_data_in_admin_tenant",
    "create_me_api_in_admin_tenant",
    "get_management_api_admin_name",
    "get_management_api_resource_indicator",
]
