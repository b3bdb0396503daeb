"""Seed plans grouping the admin data inserted when provisioning tenants."""

from __future__ import annotations

import logging
from typing import Any

import msgspec

from .management_api import (
    DEFAULT_MANAGEMENT_API,
    IdFactory,
    create_admin_data,
    create_admin_data_in_admin_tenant,
    create_me_api_in_admin_tenant,
)
from .models import TABLE_NAMES, AdminData
from .tenancy import ADMIN_TENANT_ID, DEFAULT_TENANT_ID

logger = logging.getLogger(__name__)


class TenantSeedPlan(msgspec.Struct, frozen=True, kw_only=True, rename="camel"):
    """Admin data bundles inserted for one provisioning step.

    ``tenant_id`` names the tenant being provisioned; individual bundles may
    belong to the admin tenant.
    """

    tenant_id: str
    bundles: tuple[AdminData, ...]

    def to_rows(self) -> dict[str, list[dict[str, Any]]]:
        """Return rows grouped per table, resources first so scopes can reference them."""

        rows: dict[str, list[dict[str, Any]]] = {table: [] for table in TABLE_NAMES}
        for bundle in self.bundles:
            for table, row in bundle.to_rows().items():
                rows[table].append(row)
        return rows

    def indicators(self) -> tuple[str, ...]:
        return tuple(bundle.resource.indicator for bundle in self.bundles)


def _log_plan(plan: TenantSeedPlan) -> TenantSeedPlan:
    logger.info(
        "Planned %d admin data bundle(s) for tenant %s: %s",
        len(plan.bundles),
        plan.tenant_id,
        ", ".join(plan.indicators()),
    )
    return plan


def plan_tenant_seed(tenant_id: str, *, generate_id: IdFactory | None = None) -> TenantSeedPlan:
    """Plan the Management API data for a newly created tenant.

    The tenant receives its own bundle and the admin tenant receives the bundle
    that lets it administer the new tenant.
    """

    return _log_plan(
        TenantSeedPlan(
            tenant_id=tenant_id,
            bundles=(
                create_admin_data(tenant_id, generate_id=generate_id),
                create_admin_data_in_admin_tenant(tenant_id, generate_id=generate_id),
            ),
        )
    )


def plan_admin_tenant_seed(*, generate_id: IdFactory | None = None) -> TenantSeedPlan:
    """Plan the admin tenant's Me API and its control over the default and admin tenants."""

    return _log_plan(
        TenantSeedPlan(
            tenant_id=ADMIN_TENANT_ID,
            bundles=(
                create_me_api_in_admin_tenant(generate_id=generate_id),
                create_admin_data_in_admin_tenant(DEFAULT_TENANT_ID, generate_id=generate_id),
                create_admin_data_in_admin_tenant(ADMIN_TENANT_ID, generate_id=generate_id),
            ),
        )
    )


def plan_default_tenant_seed(*, legacy: bool = False, generate_id: IdFactory | None = None) -> TenantSeedPlan:
    if legacy:
        bundle = DEFAULT_MANAGEMENT_API
    else:
        bundle = create_admin_data(DEFAULT_TENANT_ID, generate_id=generate_id)
    return _log_plan(TenantSeedPlan(tenant_id=DEFAULT_TENANT_ID, bundles=(bundle,)))


__all__ = [
    "TenantSeedPlan",
    "plan_admin_tenant_seed",
    "plan_default_tenant_seed",
    "plan_tenant_seed",
]
