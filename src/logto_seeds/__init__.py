"""Bootstrap Management API resources, scopes, and roles for tenants."""

from .config import SeedConfig, load_config_from_env
from .exceptions import BundleIntegrityError, ConfigurationError, SeedError
from .ids import STANDARD_ALPHABET, STANDARD_ID_SIZE, generate_standard_id, is_standard_id
from .management_api import (
    DEFAULT_MANAGEMENT_API,
    create_admin_data,
    create_admin_data_in_admin_tenant,
    create_me_api_in_admin_tenant,
    get_management_api_admin_name,
    get_management_api_resource_indicator,
)
from .models import AdminData, PredefinedScope, Resource, Role, Scope, UserRole
from .seeding import TenantSeedPlan, plan_admin_tenant_seed, plan_default_tenant_seed, plan_tenant_seed
from .tenancy import ADMIN_TENANT_ID, DEFAULT_TENANT_ID

__all__ = [
    "ADMIN_TENANT_ID",
    "DEFAULT_MANAGEMENT_API",
    "DEFAULT_TENANT_ID",
    "STANDARD_ALPHABET",
    "STANDARD_ID_SIZE",
    "AdminData",
    "BundleIntegrityError",
    "ConfigurationError",
    "PredefinedScope",
    "Resource",
    "Role",
    "Scope",
    "SeedConfig",
    "SeedError",
    "TenantSeedPlan",
    "UserRole",
    "create_admin_data",
    "create_admin_data_in_admin_tenant",
    "create_me_api_in_admin_tenant",
    "generate_standard_id",
    "get_management_api_admin_name",
    "get_management_api_resource_indicator",
    "is_standard_id",
    "load_config_from_env",
    "plan_admin_tenant_seed",
    "plan_default_tenant_seed",
    "plan_tenant_seed",
]
