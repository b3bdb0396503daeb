"""Command line utilities for printing Management API seed data."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Mapping, Sequence

from .config import SeedConfig, load_config_from_env
from .exceptions import SeedError
from .management_api import get_management_api_resource_indicator
from .seeding import TenantSeedPlan, plan_admin_tenant_seed, plan_default_tenant_seed, plan_tenant_seed
from .serialization import json_encode

PROJECT_NAME = "logto-seeds"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TENANT_ALLOWED_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789-")

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config_from_env(environ)
    except SeedError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=args.log_level or config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args, config)
    except SeedError as exc:
        parser.error(str(exc))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROJECT_NAME, description="Print Management API seed data as JSON")
    parser.add_argument("--rows", action="store_true", help="Print table rows instead of admin data bundles")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for stderr output",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tenant = sub.add_parser("tenant", help="Seed data for a newly created tenant")
    tenant.add_argument("tenant_id", type=_tenant_id, help="Identifier of the tenant")
    tenant.set_defaults(func=_cmd_tenant)

    admin = sub.add_parser("admin", help="Seed data for the admin tenant")
    admin.set_defaults(func=_cmd_admin)

    default = sub.add_parser("default", help="Seed data for the default tenant")
    default.add_argument(
        "--legacy",
        action="store_true",
        default=None,
        help="Use the fixed legacy identifiers",
    )
    default.set_defaults(func=_cmd_default)

    indicator = sub.add_parser("indicator", help="Print a Management API resource indicator")
    indicator.add_argument("tenant_id", type=_tenant_id, help="Identifier of the tenant")
    indicator.add_argument("--path", default="api", help="API path of the indicator")
    indicator.set_defaults(func=_cmd_indicator)

    return parser


def _tenant_id(value: str) -> str:
    if not value or not set(value) <= _TENANT_ALLOWED_CHARS:
        raise argparse.ArgumentTypeError(
            f"invalid tenant id {value!r}: use lowercase letters, digits, and '-'"
        )
    return value


def _cmd_tenant(args: argparse.Namespace, config: SeedConfig) -> int:
    plan = plan_tenant_seed(args.tenant_id, generate_id=config.id_factory())
    return _emit_plan(plan, rows=args.rows)


def _cmd_admin(args: argparse.Namespace, config: SeedConfig) -> int:
    plan = plan_admin_tenant_seed(generate_id=config.id_factory())
    return _emit_plan(plan, rows=args.rows)


def _cmd_default(args: argparse.Namespace, config: SeedConfig) -> int:
    legacy = config.legacy_default_tenant if args.legacy is None else args.legacy
    plan = plan_default_tenant_seed(legacy=legacy, generate_id=config.id_factory())
    return _emit_plan(plan, rows=args.rows)


def _cmd_indicator(args: argparse.Namespace, config: SeedConfig) -> int:
    _emit({"indicator": get_management_api_resource_indicator(args.tenant_id, args.path)})
    return 0


def _emit_plan(plan: TenantSeedPlan, *, rows: bool) -> int:
    if rows:
        _emit(plan.to_rows())
    else:
        _emit(plan)
    logger.debug("Printed seed plan for tenant %s", plan.tenant_id)
    return 0


def _emit(payload: Any) -> None:
    sys.stdout.write(json_encode(payload).decode("utf-8"))
    sys.stdout.write("\n")
    sys.stdout.flush()


__all__ = ["main"]
