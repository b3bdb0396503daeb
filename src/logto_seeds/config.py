"""Configuration for seed plan generation."""

from __future__ import annotations

import logging
import os
from functools import partial
from typing import Mapping

from msgspec import Struct

from .exceptions import ConfigurationError
from .ids import STANDARD_ID_SIZE, generate_standard_id
from .management_api import IdFactory

ENV_LOG_LEVEL = "LOGTO_SEEDS_LOG_LEVEL"
ENV_LEGACY_DEFAULT_TENANT = "LOGTO_SEEDS_LEGACY_DEFAULT_TENANT"
ENV_ID_SIZE = "LOGTO_SEEDS_ID_SIZE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class SeedConfig(Struct, frozen=True):
    """Typed configuration for the ``logto-seeds`` command line."""

    log_level: str = "WARNING"
    legacy_default_tenant: bool = False
    id_size: int = STANDARD_ID_SIZE

    def id_factory(self) -> IdFactory | None:
        """Return the identifier factory for ``id_size``, or ``None`` for the default."""

        if self.id_size == STANDARD_ID_SIZE:
            return None
        return partial(generate_standard_id, self.id_size)


def load_config_from_env(environ: Mapping[str, str] | None = None) -> SeedConfig:
    """Build a :class:`SeedConfig` from ``LOGTO_SEEDS_*`` environment variables."""

    env = os.environ if environ is None else environ
    defaults = SeedConfig()

    log_level = env.get(ENV_LOG_LEVEL, defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"{ENV_LOG_LEVEL} must be a logging level name, got {log_level!r}")

    legacy = defaults.legacy_default_tenant
    raw_legacy = env.get(ENV_LEGACY_DEFAULT_TENANT)
    if raw_legacy is not None:
        legacy = _parse_bool(ENV_LEGACY_DEFAULT_TENANT, raw_legacy)

    id_size = defaults.id_size
    raw_size = env.get(ENV_ID_SIZE)
    if raw_size is not None:
        try:
            id_size = int(raw_size)
        except ValueError as exc:
            raise ConfigurationError(f"{ENV_ID_SIZE} must be an integer, got {raw_size!r}") from exc
        if id_size < 1:
            raise ConfigurationError(f"{ENV_ID_SIZE} must be positive, got {id_size}")

    return SeedConfig(log_level=log_level, legacy_default_tenant=legacy, id_size=id_size)


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {value!r}")


__all__ = ["SeedConfig", "load_config_from_env"]
