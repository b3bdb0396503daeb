from __future__ import annotations

from typing import Any

import msgspec

_encoder = msgspec.json.Encoder()


def json_encode(value: Any) -> bytes:
    """Serialize ``value`` to JSON bytes using msgspec."""

    return _encoder.encode(value)


def json_decode(data: bytes | str) -> Any:
    """Deserialize JSON ``data`` into native Python values."""

    return msgspec.json.decode(data)


def to_builtins(value: Any) -> Any:
    """Convert structs into the dicts and lists their JSON form would decode to."""

    return msgspec.to_builtins(value)


__all__ = ["json_decode", "json_encode", "to_builtins"]
