# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint target model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ConfigError
from ..utils.redact import REDACTED

SCHEME = "https"
_FORBIDDEN_HOST_CHARS = set("/?#@ \t\r\n")


def _coerce_port(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError("port must be an integer between 1 and 65535")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ConfigError("port must be an integer between 1 and 65535")
        value = int(value)
    if not isinstance(value, int):
        raise ConfigError("port must be an integer between 1 and 65535")
    if not 1 <= value <= 65535:
        raise ConfigError("port must be an integer between 1 and 65535")
    return value


@dataclass(frozen=True, repr=False)
class EndpointTarget:
    """
    A remote endpoint reached over the private network.

    The scheme is always https. When ``sensitive`` is set (the default) the
    host and port are treated as secrets: ``display`` and ``repr`` hide them
    and ``secrets()`` lists them for redaction.
    """

    host: str
    port: int
    sensitive: bool = True

    @classmethod
    def create(cls, host: Any, port: Any, *, sensitive: bool = True) -> EndpointTarget:
        """Build a validated target, coercing a numeric port string."""
        target = cls(host=str(host).strip() if host is not None else "", port=_coerce_port(port), sensitive=sensitive)
        target.validate()
        return target

    def validate(self) -> None:
        if not isinstance(self.host, str) or not self.host.strip():
            raise ConfigError("host must not be empty")
        if "://" in self.host or any(ch in _FORBIDDEN_HOST_CHARS for ch in self.host):
            raise ConfigError("host must be a bare hostname without scheme, credentials or path")
        _coerce_port(self.port)

    @property
    def scheme(self) -> str:
        return SCHEME

    @property
    def authority(self) -> str:
        host = self.host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{host}:{self.port}"

    def url_for(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{SCHEME}://{self.authority}{path}"

    @property
    def display(self) -> str:
        return REDACTED if self.sensitive else f"{SCHEME}://{self.authority}"

    def secrets(self) -> list[str]:
        if not self.sensitive:
            return []
        return [self.host, str(self.port)]

    def __repr__(self) -> str:
        if self.sensitive:
            return f"EndpointTarget(host={REDACTED!r}, port={REDACTED!r}, sensitive=True)"
        return f"EndpointTarget(host={self.host!r}, port={self.port!r}, sensitive=False)"
