# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for gatewayprobe."""

import os
from dataclasses import dataclass

from .errors import ConfigError
from .version import __version__

DEFAULT_USER_AGENT = f"gatewayprobe/{__version__}"
DEFAULT_PROMPT = "Say hello in one short sentence."
DEFAULT_MODEL = "gpt-4"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Prober defaults. Passed explicitly into the prober; never looked up from inside it."""

    health_timeout: float = 10.0
    completion_timeout: float = 30.0
    model: str = DEFAULT_MODEL
    max_tokens: int = 16
    prompt: str = DEFAULT_PROMPT
    health_path: str = "/health"
    completion_path: str = "/v1/chat/completions"
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    max_body_bytes: int = 1024 * 1024
    diagnostic_bytes: int = 512

    def validate(self) -> None:
        """Raise ConfigError for values that would make a probe meaningless."""
        if self.health_timeout <= 0 or self.completion_timeout <= 0:
            raise ConfigError("timeouts must be positive")
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            raise ConfigError("max_tokens must be a positive integer")
        if not self.model or not self.model.strip():
            raise ConfigError("model must not be empty")

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("GATEWAYPROBE_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        diagnostic_bytes = _int_env("GATEWAYPROBE_DIAGNOSTIC_BYTES", cls.diagnostic_bytes)
        if diagnostic_bytes <= 0:
            diagnostic_bytes = cls.diagnostic_bytes
        return cls(
            health_timeout=_float_env("GATEWAYPROBE_HEALTH_TIMEOUT", cls.health_timeout),
            completion_timeout=_float_env("GATEWAYPROBE_COMPLETION_TIMEOUT", cls.completion_timeout),
            model=os.getenv("GATEWAYPROBE_MODEL", cls.model),
            max_tokens=_int_env("GATEWAYPROBE_MAX_TOKENS", cls.max_tokens),
            prompt=os.getenv("GATEWAYPROBE_PROMPT", cls.prompt),
            health_path=os.getenv("GATEWAYPROBE_HEALTH_PATH", cls.health_path),
            completion_path=os.getenv("GATEWAYPROBE_COMPLETION_PATH", cls.completion_path),
            verify_ssl=_bool_env("GATEWAYPROBE_VERIFY_SSL", cls.verify_ssl),
            user_agent=os.getenv("GATEWAYPROBE_USER_AGENT", cls.user_agent),
            max_body_bytes=max_body_bytes,
            diagnostic_bytes=diagnostic_bytes,
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
