# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpping."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"httpping/{__version__}"


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


def _positive(value: float, default: float) -> float:
    return value if value > 0 else default


@dataclass
class ProbeSettings:
    """Probe defaults shared by the CLI, the runtime facade and the HTTP client."""

    timeout: float = 2.5
    wait: float = 1.0
    max_body_bytes: int = 64
    max_redirects: int = 10
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    require_success_status: bool = False

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_redirects = _int_env("HTTPPING_MAX_REDIRECTS", cls.max_redirects)
        if max_redirects < 0:
            max_redirects = cls.max_redirects
        return cls(
            timeout=_positive(_float_env("HTTPPING_TIMEOUT", cls.timeout), cls.timeout),
            wait=_positive(_float_env("HTTPPING_WAIT", cls.wait), cls.wait),
            max_body_bytes=int(_positive(_int_env("HTTPPING_BYTES", cls.max_body_bytes), cls.max_body_bytes)),
            max_redirects=max_redirects,
            user_agent=os.getenv("HTTPPING_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("HTTPPING_VERIFY_SSL", cls.verify_ssl),
            require_success_status=_bool_env("HTTPPING_REQUIRE_SUCCESS", cls.require_success_status),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
