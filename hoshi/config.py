"""Process-wide settings for hoshi.

Values come from environment variables so that applications importing
the package can tune it without code changes:

- ``HOSHI_MAX_LISTENERS``: default listener cap for new event buses
  (``-1`` disables the cap)
- ``HOSHI_LOG_LEVEL``: log level used by :func:`configure_from_settings`
- ``HOSHI_LOG_JSON``: emit JSON logs when set to ``1``/``true``
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from hoshi.exceptions import ConfigError

DEFAULT_MAX_LISTENERS = 250

_TRUTHY = ("1", "true", "True")


@dataclass
class Settings:
    """Runtime configuration."""

    max_listeners: int = DEFAULT_MAX_LISTENERS
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance

        Raises:
            ConfigError: If ``HOSHI_MAX_LISTENERS`` is not an integer
        """
        env = os.environ if environ is None else environ

        raw_max = env.get("HOSHI_MAX_LISTENERS", str(DEFAULT_MAX_LISTENERS))
        try:
            max_listeners = int(raw_max.strip())
        except ValueError as exc:
            raise ConfigError(
                f"HOSHI_MAX_LISTENERS must be an integer, got {raw_max!r}"
            ) from exc

        return cls(
            max_listeners=max_listeners,
            log_level=env.get("HOSHI_LOG_LEVEL", "INFO").upper(),
            json_logs=env.get("HOSHI_LOG_JSON", "0") in _TRUTHY,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None
