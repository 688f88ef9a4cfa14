import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

ENV_PREFIX = "ADMINFIELDS_"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the preview server and CLI logging."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read ``ADMINFIELDS_HOST``, ``ADMINFIELDS_PORT`` and ``ADMINFIELDS_LOG_LEVEL``."""
        env = os.environ if environ is None else environ
        settings = cls()

        host = env.get(f"{ENV_PREFIX}HOST")
        if host:
            settings = replace(settings, host=host)

        port = env.get(f"{ENV_PREFIX}PORT")
        if port:
            try:
                settings = replace(settings, port=int(port))
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port!r}") from None

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            settings = replace(settings, log_level=log_level.upper())

        return settings

    def override(self, **changes: Any) -> "Settings":
        """Apply explicit (e.g. command line) values, ignoring ``None``."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
