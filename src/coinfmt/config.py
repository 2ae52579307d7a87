"""CLI/runtime configuration.

Config files are JSON with camelCase keys:
{
  "logLevel": "INFO",
  "logFormat": "%(levelname)s %(name)s: %(message)s"
}
Missing keys keep their defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Config:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level!r}. Must be one of {list(_LEVELS)}.")
        if not isinstance(self.log_format, str) or not self.log_format.strip():
            raise ValueError(f"Invalid log_format: {self.log_format!r}. Must be a non-empty string.")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as err:
            raise ValueError(f"Failed to load config from {p}: {err}") from err
        if not isinstance(data, dict):
            raise ValueError(f"Failed to load config from {p}: expected JSON object")

        defaults = cls()
        return cls(
            log_level=data.get("logLevel", defaults.log_level),
            log_format=data.get("logFormat", defaults.log_format),
        )

    def update(self, **kwargs: Any) -> "Config":
        """Return a copy with updated values."""
        current = asdict(self)
        current.update(kwargs)
        return Config(**current)

    def to_dict(self) -> dict[str, Any]:
        return {"logLevel": self.log_level, "logFormat": self.log_format}

    def configure_logging(self) -> None:
        logging.basicConfig(level=getattr(logging, self.log_level), format=self.log_format, force=True)
