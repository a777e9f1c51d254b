"""Devboy configuration.

Settings come from keyword arguments, or from the environment via
``DevboyConfig.from_env``.  Instances are frozen.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from devboy.errors import ConfigurationError

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class DevboyConfig:
    """Project configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DevboyConfig(root=Path("myapi"), port=4000)
    """

    # Project
    root: Path = field(default_factory=Path.cwd)
    registry_file: str = "devboy.config.json"
    handler_filename: str = "index.py"

    # Dev server
    host: str = "127.0.0.1"
    port: int = 3000

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))
        if not 0 < self.port < 65536:
            msg = f"Port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}. Expected one of: {', '.join(_LOG_LEVELS)}"
            raise ConfigurationError(msg)

    @property
    def registry_path(self) -> Path:
        """Absolute location of the registry document."""
        return self.root / self.registry_file

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> DevboyConfig:
        """Build a config from ``PORT``, ``HOST`` and ``DEVBOY_LOG_LEVEL``.

        Keyword overrides that are not ``None`` win over the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if "PORT" in env:
            try:
                values["port"] = int(env["PORT"])
            except ValueError as exc:
                msg = f"PORT must be an integer, got {env['PORT']!r}"
                raise ConfigurationError(msg) from exc
        if "HOST" in env:
            values["host"] = env["HOST"]
        if "DEVBOY_LOG_LEVEL" in env:
            values["log_level"] = env["DEVBOY_LOG_LEVEL"]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]
