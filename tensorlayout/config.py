# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Dump configuration.

Read from the environment:
- TENSORLAYOUT_DUMP_DIR: existing directory for dump artifacts. Empty or
  unset disables tensor dumps and graph export.
- TENSORLAYOUT_VERBOSITY: logger verbosity, 0 (silent) to 4 (debug),
  applied to the shared logger by DumpConfig.apply().
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .observability import VERBOSITY_ENV_VAR, Verbosity, set_verbosity

DUMP_DIR_ENV_VAR = "TENSORLAYOUT_DUMP_DIR"


@dataclass(frozen=True)
class DumpConfig:
    """Where, and whether, diagnostic artifacts are written."""

    dump_dir: str = ""
    verbosity: Verbosity = Verbosity.INFO

    @property
    def enabled(self) -> bool:
        return bool(self.dump_dir)

    def apply(self) -> None:
        """Set the shared logger to this configuration's verbosity."""
        set_verbosity(self.verbosity)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DumpConfig":
        """
        Build a configuration from environment variables.

        Raises:
            ConfigurationError: If the verbosity is not an integer in 0..4
        """
        env = os.environ if environ is None else environ

        raw_verbosity = env.get(VERBOSITY_ENV_VAR)
        verbosity = Verbosity.INFO
        if raw_verbosity is not None:
            try:
                verbosity = Verbosity(int(raw_verbosity))
            except ValueError as e:
                raise ConfigurationError(
                    "verbosity must be an integer from 0 to 4",
                    config_key=VERBOSITY_ENV_VAR,
                    config_value=raw_verbosity,
                ) from e

        return cls(dump_dir=env.get(DUMP_DIR_ENV_VAR, ""), verbosity=verbosity)
