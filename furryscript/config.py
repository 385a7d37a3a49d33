"""
FurryScript Run Configuration
=============================
Settings for the command-line runner and REPL. The language core takes
no configuration.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_FALSY = ("0", "false", "no", "off")


@dataclass
class RunConfig:
    """Configuration for running FurryScript from the command line."""

    log_level: str = "WARNING"      # Level passed to logging.basicConfig
    require_extension: bool = True  # Refuse files without the .fur extension
    extension: str = ".fur"         # Source file extension
    show_banner: bool = True        # Print the usage banner when no file is given

    @classmethod
    def from_env(cls) -> RunConfig:
        """Build a config from FURRYSCRIPT_* environment variables."""
        config = cls()
        config.log_level = os.environ.get("FURRYSCRIPT_LOG_LEVEL", config.log_level).upper()
        require = os.environ.get("FURRYSCRIPT_REQUIRE_EXTENSION")
        if require is not None:
            config.require_extension = require.strip().lower() not in _FALSY
        banner = os.environ.get("FURRYSCRIPT_BANNER")
        if banner is not None:
            config.show_banner = banner.strip().lower() not in _FALSY
        return config
