"""
Main Config class for xfwall.
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field

try:
    import tomli
except ImportError:
    raise ImportError("Required package 'tomli' not found. Install with: pip install tomli")

from ..exceptions import ConfigError, ConfigValidationError

from .dataclasses import (
    XfconfConfig,
    RotationConfig,
    LoggingConfig,
)
from .validation import validate_toml_structure


@dataclass
class Config:
    """
    Main configuration class for xfwall.

    Configuration is loaded from an optional TOML file; every setting has a
    default so a missing file is not an error.
    """

    xfconf: XfconfConfig = field(default_factory=XfconfConfig)
    rotation: RotationConfig = field(default_factory=RotationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Validate and post-process configuration."""
        if not self.xfconf.channel:
            raise ConfigValidationError("xfconf channel must not be empty.")

        if not self.xfconf.command:
            raise ConfigValidationError("xfconf command must not be empty.")

        if self.xfconf.timeout <= 0 or self.xfconf.timeout > 60:
            raise ConfigValidationError(
                f"xfconf timeout ({self.xfconf.timeout}s) out of range.\n"
                "Must be greater than 0 and at most 60 seconds."
            )

        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.logging.level.upper() not in valid_levels:
            raise ConfigValidationError(
                f"Invalid log level: {self.logging.level}\n"
                f"Must be one of: {valid_levels}"
            )

    @classmethod
    def get_config_dir(cls) -> Path:
        """
        Get user configuration directory.

        Uses XDG_CONFIG_HOME if set, otherwise defaults to ~/.config.
        """
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "xfwall"
        return Path.home() / ".config" / "xfwall"

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        Args:
            config_file: Optional path to config TOML file

        Returns:
            Config instance with loaded settings

        Raises:
            ConfigError: If the file has unknown sections, keys or wrong types
            ConfigValidationError: If a value is out of range
        """
        logger = logging.getLogger(__name__)

        if not config_file:
            config_file = cls.get_config_dir() / "config.toml"

        config_dict = {}
        if config_file.exists():
            try:
                with open(config_file, 'rb') as f:
                    config_dict = tomli.load(f)

                validate_toml_structure(config_dict, config_file)

                logger.info(f"Loaded config from {config_file}")
            except (tomli.TOMLDecodeError, OSError) as e:
                logger.warning(f"Failed to load config: {e}")
                config_dict = {}
        else:
            logger.debug(f"No config file at {config_file}, using defaults")

        try:
            xfconf_config = XfconfConfig(**config_dict.get('xfconf', {}))
            rotation_config = RotationConfig(**config_dict.get('rotation', {}))
            logging_config = LoggingConfig(**config_dict.get('logging', {}))
        except TypeError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

        return cls(
            xfconf=xfconf_config,
            rotation=rotation_config,
            logging=logging_config,
        )
