"""
Configuration validation for xfwall.
"""

from pathlib import Path
from typing import Dict, Any

from ..exceptions import ConfigError


VALID_STRUCTURE: Dict[str, Dict[str, Any]] = {
    'xfconf': {
        'command': str,
        'channel': str,
        'timeout': (int, float),
    },
    'rotation': {
        'repeat': bool,
        'seed': int,
    },
    'logging': {
        'level': str,
        'verbose': bool,
    },
}


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def validate_toml_structure(config_dict: Dict[str, Any], config_file: Path) -> None:
    """
    Validate TOML structure before creating dataclasses.

    Checks for unknown sections and keys, providing helpful error messages.

    Args:
        config_dict: Loaded TOML configuration dictionary
        config_file: Path to config file for error messages

    Raises:
        ConfigError: If structure validation fails
    """
    for section in config_dict:
        if section not in VALID_STRUCTURE:
            raise ConfigError(
                f"Unknown config section '{section}' in {config_file}. "
                f"Valid sections: {list(VALID_STRUCTURE.keys())}"
            )

    for section_name, section_config in config_dict.items():
        if not isinstance(section_config, dict):
            raise ConfigError(
                f"Section '{section_name}' must be a dictionary in {config_file}"
            )

        valid_keys = VALID_STRUCTURE[section_name]

        for key, value in section_config.items():
            if key not in valid_keys:
                raise ConfigError(
                    f"Unknown key '{key}' in section '{section_name}' in {config_file}. "
                    f"Valid keys: {list(valid_keys.keys())}"
                )

            expected_type = valid_keys[key]
            # bool is an int subclass; only accept it where bool is expected
            wrong_bool = isinstance(value, bool) and expected_type is not bool
            if wrong_bool or not isinstance(value, expected_type):
                raise ConfigError(
                    f"Key '{section_name}.{key}' must be of type {_type_name(expected_type)} "
                    f"in {config_file}, got {type(value).__name__}"
                )
