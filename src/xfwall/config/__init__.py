"""
Configuration package for xfwall.
"""

from .main import Config
from .dataclasses import (
    XfconfConfig,
    RotationConfig,
    LoggingConfig,
)
