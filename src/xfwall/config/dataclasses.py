"""
Configuration dataclasses for xfwall.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class XfconfConfig:
    """Configuration service (xfconf-query) settings."""
    command: str = "xfconf-query"
    channel: str = "xfce4-desktop"
    timeout: float = 2  # Seconds per call


@dataclass
class RotationConfig:
    """Rotation and explicit assignment settings."""
    repeat: bool = False  # Default for cycling explicit image lists
    seed: Optional[int] = None  # Seed for the image selector's random source


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    verbose: bool = False
