"""
Common exception classes for xfwall.

Provides domain-specific exceptions for consistent error handling across modules.
All exceptions inherit from XfwallError for unified catching at CLI level.
"""


class XfwallError(Exception):
    """
    Base exception for all xfwall errors.

    All domain-specific exceptions inherit from this class, allowing
    callers to catch all xfwall errors with a single except clause.
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(XfwallError):
    """
    Configuration-related errors.

    Raised when:
    - Config file has unknown sections or keys
    - A config value has the wrong type
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Config value validation failed.

    Raised when a config value is present but invalid (e.g., out of range,
    unknown log level, empty channel name).
    """
    pass


# ============================================================================
# Configuration Service (xfconf) Errors
# ============================================================================

class TransportError(XfwallError):
    """
    A call to the configuration service failed.

    Raised when xfconf-query exits with an error, cannot be started,
    or does not answer in time. Never retried automatically.
    """
    pass


class XfconfTimeoutError(TransportError):
    """xfconf-query did not answer within the configured timeout."""
    pass


class XfconfCommandNotFoundError(TransportError):
    """The xfconf-query command is not installed or not in PATH."""
    pass


class SchemaError(XfwallError):
    """
    A property value was absent or of an unexpected type.

    Raised by the typed client accessors when the raw value returned by the
    configuration service cannot be converted.
    """
    pass


class PropertyNotFoundError(SchemaError):
    """The requested property does not exist on the channel."""

    def __init__(self, channel: str, path: str) -> None:
        super().__init__(f"Property {path} does not exist on channel {channel}")
        self.channel = channel
        self.path = path


# ============================================================================
# Topology Errors
# ============================================================================

class NoTopologyError(XfwallError):
    """
    No monitors discovered.

    Raised when no property under the backdrop namespace matches the
    monitor/workspace color-style pattern.
    """
    pass


# ============================================================================
# Image Errors
# ============================================================================

class NoImageError(XfwallError):
    """Candidate pool exhausted without finding an existing image file."""
    pass


class ImageListError(XfwallError):
    """
    Image list file could not be read.

    Raised when the list file is missing, unreadable or not valid UTF-8.
    """
    pass


class ListValidationError(XfwallError):
    """
    A list file offered as the saved list has no usable image.

    Raised by "set list" when none of the listed paths currently exists.
    """
    pass
