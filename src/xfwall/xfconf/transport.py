"""
Command-line transport for the xfconf configuration service.

Handles low-level communication: running xfconf-query with a per-call
timeout and turning its failures into TransportError / PropertyNotFoundError.
"""

import logging
import subprocess
from typing import List, Union

from ..config import XfconfConfig
from ..exceptions import (
    TransportError,
    XfconfTimeoutError,
    XfconfCommandNotFoundError,
    PropertyNotFoundError,
)


logger = logging.getLogger(__name__)

Value = Union[str, bool, int]

# xfconf-query stderr markers for a missing property or empty channel
_MISSING_MARKERS = ("does not exist", "contains no properties")


def encode_value(value: Value) -> tuple[str, str]:
    """
    Encode a Python value as an (xfconf type, text) pair for xfconf-query.

    Args:
        value: str, bool or int value to write

    Returns:
        Tuple of xfconf-query type name and command-line text

    Raises:
        TypeError: If the value type has no xfconf counterpart
    """
    # bool first: bool is an int subclass
    if isinstance(value, bool):
        return "bool", "true" if value else "false"
    if isinstance(value, int):
        return "int", str(value)
    if isinstance(value, str):
        return "string", value
    raise TypeError(f"Unsupported xfconf value type: {type(value).__name__}")


class XfconfTransport:
    """
    Low-level transport running the xfconf-query command.

    Handles:
    - Property reads (raw text values)
    - Property writes (creating the property if needed)
    - Property listing under a path prefix
    """

    def __init__(self, config: XfconfConfig) -> None:
        self.config = config
        self.command = config.command
        self.timeout = config.timeout

    def get(self, channel: str, path: str) -> str:
        """
        Read a property as raw text.

        Raises:
            PropertyNotFoundError: If the property does not exist
            TransportError: On any other failure
        """
        stdout = self._run(["-c", channel, "-p", path], channel=channel, path=path)
        return stdout.rstrip("\n")

    def set(self, channel: str, path: str, value: Value) -> None:
        """
        Write a property, creating it with the matching type if it is missing.

        Raises:
            TransportError: If the write fails
        """
        type_name, text = encode_value(value)
        self._run(
            ["-c", channel, "-p", path, "-n", "-t", type_name, "-s", text],
            channel=channel,
            path=path,
        )

    def list_properties(self, channel: str, prefix: str) -> List[str]:
        """
        List property paths under a prefix.

        Returns:
            Property paths, in the order xfconf-query prints them. Empty if
            the channel or prefix has no properties.

        Raises:
            TransportError: If the listing fails
        """
        try:
            stdout = self._run(["-c", channel, "-p", prefix, "-l"], channel=channel, path=prefix)
        except PropertyNotFoundError:
            logger.debug(f"No properties under {prefix} on channel {channel}")
            return []
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def _run(self, args: List[str], channel: str, path: str) -> str:
        """
        Run xfconf-query with the given arguments and return stdout.

        Raises:
            XfconfTimeoutError: If the call exceeds the configured timeout
            XfconfCommandNotFoundError: If xfconf-query is not installed
            PropertyNotFoundError: If xfconf-query reports a missing property
            TransportError: On any other failure
        """
        cmd = [self.command, *args]
        cmd_str = ' '.join(cmd)  # For logging purposes

        try:
            logger.debug(f"Running command: {cmd_str}")
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise XfconfTimeoutError(
                f"Timeout after {self.timeout}s: {cmd_str}"
            ) from e
        except FileNotFoundError as e:
            raise XfconfCommandNotFoundError(
                f"Command not found: {self.command} - ensure xfconf is installed and in PATH"
            ) from e
        except OSError as e:
            raise TransportError(f"OS error executing command {cmd_str}: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            if any(marker in stderr for marker in _MISSING_MARKERS):
                raise PropertyNotFoundError(channel, path)
            error_msg = f"Command failed with exit code {result.returncode}: {cmd_str}"
            if stderr:
                error_msg += f"\nStderr: {stderr}"
            raise TransportError(error_msg)

        return result.stdout or ""
