"""
Typed xfconf client.

Converts raw property text from the transport into typed values, raising
SchemaError when a value does not have the expected type.
"""

import logging
from typing import List, Optional

from ..config import XfconfConfig
from ..exceptions import SchemaError
from .transport import XfconfTransport, Value


def parse_bool(path: str, raw: str) -> bool:
    """Convert xfconf-query bool text ("true"/"false") to bool."""
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise SchemaError(f"Property {path} is not a bool: {raw!r}")


def parse_int(path: str, raw: str) -> int:
    """Convert xfconf-query integer text to int."""
    try:
        return int(raw.strip())
    except ValueError as e:
        raise SchemaError(f"Property {path} is not an integer: {raw!r}") from e


class XfconfClient:
    """
    Client for one xfconf channel.

    Usage:
        client = XfconfClient(config)
        image = client.get_string("/backdrop/screen0/monitor0/workspace0/last-image")
    """

    def __init__(
        self,
        xfconf_config: XfconfConfig,
        transport: Optional[XfconfTransport] = None,
    ) -> None:
        self.config = xfconf_config
        self.channel = xfconf_config.channel
        self._transport = transport or XfconfTransport(xfconf_config)
        self.logger = logging.getLogger(__name__)

    @property
    def transport(self) -> XfconfTransport:
        """Underlying command transport."""
        return self._transport

    def list_properties(self, prefix: str) -> List[str]:
        """List property paths under prefix."""
        return self._transport.list_properties(self.channel, prefix)

    def get_string(self, path: str) -> str:
        """Read a string property."""
        return self._transport.get(self.channel, path)

    def get_bool(self, path: str) -> bool:
        """Read a bool property."""
        return parse_bool(path, self._transport.get(self.channel, path))

    def get_int(self, path: str) -> int:
        """Read an integer property."""
        return parse_int(path, self._transport.get(self.channel, path))

    def set(self, path: str, value: Value) -> None:
        """Write a property."""
        self.logger.debug(f"Setting {self.channel}:{path} = {value!r}")
        self._transport.set(self.channel, path, value)
