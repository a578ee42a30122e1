"""xfconf configuration service integration module."""

from .client import XfconfClient, parse_bool, parse_int
from .transport import XfconfTransport, encode_value

__all__ = [
    "XfconfClient",
    "XfconfTransport",
    "encode_value",
    "parse_bool",
    "parse_int",
]
