"""CLI commands module."""

from .query import show_query, get_query_json
from .rotate import rotate_backdrops, set_images, print_report
from .settings import set_list, set_backdrop_mode

__all__ = [
    "show_query",
    "get_query_json",
    "rotate_backdrops",
    "set_images",
    "print_report",
    "set_list",
    "set_backdrop_mode",
]
