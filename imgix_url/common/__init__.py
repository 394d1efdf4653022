"""Common utilities for the URL builder."""

from .validators import validate_domains, looks_like_hostname
from .url_builder import normalize_path, build_absolute_url, append_param
from .logging_config import setup_logging, get_logger

__all__ = [
    "validate_domains",
    "looks_like_hostname",
    "normalize_path",
    "build_absolute_url",
    "append_param",
    "setup_logging",
    "get_logger",
]
