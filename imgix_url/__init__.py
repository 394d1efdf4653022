"""Build and sign image CDN URLs."""

from .version import __version__
from .errors import ConfigurationError
from .sharding import ShardStrategy, DomainSelector
from .builder import UrlBuilder
from .config import Config, load_config
from .common.logging_config import setup_logging

__all__ = [
    "__version__",
    "ConfigurationError",
    "ShardStrategy",
    "DomainSelector",
    "UrlBuilder",
    "Config",
    "load_config",
    "setup_logging",
]
