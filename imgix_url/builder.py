"""URL builder for image CDN requests."""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .common.url_builder import append_param, build_absolute_url, normalize_path
from .common.validators import looks_like_hostname, validate_domains
from .config import Config
from .encoding import encode_query
from .errors import ConfigurationError
from .sharding import DomainSelector, ShardStrategy
from .signing import SIGNATURE_PARAM, sign


class UrlBuilder:
    """Build (and optionally sign) image URLs for one or more hostnames.

    Parameters can be passed to :meth:`build_url` per call, or set on
    :attr:`parameters` and reused across calls. The builder-owned mapping is
    not safe for concurrent mutation; pass parameters per call when the
    builder is shared between threads.
    """

    def __init__(
        self,
        domains: Union[str, Iterable[str]],
        use_https: bool = False,
        sign_key: Optional[str] = None,
        shard_strategy: Union[ShardStrategy, str, None] = ShardStrategy.CRC,
        include_library_param: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL builder.

        Args:
            domains: Hostname or ordered hostnames to build URLs for
            use_https: Use https instead of http
            sign_key: Optional signing secret
            shard_strategy: How to pick among several hostnames (None for the first one)
            include_library_param: Append the ixlib parameter
            logger: Optional logger

        Raises:
            ConfigurationError: If no usable hostname is given or the strategy is unknown
        """
        self.logger = logger or logging.getLogger(__name__)

        if isinstance(domains, str):
            domains = [domains]
        domains = list(domains) if domains is not None else []

        is_valid, error = validate_domains(domains)
        if not is_valid:
            raise ConfigurationError(error)

        if not isinstance(shard_strategy, ShardStrategy):
            try:
                shard_strategy = ShardStrategy.parse(shard_strategy)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        self._domains: Tuple[str, ...] = tuple(d.strip() for d in domains)
        self._use_https = bool(use_https)
        self._sign_key = sign_key or None
        self._include_library_param = bool(include_library_param)
        self._selector = DomainSelector(self._domains, shard_strategy)
        self.parameters: Dict[str, Any] = {}

        for domain in self._domains:
            ok, warning = looks_like_hostname(domain)
            if not ok:
                self.logger.warning(warning)

        self.logger.info(
            f"URL builder ready: {len(self._domains)} domain(s), "
            f"scheme={self.scheme}, shard={shard_strategy.value if shard_strategy else 'none'}, "
            f"signed={self._sign_key is not None}"
        )

    @classmethod
    def secure(cls, domains: Union[str, Iterable[str]], **kwargs) -> "UrlBuilder":
        """Builder with https and the library parameter enabled by default."""
        kwargs.setdefault("use_https", True)
        kwargs.setdefault("include_library_param", True)
        return cls(domains, **kwargs)

    @classmethod
    def from_config(
        cls,
        config: Config,
        logger: Optional[logging.Logger] = None,
    ) -> "UrlBuilder":
        """Create a builder from settings.

        Args:
            config: Loaded configuration
            logger: Optional logger

        Returns:
            Configured builder
        """
        return cls(
            config.domain_list(),
            use_https=config.use_https,
            sign_key=config.sign_key,
            shard_strategy=config.strategy(),
            include_library_param=config.include_library_param,
            logger=logger,
        )

    @property
    def domains(self) -> Tuple[str, ...]:
        return self._domains

    @property
    def use_https(self) -> bool:
        return self._use_https

    @property
    def scheme(self) -> str:
        return "https" if self._use_https else "http"

    @property
    def sign_key(self) -> Optional[str]:
        return self._sign_key

    @property
    def shard_strategy(self) -> Optional[ShardStrategy]:
        return self._selector.strategy

    @property
    def include_library_param(self) -> bool:
        return self._include_library_param

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the URL for a source path.

        Args:
            path: Source path (not percent-encoded), e.g. ``test/gaiman.jpg``
            params: Rendering parameters; when None the builder's own
                :attr:`parameters` are used

        Returns:
            Absolute URL
        """
        if params is None:
            params = self.parameters

        host = self._selector.select(path or "")
        normalized = normalize_path(path)

        query = encode_query(params, self._include_library_param)

        if self._sign_key:
            signature = sign(self._sign_key, normalized, query)
            query = append_param(query, SIGNATURE_PARAM, signature)

        url = build_absolute_url(self.scheme, host, normalized, query)
        self.logger.debug(f"Built URL for {normalized} on {host}")
        return url

    def __repr__(self) -> str:
        strategy = self.shard_strategy.value if self.shard_strategy else None
        return (
            f"UrlBuilder(domains={list(self._domains)!r}, use_https={self._use_https}, "
            f"shard_strategy={strategy!r}, signed={self._sign_key is not None})"
        )
