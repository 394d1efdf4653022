"""Domain selection across sharded hostnames."""

import enum
import threading
import zlib
from typing import Optional, Sequence


class ShardStrategy(enum.Enum):
    """How a hostname is picked when several are configured."""

    CRC = "crc"
    CYCLE = "cycle"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ShardStrategy"]:
        """Parse a strategy name.

        Args:
            value: Strategy name (``crc``, ``cycle``), or ``none``/empty for no strategy

        Returns:
            Matching strategy, or None

        Raises:
            ValueError: If the name is not a known strategy
        """
        if value is None:
            return None
        name = str(value).strip().lower()
        if name in ("", "none", "null"):
            return None
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown shard strategy '{value}' (expected crc, cycle or none)"
            ) from None


def crc_index(path: str, count: int) -> int:
    """Shard index for a path under the CRC strategy.

    Args:
        path: Source path exactly as given to the builder
        count: Number of hostnames

    Returns:
        Index in ``range(count)``
    """
    if count <= 1:
        return 0
    return zlib.crc32(path.encode("utf-8")) % count


class DomainSelector:
    """Pick one hostname per request."""

    def __init__(self, domains: Sequence[str], strategy: Optional[ShardStrategy] = ShardStrategy.CRC):
        """Initialize domain selector.

        Args:
            domains: Ordered, non-empty hostnames
            strategy: Sharding strategy, None to always use the first hostname
        """
        self.domains = tuple(domains)
        self.strategy = strategy
        self._counter = 0
        self._lock = threading.Lock()

    def select(self, path: str) -> str:
        """Select the hostname for a path.

        Args:
            path: Source path exactly as given to the builder

        Returns:
            Hostname
        """
        if self.strategy is ShardStrategy.CYCLE:
            return self.domains[self._next_index()]

        if self.strategy is ShardStrategy.CRC:
            return self.domains[crc_index(path, len(self.domains))]

        return self.domains[0]

    def _next_index(self) -> int:
        with self._lock:
            index = self._counter % len(self.domains)
            self._counter += 1
        return index
