"""Configuration management for the URL builder."""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .sharding import ShardStrategy


class Config(BaseSettings):
    """Builder configuration, read from ``IMGIX_*`` environment variables."""

    # Builder settings
    domains: str = Field(
        default="",
        description="Comma-separated hostnames (e.g. 'a.imgix.net,b.imgix.net')"
    )

    use_https: bool = Field(
        default=False,
        description="Build https:// URLs instead of http://"
    )

    sign_key: Optional[str] = Field(
        default=None,
        description="Shared secret used to sign URLs (unsigned if not set)"
    )

    shard_strategy: str = Field(
        default="crc",
        description="Domain sharding strategy: crc, cycle or none"
    )

    include_library_param: bool = Field(
        default=False,
        description="Append the ixlib library-identification parameter"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_prefix": "IMGIX_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("shard_strategy")
    @classmethod
    def validate_shard_strategy(cls, v: str) -> str:
        """Validate strategy name."""
        ShardStrategy.parse(v)
        return (v or "none").strip().lower()

    def domain_list(self) -> List[str]:
        """Configured hostnames in order."""
        return [d.strip() for d in self.domains.split(",") if d.strip()]

    def strategy(self) -> Optional[ShardStrategy]:
        """Configured sharding strategy."""
        return ShardStrategy.parse(self.shard_strategy)


def load_config(**overrides) -> Config:
    """Load configuration from environment."""
    return Config(**overrides)
