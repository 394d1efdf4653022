"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from imgix_url.config import Config, load_config
from imgix_url.sharding import ShardStrategy


class TestConfig:
    """Test settings."""

    def test_defaults(self):
        """Test default values."""
        config = Config()

        assert config.domain_list() == []
        assert config.use_https is False
        assert config.sign_key is None
        assert config.strategy() is ShardStrategy.CRC
        assert config.include_library_param is False
        assert config.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        """Test IMGIX_* variables."""
        monkeypatch.setenv("IMGIX_DOMAINS", "a.imgix.net,b.imgix.net")
        monkeypatch.setenv("IMGIX_USE_HTTPS", "true")
        monkeypatch.setenv("IMGIX_SIGN_KEY", "secret")
        monkeypatch.setenv("IMGIX_SHARD_STRATEGY", "cycle")
        monkeypatch.setenv("IMGIX_INCLUDE_LIBRARY_PARAM", "1")

        config = load_config()
        assert config.domain_list() == ["a.imgix.net", "b.imgix.net"]
        assert config.use_https is True
        assert config.sign_key == "secret"
        assert config.strategy() is ShardStrategy.CYCLE
        assert config.include_library_param is True

    def test_domain_list_trims(self):
        """Test whitespace and empty entries are dropped."""
        config = Config(domains=" a.imgix.net , ,b.imgix.net ")

        assert config.domain_list() == ["a.imgix.net", "b.imgix.net"]

    def test_strategy_none(self):
        """Test disabling sharding."""
        assert Config(shard_strategy="none").strategy() is None
        assert Config(shard_strategy="").strategy() is None

    def test_strategy_normalized(self):
        """Test strategy names are lowercased."""
        assert Config(shard_strategy="CRC").shard_strategy == "crc"

    def test_unknown_strategy(self):
        """Test bad strategy names are rejected."""
        with pytest.raises(ValidationError):
            Config(shard_strategy="random")

    def test_overrides(self, monkeypatch):
        """Test keyword overrides win over environment."""
        monkeypatch.setenv("IMGIX_DOMAINS", "env.imgix.net")

        assert load_config(domains="arg.imgix.net").domain_list() == ["arg.imgix.net"]
