"""Pytest configuration and fixtures."""

import logging
import os

import pytest

from imgix_url.builder import UrlBuilder
from imgix_url.common.logging_config import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep IMGIX_* variables from the surrounding shell out of tests."""
    for name in list(os.environ):
        if name.upper().startswith("IMGIX_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by setup_logging during a test."""
    yield
    logger = logging.getLogger("imgix_url")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def sign_key():
    """Signing key used by the reference URLs."""
    return "aaAAbbBB11223344"


@pytest.fixture
def domains():
    """Three sharded hostnames."""
    return ["domain.imgix.net", "domain2.imgix.net", "domain3.imgix.net"]


@pytest.fixture
def builder(logger):
    """Plain http builder for a single domain."""
    return UrlBuilder("domain.imgix.net", logger=logger)


@pytest.fixture
def signed_builder(sign_key, logger):
    """Signed http builder for a single domain."""
    return UrlBuilder("domain.imgix.net", sign_key=sign_key, logger=logger)
