"""Validation utilities for builder configuration."""

import re
from typing import Iterable, Tuple

# Hostname, optionally with a port; no scheme and no path
_HOST_RE = re.compile(r"^[A-Za-z0-9.-]+(:\d+)?$")


def validate_domains(domains: Iterable[str]) -> Tuple[bool, str]:
    """Validate the hostname list of a builder.

    Args:
        domains: Candidate hostnames

    Returns:
        Tuple of (is_valid, error_message)
    """
    if domains is None:
        return False, "At least one domain is required"

    domains = list(domains)
    if not domains:
        return False, "At least one domain is required"

    for domain in domains:
        if not isinstance(domain, str) or not domain.strip():
            return False, "Domains must be non-empty strings"

    return True, ""


def looks_like_hostname(domain: str) -> Tuple[bool, str]:
    """Loose check that a domain is a bare hostname.

    Used for warnings only; builders accept any non-empty string.

    Args:
        domain: Hostname to check

    Returns:
        Tuple of (is_valid, error_message)
    """
    if "://" in domain:
        return False, f"Domain '{domain}' should not include a scheme"

    if not _HOST_RE.match(domain):
        return False, f"Domain '{domain}' does not look like a hostname"

    return True, ""
