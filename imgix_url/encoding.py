"""Query string encoding for image parameters."""

import base64
from typing import Any, Mapping, Optional
from urllib.parse import quote

from .version import LIBRARY_PARAM, library_tag

# Left unescaped alongside letters, digits and "-_.~" (always safe for quote)
SAFE_CHARS = "!*'()"

BASE64_SUFFIX = "64"


def escape(value: Any) -> str:
    """Percent-encode a query component.

    Spaces become ``%20``, hex digits are uppercase.

    Args:
        value: Text to escape (non-str values are converted with ``str``)

    Returns:
        Escaped text
    """
    return quote(str(value), safe=SAFE_CHARS)


def base64url(value: Any) -> str:
    """URL-safe base64 of the UTF-8 bytes, without padding."""
    encoded = base64.urlsafe_b64encode(str(value).encode("utf-8"))
    return encoded.decode("ascii").rstrip("=")


def is_base64_param(name: str) -> bool:
    """Check whether a parameter's value is sent base64url encoded.

    Args:
        name: Parameter name, e.g. ``txt64``

    Returns:
        True if the name ends with the ``64`` suffix
    """
    return str(name).endswith(BASE64_SUFFIX)


def encode_param(name: str, value: Any) -> str:
    """Encode a single ``name=value`` pair."""
    if is_base64_param(name):
        value = base64url(value)
    return f"{escape(name)}={escape(value)}"


def encode_params(params: Optional[Mapping[str, Any]]) -> str:
    """Encode parameters into a query string.

    Pairs keep the mapping's insertion order. No leading ``?``.

    Args:
        params: Parameter name to value mapping

    Returns:
        Query string, empty when there are no parameters
    """
    if not params:
        return ""
    return "&".join(encode_param(name, value) for name, value in params.items())


def encode_query(params: Optional[Mapping[str, Any]], include_library_param: bool = False) -> str:
    """Encode parameters plus the optional ixlib parameter.

    This is the query string a signature is computed over.

    Args:
        params: Parameter name to value mapping
        include_library_param: Append ``ixlib=<library tag>`` after the parameters

    Returns:
        Query string without ``?`` or signature
    """
    query = encode_params(params)
    if include_library_param:
        pair = encode_param(LIBRARY_PARAM, library_tag())
        query = f"{query}&{pair}" if query else pair
    return query
