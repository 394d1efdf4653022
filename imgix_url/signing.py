"""Request signing.

The token is ``md5(sign_key + path [+ "?" + query])`` rendered as lowercase
hex and sent as the ``s`` parameter. The receiving service recomputes it with
the same shared key, so the digest must stay MD5 to interoperate.
"""

import hashlib
import hmac

SIGNATURE_PARAM = "s"


def signature_base(sign_key: str, path: str, query: str = "") -> str:
    """String the signature is computed over.

    Args:
        sign_key: Shared secret
        path: Path with its leading ``/``
        query: Encoded query string without ``?``

    Returns:
        Concatenated string
    """
    if query:
        return f"{sign_key}{path}?{query}"
    return f"{sign_key}{path}"


def sign(sign_key: str, path: str, query: str = "") -> str:
    """Compute the signature for a path and query string.

    Args:
        sign_key: Shared secret
        path: Path with its leading ``/``
        query: Encoded query string without ``?``, empty if there are no parameters

    Returns:
        Lowercase hex MD5 digest
    """
    base = signature_base(sign_key, path, query)
    return hashlib.md5(base.encode("utf-8")).hexdigest()


def verify(sign_key: str, path: str, query: str, signature: str) -> bool:
    """Check a signature received with a URL.

    Args:
        sign_key: Shared secret
        path: Path with its leading ``/``
        query: Encoded query string without the signature parameter
        signature: Value of the ``s`` parameter

    Returns:
        True if the signature matches
    """
    expected = sign(sign_key, path, query)
    return hmac.compare_digest(str(signature or ""), expected)
