"""URL assembly helpers."""


def normalize_path(path: str) -> str:
    """Ensure a path starts with exactly one ``/``.

    Internal segments are left as given.

    Args:
        path: Source path, e.g. ``gaiman.jpg`` or ``/test/gaiman.jpg``

    Returns:
        Path with a single leading slash
    """
    return "/" + (path or "").lstrip("/")


def build_absolute_url(
    scheme: str,
    host: str,
    path: str,
    query: str = "",
) -> str:
    """Build complete URL.

    Args:
        scheme: ``http`` or ``https``
        host: Hostname (e.g., domain.imgix.net)
        path: Normalized path with leading slash
        query: Optional query string without ``?``

    Returns:
        Complete URL
    """
    base = f"{scheme}://{host.strip().rstrip('/')}{path}"

    if query:
        return f"{base}?{query}"
    return base


def append_param(query: str, name: str, value: str) -> str:
    """Append an already-escaped ``name=value`` pair to a query string."""
    pair = f"{name}={value}"
    if query:
        return f"{query}&{pair}"
    return pair
