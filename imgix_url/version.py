"""Package version."""

__version__ = "1.0.0"

LIBRARY_PARAM = "ixlib"
LIBRARY_NAME = "python"


def library_tag() -> str:
    """Value sent in the library-identification parameter."""
    return f"{LIBRARY_NAME}-{__version__}"
