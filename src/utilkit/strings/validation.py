"""Format validators for emails, URLs and UUIDs.

All validators return a boolean verdict for any ``str`` input and only raise
:class:`~utilkit.errors.InvalidInputTypeError` when the argument is not a
string at all.

``is_valid_url`` is stricter than browser (WHATWG) URL parsing. It does not
repair input: a network scheme must be followed by ``//`` and a literal host,
so ``http:example.com`` and ``http:/example.com`` are rejected, and so is a
percent-encoded host such as ``http://%41.com``.
"""

import ipaddress
import re
from urllib.parse import SplitResult, urlsplit

from utilkit.guards import ensure_string

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
URL_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes that must carry a host in their authority component.
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})
FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")


def is_valid_email(email: str) -> bool:
    """Return True if ``email`` looks like ``local@domain.tld``.

    This is a shape check, not RFC 5322 validation: the local part, domain and
    top-level part must each be non-empty and free of whitespace and ``@``.
    """
    return EMAIL_PATTERN.fullmatch(ensure_string(email)) is not None


def _has_valid_host(parts: SplitResult) -> bool:
    host = parts.hostname
    if not host:
        return False
    if "[" in parts.netloc:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True
    return not any(char in FORBIDDEN_HOST_CHARS for char in host)


def is_valid_url(url: str) -> bool:
    """Return True if ``url`` parses as an absolute URL.

    The URL needs a syntactically valid scheme. For network schemes
    (``http``, ``https``, ``ftp``, ``ws``, ``wss``) it also needs a non-empty
    host without forbidden characters and, if present, a numeric port in
    range. Any parse failure yields False.

    Example:
        >>> is_valid_url("https://example.com:8080/path?q=1")
        True
        >>> is_valid_url("example.com")
        False
    """
    candidate = ensure_string(url).strip()
    try:
        parts = urlsplit(candidate)
        _ = parts.port  # raises ValueError for non-numeric or out-of-range ports
    except ValueError:
        return False
    if not URL_SCHEME_PATTERN.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in HOST_REQUIRED_SCHEMES:
        return _has_valid_host(parts)
    return True


def is_valid_uuid(uuid: str) -> bool:
    """Return True for a canonical, hyphenated RFC 4122 UUID (versions 1-5).

    Matching is case-insensitive. The variant nibble must be one of
    ``8``, ``9``, ``a`` or ``b``.
    """
    return UUID_PATTERN.fullmatch(ensure_string(uuid)) is not None
