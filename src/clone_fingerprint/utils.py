"""Utility helpers shared by the transports and the report builder."""
from __future__ import annotations

import ipaddress
from urllib.parse import urlparse

_SCHEME_ONLY = {"file", "data", "about"}
# Characters a host may never contain (WHATWG forbidden host code points)
_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")


def _is_valid_host(netloc: str, hostname: str | None) -> bool:
    if not hostname:
        return False
    if "[" in netloc:
        try:
            ipaddress.IPv6Address(hostname)
        except ValueError:
            return False
        return True
    return not any(char in _FORBIDDEN_HOST_CHARS or not char.isprintable() for char in hostname)


def is_valid_url(value: str) -> bool:
    """Return True for absolute URLs with a scheme and a well-formed host.

    ``file:``, ``data:`` and ``about:`` URLs carry no host and only need a
    non-empty remainder.
    """
    if not isinstance(value, str) or not value or value != value.strip():
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    scheme = parsed.scheme.lower()
    if not scheme:
        return False
    if scheme in _SCHEME_ONLY:
        return bool(parsed.netloc or parsed.path)
    if not parsed.netloc:
        return False
    try:
        parsed.port
    except ValueError:
        return False
    return _is_valid_host(parsed.netloc, parsed.hostname)


def format_percentage(value: float, precision: int = 2) -> str:
    """Render a 0-100 score with fixed decimals, e.g. ``66.67``."""
    return f"{value:.{precision}f}"


def truncate(text: str, limit: int = 72) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
