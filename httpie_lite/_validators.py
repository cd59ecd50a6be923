from __future__ import annotations

import httpx

from ._models import KvPair


def parse_url(value: str) -> str:
    """
    Check that ``value`` is an absolute URL with a scheme and a host.

    The string is returned unchanged.
    """
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ValueError(f"{value!r} is not a valid URL: {exc}") from exc
    if not url.scheme or not url.host:
        raise ValueError(f"{value!r} is not a valid URL: relative URL without a base")
    return value


def parse_kv_pair(value: str) -> KvPair:
    """
    Parse a ``key=value`` token.

    Only the first two ``=``-separated pieces are used, so ``a=b=c`` gives
    ``KvPair(k="a", v="b")``.
    """
    pieces = value.split("=")
    if len(pieces) < 2:
        raise ValueError(f"Failed to parse {value}")
    return KvPair(k=pieces[0], v=pieces[1])
