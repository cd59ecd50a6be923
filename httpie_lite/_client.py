from __future__ import annotations

import logging
import typing

import httpx

from ._exceptions import NetworkError
from ._models import KvPair, Options, Post, ResponseSnapshot
from ._utils import parse_mime

logger = logging.getLogger(__name__)


def create_client() -> httpx.AsyncClient:
    """
    The client used for the whole process.

    Platform TLS defaults, redirects followed, no timeout. Proxy and
    certificate environment variables are ignored.
    """
    return httpx.AsyncClient(follow_redirects=True, timeout=None, trust_env=False)


def build_body(pairs: typing.Iterable[KvPair]) -> dict[str, str]:
    # Later pairs overwrite earlier ones with the same key.
    return {pair.k: pair.v for pair in pairs}


async def execute(client: httpx.AsyncClient, options: Options) -> ResponseSnapshot:
    """
    Send the request described by ``options`` and read the whole response.

    Client failures of any kind are raised as :class:`NetworkError`.
    """
    try:
        if isinstance(options, Post):
            body = build_body(options.body)
            logger.debug("POST %s with %d field(s)", options.url, len(body))
            response = await client.post(options.url, json=body)
        else:
            logger.debug("GET %s", options.url)
            response = await client.get(options.url)
        return snapshot(response)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(str(exc) or type(exc).__name__) from exc


def snapshot(response: httpx.Response) -> ResponseSnapshot:
    content_types = response.headers.get_list("content-type")
    content_type = content_types[0] if content_types else None
    mime = parse_mime(content_type)
    logger.debug(
        "%s %s, content-type %r parsed as %r",
        response.status_code,
        response.reason_phrase,
        content_type,
        mime,
    )
    return ResponseSnapshot(
        http_version=response.http_version,
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        headers=response.headers.multi_items(),
        mime=mime,
        text=response.text,
    )
