from __future__ import annotations

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class KvPair:
    """A ``key=value`` token from the command line."""

    k: str
    v: str


@dataclasses.dataclass(frozen=True)
class Get:
    url: str


@dataclasses.dataclass(frozen=True)
class Post:
    url: str
    body: tuple[KvPair, ...] = ()


Options = typing.Union[Get, Post]


@dataclasses.dataclass(frozen=True)
class ResponseSnapshot:
    """
    Everything the renderer needs from a response, read once from the client.

    ``headers`` keeps the server's order and repeated names. ``mime`` is the
    parameter-free media type from the first ``Content-Type`` header, or
    ``None`` when the header is absent or cannot be parsed.
    """

    http_version: str
    status_code: int
    reason_phrase: str
    headers: list[tuple[str, str]]
    mime: str | None
    text: str

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()
