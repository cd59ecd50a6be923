from __future__ import annotations

import asyncio
import logging
import sys
import typing

import click
from rich.console import Console
from rich.logging import RichHandler

from .__version__ import __version__
from ._client import create_client, execute
from ._exceptions import HttpieError
from ._models import Get, KvPair, Options, Post, ResponseSnapshot
from ._render import render
from ._validators import parse_kv_pair, parse_url

# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------


class URLParamType(click.ParamType):
    name = "url"

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str:
        try:
            return parse_url(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


class KvPairParamType(click.ParamType):
    name = "key=value"

    def convert(
        self,
        value: typing.Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KvPair:
        if isinstance(value, KvPair):
            return value
        try:
            return parse_kv_pair(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


URL = URLParamType()
KV_PAIR = KvPairParamType()


# ---------------------------------------------------------------------------
# Running a request
# ---------------------------------------------------------------------------


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


async def send(options: Options) -> ResponseSnapshot:
    async with create_client() as client:
        return await execute(client, options)


def run(options: Options) -> None:
    try:
        snapshot = asyncio.run(send(options))
        render(snapshot)
    except (HttpieError, OSError) as exc:
        click.echo(f"{type(exc).__name__}: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


@click.group(help="A native httpie implementation. Sends GET or POST requests and pretty-prints the response.")
@click.version_option(__version__, message="%(version)s")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log request details to stderr.")
def main(verbose: bool) -> None:
    if verbose:
        configure_logging()


@main.command(help="Feed get with an URL and retrieve the response for you.")
@click.argument("url", type=URL)
def get(url: str) -> None:
    run(Get(url=url))


@main.command(
    help=(
        "Feed post with an URL and optional key=value pairs. The pairs are "
        "posted as a JSON object and the response is retrieved for you."
    )
)
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
def post(url: str, body: tuple[KvPair, ...]) -> None:
    run(Post(url=url, body=tuple(body)))
