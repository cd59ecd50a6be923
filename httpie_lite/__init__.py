from .__version__ import __description__, __title__, __version__
from ._client import build_body, create_client, execute
from ._exceptions import HttpieError, NetworkError
from ._models import Get, KvPair, Options, Post, ResponseSnapshot
from ._render import render
from ._validators import parse_kv_pair, parse_url
from .cli import main

_EXCLUDED_FROM_ALL = {"cli"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
