import json
import threading
import time
import typing

import pytest
from uvicorn.config import Config
from uvicorn.server import Server


@pytest.fixture
def anyio_backend():
    return "asyncio"


Message = typing.Dict[str, typing.Any]
Receive = typing.Callable[[], typing.Awaitable[Message]]
Send = typing.Callable[
    [typing.Dict[str, typing.Any]], typing.Coroutine[None, None, None]
]
Scope = typing.Dict[str, typing.Any]


async def app(scope: Scope, receive: Receive, send: Send) -> None:
    assert scope["type"] == "http"
    if scope["path"].startswith("/plain"):
        await plain(scope, receive, send)
    elif scope["path"].startswith("/json"):
        await hello_json(scope, receive, send)
    elif scope["path"].startswith("/html"):
        await hello_html(scope, receive, send)
    elif scope["path"].startswith("/echo_headers"):
        await echo_headers(scope, receive, send)
    elif scope["path"].startswith("/echo"):
        await echo_body(scope, receive, send)
    elif scope["path"].startswith("/no_content_type"):
        await no_content_type(scope, receive, send)
    elif scope["path"].startswith("/bad_content_type"):
        await bad_content_type(scope, receive, send)
    elif scope["path"].startswith("/status"):
        await status_code(scope, receive, send)
    elif scope["path"].startswith("/redirect"):
        await redirect_301(scope, receive, send)
    else:
        await plain(scope, receive, send)


async def respond(
    send: Send, body: bytes, content_type: typing.Optional[bytes], status: int = 200
) -> None:
    headers = [] if content_type is None else [[b"content-type", content_type]]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})


async def read_body(receive: Receive) -> bytes:
    body = b""
    more_body = True

    while more_body:
        message = await receive()
        body += message.get("body", b"")
        more_body = message.get("more_body", False)

    return body


async def plain(scope: Scope, receive: Receive, send: Send) -> None:
    await respond(send, b"hello\n", b"text/plain")


async def hello_json(scope: Scope, receive: Receive, send: Send) -> None:
    await respond(send, b'{"a":1}', b"application/json")


async def hello_html(scope: Scope, receive: Receive, send: Send) -> None:
    await respond(send, b"<html><body><p>hi</p></body></html>\n", b"text/html; charset=utf-8")


async def echo_body(scope: Scope, receive: Receive, send: Send) -> None:
    body = await read_body(receive)
    await respond(send, body, b"text/plain")


async def echo_headers(scope: Scope, receive: Receive, send: Send) -> None:
    await read_body(receive)
    body = {
        name.decode(): value.decode() for name, value in scope.get("headers", [])
    }
    await respond(send, json.dumps(body).encode(), b"text/plain")


async def no_content_type(scope: Scope, receive: Receive, send: Send) -> None:
    await respond(send, b"raw\tbody", None)


async def bad_content_type(scope: Scope, receive: Receive, send: Send) -> None:
    await respond(send, b'{"a":1}', b"not a mime type")


async def status_code(scope: Scope, receive: Receive, send: Send) -> None:
    status = int(scope["path"].replace("/status/", ""))
    await respond(send, b"status body", b"text/plain", status=status)


async def redirect_301(scope: Scope, receive: Receive, send: Send) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": 301,
            "headers": [[b"location", b"/plain"]],
        }
    )
    await send({"type": "http.response.body"})


class TestServer(Server):
    __test__ = False

    @property
    def url(self) -> str:
        port = self.servers[0].sockets[0].getsockname()[1]
        return f"http://{self.config.host}:{port}"


def serve_in_thread(server: TestServer) -> typing.Iterator[TestServer]:
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    try:
        deadline = time.monotonic() + 10
        while not server.started:
            if time.monotonic() > deadline or not thread.is_alive():
                raise RuntimeError("Server failed to start within 10 seconds")
            time.sleep(1e-3)
        yield server
    finally:
        server.should_exit = True
        thread.join(timeout=5)


@pytest.fixture(scope="session")
def server() -> typing.Iterator[TestServer]:
    config = Config(app=app, lifespan="off", loop="asyncio", host="127.0.0.1", port=0)
    server = TestServer(config=config)
    yield from serve_in_thread(server)
