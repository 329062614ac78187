"""One-shot TCP request/response: a server that answers one client, and a client."""

from __future__ import annotations

import socket
from collections.abc import Callable

BUFFER_SIZE = 1024
DEFAULT_PORT = 8080
BACKLOG = 4
_ENCODING = "utf-8"


def serve_once(
    respond: Callable[[str], str],
    host: str = "",
    port: int = DEFAULT_PORT,
) -> str:
    """Accept one connection, answer its message with ``respond(message)``.

    Reads at most ``BUFFER_SIZE`` bytes from the client, sends back the
    response, closes both sockets and returns the client's message.
    """
    with socket.create_server((host, port), backlog=BACKLOG) as server:
        connection, _ = server.accept()
        with connection:
            data = connection.recv(BUFFER_SIZE)
            message = data.decode(_ENCODING, errors="replace")
            reply = respond(message)
            connection.sendall(reply.encode(_ENCODING))
    return message


def request(
    message: str,
    host: str = "127.0.0.1",
    port: int = DEFAULT_PORT,
) -> str:
    """Send ``message`` to a server and return its reply (at most ``BUFFER_SIZE`` bytes)."""
    with socket.create_connection((host, port)) as connection:
        connection.sendall(message.encode(_ENCODING))
        data = connection.recv(BUFFER_SIZE)
    return data.decode(_ENCODING, errors="replace")