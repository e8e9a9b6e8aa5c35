"""Small TCP helpers shared by the link-layer demonstration tools."""

from __future__ import annotations

import socket

DEFAULT_HOST = "127.0.0.1"
_BACKLOG = 10
_CHUNK = 4096


def open_server(host: str = DEFAULT_HOST, port: int = 0) -> socket.socket:
    """Return a listening TCP socket bound to ``host:port``."""
    return socket.create_server((host, port), backlog=_BACKLOG)


def send_message(message: str, host: str = DEFAULT_HOST, port: int = 9995) -> int:
    """Connect, send ``message`` followed by a NUL terminator and close.

    Returns the number of bytes written.
    """
    payload = message.encode("utf-8") + b"\0"
    with socket.create_connection((host, port)) as conn:
        conn.sendall(payload)
    return len(payload)


def receive_message(
    host: str = DEFAULT_HOST, port: int = 9995, timeout: float | None = None
) -> str:
    """Accept one connection and return the text it sent up to the first NUL.

    Raises ``TimeoutError`` if no client connects or sends within ``timeout``.
    """
    with open_server(host, port) as server:
        server.settimeout(timeout)
        conn, _ = server.accept()
        with conn:
            conn.settimeout(timeout)
            chunks = []
            while chunk := conn.recv(_CHUNK):
                chunks.append(chunk)
    raw = b"".join(chunks).split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")