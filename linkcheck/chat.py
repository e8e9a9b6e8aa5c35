"""One-way chat: a client sends lines to a server that prints them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from linkcheck.net import DEFAULT_HOST, open_server

import socket

DEFAULT_PORT = 9995
QUIT = "quit"
_PROMPT = "Enter your Mess : (enter quit to exit): "


def split_messages(buffer: bytes) -> tuple[list[str], bytes]:
    """Split NUL-terminated messages off ``buffer``; return them and the remainder."""
    *complete, rest = buffer.split(b"\0")
    return [part.decode("utf-8", errors="replace") for part in complete], rest


def serve(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, output: TextIO | None = None
) -> list[str]:
    """Accept one client and print its messages until it quits or disconnects.

    Returns the messages received, not counting the final ``quit``.
    """
    out = output if output is not None else sys.stdout
    received: list[str] = []
    with open_server(host, port) as server:
        bound_port = server.getsockname()[1]
        print(f"Server is waiting for client connection on port {bound_port}...", file=out)
        conn, _ = server.accept()
        with conn:
            print("Client connected.", file=out)
            pending = b""
            while True:
                try:
                    chunk = conn.recv(1024)
                except OSError:
                    chunk = b""
                if not chunk:
                    print("Client disconnected or error.", file=out)
                    return received
                messages, pending = split_messages(pending + chunk)
                for message in messages:
                    if message == QUIT:
                        print("Client ended the chat.", file=out)
                        return received
                    print(f"Client says: {message}", file=out)
                    received.append(message)


def run_client(
    lines: Iterable[str], host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> list[str]:
    """Send each line (up to its first newline) until ``quit`` has been sent."""
    sent: list[str] = []
    with socket.create_connection((host, port)) as conn:
        for line in lines:
            message = line.split("\n", 1)[0]
            conn.sendall(message.encode("utf-8") + b"\0")
            sent.append(message)
            if message == QUIT:
                break
    return sent


def _prompted_lines() -> Iterator[str]:
    while True:
        try:
            yield input(_PROMPT)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="linkcheck-chat", description="Simple TCP chat.")
    parser.add_argument("role", choices=("client", "server"))
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    if args.role == "server":
        serve(args.host, args.port)
    else:
        run_client(_prompted_lines(), args.host, args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())