"""Single parity bit error detection."""

from __future__ import annotations

import argparse
from enum import Enum

from linkcheck.net import DEFAULT_HOST, receive_message, send_message

DEFAULT_PORT = 9995


class Parity(Enum):
    """Kind of parity: the total number of ones is even or odd."""

    EVEN = "e"
    ODD = "o"


def count_ones(message: str) -> int:
    """Number of ``'1'`` characters in ``message``."""
    return message.count("1")


def add_parity(message: str, parity: Parity | str) -> str:
    """Append the parity bit that gives ``message`` the requested parity."""
    kind = Parity(parity)
    ones_even = count_ones(message) % 2 == 0
    if kind is Parity.EVEN:
        return message + ("0" if ones_even else "1")
    return message + ("1" if ones_even else "0")


def has_error(codeword: str, parity: Parity | str) -> bool:
    """True if ``codeword`` does not have the requested parity."""
    ones_even = count_ones(codeword) % 2 == 0
    return not ones_even if Parity(parity) is Parity.EVEN else ones_even


def _ask(prompt: str, choices: str) -> str:
    while True:
        answer = input(prompt).strip().lower()[:1]
        if answer and answer in choices:
            return answer


_PARITY_PROMPT = "enter choice (e for even parity, o for odd parity): "


def _client(host: str, port: int) -> int:
    message = input("enter the message: ")
    print(f"message: {message}")
    codeword = add_parity(message, _ask(_PARITY_PROMPT, "eo"))
    print(f"updated message: {codeword}")
    if _ask("do you want to modify the codeword? (y/n) ", "yn") == "y":
        print(f"codeword is : {codeword} --->you can modify it (only one bit is preferred)")
        codeword = input("enter the modified codeword: ").strip()
        print(f"modified codeword is: {codeword}")
    else:
        print(f"original codeword is sent to the server side: {codeword}")
    send_message(codeword, host, port)
    return 0


def _server(host: str, port: int) -> int:
    codeword = receive_message(host, port)
    if has_error(codeword, _ask(_PARITY_PROMPT, "eo")):
        print("error")
        return 1
    print("no error")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="linkcheck-parity", description="Parity bit error detection."
    )
    parser.add_argument("role", choices=("client", "server"))
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    if args.role == "client":
        return _client(args.host, args.port)
    return _server(args.host, args.port)


if __name__ == "__main__":
    raise SystemExit(main())