"""Cyclic redundancy check over strings of binary digits."""

from __future__ import annotations

import argparse
import sys

from linkcheck.net import DEFAULT_HOST, receive_message, send_message

DEFAULT_PORT = 9422


class CrcError(ValueError):
    """Raised for malformed input or a codeword that fails the check."""


def _require_bits(text: str, what: str) -> None:
    if set(text) - {"0", "1"}:
        raise CrcError(f"{what} must contain only 0 and 1: {text!r}")


def _check_generator(generator: str) -> None:
    if not generator:
        raise CrcError("generator polynomial must not be empty")
    _require_bits(generator, "generator polynomial")


def _divide(bits: str, steps: int, generator: str) -> str:
    """Run ``steps`` steps of modulo-2 long division; return the low-order remainder."""
    width = len(bits)
    value = int(bits or "0", 2)
    divisor = int(generator, 2)
    for i in range(steps):
        if (value >> (width - 1 - i)) & 1:
            value ^= divisor << (width - i - len(generator))
    tail = len(generator) - 1
    if tail == 0:
        return ""
    return format(value & ((1 << tail) - 1), f"0{tail}b")


def crc_remainder(data: str, generator: str) -> str:
    """Return the CRC check bits of ``data`` for ``generator``."""
    _check_generator(generator)
    _require_bits(data, "data")
    padded = data + "0" * (len(generator) - 1)
    return _divide(padded, len(data), generator)


def encode(data: str, generator: str) -> str:
    """Return ``data`` with its CRC check bits appended."""
    return data + crc_remainder(data, generator)


def verify(codeword: str, generator: str) -> str:
    """Check ``codeword`` and return the data part; raise ``CrcError`` if it is wrong."""
    _check_generator(generator)
    _require_bits(codeword, "codeword")
    tail = len(generator) - 1
    if len(codeword) < tail:
        raise CrcError("codeword is shorter than the check bits")
    steps = len(codeword) - tail
    if "1" in _divide(codeword, steps, generator):
        raise CrcError("data received wrong")
    return codeword[:steps]


def _ask(prompt: str, choices: str) -> str:
    while True:
        answer = input(prompt).strip().lower()[:1]
        if answer and answer in choices:
            return answer


def _client(host: str, port: int) -> int:
    data = input("Enter the input data: ").strip()
    generator = input("Enter coefficients of generator polynomial: ").strip()
    try:
        codeword = encode(data, generator)
    except CrcError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Updated dividend: {data + '0' * (len(generator) - 1)}")
    print(f"The codeword is: {codeword}")
    send_message(codeword, host, port)
    return 0


def _server(host: str, port: int) -> int:
    codeword = receive_message(host, port)
    print(f"the received codeword is: {codeword}")
    if _ask("Do you want to modify the codeword (y/n)? ", "yn") == "y":
        codeword = input("enter the modified codeword: ").strip()
    generator = input("Enter coefficients of generator polynomial: ").strip()
    try:
        data = verify(codeword, generator)
    except CrcError as exc:
        print(exc)
        return 1
    print("Original data received")
    print("Actual data : " + " ".join(data))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="linkcheck-crc", description="CRC error detection.")
    parser.add_argument("role", choices=("client", "server"))
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    if args.role == "client":
        return _client(args.host, args.port)
    return _server(args.host, args.port)


if __name__ == "__main__":
    raise SystemExit(main())