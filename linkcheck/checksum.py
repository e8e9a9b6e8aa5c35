"""Internet-style one's complement checksum over binary digit strings."""

from __future__ import annotations

import argparse
import sys

from linkcheck.net import DEFAULT_HOST, receive_message, send_message

DEFAULT_PORT = 9995


class ChecksumError(ValueError):
    """Raised for malformed input or a codeword whose checksum does not match."""


def validate_segment_length(length: int) -> int:
    """Return ``length`` if it is a power of two of at least 2, else raise."""
    if length < 2 or length & (length - 1):
        raise ChecksumError("segment length must be a power of 2")
    return length


def _require_bits(text: str) -> None:
    if set(text) - {"0", "1"}:
        raise ChecksumError(f"data must contain only 0 and 1: {text!r}")


def _pad(data: str, segment_length: int) -> str:
    width = -(-len(data) // segment_length) * segment_length
    return data.rjust(width, "0")


def ones_complement_sum(data: str, segment_length: int) -> str:
    """Add the segments of ``data`` with end-around carry, right to left."""
    validate_segment_length(segment_length)
    _require_bits(data)
    padded = _pad(data, segment_length)
    mask = (1 << segment_length) - 1
    segments = [padded[i:i + segment_length] for i in range(0, len(padded), segment_length)]
    total = 0
    for segment in reversed(segments):
        total += int(segment, 2)
        if total > mask:
            total = (total & mask) + 1
    return format(total, f"0{segment_length}b")


def checksum(data: str, segment_length: int) -> str:
    """Return the complement of the one's complement sum of ``data``."""
    total = int(ones_complement_sum(data, segment_length), 2)
    mask = (1 << segment_length) - 1
    return format(total ^ mask, f"0{segment_length}b")


def encode(data: str, segment_length: int) -> str:
    """Pad ``data`` with leading zeros to whole segments and append its checksum."""
    return _pad(data, validate_segment_length(segment_length)) + checksum(data, segment_length)


def verify(codeword: str, segment_length: int) -> str:
    """Return the message part of ``codeword``; raise ``ChecksumError`` if it is wrong."""
    validate_segment_length(segment_length)
    _require_bits(codeword)
    if not codeword or len(codeword) % segment_length:
        raise ChecksumError("codeword is not a whole number of segments")
    if "1" in checksum(codeword, segment_length):
        raise ChecksumError("wrong message received")
    return codeword[:-segment_length]


def _ask_segment_length(prompt: str) -> int:
    while True:
        try:
            return validate_segment_length(int(input(prompt)))
        except ValueError:
            print("segment length must be a power of 2")


def _client(host: str, port: int) -> int:
    data = input("enter the data: ").strip()
    length = _ask_segment_length("enter the segment length: ")
    try:
        codeword = encode(data, length)
    except ChecksumError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"checksum:  {codeword[-length:]}")
    print(f"encoded data: {codeword}")
    send_message(codeword, host, port)
    return 0


def _server(host: str, port: int) -> int:
    codeword = receive_message(host, port)
    print(f"received data:  {codeword}")
    length = _ask_segment_length("enter the segment length: ")
    try:
        print(f"calculated checksum:  {checksum(codeword, length)}")
        message = verify(codeword, length)
    except ChecksumError:
        print("wrong message received")
        return 1
    print("actual message received")
    print(message)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="linkcheck-checksum", description="Checksum error detection."
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