"""Even-parity Hamming code with single-bit error correction.

Codewords are written with the highest bit position on the left and
position 1 on the right; parity bits sit at the power-of-two positions.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from functools import reduce
from operator import xor

from linkcheck.net import DEFAULT_HOST, receive_message, send_message

DEFAULT_PORT = 9995


def _require_bits(text: str) -> None:
    if set(text) - {"0", "1"}:
        raise ValueError(f"input must contain only 0 and 1: {text!r}")


def _is_parity_position(position: int) -> bool:
    return position & (position - 1) == 0


def _positions(length: int) -> range:
    return range(length, 0, -1)


def _data_bits(codeword: str) -> str:
    return "".join(
        bit
        for position, bit in zip(_positions(len(codeword)), codeword)
        if not _is_parity_position(position)
    )


@dataclass(frozen=True)
class Correction:
    """Outcome of checking a codeword: the corrected word and the bad position (0 if none)."""

    codeword: str
    position: int

    @property
    def corrected(self) -> bool:
        return self.position != 0

    @property
    def data(self) -> str:
        return _data_bits(self.codeword)


def parity_bit_count(data_length: int) -> int:
    """Smallest ``r`` with ``2**r >= data_length + r + 1``."""
    if data_length < 0:
        raise ValueError("data length must not be negative")
    r = 0
    while 2**r < data_length + r + 1:
        r += 1
    return r


def encode(data: str) -> str:
    """Return the Hamming codeword for the binary string ``data``."""
    _require_bits(data)
    r = parity_bit_count(len(data))
    length = len(data) + r
    data_iter = iter(data)
    bits = {
        position: 0 if _is_parity_position(position) else int(next(data_iter))
        for position in _positions(length)
    }
    parity = reduce(xor, (position for position, bit in bits.items() if bit), 0)
    for j in range(r):
        bits[1 << j] = (parity >> j) & 1
    return "".join(str(bits[position]) for position in _positions(length))


def syndrome(codeword: str) -> int:
    """Return the position the parity checks point at; 0 means no error."""
    _require_bits(codeword)
    return reduce(
        xor,
        (position for position, bit in zip(_positions(len(codeword)), codeword) if bit == "1"),
        0,
    )


def correct(codeword: str) -> Correction:
    """Fix a single-bit error in ``codeword`` if there is one."""
    position = syndrome(codeword)
    if position == 0:
        return Correction(codeword, 0)
    if position > len(codeword):
        raise ValueError(f"error position {position} is outside the codeword")
    index = len(codeword) - position
    flipped = "0" if codeword[index] == "1" else "1"
    return Correction(codeword[:index] + flipped + codeword[index + 1:], position)


def _client(host: str, port: int) -> int:
    data = input("enter the data:  ").strip()
    try:
        codeword = encode(data)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"number of parity bits: {parity_bit_count(len(data))}")
    print(f"codeword is: {codeword}")
    send_message(codeword, host, port)
    return 0


def _server(host: str, port: int) -> int:
    codeword = receive_message(host, port)
    print(f"received codeword: {codeword}")
    print(f"number of parity bits: {len(codeword).bit_length()}")
    try:
        result = correct(codeword)
    except ValueError as exc:
        print(exc)
        return 1
    if result.corrected:
        print(f"the error is in the position {result.position}")
    else:
        print("NO ERROR")
    print("CORRECTED HAMMING CODE:")
    print(result.codeword)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="linkcheck-hamming", description="Hamming code error correction."
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