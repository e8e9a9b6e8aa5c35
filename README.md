# linkcheck

Small tools for the classic data-link layer error-control schemes. Each one has
a sending side (`client`) and a receiving side (`server`) that pass one
message over a TCP connection, by default on `127.0.0.1`:

- **Parity** (`linkcheck.parity`): append an even or odd parity bit, then
  check it on arrival.
- **CRC** (`linkcheck.crc`): divide by a generator polynomial using modulo-2
  arithmetic, send the codeword, and have the receiver check that the
  remainder is zero.
- **Checksum** (`linkcheck.checksum`): a one's-complement sum over fixed-size
  segments (the segment length must be a power of two, at least 2); data is
  padded with leading zeros to whole segments before the checksum is appended.
- **Hamming code** (`linkcheck.hamming`): parity bits at the power-of-two
  positions, with position 1 written rightmost; the receiver locates and flips
  a single wrong bit.
- **Chat** (`linkcheck.chat`): the client sends lines to the server, which
  prints them, until the client sends `quit`.

## Installation

```
pip install .
```

No third-party libraries are needed at run time. To run the test suite:

```
pip install .[test]
pytest
```

## Command-line use

Every command takes a role, `client` or `server`, and the options `--host`
(default `127.0.0.1`) and `--port`. Start the server in one terminal, then the
client in another; both ask for their input interactively.

```
linkcheck-chat server          # port 9995
linkcheck-chat client
linkcheck-crc server           # port 9422
linkcheck-crc client
linkcheck-checksum server      # port 9995
linkcheck-checksum client
linkcheck-hamming server       # port 9995
linkcheck-hamming client
linkcheck-parity server        # port 9995
linkcheck-parity client
```

- `linkcheck-crc client` asks for the data and the generator polynomial and
  sends the codeword; the server offers to replace the received codeword with
  a modified one, asks for the generator and reports whether the data arrived
  intact.
- `linkcheck-checksum` asks both sides for the segment length, repeating the
  question until it is a power of two.
- `linkcheck-hamming server` reports the position of a wrong bit, if any, and
  prints the corrected codeword.
- `linkcheck-parity client` asks for even (`e`) or odd (`o`) parity and offers
  to modify the codeword before sending it; the server asks for the parity
  kind and prints `error` or `no error`.

The CRC, checksum, Hamming and parity servers exit with status 1 when the
check fails.

## Library use

The coding functions work without any network:

```python
from linkcheck import crc, checksum, hamming, parity

codeword = crc.encode("1101011011", "10011")
crc.crc_remainder("1101011011", "10011")  # the check bits alone
crc.verify(codeword, "10011")             # returns the data; raises crc.CrcError if corrupted

encoded = checksum.encode("10110011", 4)
checksum.checksum("10110011", 4)
checksum.verify(encoded, 4)               # raises checksum.ChecksumError if corrupted

code = hamming.encode("1011")
hamming.parity_bit_count(4)               # 3
hamming.syndrome(code)                    # 0 when no error is detected
result = hamming.correct(code)            # a hamming.Correction
result.codeword, result.position, result.corrected, result.data

parity.add_parity("1011", parity.Parity.EVEN)   # "10111"
parity.has_error("10111", parity.Parity.EVEN)   # False
```

`CrcError` and `ChecksumError` are subclasses of `ValueError`; the Hamming
functions raise `ValueError` for input that is not binary or an error
position outside the codeword.

`linkcheck.net` carries a single NUL-terminated message: `send_message`
connects and sends it, `receive_message` accepts one connection and returns
the text (with an optional timeout), and `open_server` returns a listening
socket. `linkcheck.chat` provides `serve`, `run_client` and `split_messages`.

## What it does not do

- Every server accepts a single client, handles one exchange and exits; there
  is no handling of several clients at once.
- The chat is one-way: only the client sends, only the server prints.
- The Hamming code corrects one wrong bit; two or more wrong bits are not
  detected as such and may be "corrected" wrongly.