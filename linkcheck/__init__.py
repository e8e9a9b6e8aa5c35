"""Parity, CRC, checksum and Hamming codes, and a simple chat, over local TCP connections."""

__version__ = "0.1.0"
__all__ = ["chat", "checksum", "crc", "hamming", "net", "parity"]