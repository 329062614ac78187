"""Digit sum over UDP: a server that sums a client's number's digits, and a client."""

from __future__ import annotations

import socket
import struct

DEFAULT_PORT = 8080
_INT = struct.Struct("<i")


def digit_sum(number: int) -> int:
    """Sum of the decimal digits of ``number``; zero for numbers below one."""
    total = 0
    while number > 0:
        number, digit = divmod(number, 10)
        total += digit
    return total


def _pack(number: int) -> bytes:
    try:
        return _INT.pack(number)
    except struct.error as error:
        raise ValueError(f"{number} does not fit in a 32-bit integer") from error


def _unpack(data: bytes) -> int:
    if len(data) != _INT.size:
        raise ValueError(f"expected {_INT.size} bytes, got {len(data)}")
    return _INT.unpack(data)[0]


def serve_digit_sum(host: str = "", port: int = DEFAULT_PORT) -> int:
    """Receive one number, send back the sum of its digits, and return that sum.

    Numbers travel as 4-byte little-endian signed integers.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind((host, port))
        data, client = sock.recvfrom(_INT.size)
        result = digit_sum(_unpack(data))
        sock.sendto(_pack(result), client)
    return result


def request_digit_sum(
    number: int, host: str = "127.0.0.1", port: int = DEFAULT_PORT
) -> int:
    """Send ``number`` to a digit-sum server and return the number it answers with."""
    payload = _pack(number)
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.sendto(payload, (host, port))
        data, _ = sock.recvfrom(_INT.size)
    return _unpack(data)