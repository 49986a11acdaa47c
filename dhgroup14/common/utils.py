"""Common utility helpers: fixed-width big-endian integers, SHA-256."""
import hashlib
from typing import Union


def bytes_to_int(data: bytes) -> int:
    """Interpret bytes as an unsigned big-endian integer."""
    return int.from_bytes(data, byteorder="big")


def int_to_bytes(value: int, length: int) -> bytes:
    """
    Encode a non-negative integer as exactly `length` big-endian bytes,
    zero-padded on the left.

    Raises:
        OverflowError: If the value does not fit in `length` bytes
    """
    return value.to_bytes(length, byteorder="big")


def sha256_hex(data: Union[bytes, str]) -> str:
    """
    Compute SHA-256 and return hex string.
    Accepts bytes or str (utf-8).
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()
