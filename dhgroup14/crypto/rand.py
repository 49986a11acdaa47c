"""Injected random source: any callable n -> n random bytes."""
import secrets
from typing import Callable

from dhgroup14.crypto.errors import RandomSourceFailure


RandomSource = Callable[[int], bytes]

# Same shape as os.urandom; backed by the OS CSPRNG.
default_random_source: RandomSource = secrets.token_bytes


def read_random(rand: RandomSource, n: int) -> bytes:
    """
    Read exactly n bytes from the random source.

    Exceptions raised by the source itself are not caught.

    Args:
        rand: Random source callable
        n: Number of bytes wanted

    Returns:
        n random bytes

    Raises:
        RandomSourceFailure: If the source returned anything but n bytes
    """
    data = rand(n)
    if not isinstance(data, (bytes, bytearray)):
        raise RandomSourceFailure(
            f"random source returned {type(data).__name__}, expected bytes"
        )
    if len(data) != n:
        raise RandomSourceFailure(
            f"random source returned {len(data)} bytes, expected {n}"
        )
    return bytes(data)
