"""Blinded modular exponentiation: base^(2^258 + secret) mod p.

The exponent is split into a random blinding part and its remainder, so
neither exponentiation sees the secret exponent itself. The split is drawn
fresh on every call; the product of the two partial results is the same
regardless of the split.

Same construction as libcperciva (Tarsnap, spiped).
"""
import logging

from dhgroup14.common.utils import bytes_to_int, int_to_bytes
from dhgroup14.crypto.errors import ResultOverflow
from dhgroup14.crypto.group import (
    BLINDING_SIZE,
    EXPONENT_OFFSET,
    MODULUS,
    PUBLIC_KEY_SIZE,
    TWO_EXP_256,
)
from dhgroup14.crypto.rand import RandomSource, read_random

logger = logging.getLogger(__name__)


def mod_pow(base: int, exponent: int) -> int:
    """
    Compute base^exponent mod MODULUS for a signed exponent.

    A negative exponent is handled by inverting the base modulo MODULUS
    first and raising the inverse to |exponent|.

    Raises:
        ValueError: If exponent is negative and base has no inverse
    """
    if exponent < 0:
        inverse = pow(base, -1, MODULUS)
        return pow(inverse, -exponent, MODULUS)
    return pow(base, exponent, MODULUS)


def blinded_mod_exp(rand: RandomSource, base: int, secret_exponent: bytes) -> bytes:
    """
    Compute base^(2^258 + secret_exponent) mod MODULUS with exponent blinding.

    The caller must ensure 0 <= base < MODULUS when base is untrusted.

    Args:
        rand: Random source; exactly 32 bytes are read per call
        base: Group element to exponentiate
        secret_exponent: 32-byte big-endian private exponent

    Returns:
        256-byte big-endian result, zero-padded on the left

    Raises:
        RandomSourceFailure: If the random source returned a short read
        ResultOverflow: If the result is wider than the modulus
    """
    exponent = bytes_to_int(secret_exponent) + EXPONENT_OFFSET

    # Random blinding exponent in [2^256, 2^257)
    blinding = bytes_to_int(read_random(rand, BLINDING_SIZE)) + TWO_EXP_256

    remainder = exponent - blinding

    r1 = pow(base, blinding, MODULUS)
    r2 = mod_pow(base, remainder)
    result = (r1 * r2) % MODULUS

    if result.bit_length() > MODULUS.bit_length():
        raise ResultOverflow("result is too large")

    logger.debug("blinded exponentiation done (%d-bit result)", result.bit_length())
    return int_to_bytes(result, PUBLIC_KEY_SIZE)
