"""Conversion between raw group 14 keys and cryptography's DH key objects."""
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import dh

from dhgroup14.common.utils import bytes_to_int, int_to_bytes
from dhgroup14.crypto.errors import InvalidPublicKeySize, PublicKeyOutOfRange
from dhgroup14.crypto.group import GENERATOR, MODULUS, PUBLIC_KEY_SIZE


def parameter_numbers() -> dh.DHParameterNumbers:
    """Return (p, g) of group 14 as DHParameterNumbers."""
    return dh.DHParameterNumbers(MODULUS, GENERATOR)


def parameters() -> dh.DHParameters:
    """Return a DHParameters object for group 14."""
    return parameter_numbers().parameters(default_backend())


def public_key_from_bytes(public_key: bytes) -> dh.DHPublicKey:
    """
    Build a cryptography DHPublicKey from a 256-byte group 14 public key.

    Raises:
        InvalidPublicKeySize: If public_key is not 256 bytes
        PublicKeyOutOfRange: If the value is not less than p
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise InvalidPublicKeySize(
            f"wrong public key size: {len(public_key)} bytes, expected {PUBLIC_KEY_SIZE}"
        )
    y = bytes_to_int(public_key)
    if y >= MODULUS:
        raise PublicKeyOutOfRange("public key is too large")

    pub_nums = dh.DHPublicNumbers(y, parameter_numbers())
    return pub_nums.public_key(default_backend())


def public_key_to_bytes(public_key: dh.DHPublicKey) -> bytes:
    """
    Encode a cryptography DHPublicKey as 256 big-endian bytes.

    Raises:
        ValueError: If the key does not belong to group 14
    """
    numbers = public_key.public_numbers()
    params = numbers.parameter_numbers
    if params.p != MODULUS or params.g != GENERATOR:
        raise ValueError("public key is not a group 14 key")
    return int_to_bytes(numbers.y, PUBLIC_KEY_SIZE)
