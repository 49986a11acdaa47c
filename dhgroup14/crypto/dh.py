"""Blinded DH over RFC 3526 group 14: key pairs, public keys, shared keys."""
import logging
from typing import NamedTuple, Optional

from dhgroup14.common.utils import bytes_to_int
from dhgroup14.crypto.blinded import blinded_mod_exp
from dhgroup14.crypto.errors import (
    InvalidPrivateKeySize,
    InvalidPublicKeySize,
    PublicKeyOutOfRange,
)
from dhgroup14.crypto.group import (
    GENERATOR,
    MODULUS,
    PRIVATE_KEY_SIZE,
    PUBLIC_KEY_SIZE,
)
from dhgroup14.crypto.rand import RandomSource, default_random_source, read_random

logger = logging.getLogger(__name__)


class KeyPair(NamedTuple):
    """Public key (256 bytes) and private key (32 bytes)."""
    public_key: bytes
    private_key: bytes


def _check_private_key(private_key: bytes) -> None:
    if len(private_key) != PRIVATE_KEY_SIZE:
        logger.debug("rejected private key of %d bytes", len(private_key))
        raise InvalidPrivateKeySize(
            f"wrong private key size: {len(private_key)} bytes, expected {PRIVATE_KEY_SIZE}"
        )


def generate_key_pair(rand: Optional[RandomSource] = None) -> KeyPair:
    """
    Generate a random private key and the corresponding public key.

    Args:
        rand: Random source (default: secrets.token_bytes)

    Returns:
        KeyPair(public_key, private_key)
    """
    if rand is None:
        rand = default_random_source

    private_key = read_random(rand, PRIVATE_KEY_SIZE)
    public_key = derive_public_key(rand, private_key)
    return KeyPair(public_key, private_key)


def derive_public_key(rand: Optional[RandomSource], private_key: bytes) -> bytes:
    """
    Compute the public key 2^(2^258 + private_key) mod p.

    Random bytes for blinding are read from rand, which must be a CSPRNG.

    Args:
        rand: Random source (None for secrets.token_bytes)
        private_key: 32-byte private key

    Returns:
        256-byte public key

    Raises:
        InvalidPrivateKeySize: If private_key is not 32 bytes
    """
    _check_private_key(private_key)
    if rand is None:
        rand = default_random_source
    return blinded_mod_exp(rand, GENERATOR, private_key)


def derive_shared_secret(
    rand: Optional[RandomSource],
    peer_public_key: bytes,
    my_private_key: bytes
) -> bytes:
    """
    Compute the shared key peer_public_key^(2^258 + my_private_key) mod p.

    Random bytes for blinding are read from rand, which must be a CSPRNG.
    The result is the raw group element; run it through a KDF before use.

    Args:
        rand: Random source (None for secrets.token_bytes)
        peer_public_key: Other party's 256-byte public key
        my_private_key: Our 32-byte private key

    Returns:
        256-byte shared key

    Raises:
        InvalidPublicKeySize: If peer_public_key is not 256 bytes
        InvalidPrivateKeySize: If my_private_key is not 32 bytes
        PublicKeyOutOfRange: If peer_public_key >= p
    """
    if len(peer_public_key) != PUBLIC_KEY_SIZE:
        logger.debug("rejected peer public key of %d bytes", len(peer_public_key))
        raise InvalidPublicKeySize(
            f"wrong public key size: {len(peer_public_key)} bytes, expected {PUBLIC_KEY_SIZE}"
        )
    _check_private_key(my_private_key)

    peer = bytes_to_int(peer_public_key)
    if peer >= MODULUS:
        logger.debug("rejected peer public key outside the group")
        raise PublicKeyOutOfRange("public key is too large")

    if rand is None:
        rand = default_random_source
    return blinded_mod_exp(rand, peer, my_private_key)
