"""Exceptions raised by the group 14 key agreement operations."""


class DHError(Exception):
    """Base class for dhgroup14 failures."""
    pass


class InvalidPrivateKeySize(DHError, ValueError):
    """Private key is not exactly 32 bytes."""
    pass


class InvalidPublicKeySize(DHError, ValueError):
    """Public key is not exactly 256 bytes."""
    pass


class PublicKeyOutOfRange(DHError, ValueError):
    """Peer public key is not less than the group modulus."""
    pass


class ResultOverflow(DHError, ArithmeticError):
    """Exponentiation result is wider than the modulus (internal arithmetic bug)."""
    pass


class RandomSourceFailure(DHError):
    """Random source returned fewer (or other than) the requested bytes."""
    pass
