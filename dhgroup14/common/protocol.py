"""Pydantic models: dh_public message, dh_keypair file."""
from pydantic import BaseModel, field_validator
from typing import Literal

from dhgroup14.crypto.group import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE


def _check_hex(value: str, size: int, what: str) -> str:
    try:
        raw = bytes.fromhex(value)
    except ValueError:
        raise ValueError(f"{what} is not valid hex") from None
    if len(raw) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(raw)}")
    return value.lower()


class PublicKeyMsg(BaseModel):
    """Public key sent to a peer."""
    type: Literal["dh_public"] = "dh_public"
    public_key: str  # hex, 256 bytes

    @field_validator("public_key")
    @classmethod
    def _public_key_size(cls, v: str) -> str:
        return _check_hex(v, PUBLIC_KEY_SIZE, "public_key")

    @classmethod
    def from_bytes(cls, public_key: bytes) -> "PublicKeyMsg":
        return cls(public_key=public_key.hex())

    def public_key_bytes(self) -> bytes:
        return bytes.fromhex(self.public_key)


class KeyPairFile(BaseModel):
    """Key pair as stored on disk."""
    type: Literal["dh_keypair"] = "dh_keypair"
    public_key: str  # hex, 256 bytes
    private_key: str  # hex, 32 bytes

    @field_validator("public_key")
    @classmethod
    def _public_key_size(cls, v: str) -> str:
        return _check_hex(v, PUBLIC_KEY_SIZE, "public_key")

    @field_validator("private_key")
    @classmethod
    def _private_key_size(cls, v: str) -> str:
        return _check_hex(v, PRIVATE_KEY_SIZE, "private_key")

    @classmethod
    def from_bytes(cls, public_key: bytes, private_key: bytes) -> "KeyPairFile":
        return cls(public_key=public_key.hex(), private_key=private_key.hex())

    def public_key_bytes(self) -> bytes:
        return bytes.fromhex(self.public_key)

    def private_key_bytes(self) -> bytes:
        return bytes.fromhex(self.private_key)
