"""Derive the raw group 14 shared key from a saved key pair and a peer public key."""
import argparse
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError

from dhgroup14.common.protocol import KeyPairFile, PublicKeyMsg
from dhgroup14.crypto import dh
from dhgroup14.crypto.errors import DHError

load_dotenv()


def derive_shared(keypair_path: str, peer_path: str) -> bytes:
    """
    Load our key pair and the peer's public key, then derive the shared key.

    Args:
        keypair_path: Path to <name>-keypair.json
        peer_path: Path to the peer's <name>-public.json

    Returns:
        256-byte shared key
    """
    with open(keypair_path, "r") as f:
        keypair = KeyPairFile.model_validate_json(f.read())
    with open(peer_path, "r") as f:
        peer = PublicKeyMsg.model_validate_json(f.read())

    return dh.derive_shared_secret(
        None,
        peer.public_key_bytes(),
        keypair.private_key_bytes()
    )


def main(argv=None):
    keys_dir = os.getenv("KEYS_DIR", "keys")

    parser = argparse.ArgumentParser(description="Derive group 14 DH shared key")
    parser.add_argument(
        "--keypair",
        required=True,
        help=f"Our key pair file (relative names are looked up in {keys_dir})"
    )
    parser.add_argument(
        "--peer",
        required=True,
        help=f"Peer public key file (relative names are looked up in {keys_dir})"
    )

    args = parser.parse_args(argv)
    keypair_path = _resolve(args.keypair, keys_dir)
    peer_path = _resolve(args.peer, keys_dir)

    try:
        shared = derive_shared(keypair_path, peer_path)
    except (OSError, ValidationError, DHError) as e:
        print(f"[!] Key agreement failed: {e}")
        return 1

    print(shared.hex())
    return 0


def _resolve(path: str, keys_dir: str) -> str:
    """Return path as given if it exists, else the same name inside keys_dir."""
    if os.path.exists(path) or os.path.isabs(path):
        return path
    return os.path.join(keys_dir, path)


if __name__ == "__main__":
    sys.exit(main())
