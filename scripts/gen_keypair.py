"""Generate a group 14 DH key pair and save it as JSON."""
import argparse
import os
import sys
from dotenv import load_dotenv

from dhgroup14.common.protocol import KeyPairFile, PublicKeyMsg
from dhgroup14.common.utils import sha256_hex
from dhgroup14.crypto import dh

load_dotenv()


def generate_keypair(name: str, output_dir: str) -> tuple[str, str]:
    """
    Generate a key pair and write <name>-keypair.json and <name>-public.json.

    Args:
        name: Owner name used in the file names (e.g., "alice")
        output_dir: Directory to save the files

    Returns:
        (keypair_path, public_path) tuple
    """
    os.makedirs(output_dir, exist_ok=True)

    print(f"[*] Generating group 14 key pair for '{name}'...")
    public_key, private_key = dh.generate_key_pair()

    keypair_path = os.path.join(output_dir, f"{name}-keypair.json")
    public_path = os.path.join(output_dir, f"{name}-public.json")

    print(f"[*] Saving key pair to {keypair_path}")
    with open(keypair_path, "w") as f:
        f.write(KeyPairFile.from_bytes(public_key, private_key).model_dump_json(indent=2))
    os.chmod(keypair_path, 0o600)

    print(f"[*] Saving public key to {public_path}")
    with open(public_path, "w") as f:
        f.write(PublicKeyMsg.from_bytes(public_key).model_dump_json(indent=2))

    print(f"\n[+] Key pair generated successfully!")
    print(f"    Public key SHA-256: {sha256_hex(public_key)}")
    print(f"\n[!] WARNING: Keep {name}-keypair.json secure and do NOT commit to git!")
    return keypair_path, public_path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate group 14 DH key pair")
    parser.add_argument(
        "--name",
        required=True,
        help="Key owner name, used in file names"
    )
    parser.add_argument(
        "--out",
        default=os.getenv("KEYS_DIR", "keys"),
        help="Output directory (default: $KEYS_DIR or keys)"
    )

    args = parser.parse_args(argv)
    try:
        generate_keypair(args.name, args.out)
    except OSError as e:
        print(f"[!] Failed to write key files: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
