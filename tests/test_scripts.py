import json
import os

import derive_shared
import gen_keypair


def test_gen_keypair_writes_files(tmp_path, capsys):
    assert gen_keypair.main(["--name", "alice", "--out", str(tmp_path)]) == 0

    with open(tmp_path / "alice-keypair.json") as f:
        keypair = json.load(f)
    with open(tmp_path / "alice-public.json") as f:
        public = json.load(f)

    assert keypair["type"] == "dh_keypair"
    assert public["type"] == "dh_public"
    assert public["public_key"] == keypair["public_key"]
    assert "[+] Key pair generated successfully!" in capsys.readouterr().out


def test_gen_keypair_uses_keys_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("KEYS_DIR", str(tmp_path / "from-env"))
    assert gen_keypair.main(["--name", "carol"]) == 0
    assert os.path.exists(tmp_path / "from-env" / "carol-public.json")


def test_derive_shared_agrees(tmp_path, capsys):
    gen_keypair.generate_keypair("alice", str(tmp_path))
    gen_keypair.generate_keypair("bob", str(tmp_path))
    capsys.readouterr()

    assert derive_shared.main([
        "--keypair", str(tmp_path / "alice-keypair.json"),
        "--peer", str(tmp_path / "bob-public.json"),
    ]) == 0
    alice_view = capsys.readouterr().out.strip()

    assert derive_shared.main([
        "--keypair", str(tmp_path / "bob-keypair.json"),
        "--peer", str(tmp_path / "alice-public.json"),
    ]) == 0
    bob_view = capsys.readouterr().out.strip()

    assert len(bytes.fromhex(alice_view)) == 256
    assert alice_view == bob_view


def test_derive_shared_resolves_names_in_keys_dir(tmp_path, monkeypatch, capsys):
    gen_keypair.generate_keypair("alice", str(tmp_path))
    gen_keypair.generate_keypair("bob", str(tmp_path))
    capsys.readouterr()
    monkeypatch.setenv("KEYS_DIR", str(tmp_path))

    assert derive_shared.main(["--keypair", "alice-keypair.json", "--peer", "bob-public.json"]) == 0
    assert len(capsys.readouterr().out.strip()) == 512


def test_derive_shared_reports_out_of_range_peer(tmp_path, capsys):
    from dhgroup14.crypto.group import MODULUS

    gen_keypair.generate_keypair("alice", str(tmp_path))
    peer = tmp_path / "evil-public.json"
    peer.write_text(json.dumps({"type": "dh_public", "public_key": MODULUS.to_bytes(256, "big").hex()}))
    capsys.readouterr()

    assert derive_shared.main([
        "--keypair", str(tmp_path / "alice-keypair.json"),
        "--peer", str(peer),
    ]) == 1
    assert "[!] Key agreement failed" in capsys.readouterr().out


def test_derive_shared_reports_missing_file(tmp_path, capsys):
    assert derive_shared.main([
        "--keypair", str(tmp_path / "nope.json"),
        "--peer", str(tmp_path / "nope.json"),
    ]) == 1
    assert "[!]" in capsys.readouterr().out
