import hashlib
from concurrent.futures import ThreadPoolExecutor
import pytest
from cryptography.hazmat.primitives import serialization
from repotrust_core import legacy
from repotrust_core.legacy import legacy_sig_hash, package_sig_hash


def _reference(raw: bytes) -> str:
    return hashlib.md5(raw.hex().encode("ascii")).hexdigest()


@pytest.mark.parametrize("raw", [b"", b"\x00", b"\xde\xad\xbe\xef", bytes(range(256))])
def test_hash_of_hex_text_not_raw_bytes(raw):
    assert legacy_sig_hash(raw) == _reference(raw)
    assert len(legacy_sig_hash(raw)) == 32


def test_differs_from_plain_md5():
    raw = b"\x01\x02\x03"
    assert legacy_sig_hash(raw) != hashlib.md5(raw).hexdigest()


def test_known_value():
    # md5("deadbeef")
    assert legacy_sig_hash(b"\xde\xad\xbe\xef") == "4f41243847da693a4f356c0486114bc6"


def test_package_sig_matches_certificate_sig(signing_cert):
    der = signing_cert.public_bytes(serialization.Encoding.DER)
    assert package_sig_hash([der.hex(), "ff" * 300]) == legacy_sig_hash(der)


@pytest.mark.parametrize("signatures", [None, []])
def test_package_sig_without_signatures(signatures):
    assert package_sig_hash(signatures) == ""


def test_digest_failure_gives_empty_string(monkeypatch):
    def broken(data, algorithm):
        raise RuntimeError("provider gone")

    monkeypatch.setattr(legacy, "digest_bytes", broken)
    assert legacy_sig_hash(b"\x01") == ""


def test_concurrent_calls():
    inputs = [bytes([i]) * (i + 1) for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(legacy_sig_hash, inputs)) == [_reference(r) for r in inputs]
