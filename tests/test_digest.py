import hashlib
import pytest
from repotrust_core.digest import digest_bytes, hash_bytes, new_digest, resolve_algorithm
from repotrust_core.errors import UnsupportedAlgorithm

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def test_known_empty_vectors():
    assert digest_bytes(b"", "sha256") == EMPTY_SHA256
    assert digest_bytes(b"", "md5") == EMPTY_MD5


@pytest.mark.parametrize("name", ["sha256", "SHA256", "SHA-256", " Sha-256 "])
def test_name_lookup_is_case_insensitive(name):
    assert digest_bytes(b"fdroid", name) == hashlib.sha256(b"fdroid").hexdigest()


@pytest.mark.parametrize("name", ["md5", "sha1", "sha224", "sha384", "sha512"])
def test_matches_hashlib(name):
    data = b"catalog index entry" * 100
    assert digest_bytes(data, name) == hashlib.new(name, data).hexdigest()


def test_unknown_algorithm_raises():
    with pytest.raises(UnsupportedAlgorithm) as exc:
        resolve_algorithm("whirlpool")
    assert exc.value.algorithm == "whirlpool"


def test_hash_bytes_recovers_unknown_algorithm(caplog):
    assert hash_bytes(b"x", "nope") is None
    assert "does not support nope" in caplog.text
    assert hash_bytes(b"x", "MD5") == hashlib.md5(b"x").hexdigest()


def test_new_digest_objects_are_independent():
    a = new_digest("sha256")
    b = new_digest("sha256")
    a.update(b"left")
    b.update(b"right")
    assert a.finalize().hex() == hashlib.sha256(b"left").hexdigest()
    assert b.finalize().hex() == hashlib.sha256(b"right").hexdigest()


@pytest.mark.parametrize("name", ["s-h-a-2-5-6", "md_5", "sha_256", "sha--256", "SHA-"])
def test_mangled_names_are_not_folded(name):
    with pytest.raises(UnsupportedAlgorithm):
        resolve_algorithm(name)


@pytest.mark.parametrize("data", [300, "text", None])
def test_non_buffer_input_is_refused(data):
    with pytest.raises(TypeError):
        digest_bytes(data, "sha256")


def test_bytearray_and_memoryview_are_accepted():
    expected = hashlib.sha256(b"abc").hexdigest()
    assert digest_bytes(bytearray(b"abc"), "sha256") == expected
    assert digest_bytes(memoryview(b"abc"), "sha256") == expected
