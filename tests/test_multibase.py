"""Tests for prefix-aware multibase encoding."""

import pytest

import multibase_registry
from multibase_registry import (
    AlgorithmNotFoundError,
    FormatError,
    InvalidArgumentError,
    Registry,
    algorithm_of,
    build_registry,
    decode,
    default_registry,
    encode,
    is_encoded,
)

# Multibase encodings of b"yes mani !"
PREFIXED_VECTORS = [
    "f796573206d616e692021",
    "F796573206D616E692021",
    "bpfsxgidnmfxgsibb",
    "BPFSXGIDNMFXGSIBB",
    "cpfsxgidnmfxgsibb",
    "vf5in683dc5n6i811",
    "tf5in683dc5n6i811",
    "hxf1zgedpcfzg1ebb",
    "k2lcpzo5yikidynfl",
    "z7paNL19xttacUY",
    "Z7Pznk19XTTzBtx",
    "meWVzIG1hbmkgIQ",
    "MeWVzIG1hbmkgIQ==",
    "ueWVzIG1hbmkgIQ",
]


@pytest.mark.parametrize("text", PREFIXED_VECTORS)
def test_decode_vectors(text: str) -> None:
    """Test decoding self-describing strings."""
    assert decode(text) == b"yes mani !"


def test_encode_defaults_to_base58btc() -> None:
    """Test the default algorithm."""
    assert encode(b"yes mani !") == "z7paNL19xttacUY"


def test_encode_by_name_and_instance() -> None:
    """Test encoding with a name or an Algorithm."""
    base16 = default_registry.get("base16")
    assert encode(b"\x01", "base16") == "f01"
    assert encode(b"\x01", base16) == "f01"
    assert encode(b"", "base32") == "b"
    assert decode("b") == b""


def test_algorithm_of() -> None:
    """Test prefix lookup."""
    assert algorithm_of("BPFSXGIDNMFXGSIBB").name == "BASE32"
    assert is_encoded("z7paNL19xttacUY")
    assert not is_encoded("")
    assert not is_encoded("?abc")


def test_decode_errors() -> None:
    """Test each decode failure kind."""
    with pytest.raises(InvalidArgumentError):
        decode("")
    with pytest.raises(AlgorithmNotFoundError):
        decode("?abc")
    with pytest.raises(FormatError):
        decode("bpfsxg!idnmfxgsib")
    with pytest.raises(AlgorithmNotFoundError):
        encode(b"data", "base1000")


@pytest.mark.parametrize("code, name", [("1", "base1"), ("0", "base2"), ("7", "base8"), ("9", "base10")])
def test_reserved_codes_are_unsupported(code: str, name: str) -> None:
    """Test that reserved single-digit bases are known but not registered."""
    assert default_registry.find_by_code(code) is None
    with pytest.raises(AlgorithmNotFoundError, match=f"reserved for {name}"):
        decode(code + "0101")


def test_explicit_registry() -> None:
    """Test that an explicit registry is used instead of the default."""
    registry = build_registry()
    registry.register("reversed", "q", lambda data: data[::-1].hex(), lambda text: bytes.fromhex(text)[::-1])

    assert encode(b"\x01\x02", "reversed", registry) == "q0201"
    assert decode("q0201", registry) == b"\x01\x02"
    with pytest.raises(AlgorithmNotFoundError):
        decode("q0201")


def test_empty_explicit_registry_is_not_replaced() -> None:
    """Test that an empty registry does not fall back to the default."""
    registry = Registry()
    assert not is_encoded("z7paNL19xttacUY", registry)
    with pytest.raises(AlgorithmNotFoundError):
        decode("z7paNL19xttacUY", registry)


def test_default_registry_helpers() -> None:
    """Test the default registry helper functions."""
    assert "base58btc" in multibase_registry.list_algorithms()

    algorithm = multibase_registry.register_algorithm("testbase", "q", bytes.hex, bytes.fromhex)
    try:
        assert multibase_registry.get_algorithm("testbase") is algorithm
        assert decode(encode(b"\xca\xfe", "testbase")) == b"\xca\xfe"
    finally:
        multibase_registry.deregister_algorithm(algorithm)

    with pytest.raises(AlgorithmNotFoundError):
        multibase_registry.get_algorithm("testbase")
