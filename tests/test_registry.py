"""Tests for the multibase algorithm registry."""

import threading

import pytest

from multibase_registry import (
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    DuplicateCodeError,
    DuplicateNameError,
    ErrorCode,
    FunctionCodec,
    InvalidArgumentError,
    Registry,
    build_registry,
)


def hex_encode(data: bytes) -> str:
    return data.hex()


def hex_decode(text: str) -> bytes:
    return bytes.fromhex(text)


@pytest.fixture
def registry() -> Registry:
    return build_registry()


def test_register_lifecycle(registry: Registry) -> None:
    """Test register, duplicate rejection, deregister and lookup."""
    testbase = registry.register("testbase", "q", hex_encode, hex_decode)
    assert testbase in registry.all()
    assert registry.get("testbase") is testbase
    assert registry.get_by_code("q") is testbase
    assert testbase.decode(testbase.encode(b"\x01\xff")) == b"\x01\xff"

    with pytest.raises(DuplicateNameError):
        registry.register("testbase", "r", hex_encode, hex_decode)
    with pytest.raises(DuplicateCodeError):
        registry.register("other", "q", hex_encode, hex_decode)

    registry.deregister(testbase)
    with pytest.raises(AlgorithmNotFoundError):
        registry.get("testbase")
    with pytest.raises(AlgorithmNotFoundError):
        registry.get_by_code("q")


def test_failed_registration_leaves_registry_unchanged(registry: Registry) -> None:
    """Test that duplicate registrations do not mutate either index."""
    before = len(registry)
    base32 = registry.get("base32")

    with pytest.raises(DuplicateNameError):
        registry.register("base32", "q")
    with pytest.raises(DuplicateCodeError):
        registry.register("base32-again", "b")

    assert len(registry) == before
    assert len(list(registry.all())) == before
    assert registry.get("base32") is base32
    assert registry.get_by_code("b") is base32
    assert registry.find("base32-again") is None
    assert registry.find_by_code("q") is None


def test_reregister_after_deregister(registry: Registry) -> None:
    """Test that a name and code can be reused once deregistered."""
    old = registry.get("base36")
    registry.deregister(old)
    assert "base36" not in registry
    assert registry.find_by_code("k") is None

    new = registry.register("base36", "k", hex_encode, hex_decode)
    assert new is not old
    assert registry.get("base36") is new
    assert old.encode(b"\x01") == "1"


def test_deregister_is_idempotent(registry: Registry) -> None:
    """Test that deregistering twice is a no-op."""
    algorithm = registry.get("base58flickr")
    before = len(registry)

    registry.deregister(algorithm)
    registry.deregister(algorithm)
    assert len(registry) == before - 1


def test_deregister_stale_algorithm_keeps_new_entry(registry: Registry) -> None:
    """Test that a stale algorithm cannot remove its replacement."""
    stale = registry.register("custom", "q", hex_encode, hex_decode)
    registry.deregister(stale)
    fresh = registry.register("custom", "q", hex_encode, hex_decode)

    registry.deregister(stale)
    assert registry.get("custom") is fresh
    assert registry.get_by_code("q") is fresh


def test_deregister_stale_algorithm_keeps_indexes_in_step(registry: Registry) -> None:
    """Test that a stale algorithm sharing only a code leaves both indexes intact."""
    stale = registry.register("custom", "q", hex_encode, hex_decode)
    registry.deregister(stale)
    fresh = registry.register("other", "q", hex_encode, hex_decode)

    registry.deregister(stale)
    assert registry.get("other") is fresh
    assert registry.get_by_code("q") is fresh
    assert registry.find("custom") is None


def test_case_sensitive_names(registry: Registry) -> None:
    """Test that upper- and lower-case names are distinct algorithms."""
    lower = registry.get("base32")
    upper = registry.get("BASE32")
    assert lower is not upper
    assert lower.code == "b"
    assert upper.code == "B"
    assert lower.encode(b"yes") == upper.encode(b"yes").lower()


@pytest.mark.parametrize("name", ["", "   ", "\t"])
def test_register_rejects_blank_name(name: str) -> None:
    """Test that blank names are rejected."""
    registry = Registry()
    with pytest.raises(InvalidArgumentError) as exc_info:
        registry.register(name, "q")
    assert exc_info.value.code == ErrorCode.ERR_INVALID_ARGUMENT
    assert len(registry) == 0


@pytest.mark.parametrize("code", ["", "qq"])
def test_register_rejects_bad_code(code: str) -> None:
    """Test that codes must be a single character."""
    with pytest.raises(InvalidArgumentError):
        Registry().register("custom", code)


def test_register_rejects_codec_and_functions() -> None:
    """Test that codec and encode/decode are mutually exclusive."""
    codec = FunctionCodec(hex_encode, hex_decode)
    with pytest.raises(InvalidArgumentError):
        Registry().register("custom", "q", hex_encode, codec=codec)


def test_placeholder_algorithm() -> None:
    """Test that an algorithm without functions raises not-implemented."""
    registry = Registry()
    base2 = registry.register("base2", "0")
    assert not base2.implemented

    with pytest.raises(AlgorithmNotImplementedError, match="base2"):
        base2.encode(b"\x00")
    with pytest.raises(AlgorithmNotImplementedError, match="base2"):
        base2.decode("0")
    with pytest.raises(NotImplementedError):
        base2.decode("0")


def test_partial_placeholder_algorithm() -> None:
    """Test that only the missing function raises not-implemented."""
    algorithm = Registry().register("encode-only", "e", encode=hex_encode)
    assert algorithm.encode(b"\xab") == "ab"
    with pytest.raises(AlgorithmNotImplementedError, match="encode-only"):
        algorithm.decode("ab")


def test_algorithm_is_immutable(registry: Registry) -> None:
    """Test that registered algorithms cannot be edited."""
    algorithm = registry.get("base16")
    with pytest.raises(AttributeError):
        algorithm.name = "hex"  # type: ignore[misc]
    assert str(algorithm) == "base16"


def test_all_is_restartable(registry: Registry) -> None:
    """Test that the enumeration can be iterated more than once."""
    view = registry.all()
    first = {algorithm.name for algorithm in view}
    second = {algorithm.name for algorithm in view}
    assert first == second
    assert len(view) == len(first) == 17

    registry.register("custom", "q")
    assert "custom" in {algorithm.name for algorithm in view}


def test_iteration_survives_mutation(registry: Registry) -> None:
    """Test that deregistering during enumeration is safe."""
    for algorithm in registry.all():
        registry.deregister(algorithm)
    assert len(registry) == 0


def test_describe(registry: Registry) -> None:
    """Test algorithm descriptors."""
    registry.register("reserved", "q")
    infos = {info.name: info for info in registry.describe()}
    assert infos["base58btc"].code == "z"
    assert infos["base58btc"].implemented
    assert not infos["reserved"].implemented


def test_isolated_registries() -> None:
    """Test that registries do not share state."""
    first = build_registry()
    second = build_registry()
    first.register("custom", "q")
    assert "custom" in first
    assert "custom" not in second


def test_concurrent_registration() -> None:
    """Test that concurrent registrations keep both indexes consistent."""
    registry = Registry()
    errors: list[Exception] = []

    def worker(offset: int) -> None:
        for i in range(50):
            try:
                registry.register(f"algo-{offset}-{i}", chr(0x4E00 + i))
            except (DuplicateNameError, DuplicateCodeError) as exc:
                errors.append(exc)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # Every code is claimed exactly once, by exactly one name
    assert len(registry) == 50
    assert len(errors) == 150
    for algorithm in registry.all():
        assert registry.get_by_code(algorithm.code) is algorithm
