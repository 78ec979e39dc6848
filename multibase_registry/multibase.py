"""Prefix-aware multibase encoding and the process default registry."""

from .algorithm import Algorithm
from .codecs import Codec, DecodeFn, EncodeFn
from .config import build_registry
from .constants import DEFAULT_ALGORITHM, RESERVED_CODES
from .errors import AlgorithmNotFoundError, InvalidArgumentError
from .registry import Registry

# Populated once at import with the standard algorithm set.
default_registry = build_registry()


def _resolve(registry: Registry | None) -> Registry:
    # An empty registry is falsy, so test against None explicitly
    return default_registry if registry is None else registry


def encode(data: bytes, algorithm: str | Algorithm = DEFAULT_ALGORITHM, registry: Registry | None = None) -> str:
    """Encode ``data`` as a multibase string.

    Args:
        data: Bytes to encode
        algorithm: Algorithm name or instance
        registry: Registry to look names up in, defaults to ``default_registry``

    Returns:
        The algorithm code followed by the encoded text
    """
    if not isinstance(algorithm, Algorithm):
        algorithm = _resolve(registry).get(algorithm)
    return algorithm.code + algorithm.encode(data)


def decode(text: str, registry: Registry | None = None) -> bytes:
    """Decode a multibase string.

    Args:
        text: Multibase string, starting with its algorithm code
        registry: Registry to look codes up in, defaults to ``default_registry``

    Returns:
        Decoded bytes

    Raises:
        InvalidArgumentError: If ``text`` is empty
        AlgorithmNotFoundError: If the code is not registered
        FormatError: If the body is malformed
    """
    return algorithm_of(text, registry).decode(text[1:])


def algorithm_of(text: str, registry: Registry | None = None) -> Algorithm:
    """Return the algorithm named by the prefix of ``text``."""
    if not text:
        raise InvalidArgumentError("Multibase string must not be empty.")

    code = text[0]
    algorithm = _resolve(registry).find_by_code(code)
    if algorithm is None:
        if code in RESERVED_CODES:
            raise AlgorithmNotFoundError(
                f"The multibase code '{code}' is reserved for {RESERVED_CODES[code]} but is not supported."
            )
        raise AlgorithmNotFoundError(f"The multibase algorithm code '{code}' is not registered.")
    return algorithm


def is_encoded(text: str, registry: Registry | None = None) -> bool:
    """Check whether ``text`` starts with a registered algorithm code."""
    return bool(text) and _resolve(registry).find_by_code(text[0]) is not None


# ----------------------------------------------------------------------------
# Default registry helpers
# ----------------------------------------------------------------------------


def register_algorithm(
    name: str,
    code: str,
    encode: EncodeFn | None = None,
    decode: DecodeFn | None = None,
    *,
    codec: Codec | None = None,
) -> Algorithm:
    """Register an algorithm with the default registry."""
    return default_registry.register(name, code, encode, decode, codec=codec)


def deregister_algorithm(algorithm: Algorithm) -> None:
    """Remove an algorithm from the default registry."""
    default_registry.deregister(algorithm)


def get_algorithm(name: str) -> Algorithm:
    """Get an algorithm from the default registry by name."""
    return default_registry.get(name)


def list_algorithms() -> list[str]:
    """List all algorithm names in the default registry."""
    return default_registry.names()
