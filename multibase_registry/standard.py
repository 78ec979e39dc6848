"""Standard multibase algorithm set."""

import logging
from collections.abc import Callable, Collection

from .codecs import (
    Base16Codec,
    Base32Codec,
    Base32zCodec,
    Base36Codec,
    Base58Codec,
    Base64Codec,
    Codec,
)
from .registry import Registry

# (name, code, codec factory). Names are case-sensitive: the lower- and
# upper-case variants share a transform and differ in output case.
STANDARD_ALGORITHMS: list[tuple[str, str, Callable[[], Codec]]] = [
    ("base58btc", "z", lambda: Base58Codec()),
    ("base58flickr", "Z", lambda: Base58Codec(flickr=True)),
    ("base64", "m", lambda: Base64Codec()),
    ("base64pad", "M", lambda: Base64Codec(pad=True)),
    ("base64url", "u", lambda: Base64Codec(url=True)),
    ("base16", "f", lambda: Base16Codec()),
    ("BASE16", "F", lambda: Base16Codec(upper=True)),
    ("base32", "b", lambda: Base32Codec()),
    ("BASE32", "B", lambda: Base32Codec(upper=True)),
    ("base32pad", "c", lambda: Base32Codec(pad=True)),
    ("BASE32PAD", "C", lambda: Base32Codec(pad=True, upper=True)),
    ("base32hex", "v", lambda: Base32Codec(extended_hex=True)),
    ("BASE32HEX", "V", lambda: Base32Codec(extended_hex=True, upper=True)),
    ("base32hexpad", "t", lambda: Base32Codec(extended_hex=True, pad=True)),
    ("BASE32HEXPAD", "T", lambda: Base32Codec(extended_hex=True, pad=True, upper=True)),
    ("base32z", "h", lambda: Base32zCodec()),
    ("base36", "k", lambda: Base36Codec()),
]

STANDARD_NAMES = frozenset(name for name, _, _ in STANDARD_ALGORITHMS)


def register_standard(registry: Registry, exclude: Collection[str] = ()) -> int:
    """Register the standard algorithms with ``registry``.

    Args:
        registry: Registry to populate
        exclude: Standard names to leave out

    Returns:
        Number of algorithms registered
    """
    count = 0
    for name, code, factory in STANDARD_ALGORITHMS:
        if name in exclude:
            continue
        registry.register(name, code, codec=factory())
        count += 1

    logging.debug("Registered %d standard multibase algorithms", count)
    return count
