"""Reset / feed / finalize adapter over hash functions.

Wraps ``hashlib`` hashes and ``google_crc32c`` checksums behind one
interface, optionally truncating the output.
"""

import hashlib
from collections.abc import Callable
from typing import Protocol

from google_crc32c import Checksum

from .errors import AlgorithmNotFoundError, InvalidArgumentError


class Hasher(Protocol):
    def update(self, data: bytes) -> None: ...

    def digest(self) -> bytes: ...


HasherFactory = Callable[[], Hasher]

# ----------------------------------------------------------------------------
# Named hash functions
# ----------------------------------------------------------------------------

DIGESTS: dict[str, HasherFactory] = {
    "sha1": hashlib.sha1,
    "sha2-256": hashlib.sha256,
    "sha2-512": hashlib.sha512,
    "sha3-256": hashlib.sha3_256,
    "sha3-512": hashlib.sha3_512,
    "blake2b-512": hashlib.blake2b,
    "blake2s-256": hashlib.blake2s,
    "crc32c": Checksum,
}


class Digest:
    """Incremental digest with an optional truncated output size."""

    def __init__(self, factory: HasherFactory, output_size: int = 0):
        """Initialize digest.

        Args:
            factory: Callable returning a fresh hasher
            output_size: Bytes to keep from the final digest, 0 keeps all
        """
        if output_size < 0:
            raise InvalidArgumentError(f"Digest output size must not be negative, got {output_size}.")
        self._factory = factory
        self._hasher = factory()
        native_size = len(self._hasher.digest())
        self.digest_size = output_size if 0 < output_size < native_size else native_size

    def reset(self) -> None:
        """Discard all data fed so far."""
        self._hasher = self._factory()

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the digest."""
        self._hasher.update(data)

    def finalize(self) -> bytes:
        """Return the digest of all data fed so far and reset."""
        output = self._hasher.digest()[: self.digest_size]
        self.reset()
        return output


def new_digest(name: str, output_size: int = 0) -> Digest:
    """Create a digest by name."""
    if name not in DIGESTS:
        raise AlgorithmNotFoundError(f"Unsupported digest: {name}")
    return Digest(DIGESTS[name], output_size)
