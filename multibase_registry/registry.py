"""Multibase algorithm registry."""

import logging
import threading
from collections.abc import Iterator

from .algorithm import Algorithm, AlgorithmInfo
from .codecs import Codec, DecodeFn, EncodeFn, FunctionCodec, UnimplementedCodec
from .errors import AlgorithmNotFoundError, DuplicateCodeError, DuplicateNameError, InvalidArgumentError


class AlgorithmsView:
    """Restartable view over the algorithms of a registry.

    Each iteration walks a snapshot taken when the iteration starts, so the
    registry may be changed while a previous iteration is still running.
    """

    def __init__(self, registry: "Registry"):
        self._registry = registry

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._registry._snapshot())

    def __len__(self) -> int:
        return len(self._registry)


class Registry:
    """Table of multibase algorithms indexed by name and by code.

    One lock guards both indexes, so a register or deregister is seen by
    readers either completely or not at all.
    """

    def __init__(self) -> None:
        self._names: dict[str, Algorithm] = {}
        self._codes: dict[str, Algorithm] = {}
        self._lock = threading.RLock()

    def register(
        self,
        name: str,
        code: str,
        encode: EncodeFn | None = None,
        decode: DecodeFn | None = None,
        *,
        codec: Codec | None = None,
    ) -> Algorithm:
        """Register a new multibase algorithm.

        Args:
            name: Unique, case-sensitive algorithm name
            code: Unique single-character multibase prefix
            encode: Function encoding bytes to text
            decode: Function decoding text to bytes
            codec: Codec object, as an alternative to ``encode``/``decode``

        Returns:
            The new algorithm

        Raises:
            InvalidArgumentError: If ``name`` is blank, ``code`` is not one
                character, or both ``codec`` and functions are given
            DuplicateNameError: If ``name`` is already registered
            DuplicateCodeError: If ``code`` is already registered

        A missing ``encode`` or ``decode`` raises
        :class:`~multibase_registry.errors.AlgorithmNotImplementedError` when
        called, which lets a name/code pair be reserved ahead of time.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Algorithm name must be a non-empty string.")
        if not isinstance(code, str) or len(code) != 1:
            raise InvalidArgumentError(f"Algorithm code must be a single character, got {code!r}.")
        if codec is not None and (encode is not None or decode is not None):
            raise InvalidArgumentError("Pass either a codec or encode/decode functions, not both.")

        if codec is None:
            codec = _build_codec(name, encode, decode)

        with self._lock:
            if name in self._names:
                raise DuplicateNameError(f"The multibase algorithm name '{name}' is already defined.")
            if code in self._codes:
                raise DuplicateCodeError(f"The multibase algorithm code '{code}' is already defined.")

            algorithm = Algorithm(name=name, code=code, codec=codec)
            self._names[name] = algorithm
            self._codes[code] = algorithm

        logging.debug("Registered multibase algorithm %s (%s)", name, code)
        return algorithm

    def deregister(self, algorithm: Algorithm) -> None:
        """Remove ``algorithm`` from the registry.

        The entries are located by the algorithm's own name and code and are
        only removed if they still hold this algorithm. Removing an algorithm
        that is not registered is a no-op.

        Removal is by identity rather than by key alone, so a stale algorithm
        cannot remove a newer registration that reuses its name or code.
        """
        with self._lock:
            if self._names.get(algorithm.name) is algorithm:
                del self._names[algorithm.name]
            if self._codes.get(algorithm.code) is algorithm:
                del self._codes[algorithm.code]

        logging.debug("Deregistered multibase algorithm %s (%s)", algorithm.name, algorithm.code)

    def get(self, name: str) -> Algorithm:
        """Get an algorithm by name."""
        algorithm = self.find(name)
        if algorithm is None:
            raise AlgorithmNotFoundError(f"The multibase algorithm name '{name}' is not registered.")
        return algorithm

    def get_by_code(self, code: str) -> Algorithm:
        """Get an algorithm by its single-character code."""
        algorithm = self.find_by_code(code)
        if algorithm is None:
            raise AlgorithmNotFoundError(f"The multibase algorithm code '{code}' is not registered.")
        return algorithm

    def find(self, name: str) -> Algorithm | None:
        with self._lock:
            return self._names.get(name)

    def find_by_code(self, code: str) -> Algorithm | None:
        with self._lock:
            return self._codes.get(code)

    def all(self) -> AlgorithmsView:
        """All registered algorithms, in no particular order."""
        return AlgorithmsView(self)

    def names(self) -> list[str]:
        """List all registered algorithm names."""
        with self._lock:
            return list(self._names)

    def describe(self) -> list[AlgorithmInfo]:
        """Describe all registered algorithms."""
        return [algorithm.info() for algorithm in self._snapshot()]

    def _snapshot(self) -> list[Algorithm]:
        with self._lock:
            return list(self._names.values())

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Algorithm):
            return self.find(item.name) is item
        return isinstance(item, str) and self.find(item) is not None

    def __repr__(self) -> str:
        return f"Registry({', '.join(sorted(self.names()))})"


def _build_codec(name: str, encode: EncodeFn | None, decode: DecodeFn | None) -> Codec:
    placeholder = UnimplementedCodec(name)
    if encode is None and decode is None:
        return placeholder
    return FunctionCodec(encode or placeholder.encode, decode or placeholder.decode)
