"""Base codec interface for multibase algorithms."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from ..errors import AlgorithmNotImplementedError, FormatError

EncodeFn = Callable[[bytes], str]
DecodeFn = Callable[[str], bytes]


class Codec(ABC):
    """Base interface for multibase codecs."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes to text."""
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode text to bytes."""
        pass


class FunctionCodec(Codec):
    """Codec backed by a plain ``(encode, decode)`` function pair."""

    def __init__(self, encode: EncodeFn, decode: DecodeFn):
        self._encode = encode
        self._decode = decode

    def encode(self, data: bytes) -> str:
        return self._encode(data)

    def decode(self, text: str) -> bytes:
        return self._decode(text)


class UnimplementedCodec(Codec):
    """Codec for a name/code pair reserved before an implementation exists."""

    def __init__(self, name: str):
        self.name = name

    def encode(self, data: bytes) -> str:
        raise AlgorithmNotImplementedError(f"The encode multibase algorithm '{self.name}' is not implemented.")

    def decode(self, text: str) -> bytes:
        raise AlgorithmNotImplementedError(f"The decode multibase algorithm '{self.name}' is not implemented.")


@contextmanager
def format_errors(name: str) -> Iterator[None]:
    """Re-raise low-level ``ValueError`` from a transform as ``FormatError``.

    ``binascii.Error`` and ``UnicodeEncodeError`` are both ``ValueError``
    subclasses, so this covers the stdlib decoders and non-ASCII input.
    """
    try:
        yield
    except FormatError:
        raise
    except ValueError as exc:
        raise FormatError(f"Invalid {name} string: {exc}") from exc
