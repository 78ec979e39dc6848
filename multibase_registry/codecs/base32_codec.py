"""Base32 family codec implementations.

Covers RFC4648 base32, the extended-hex variant and z-base-32. All three are
built on the stdlib RFC4648 transforms and validated with
:func:`~multibase_registry.codecs.strict.strict_decode` before decoding.
"""

import base64

from ..constants import (
    EXTENDED_HEX_BASE32_CHARS,
    PAD_CHAR,
    RFC4648_BASE32_ALPHABET,
    RFC4648_BASE32_CHARS,
    Z_BASE32_ALPHABET,
    Z_BASE32_CHARS,
)
from .base import Codec, format_errors
from .strict import strict_decode

_TO_Z = str.maketrans(RFC4648_BASE32_ALPHABET, Z_BASE32_ALPHABET)
_FROM_Z = str.maketrans(Z_BASE32_ALPHABET, RFC4648_BASE32_ALPHABET)


def _restore_padding(text: str) -> str:
    return text + PAD_CHAR * (-len(text) % 8)


class Base32Codec(Codec):
    """RFC4648 or extended-hex base32, optionally padded, in either case."""

    def __init__(self, extended_hex: bool = False, pad: bool = False, upper: bool = False):
        self.extended_hex = extended_hex
        self.pad = pad
        self.upper = upper

    @property
    def name(self) -> str:
        return "base32hex" if self.extended_hex else "base32"

    def encode(self, data: bytes) -> str:
        if self.extended_hex:
            raw = base64.b32hexencode(data)
        else:
            raw = base64.b32encode(data)
        text = raw.decode("ascii")
        if not self.pad:
            text = text.rstrip(PAD_CHAR)
        return text if self.upper else text.lower()

    def decode(self, text: str) -> bytes:
        alphabet = EXTENDED_HEX_BASE32_CHARS if self.extended_hex else RFC4648_BASE32_CHARS
        return strict_decode(self._decode, text, alphabet, self.name)

    def _decode(self, text: str) -> bytes:
        with format_errors(self.name):
            if self.extended_hex:
                return base64.b32hexdecode(_restore_padding(text), casefold=True)
            return base64.b32decode(_restore_padding(text), casefold=True)


class Base32zCodec(Codec):
    """z-base-32: RFC4648 bit grouping over a human-oriented alphabet, no padding."""

    def encode(self, data: bytes) -> str:
        text = base64.b32encode(data).decode("ascii").rstrip(PAD_CHAR)
        return text.translate(_TO_Z)

    def decode(self, text: str) -> bytes:
        return strict_decode(self._decode, text, Z_BASE32_CHARS, "base32z")

    def _decode(self, text: str) -> bytes:
        with format_errors("base32z"):
            return base64.b32decode(_restore_padding(text.translate(_FROM_Z)))
