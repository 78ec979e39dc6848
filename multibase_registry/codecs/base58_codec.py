"""Base58 codec implementation backed by the ``base58`` package."""

import base58

from ..constants import (
    BITCOIN_BASE58_ALPHABET,
    BITCOIN_BASE58_CHARS,
    FLICKR_BASE58_ALPHABET,
    FLICKR_BASE58_CHARS,
)
from .base import Codec, format_errors
from .strict import strict_decode


class Base58Codec(Codec):
    """Base58 over the Bitcoin or Flickr alphabet.

    ``base58.b58decode`` strips trailing whitespace before decoding, so input
    is checked against the alphabet first.
    """

    def __init__(self, flickr: bool = False):
        self.flickr = flickr
        self._alphabet = FLICKR_BASE58_ALPHABET if flickr else BITCOIN_BASE58_ALPHABET
        self._chars = FLICKR_BASE58_CHARS if flickr else BITCOIN_BASE58_CHARS

    @property
    def name(self) -> str:
        return "base58flickr" if self.flickr else "base58btc"

    def encode(self, data: bytes) -> str:
        return base58.b58encode(data, alphabet=self._alphabet).decode("ascii")

    def decode(self, text: str) -> bytes:
        return strict_decode(self._decode, text, self._chars, self.name)

    def _decode(self, text: str) -> bytes:
        with format_errors(self.name):
            return base58.b58decode(text, alphabet=self._alphabet)
