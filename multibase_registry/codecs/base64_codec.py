"""Base64 codec implementations."""

import base64

from ..constants import BASE64_CHARS, BASE64URL_CHARS, PAD_CHAR
from .base import Codec, format_errors
from .strict import strict_decode

_FROM_URL = str.maketrans("-_", "+/")


class Base64Codec(Codec):
    """Standard or url-safe base64, with or without padding.

    The unpadded variants restore padding before decoding; the padded variant
    requires it.
    """

    def __init__(self, pad: bool = False, url: bool = False):
        self.pad = pad
        self.url = url

    @property
    def name(self) -> str:
        if self.url:
            return "base64url"
        return "base64pad" if self.pad else "base64"

    def encode(self, data: bytes) -> str:
        if self.url:
            text = base64.urlsafe_b64encode(data).decode("ascii")
        else:
            text = base64.b64encode(data).decode("ascii")
        return text if self.pad else text.rstrip(PAD_CHAR)

    def decode(self, text: str) -> bytes:
        alphabet = BASE64URL_CHARS if self.url else BASE64_CHARS
        return strict_decode(self._decode, text, alphabet, self.name)

    def _decode(self, text: str) -> bytes:
        if self.url:
            text = text.translate(_FROM_URL)
        if not self.pad:
            text += PAD_CHAR * (-len(text) % 4)
        with format_errors(self.name):
            return base64.b64decode(text, validate=True)
