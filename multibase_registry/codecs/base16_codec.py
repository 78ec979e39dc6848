"""Base16 (hex) codec implementation."""

import binascii

from .base import Codec, format_errors


class Base16Codec(Codec):
    """Hex codec emitting lower- or upper-case digits.

    Decoding accepts either case.
    """

    def __init__(self, upper: bool = False):
        self.upper = upper

    def encode(self, data: bytes) -> str:
        text = data.hex()
        return text.upper() if self.upper else text

    def decode(self, text: str) -> bytes:
        with format_errors("base16"):
            return binascii.unhexlify(text)
