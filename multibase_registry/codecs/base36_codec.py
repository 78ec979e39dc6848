"""Base36 codec implementation."""

from ..constants import BASE36_ALPHABET, BASE36_CHARS
from .base import Codec
from .strict import strict_decode

_ZERO = BASE36_ALPHABET[0]

# Digit values for both cases. int(text, 36) is avoided because CPython caps
# string-to-int conversion at 4300 digits for non power-of-two bases.
_DIGITS = {char: value for value, char in enumerate(BASE36_ALPHABET)}
_DIGITS.update({char.upper(): value for char, value in list(_DIGITS.items())})


class Base36Codec(Codec):
    """Big-endian base36 that keeps leading zero bytes as ``0`` digits.

    Encodes lower-case; decoding accepts either case.
    """

    def encode(self, data: bytes) -> str:
        zeros = len(data) - len(data.lstrip(b"\x00"))
        value = int.from_bytes(data, "big")
        digits = []
        while value:
            value, rem = divmod(value, 36)
            digits.append(BASE36_ALPHABET[rem])
        return _ZERO * zeros + "".join(reversed(digits))

    def decode(self, text: str) -> bytes:
        return strict_decode(self._decode, text, BASE36_CHARS, "base36")

    def _decode(self, text: str) -> bytes:
        body = text.lstrip(_ZERO)
        zeros = len(text) - len(body)
        value = 0
        for char in body:
            value = value * 36 + _DIGITS[char]
        return b"\x00" * zeros + value.to_bytes((value.bit_length() + 7) // 8, "big")
