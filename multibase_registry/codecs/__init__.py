"""Multibase codec implementations."""

from .base import Codec, DecodeFn, EncodeFn, FunctionCodec, UnimplementedCodec

# Import all codec implementations
from .base16_codec import Base16Codec
from .base32_codec import Base32Codec, Base32zCodec
from .base36_codec import Base36Codec
from .base58_codec import Base58Codec
from .base64_codec import Base64Codec
from .strict import check_alphabet, strict_decode

__all__ = [
    "Codec",
    "EncodeFn",
    "DecodeFn",
    "FunctionCodec",
    "UnimplementedCodec",
    "Base16Codec",
    "Base32Codec",
    "Base32zCodec",
    "Base36Codec",
    "Base58Codec",
    "Base64Codec",
    "check_alphabet",
    "strict_decode",
]
