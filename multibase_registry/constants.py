"""Multibase constants and enums."""

from enum import IntEnum

# ----------------------------------------------------------------------------
# Algorithm defaults
# ----------------------------------------------------------------------------

DEFAULT_ALGORITHM = "base58btc"

# Codes set aside for base1, base2, base8 and base10. No codec is registered
# for them; decoding a string that carries one of these prefixes fails.
RESERVED_CODES = {
    "1": "base1",
    "0": "base2",
    "7": "base8",
    "9": "base10",
}

# ----------------------------------------------------------------------------
# Alphabets
# ----------------------------------------------------------------------------

BASE16_ALPHABET = "0123456789abcdef"

RFC4648_BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
EXTENDED_HEX_BASE32_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
Z_BASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

BITCOIN_BASE58_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
FLICKR_BASE58_ALPHABET = b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"

PAD_CHAR = "="

# Character sets accepted by the strict decode check. Base32 transforms are
# case-insensitive, so both cases are valid input.
RFC4648_BASE32_CHARS = frozenset(
    RFC4648_BASE32_ALPHABET + RFC4648_BASE32_ALPHABET.lower() + PAD_CHAR
)
EXTENDED_HEX_BASE32_CHARS = frozenset(
    EXTENDED_HEX_BASE32_ALPHABET + EXTENDED_HEX_BASE32_ALPHABET.lower() + PAD_CHAR
)
Z_BASE32_CHARS = frozenset(Z_BASE32_ALPHABET)
BASE36_CHARS = frozenset(BASE36_ALPHABET + BASE36_ALPHABET.upper())
BASE64_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/" + PAD_CHAR
)
BASE64URL_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_" + PAD_CHAR
)
BITCOIN_BASE58_CHARS = frozenset(BITCOIN_BASE58_ALPHABET.decode("ascii"))
FLICKR_BASE58_CHARS = frozenset(FLICKR_BASE58_ALPHABET.decode("ascii"))

# ----------------------------------------------------------------------------
# Error codes
# ----------------------------------------------------------------------------


class ErrorCode(IntEnum):
    """Numeric error codes carried by every multibase error."""

    OK = 0x0000
    ERR_INVALID_ARGUMENT = 0x0001
    ERR_DUPLICATE_NAME = 0x0002
    ERR_DUPLICATE_CODE = 0x0003
    ERR_NOT_IMPLEMENTED = 0x0004
    ERR_FORMAT = 0x0005
    ERR_NOT_FOUND = 0x0006
