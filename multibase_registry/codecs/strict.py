"""Strict alphabet check for permissive decoders.

Some alphabet decoders skip characters they do not recognise instead of
rejecting them, so a corrupted string can decode "successfully" to the wrong
bytes. Every alphabet-based codec in this package runs its input through
:func:`check_alphabet` before the transform sees it.
"""

from collections.abc import Callable, Collection

from ..errors import FormatError


def check_alphabet(text: str, alphabet: Collection[str], name: str = "encoded") -> None:
    """Raise ``FormatError`` if non-empty ``text`` has a character outside ``alphabet``.

    Args:
        text: Encoded text, without its multibase prefix
        alphabet: Valid characters, including the pad character where applicable
        name: Encoding name used in the error message

    Raises:
        FormatError: If an invalid character is found
    """
    if not text:
        return
    for index, char in enumerate(text):
        if char not in alphabet:
            raise FormatError(f"Invalid character {char!r} at position {index} in {name} string.")


def strict_decode(decode: Callable[[str], bytes], text: str, alphabet: Collection[str], name: str = "encoded") -> bytes:
    """Validate ``text`` against ``alphabet``, then decode it with ``decode``."""
    check_alphabet(text, alphabet, name)
    return decode(text)
