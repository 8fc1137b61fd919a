"""
Bidirectional lookup between 6-bit values and base64 symbols.

The forward direction indexes the alphabet string directly. The inverse uses
a 128-entry table indexed by code point, where NOT_IN_ALPHABET marks every
character that is not a base64 symbol (padding included).
"""

from b64codec.errors import InvalidByte
from b64codec.protocol import (
    ALPHABET,
    ASCII_RANGE,
    NOT_IN_ALPHABET,
    SYMBOL_MASK
)

INVERSE_TABLE = [NOT_IN_ALPHABET] * ASCII_RANGE
for value, symbol in enumerate(ALPHABET):
    INVERSE_TABLE[ord(symbol)] = value

def code_of(value: int) -> str:
    """
    Get the symbol for a 6-bit value.

    Args:
        value: Integer whose low 6 bits select the symbol

    Returns:
        str: Single base64 character
    """
    return ALPHABET[value & SYMBOL_MASK]

def value_of(character: str, position: int = None) -> int:
    """
    Get the 6-bit value of a base64 symbol.

    Args:
        character: Single character to look up
        position: Index of the character in its input, reported on failure

    Returns:
        int: Value in [0, 63]

    Raises:
        InvalidByte: If the character is not part of the alphabet
    """
    code = ord(character)
    value = INVERSE_TABLE[code] if code < ASCII_RANGE else NOT_IN_ALPHABET
    if value == NOT_IN_ALPHABET:
        raise InvalidByte(position, character)
    return value
