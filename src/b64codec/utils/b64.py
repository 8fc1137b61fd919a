"""
Base64 encoding and decoding (standard alphabet, padded output).

encode() turns any bytes-like object into an ASCII string and never fails.
decode() reverses it and raises InvalidByte on malformed input, with no
partial result:
- characters outside the alphabet
- a padding region that holds anything but '=' or more than two of them
- a trimmed length congruent to 1 mod 4

Padding starts at the first '=' and must run to the end of the input.
Missing padding is accepted.
"""

from b64codec.errors import InvalidByte
from b64codec.protocol import (
    PAD,
    MAX_PADDING,
    BYTE_MASK,
    BYTES_PER_WINDOW,
    SYMBOLS_PER_WINDOW,
    TAIL_BYTES,
    OP_ENCODE,
    OP_DECODE
)
from b64codec.utils.alphabet import code_of, value_of
from b64codec.utils.logger import (
    Logger,
    Level,
    Event
    )

encode_logger = Logger(OP_ENCODE)
decode_logger = Logger(OP_DECODE)

def encoded_length(size: int) -> int:
    """
    Length of the encoding of `size` bytes: 4 * ceil(size / 3).

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Byte count can't be negative ({size})")
    return (size + BYTES_PER_WINDOW - 1) // BYTES_PER_WINDOW * SYMBOLS_PER_WINDOW

def decoded_length(trimmed_length: int) -> int:
    """
    Number of bytes decoded from `trimmed_length` symbols (padding excluded).

    Raises:
        ValueError: If trimmed_length is negative
        InvalidByte: If trimmed_length % 4 == 1
    """
    if trimmed_length < 0:
        raise ValueError(f"Symbol count can't be negative ({trimmed_length})")
    tail = TAIL_BYTES[trimmed_length % SYMBOLS_PER_WINDOW]
    if tail is None:
        raise InvalidByte.for_length(trimmed_length)
    return trimmed_length // SYMBOLS_PER_WINDOW * BYTES_PER_WINDOW + tail

def encode(data) -> str:
    """
    Encode bytes to a base64 string.

    Args:
        data: bytes, bytearray, memoryview or any other buffer

    Returns:
        str: Encoded text, length a multiple of 4
    """
    raw = bytes(memoryview(data))
    size = len(raw)
    # Pre-filled with padding, so a short final window needs no extra work
    encoded = [PAD] * encoded_length(size)
    full = size - size % BYTES_PER_WINDOW

    out = 0
    for i in range(0, full, BYTES_PER_WINDOW):
        window = (raw[i] << 16) | (raw[i + 1] << 8) | raw[i + 2]
        encoded[out] = code_of(window >> 18)
        encoded[out + 1] = code_of(window >> 12)
        encoded[out + 2] = code_of(window >> 6)
        encoded[out + 3] = code_of(window)
        out += SYMBOLS_PER_WINDOW

    leftover = size - full
    if leftover == 1:
        # 8 bits + 4 zero bits
        window = raw[full] << 4
        encoded[out] = code_of(window >> 6)
        encoded[out + 1] = code_of(window)
    elif leftover == 2:
        # 16 bits + 2 zero bits
        window = (raw[full] << 10) | (raw[full + 1] << 2)
        encoded[out] = code_of(window >> 12)
        encoded[out + 1] = code_of(window >> 6)
        encoded[out + 2] = code_of(window)

    encode_logger.log_codec_event(Level.LEVEL_DEBUG, Event.ENCODE, size)
    return ''.join(encoded)

def decode(encoded) -> bytes:
    """
    Decode a base64 string to bytes.

    Args:
        encoded: str, or bytes holding ASCII text

    Returns:
        bytes: Decoded data

    Raises:
        InvalidByte: If the input is not valid base64
    """
    text = _as_text(encoded)
    try:
        decoded = _decode_text(text)
    except InvalidByte as e:
        decode_logger.log_codec_event(Level.LEVEL_WARNING, Event.DECODE_FAIL, len(text), e.message)
        raise
    decode_logger.log_codec_event(Level.LEVEL_DEBUG, Event.DECODE, len(text))
    return decoded

def encode_text(text: str, encoding: str = 'utf-8') -> str:
    """
    Encode a string to base64.

    Args:
        text: String to encode
        encoding: Character encoding applied before base64 (default: utf-8)

    Returns:
        str: Base64 text
    """
    return encode(text.encode(encoding))

def decode_text(encoded, encoding: str = 'utf-8') -> str:
    """
    Decode base64 to a string.

    Args:
        encoded: Base64 text (str or bytes)
        encoding: Character encoding of the decoded bytes (default: utf-8)

    Returns:
        str: Decoded string
    """
    return decode(encoded).decode(encoding)

def _as_text(encoded) -> str:
    if isinstance(encoded, str):
        return encoded
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        # latin-1 keeps one character per byte, so non-ASCII bytes fail the lookup
        return bytes(encoded).decode('latin-1')
    raise TypeError(f"Expected str or bytes, got {type(encoded).__name__}")

def _strip_padding(text: str) -> int:
    """Validate the padding region and return the trimmed length."""
    trimmed_length = text.find(PAD)
    if trimmed_length == -1:
        return len(text)

    for position in range(trimmed_length, len(text)):
        if text[position] != PAD:
            raise InvalidByte(position, text[position])
        if position - trimmed_length >= MAX_PADDING:
            raise InvalidByte(position, PAD, f"Too much base64 padding at position {position}.")
    return trimmed_length

def _decode_text(text: str) -> bytes:
    trimmed_length = _strip_padding(text)
    values = [value_of(text[i], i) for i in range(trimmed_length)]
    decoded = bytearray(decoded_length(trimmed_length))
    full = trimmed_length - trimmed_length % SYMBOLS_PER_WINDOW

    out = 0
    for i in range(0, full, SYMBOLS_PER_WINDOW):
        window = (values[i] << 18) | (values[i + 1] << 12) | (values[i + 2] << 6) | values[i + 3]
        decoded[out] = window >> 16
        decoded[out + 1] = (window >> 8) & BYTE_MASK
        decoded[out + 2] = window & BYTE_MASK
        out += BYTES_PER_WINDOW

    tail = trimmed_length - full
    if tail == 2:
        # 12 bits, low 4 are padding
        window = (values[full] << 6) | values[full + 1]
        decoded[out] = window >> 4
    elif tail == 3:
        # 18 bits, low 2 are padding
        window = (values[full] << 12) | (values[full + 1] << 6) | values[full + 2]
        decoded[out] = window >> 10
        decoded[out + 1] = (window >> 2) & BYTE_MASK

    return bytes(decoded)
