"""
Custom exception classes for base64 codec failures.

Encoding never fails, so the hierarchy is small: a base class shared by every
codec error and the single decode failure, InvalidByte.
"""

class CodecError(Exception):
    """Base class for all exceptions raised by the codec."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message

class InvalidByte(CodecError):
    """
    Raised when encoded input cannot be decoded.

    Attributes:
        position: Index of the offending character in the input, or None
            when the failure concerns the input length
        symbol: The offending character, or None
    """
    def __init__(self, position=None, symbol=None, message=None):
        if message is None:
            if symbol is None:
                message = "Invalid base64 input."
            else:
                message = f"Invalid base64 symbol {symbol!r} at position {position}."
        super().__init__(message)
        self.position = position
        self.symbol = symbol

    @classmethod
    def for_length(cls, trimmed_length):
        """Trimmed length congruent to 1 mod 4 - no encoding produces it."""
        return cls(message=f"Invalid base64 length: {trimmed_length} symbols leave a single dangling symbol.")
