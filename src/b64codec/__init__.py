from b64codec.errors import CodecError, InvalidByte
from b64codec.utils.alphabet import code_of, value_of
from b64codec.utils.b64 import (
    encode,
    decode,
    encode_text,
    decode_text,
    encoded_length,
    decoded_length
)

__all__ = [
    "CodecError",
    "InvalidByte",
    "code_of",
    "value_of",
    "encode",
    "decode",
    "encode_text",
    "decode_text",
    "encoded_length",
    "decoded_length",
]
