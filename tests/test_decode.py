import base64

import pytest
from Crypto.Random import get_random_bytes

from b64codec import CodecError, InvalidByte, decode, decode_text, decoded_length, encode, encode_text


@pytest.mark.parametrize(
    "encoded, expected",
    [
        ("", b""),
        ("TQ==", b"M"),
        ("TWE=", b"Ma"),
        ("TWFu", b"Man"),
        ("Zm9vYg==", b"foob"),
        ("Zm9vYmE=", b"fooba"),
        ("Zm9vYmFy", b"foobar"),
        ("+/8=", b"\xfb\xff"),
    ],
)
def test_decode_known_vectors(encoded, expected):
    assert decode(encoded) == expected


def test_decode_round_trips_random_payloads():
    for size in range(0, 100):
        data = get_random_bytes(size)
        assert decode(encode(data)) == data


def test_decode_accepts_missing_padding():
    assert decode("TQ") == b"M"
    assert decode("TWE") == b"Ma"
    assert decode("Zm9vYg") == b"foob"


def test_decode_accepts_bytes_input():
    assert decode(b"TWFu") == b"Man"
    assert decode(bytearray(b"TWE=")) == b"Ma"


def test_decode_ignores_low_padding_bits():
    assert decode("TR==") == b"M"
    assert decode("TWF=") == b"Ma"


def test_decoded_length_matches_output():
    for size in range(0, 40):
        trimmed = base64.b64encode(get_random_bytes(size)).decode("ascii").rstrip("=")
        expected = 3 * (len(trimmed) // 4) + (0, 0, 1, 2)[len(trimmed) % 4]
        assert len(decode(trimmed)) == decoded_length(len(trimmed)) == expected == size


@pytest.mark.parametrize(
    "encoded, position, symbol",
    [
        ("Zm9v YmFy", 4, " "),
        ("Zm9v\nYmFy", 4, "\n"),
        ("Zm9v-_==", 4, "-"),
        ("Zé==", 1, "é"),
        ("TWFu.", 4, "."),
        ("TW=Fu", 3, "F"),
        ("TWFuTWE=TQ==", 8, "T"),
        ("TWE===", 5, "="),
    ],
)
def test_decode_rejects_invalid_symbols(encoded, position, symbol):
    with pytest.raises(InvalidByte) as exc_info:
        decode(encoded)
    assert exc_info.value.position == position
    assert exc_info.value.symbol == symbol


def test_decode_rejects_non_ascii_bytes():
    with pytest.raises(InvalidByte) as exc_info:
        decode(b"Zm\xff=")
    assert exc_info.value.position == 2
    assert exc_info.value.symbol == "\xff"


@pytest.mark.parametrize("encoded", ["T", "T===", "TWFuT", "TWFuT=", "Zm9vYmFyZ"])
def test_decode_rejects_dangling_symbol(encoded):
    with pytest.raises(InvalidByte):
        decode(encoded)


def test_dangling_symbol_error_has_no_position():
    with pytest.raises(InvalidByte) as exc_info:
        decode("TWFuT")
    assert exc_info.value.position is None
    assert "5" in exc_info.value.message


def test_invalid_byte_is_codec_error():
    with pytest.raises(CodecError):
        decode("!!!!")


def test_decode_rejects_unsupported_types():
    with pytest.raises(TypeError):
        decode(1234)


def test_decoded_length_rejects_bad_lengths():
    with pytest.raises(InvalidByte):
        decoded_length(5)
    with pytest.raises(ValueError):
        decoded_length(-4)


def test_decode_text_round_trip():
    assert decode_text(encode_text("héllo wörld")) == "héllo wörld"


def test_decode_text_propagates_unicode_errors():
    with pytest.raises(UnicodeDecodeError):
        decode_text("/w==")
