"""Tests for the Base64 codec (RFC 4648 standard and URL-safe)."""

import re

import pytest

from transcoder.core import Base64Codec, Base64Format, CodecOptions, InvalidBase64, TextEncoding
from transcoder.core.base64_codec import (
    decode_to_bytes,
    encode_bytes,
    from_url_safe,
    is_valid_base64,
    to_url_safe,
)

URL_SAFE = CodecOptions(format=Base64Format.URL_SAFE)


@pytest.fixture
def codec() -> Base64Codec:
    return Base64Codec()


class TestBase64Encoding:
    """Encoding in both variants."""

    def test_encode_hello_standard(self, codec: Base64Codec) -> None:
        result = codec.encode("Hello")
        assert result.success
        assert result.data == "SGVsbG8="

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (b"", ""),
            (b"f", "Zg=="),
            (b"fo", "Zm8="),
            (b"foo", "Zm9v"),
            (b"foob", "Zm9vYg=="),
            (b"fooba", "Zm9vYmE="),
            (b"foobar", "Zm9vYmFy"),
        ],
    )
    def test_rfc4648_vectors(self, raw: bytes, expected: str) -> None:
        assert encode_bytes(raw) == expected

    def test_encode_hello_url_safe(self, codec: Base64Codec) -> None:
        data = codec.encode("Hello", URL_SAFE).data or ""
        assert "+" not in data
        assert "/" not in data
        assert "=" not in data
        assert data == "SGVsbG8"

    def test_url_safe_substitution(self) -> None:
        """Bytes producing '+' and '/' in standard output map to '-' and '_'."""
        raw = b"\xfb\xff\xbf"
        assert encode_bytes(raw) == "+/+/"
        assert encode_bytes(raw, Base64Format.URL_SAFE) == "-_-_"

    def test_url_safe_alphabet(self, codec: Base64Codec) -> None:
        for text in ["?????", "~~~>>>", "日本語テキスト", "a", "ab"]:
            data = codec.encode(text, URL_SAFE).data or ""
            assert re.fullmatch(r"[A-Za-z0-9_-]*", data), text

    def test_standard_length_multiple_of_4(self, codec: Base64Codec) -> None:
        for text in ["a", "ab", "abc", "abcd"]:
            assert len(codec.encode(text).data or "") % 4 == 0

    def test_encode_empty(self, codec: Base64Codec) -> None:
        assert codec.encode("").data == ""
        assert codec.encode("", URL_SAFE).data == ""

    def test_ascii_rejects_accented(self, codec: Base64Codec) -> None:
        """Restricted 7-bit mode refuses 'é'."""
        result = codec.encode("é", CodecOptions(text_encoding=TextEncoding.ASCII))
        assert result.success is False
        assert result.data is None
        assert "not valid ASCII" in (result.error or "")

    def test_latin1_single_byte(self, codec: Base64Codec) -> None:
        result = codec.encode("é", CodecOptions(text_encoding=TextEncoding.LATIN_1))
        assert result.data == "6Q=="


class TestBase64Decoding:
    """Decoding with character-set pre-validation."""

    def test_decode_standard(self, codec: Base64Codec) -> None:
        assert codec.decode("SGVsbG8=").data == "Hello"

    def test_decode_standard_unpadded(self, codec: Base64Codec) -> None:
        assert codec.decode("SGVsbG8").data == "Hello"

    def test_decode_url_safe(self, codec: Base64Codec) -> None:
        assert codec.decode("SGVsbG8", URL_SAFE).data == "Hello"

    def test_decode_ignores_whitespace(self, codec: Base64Codec) -> None:
        assert codec.decode("SGVs\nbG8=").data == "Hello"

    def test_standard_rejects_url_safe_characters(self, codec: Base64Codec) -> None:
        result = codec.decode("-_-_")
        assert not result.success
        assert "RFC 4648" in (result.error or "")

    def test_url_safe_rejects_standard_characters(self, codec: Base64Codec) -> None:
        result = codec.decode("+/+/", URL_SAFE)
        assert not result.success
        assert "URL-safe" in (result.error or "")

    def test_url_safe_rejects_padding(self, codec: Base64Codec) -> None:
        assert not codec.decode("SGVsbG8=", URL_SAFE).success

    def test_too_much_padding_rejected(self, codec: Base64Codec) -> None:
        assert not codec.decode("SGVsbG8===").success

    def test_misplaced_padding_rejected(self) -> None:
        with pytest.raises(InvalidBase64):
            decode_to_bytes("SGVsbG8==")

    def test_impossible_length_rejected(self, codec: Base64Codec) -> None:
        """A single leftover symbol carries fewer than 8 bits."""
        result = codec.decode("SGVsb")
        assert not result.success
        assert "length" in (result.error or "")

    def test_decode_empty(self, codec: Base64Codec) -> None:
        assert codec.decode("").data == ""

    def test_invalid_utf8_reported(self, codec: Base64Codec) -> None:
        result = codec.decode("/w==")
        assert not result.success
        assert "UTF-8" in (result.error or "")

    def test_elapsed_time_recorded(self, codec: Base64Codec) -> None:
        assert codec.decode("SGVsbG8=").elapsed_time >= 0


class TestUrlSafeHelpers:
    """Conversion between the two alphabets."""

    def test_to_url_safe(self) -> None:
        assert to_url_safe("a+b/c==") == "a-b_c"

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("YQ", "YQ=="), ("YWI", "YWI="), ("YWJj", "YWJj"), ("-_", "+/==")],
    )
    def test_from_url_safe_restores_padding(self, token: str, expected: str) -> None:
        assert from_url_safe(token) == expected

    def test_is_valid_base64(self) -> None:
        assert is_valid_base64("")
        assert is_valid_base64("SGVsbG8=")
        assert not is_valid_base64("SGVsbG8=", Base64Format.URL_SAFE)
        assert not is_valid_base64("not valid!")


class TestBase64RoundTrip:
    """decode(encode(x)) == x for both variants and all text encodings."""

    @pytest.mark.parametrize("fmt", list(Base64Format))
    @pytest.mark.parametrize(
        ("text", "encoding"),
        [
            ("Hello, World!", TextEncoding.UNICODE),
            ("Prüfung mit Ümläuten 🚀", TextEncoding.UNICODE),
            ("𝔘𝔫𝔦𝔠𝔬𝔡𝔢", TextEncoding.UNICODE),
            ("", TextEncoding.UNICODE),
            ("{\"key\": [1, 2, 3]}", TextEncoding.ASCII),
            ("Œuvre complète", TextEncoding.UNICODE),
            ("smørrebrød", TextEncoding.LATIN_1),
        ],
    )
    def test_roundtrip(
        self, codec: Base64Codec, text: str, encoding: TextEncoding, fmt: Base64Format
    ) -> None:
        options = CodecOptions(text_encoding=encoding, format=fmt)
        encoded = codec.encode(text, options)
        assert encoded.success
        assert codec.decode(encoded.data or "", options).data == text
