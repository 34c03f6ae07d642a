"""Tests for wrapping tool input into URL-safe link tokens."""

import pytest

from transcoder.sharing.link_codec import is_valid_token, try_unwrap, unwrap, wrap

TOKEN_ALPHABET = set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")


class TestWrap:
    """Tokens are URL-safe Base64 without padding."""

    def test_wrap_simple_string(self) -> None:
        assert wrap("hello") == "aGVsbG8"

    def test_wrap_empty(self) -> None:
        assert wrap("") == ""

    def test_wrap_produces_token_alphabet(self) -> None:
        # Would produce '+' and '/' in standard base64
        token = wrap("?????>>>~~~")
        assert token
        assert set(token) <= TOKEN_ALPHABET

    def test_no_padding(self) -> None:
        for text in ["a", "ab", "https://example.com"]:
            assert not wrap(text).endswith("="), text

    def test_lone_surrogate_wraps_to_empty(self) -> None:
        assert wrap("\udc80") == ""


class TestUnwrap:
    """Unwrapping restores text and fails open."""

    def test_roundtrip_hello_world(self) -> None:
        assert unwrap(wrap("Hello, World!")) == "Hello, World!"

    @pytest.mark.parametrize(
        "text",
        [
            "a",
            "ab",
            "abc",
            "abcd",
            "Prüfung mit Ümläuten",
            "emoji 😀 and 𝄞",
            "line\nbreaks\tand tabs",
            '{"json": true, "n": [1, 2]}',
        ],
    )
    def test_roundtrip(self, text: str) -> None:
        assert unwrap(wrap(text)) == text

    def test_unwrap_padded_standard_token(self) -> None:
        assert unwrap("SGVsbG8=") == "Hello"

    def test_unwrap_empty(self) -> None:
        assert unwrap("") == ""

    def test_invalid_token_returns_empty(self) -> None:
        assert unwrap("not-valid-token!!!") == ""

    def test_truncated_token_returns_empty(self) -> None:
        """A length of 1 mod 4 cannot be Base64."""
        assert unwrap(wrap("Hello, World!")[:5]) == ""

    def test_invalid_utf8_returns_empty(self) -> None:
        assert unwrap("_w") == ""

    @pytest.mark.parametrize("token", [None, 42, b"SGVsbG8=", ["SGVsbG8="]])
    def test_non_string_returns_empty(self, token: object) -> None:
        assert unwrap(token) == ""

    def test_try_unwrap_distinguishes_failure(self) -> None:
        assert try_unwrap("") == ""
        assert try_unwrap("!!!") is None
        assert try_unwrap("aGVsbG8") == "hello"


class TestIsValidToken:
    """Syntactic validity does not require UTF-8."""

    def test_valid_tokens(self) -> None:
        assert is_valid_token("SGVsbG8=")
        assert is_valid_token("SGVsbG8")
        assert is_valid_token("_w")

    def test_invalid_tokens(self) -> None:
        assert not is_valid_token("not-valid-token!!!")
        assert not is_valid_token("abcde")
        assert not is_valid_token(None)
