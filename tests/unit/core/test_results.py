"""Tests for codec options, results and the codec registry."""

import pytest
from pydantic import ValidationError

from transcoder.core import (
    Base16Codec,
    Base32Codec,
    Base64Codec,
    Base64Format,
    Codec,
    CodecError,
    CodecOptions,
    CodecResult,
    TextEncoding,
    get_codec,
)
from transcoder.core.results import run_timed


class TestCodecOptions:
    """Defaults and immutability."""

    def test_defaults(self) -> None:
        options = CodecOptions()
        assert options.text_encoding is TextEncoding.UNICODE
        assert options.format is Base64Format.STANDARD
        assert options.padding is True

    def test_wire_values_accepted(self) -> None:
        options = CodecOptions(text_encoding="latin-1", format="URL-safe")
        assert options.text_encoding is TextEncoding.LATIN_1
        assert options.format is Base64Format.URL_SAFE

    def test_frozen(self) -> None:
        options = CodecOptions()
        with pytest.raises(ValidationError):
            options.padding = False

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CodecOptions(text_encoding="utf-16")


class TestCodecResult:
    """Exactly one of data and error is set."""

    def test_ok(self) -> None:
        result = CodecResult.ok("abc", 1.5)
        assert result.success
        assert result.data == "abc"
        assert result.error is None
        assert result.elapsed_time == 1.5

    def test_fail(self) -> None:
        result = CodecResult.fail("broken")
        assert not result.success
        assert result.data is None
        assert result.error == "broken"


class TestRunTimed:
    """Codec errors become failed results; other errors propagate."""

    def test_codec_error_becomes_result(self) -> None:
        def operation() -> str:
            raise CodecError("bad input")

        result = run_timed(operation, codec="test", action="decode")
        assert not result.success
        assert result.error == "bad input"
        assert result.elapsed_time >= 0

    def test_programming_error_propagates(self) -> None:
        def operation() -> str:
            raise KeyError("oops")

        with pytest.raises(KeyError):
            run_timed(operation, codec="test", action="decode")


class TestCodecRegistry:
    """Lookup of codecs by name."""

    @pytest.mark.parametrize(
        ("name", "cls"),
        [("base16", Base16Codec), ("base32", Base32Codec), ("BASE64", Base64Codec)],
    )
    def test_get_codec(self, name: str, cls: type) -> None:
        codec = get_codec(name)
        assert isinstance(codec, cls)
        assert isinstance(codec, Codec)

    def test_unknown_codec(self) -> None:
        with pytest.raises(ValueError, match="Unknown codec"):
            get_codec("base58")

    def test_independent_instances(self) -> None:
        assert get_codec("base64") is not get_codec("base64")
