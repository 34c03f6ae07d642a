"""Link state models and validation of parameters restored from a shared link.

``validate_url_parameters`` turns whatever was parsed from a query string into
a fully-defaulted ``URLParameters``. It never raises: a bad ``input`` token
becomes ``""``, an unknown ``input_encoding`` becomes ``utf-8``, and settings
whose value is not a plain primitive are dropped one by one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, Field

from transcoder.core.text_encoding import TextEncoding
from transcoder.sharing.link_codec import is_valid_token

logger = logging.getLogger(__name__)

Primitive = str | bool | int | float

INPUT_KEY: Final[str] = "input"
ENCODING_KEY: Final[str] = "input_encoding"
RESERVED_KEYS: Final[frozenset[str]] = frozenset({INPUT_KEY, ENCODING_KEY})

VALID_ENCODINGS: Final[tuple[str, ...]] = tuple(encoding.value for encoding in TextEncoding)


class ToolSettings(BaseModel):
    """Complete state of one tool, as captured for or restored from a link.

    ``input`` is always the plain text, never the wrapped token.
    """

    model_config = {"frozen": True}

    tool_id: str
    input: str = ""
    input_encoding: TextEncoding = TextEncoding.UNICODE
    tool_specific_settings: dict[str, Primitive | None] = Field(default_factory=dict)


class URLParameters(BaseModel):
    """Validated query parameters of a share link.

    ``input`` is still the wrapped token; use ``link_codec.unwrap`` to get the
    text back.
    """

    model_config = {"frozen": True}

    input: str = ""
    input_encoding: TextEncoding = TextEncoding.UNICODE
    settings: dict[str, Primitive] = Field(default_factory=dict)

    def as_dict(self) -> dict[str, Primitive]:
        """Flatten to the wire shape ``{input, input_encoding, **settings}``."""
        return {
            INPUT_KEY: self.input,
            ENCODING_KEY: self.input_encoding.value,
            **self.settings,
        }


def _last_value(value: object) -> object:
    # parse_qs-style lists: last value wins
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value


def _validate_input(value: object) -> str:
    if value is None or value == "":
        return ""
    if isinstance(value, str) and is_valid_token(value):
        return value
    logger.info("Shared link input is not a valid token; using empty input")
    return ""


def _validate_encoding(value: object) -> TextEncoding:
    if isinstance(value, str) and value in VALID_ENCODINGS:
        return TextEncoding(value)
    if value is not None:
        logger.info("Unsupported input_encoding %r in shared link; using utf-8", value)
    return TextEncoding.UNICODE


def validate_url_parameters(params: Mapping[str, object] | None) -> URLParameters:
    """Sanitize a raw key/value bag into ``URLParameters``.

    Fields are processed in the order input, input_encoding, then every other
    key. Other keys are passed through with their original type when the value
    is a string, boolean or number.
    """
    if not isinstance(params, Mapping):
        return URLParameters()

    input_token = _validate_input(_last_value(params.get(INPUT_KEY)))
    input_encoding = _validate_encoding(_last_value(params.get(ENCODING_KEY)))

    settings: dict[str, Primitive] = {}
    for key, raw_value in params.items():
        if key in RESERVED_KEYS:
            continue
        value = _last_value(raw_value)
        if not isinstance(key, str) or not isinstance(value, (str, bool, int, float)):
            logger.info("Dropping shared link setting %r with unsupported value", key)
            continue
        settings[key] = value

    return URLParameters(input=input_token, input_encoding=input_encoding, settings=settings)
