"""transcoder: reversible Base16/Base32/Base64 text tools with shareable links."""

__version__ = "0.1.0"
