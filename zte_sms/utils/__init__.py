"""Utility subpackage: hashing and UCS2 helpers."""

from .hashing import sha256_hex, md5_hex, b64encode_text
from .ucs2 import decode_hex_utf16_payload

__all__ = [
    "sha256_hex",
    "md5_hex",
    "b64encode_text",
    "decode_hex_utf16_payload",
]
