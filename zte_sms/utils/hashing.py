"""Digest and Base64 primitives shared by login and change detection."""

import base64
import hashlib


def sha256_hex(text: str) -> str:
    """Uppercase hex SHA-256 of the UTF-8 bytes of *text*."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest().upper()


def md5_hex(text: str) -> str:
    """
    Uppercase hex MD5 of the UTF-8 bytes of *text*.

    Only used for the SMS change fingerprint, never for authentication.
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest().upper()


def b64encode_text(text: str) -> str:
    """Standard RFC 4648 Base64 over the UTF-8 bytes of *text*."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
