"""
Password encoding for the ZTE goform LOGIN command.

The web UI picks one of three encodings from the firmware attribute
WEB_ATTR_IF_SUPPORT_SHA256 (see service.js):

  1  SHA256(Base64(password))                  older models
  2  SHA256(SHA256(password) + LD)             current models, e.g. MC888
  *  Base64(password)                          legacy firmware

Only mode 2 has been confirmed on hardware.
"""

import enum

from ..utils.hashing import b64encode_text, sha256_hex


class EncodingVariant(enum.IntEnum):
    SHA256_BASE64 = 1
    DOUBLE_SHA256 = 2
    PLAIN_BASE64 = 3

    @classmethod
    def from_firmware(cls, value: int) -> "EncodingVariant":
        """Map a WEB_ATTR_IF_SUPPORT_SHA256 value; unknown values mean Base64."""
        if value == 1:
            return cls.SHA256_BASE64
        if value == 2:
            return cls.DOUBLE_SHA256
        return cls.PLAIN_BASE64


DEFAULT_VARIANT = EncodingVariant.DOUBLE_SHA256


def select_password_hash(
    password: str,
    challenge: str,
    variant: EncodingVariant = DEFAULT_VARIANT,
) -> str:
    """Return the value to send as ``password`` in goformId=LOGIN."""
    if variant == EncodingVariant.SHA256_BASE64:
        return sha256_hex(b64encode_text(password))
    if variant == EncodingVariant.DOUBLE_SHA256:
        return sha256_hex(sha256_hex(password) + challenge)
    return b64encode_text(password)
