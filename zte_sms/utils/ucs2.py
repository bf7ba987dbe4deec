"""Decoding of the router's hex-encoded UCS2 SMS bodies."""


def decode_hex_utf16_payload(hex_string: str) -> str:
    """
    Decode a message ``content`` field as served by sms_data_total.

    The router sends UCS2 big-endian code units as hex, e.g. "Hi" is
    ``00480069``.  Starting at offset 2 every other byte pair is the low
    byte of a code unit; the high bytes are skipped, so only the Latin-1
    range survives::

        0048 0069
          ^^   ^^

    No validation is done.  A trailing single hex digit is read on its own,
    and non-hex input raises ValueError from int().
    """
    chars = []
    for i in range(2, len(hex_string), 4):
        chars.append(chr(int(hex_string[i:i + 2], 16)))
    return "".join(chars)
