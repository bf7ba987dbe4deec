"""
Tests for the digest, Base64 and UCS2 primitives.
"""

import base64
import unittest

from zte_sms.utils.hashing import b64encode_text, md5_hex, sha256_hex
from zte_sms.utils.ucs2 import decode_hex_utf16_payload


class TestSha256Hex(unittest.TestCase):
    def test_known_digest(self):
        self.assertEqual(
            sha256_hex("abc"),
            "BA7816BF8F01CFEA414140DE5DAE2223B00361A396177A9CB410FF61F20015AD",
        )

    def test_uppercase(self):
        digest = sha256_hex("admin")
        self.assertEqual(digest, digest.upper())
        self.assertEqual(len(digest), 64)

    def test_utf8_input(self):
        self.assertNotEqual(sha256_hex("pässword"), sha256_hex("password"))


class TestMd5Hex(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(md5_hex(""), "D41D8CD98F00B204E9800998ECF8427E")

    def test_known_digest(self):
        self.assertEqual(md5_hex("abc"), "900150983CD24FB0D6963F7D28E17F72")


class TestB64EncodeText(unittest.TestCase):
    def test_ascii(self):
        self.assertEqual(b64encode_text("admin"), "YWRtaW4=")

    def test_empty(self):
        self.assertEqual(b64encode_text(""), "")

    def test_round_trip(self):
        for password in ("admin", "p@ss w0rd!", "contraseña", "密码"):
            decoded = base64.b64decode(b64encode_text(password)).decode("utf-8")
            self.assertEqual(decoded, password)


class TestDecodeHexUtf16Payload(unittest.TestCase):
    def test_hello(self):
        self.assertEqual(decode_hex_utf16_payload("00480065006C006C006F"), "Hello")

    def test_captured_inbox_body(self):
        # "Your code is 4711" as sent by the router
        self.assertEqual(
            decode_hex_utf16_payload(
                "0059006F0075007200200063006F006400650020006900730020"
                "0034003700310031"
            ),
            "Your code is 4711",
        )

    def test_lowercase_hex(self):
        self.assertEqual(decode_hex_utf16_payload("004f006b"), "Ok")

    def test_high_byte_dropped(self):
        # U+00E9 survives, U+4F60 keeps only its low byte 0x60
        self.assertEqual(decode_hex_utf16_payload("00E94F60"), "é`")

    def test_empty_and_short(self):
        self.assertEqual(decode_hex_utf16_payload(""), "")
        self.assertEqual(decode_hex_utf16_payload("00"), "")

    def test_trailing_nibble_read_alone(self):
        self.assertEqual(decode_hex_utf16_payload("0041000"), "A\x00")

    def test_non_hex_raises(self):
        with self.assertRaises(ValueError):
            decode_hex_utf16_payload("00zz")
