import base64
import struct
import unittest
from binascii import unhexlify

import pytest
from pydantic import ValidationError

from rdtools.common.data import DNSKEYRecord, DSRecord
from rdtools.common.dnssec import (
    calculate_key_tag,
    decode_dnskey,
    decode_ds,
    dnskey_to_rdata,
    dnskey_type,
    ds_to_rdata,
    ds_type,
    keytag,
)
from rdtools.common.validate import DecodeError, MalformedInput

# ECDSAP256SHA256 zone signing key
DNSKEY_ZSK = unhexlify(
    "0100030df21e9cfcde3974df84bf139b250c4088eb0783887b1c99d26530e62c00b0baf6d4"
    "0be0656520b123a00082eddc7da7a28b8c17bd493b6edb90294450dc2c7b42"
)
# ECDSAP256SHA256 key signing key, key tag 46701
DNSKEY_KSK = unhexlify(
    "0101030d0abfda1f783de5c8f63a7f389b8b710ab735b115f369cd2f2b8b5d7cab16796f50"
    "1550308dff178f784d8429613c654f4714fa22510bb67809bd03c0f473c37a"
)
# DS records for DNSKEY_KSK, SHA-256 and SHA-384
DS_SHA256 = unhexlify(
    "b66d0d02545a8653d5f628473872abb45cfa519559d742ae6e50dd7c6339d0819467edf6"
)
DS_SHA384 = unhexlify(
    "b66d0d04e560b6e6e1fd63fe3b83b6bc916f02cd76fb135adb3b466ad54ec1a7dd9dc4feb1"
    "89b6f741d467e7a4eaefe569917481"
)


class Test_DecodeDNSKEY(unittest.TestCase):
    def test_decode_zsk(self) -> None:
        """Test decoding a zone signing key"""
        record = decode_dnskey(DNSKEY_ZSK)
        self.assertEqual(
            record.as_tuple(),
            (
                256,
                3,
                13,
                "8h6c/N45dN+EvxObJQxAiOsHg4h7HJnSZTDmLACwuvbUC+BlZSCxI6AAgu3cfaeii4wXvUk7btuQKURQ3Cx7Qg==",
            ),
        )
        self.assertTrue(record.is_zone_key)
        self.assertFalse(record.is_sep)
        self.assertFalse(record.is_revoked)

    def test_decode_ksk(self) -> None:
        """Test decoding a key signing key"""
        record = decode_dnskey(DNSKEY_KSK)
        self.assertEqual(
            record,
            DNSKEYRecord(
                flags=257,
                protocol=3,
                algorithm=13,
                public_key="Cr/aH3g95cj2On84m4txCrc1sRXzac0vK4tdfKsWeW9QFVAwjf8Xj3hNhClhPGVPRxT6IlELtngJvQPA9HPDeg==",
            ),
        )
        self.assertTrue(record.is_sep)

    def test_header_only(self) -> None:
        """Test DNSKEY without any public key material"""
        record = decode_dnskey(b"\x01\x81\x03\x08")
        self.assertEqual(record.as_tuple(), (385, 3, 8, ""))
        self.assertTrue(record.is_revoked)

    def test_protocol_and_algorithm_not_validated(self) -> None:
        """Test that protocol and algorithm values are passed through as-is"""
        record = decode_dnskey(b"\xff\xff\x07\xfeabc")
        self.assertEqual(
            record.as_tuple(), (65535, 7, 254, base64.b64encode(b"abc").decode())
        )

    def test_too_short(self) -> None:
        """Test DNSKEY RDATA shorter than the header"""
        with self.assertRaises(MalformedInput):
            decode_dnskey(b"\x01\x00\x03")
        with self.assertRaises(DecodeError):
            decode_dnskey(b"")

    def test_not_bytes(self) -> None:
        """Test that text input is rejected"""
        with self.assertRaises(TypeError):
            decode_dnskey("0100030d")  # type: ignore

    def test_bytearray(self) -> None:
        """Test decoding from a bytearray"""
        self.assertEqual(decode_dnskey(bytearray(DNSKEY_KSK)), decode_dnskey(DNSKEY_KSK))

    def test_round_trip(self) -> None:
        """Test that the header and the decoded public key reproduce the input"""
        for rdata in [DNSKEY_ZSK, DNSKEY_KSK, b"\x00\x00\x00\x00", b"\x01\x01\x03\x05\x00"]:
            record = decode_dnskey(rdata)
            header = struct.pack("!HBB", record.flags, record.protocol, record.algorithm)
            self.assertEqual(header + base64.b64decode(record.public_key), rdata)
            self.assertEqual(dnskey_to_rdata(record), rdata)

    def test_record_immutable(self) -> None:
        """Test that decoded records can't be modified"""
        record = decode_dnskey(DNSKEY_ZSK)
        with pytest.raises(ValidationError):
            record.flags = 257  # type: ignore


class Test_DecodeDS(unittest.TestCase):
    def test_decode_sha256(self) -> None:
        """Test decoding a DS with a SHA-256 digest"""
        record = decode_ds(DS_SHA256)
        self.assertEqual(
            record.as_tuple(),
            (46701, 13, 2, "VFqGU9X2KEc4cqu0XPpRlVnXQq5uUN18YznQgZRn7fY="),
        )

    def test_decode_sha384(self) -> None:
        """Test decoding a DS with a SHA-384 digest"""
        record = decode_ds(DS_SHA384)
        self.assertEqual(
            record,
            DSRecord(
                key_tag=46701,
                algorithm=13,
                digest_type=4,
                digest="5WC25uH9Y/47g7a8kW8CzXb7E1rbO0Zq1U7Bp92dxP6xibb3QdRn56Tq7+VpkXSB",
            ),
        )

    def test_unknown_digest_type_decodes(self) -> None:
        """Test that the digest type is not checked when decoding"""
        record = decode_ds(b"\x00\x01\x08\x63")
        self.assertEqual(record.as_tuple(), (1, 8, 99, ""))

    def test_too_short(self) -> None:
        """Test DS RDATA shorter than the header"""
        with self.assertRaises(MalformedInput):
            decode_ds(b"\xb6\x6d\x0d")

    def test_round_trip(self) -> None:
        """Test that the header and the decoded digest reproduce the input"""
        for rdata in [DS_SHA256, DS_SHA384, b"\xff\xff\xff\xff"]:
            record = decode_ds(rdata)
            header = struct.pack("!HBB", record.key_tag, record.algorithm, record.digest_type)
            self.assertEqual(header + base64.b64decode(record.digest), rdata)
            self.assertEqual(ds_to_rdata(record), rdata)


class Test_KeyTag(unittest.TestCase):
    def test_ksk(self) -> None:
        """Test key tag of a key signing key, matching its DS record"""
        self.assertEqual(calculate_key_tag(DNSKEY_KSK), 46701)
        self.assertEqual(calculate_key_tag(DNSKEY_KSK), decode_ds(DS_SHA256).key_tag)

    def test_zsk(self) -> None:
        """Test key tag of a zone signing key"""
        self.assertEqual(calculate_key_tag(DNSKEY_ZSK), 26562)

    def test_deterministic(self) -> None:
        """Test that the same input gives the same key tag"""
        self.assertEqual(keytag(DNSKEY_ZSK), keytag(DNSKEY_ZSK))

    def test_empty(self) -> None:
        """Test key tag of empty input"""
        self.assertEqual(calculate_key_tag(b""), 0)

    def test_odd_length(self) -> None:
        """Test that the last byte of odd length input is the high half of a word"""
        # 0x0102 + 0x0300
        self.assertEqual(calculate_key_tag(b"\x01\x02\x03"), 0x0402)
        self.assertEqual(calculate_key_tag(b"\x03"), 0x0300)

    def test_carry_fold(self) -> None:
        """Test that the carry is folded back into the lower 16 bits once"""
        # 0xffff + 0xffff + 0xff00 = 0x2fefe, 0xfefe + 0x2 = 0xff00
        self.assertEqual(calculate_key_tag(b"\xff" * 5), 0xFF00)
        # 0xffff + 0x0001 = 0x10000, 0x0000 + 0x1 = 0x0001
        self.assertEqual(calculate_key_tag(b"\xff\xff\x00\x01"), 0x0001)


class Test_Constants(unittest.TestCase):
    def test_rr_types(self) -> None:
        """Test DNS RR type codes"""
        self.assertEqual(dnskey_type(), 48)
        self.assertEqual(ds_type(), 43)


if __name__ == "__main__":
    unittest.main()
