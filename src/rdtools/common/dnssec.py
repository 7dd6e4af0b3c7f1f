"""DNSSEC protocol specific functions."""

import base64
import logging
import struct

from rdtools.common.data import DNSKEYRecord, DSRecord, TypeDNSSEC
from rdtools.common.validate import MalformedInput

logger = logging.getLogger(__name__)

# Flags/Key Tag (16 bits), Protocol/Algorithm (8 bits), Algorithm/Digest Type (8 bits)
_HEADER = struct.Struct("!HBB")


def dnskey_type() -> int:
    """DNS RR type code for DNSKEY."""
    return TypeDNSSEC.DNSKEY.value


def ds_type() -> int:
    """DNS RR type code for DS."""
    return TypeDNSSEC.DS.value


def _split_rdata(rdata: bytes, rrtype: TypeDNSSEC) -> tuple[int, int, int, str]:
    """Unpack the fixed four byte header shared by DNSKEY and DS, and base64 encode the rest."""
    if not isinstance(rdata, (bytes, bytearray, memoryview)):
        raise TypeError(f"{rrtype.name} RDATA must be bytes, not {type(rdata).__name__}")
    rdata = bytes(rdata)
    if len(rdata) < _HEADER.size:
        raise MalformedInput(
            f"{rrtype.name} RDATA too short ({len(rdata)} < {_HEADER.size} bytes)"
        )
    first, second, third = _HEADER.unpack_from(rdata)
    return first, second, third, b64encode(rdata[_HEADER.size :])


def b64encode(data: bytes) -> str:
    """Standard base64 (with padding) as text."""
    return base64.b64encode(data).decode()


def decode_dnskey(rdata: bytes) -> DNSKEYRecord:
    """
    Decode DNSKEY RDATA (RFC 4034, section 2.1).

                         1 1 1 1 1 1 1 1 1 1 2 2 2 2 2 2 2 2 2 2 3 3
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |              Flags            |    Protocol   |   Algorithm   |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    /                            Public Key                         /
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

    Protocol and algorithm are passed through without validation.
    """
    flags, protocol, algorithm, public_key = _split_rdata(rdata, TypeDNSSEC.DNSKEY)
    logger.debug(
        "Decoded DNSKEY flags=%d protocol=%d algorithm=%d", flags, protocol, algorithm
    )
    return DNSKEYRecord(
        flags=flags, protocol=protocol, algorithm=algorithm, public_key=public_key
    )


def decode_ds(rdata: bytes) -> DSRecord:
    """
    Decode DS RDATA (RFC 4034, section 5.1).

                         1 1 1 1 1 1 1 1 1 1 2 2 2 2 2 2 2 2 2 2 3 3
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |           Key Tag             |  Algorithm    |  Digest Type  |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    /                            Digest                             /
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    """
    key_tag, algorithm, digest_type, digest = _split_rdata(rdata, TypeDNSSEC.DS)
    logger.debug(
        "Decoded DS key_tag=%d algorithm=%d digest_type=%d",
        key_tag,
        algorithm,
        digest_type,
    )
    return DSRecord(
        key_tag=key_tag, algorithm=algorithm, digest_type=digest_type, digest=digest
    )


def dnskey_to_rdata(record: DNSKEYRecord) -> bytes:
    """Return DNSKEY in DNS RDATA format (RFC 4034)."""
    header = _HEADER.pack(record.flags, record.protocol, record.algorithm)
    return header + base64.b64decode(record.public_key)


def ds_to_rdata(record: DSRecord) -> bytes:
    """Return DS in DNS RDATA format (RFC 4034)."""
    header = _HEADER.pack(record.key_tag, record.algorithm, record.digest_type)
    return header + base64.b64decode(record.digest)


def calculate_key_tag(rdata: bytes) -> int:
    """
    Calculate DNSSEC key tag from DNSKEY RDATA (header and public key).

    The algorithm to do this is found in RFC 4034, Appendix B.1. Even positioned
    bytes are the high half of a 16 bit word, so an odd length buffer ends with
    an implicit zero low byte.
    """
    _sum = 0
    for i, this in enumerate(rdata):
        if i % 2:
            _sum += this
        else:
            _sum += this << 8
    return (_sum + (_sum >> 16)) & 0xFFFF


keytag = calculate_key_tag
