"""Code to compute and check DS record digests (RFC 4034, section 5.1.4)."""

import base64
import binascii
import hashlib
import logging

from rdtools.common.digest import digest_algorithm_name
from rdtools.common.dnssec import calculate_key_tag, decode_dnskey, decode_ds
from rdtools.common.validate import MalformedInput

logger = logging.getLogger(__name__)

MAX_LABEL_LENGTH = 63
MAX_NAME_LENGTH = 255


def owner_to_wire(name: str) -> bytes:
    """
    Return a domain name in canonical (lower case, uncompressed) wire format.

    Relative names are treated as absolute.
    """
    if name in (".", ""):
        return b"\x00"
    res = b""
    for label in name.rstrip(".").split("."):
        try:
            _label = label.lower().encode("ascii")
        except UnicodeEncodeError:
            raise MalformedInput(f"Non-ASCII label in domain name {name!r}") from None
        if not _label or len(_label) > MAX_LABEL_LENGTH:
            raise MalformedInput(f"Bad label length {len(_label)} in domain name {name!r}")
        res += bytes([len(_label)]) + _label
    res += b"\x00"
    if len(res) > MAX_NAME_LENGTH:
        raise MalformedInput(f"Domain name {name!r} too long ({len(res)} bytes)")
    return res


def calculate_ds_digest(owner: str, dnskey_rdata: bytes, digest_type: int) -> bytes:
    """
    Calculate the DS digest of a DNSKEY.

        digest = digest_algorithm( DNSKEY owner name | DNSKEY RDATA)

    :raises UnsupportedAlgorithm: if digest_type is not in the digest registry
    """
    _hash = digest_algorithm_name(digest_type)
    data = owner_to_wire(owner) + bytes(dnskey_rdata)
    logger.debug(
        "Creating DS digest (%s) using owner + DNSKEY RDATA\n%s",
        _hash,
        binascii.hexlify(data),
    )
    return hashlib.new(_hash, data).digest()


def ds_matches_dnskey(owner: str, ds_rdata: bytes, dnskey_rdata: bytes) -> bool:
    """
    Check if a DS record refers to a DNSKEY.

    Key tag, algorithm and digest all have to match. No signatures are verified.
    """
    ds = decode_ds(ds_rdata)
    dnskey = decode_dnskey(dnskey_rdata)
    key_tag = calculate_key_tag(dnskey_rdata)
    if ds.key_tag != key_tag:
        logger.debug("DS key tag %d does not match DNSKEY key tag %d", ds.key_tag, key_tag)
        return False
    if ds.algorithm != dnskey.algorithm:
        logger.debug(
            "DS algorithm %d does not match DNSKEY algorithm %d",
            ds.algorithm,
            dnskey.algorithm,
        )
        return False
    digest = calculate_ds_digest(owner, dnskey_rdata, ds.digest_type)
    return digest == base64.b64decode(ds.digest)
