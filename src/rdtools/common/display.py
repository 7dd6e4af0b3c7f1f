"""Functions to display decoded records to humans."""

from base64 import b64decode
from binascii import hexlify

from rdtools.common.data import DigestDNSSEC, DNSKEYRecord, DSRecord, TypeDNSSEC
from rdtools.common.digest import DigestSupported, resolve_algorithm, resolve_digest_type
from rdtools.common.validate import UnsupportedAlgorithm


def fmt_algorithm(code: int) -> str:
    """Return algorithm mnemonic, or the number if it is unassigned."""
    try:
        return resolve_algorithm(code).name
    except UnsupportedAlgorithm:
        return str(code)


def fmt_digest_type(code: int) -> str:
    """Return digest type mnemonic, or the number if it is unassigned."""
    try:
        return DigestDNSSEC(code).name
    except ValueError:
        return str(code)


def fmt_dnskey(record: DNSKEYRecord, key_tag: int | None = None) -> str:
    """
    Return DNSKEY in presentation format, with a comment like the one dnssec-keygen writes.

    Example:
    -------
        DNSKEY 257 3 13 Cr/aH3g9...9HPDeg== ; KSK ; alg = ECDSAP256SHA256 ; key id = 46701
    """
    res = f"{TypeDNSSEC.DNSKEY.name} {record.flags} {record.protocol} {record.algorithm}"
    if record.public_key:
        res += f" {record.public_key}"
    res += " ; " + ("KSK" if record.is_sep else "ZSK")
    if record.is_revoked:
        res += " (revoked)"
    res += f" ; alg = {fmt_algorithm(record.algorithm)}"
    if key_tag is not None:
        res += f" ; key id = {key_tag}"
    return res


def fmt_ds(record: DSRecord) -> str:
    """Return DS in presentation format (digest as upper case hex, like dnssec-dsfromkey)."""
    _lookup = resolve_digest_type(record.digest_type)
    if isinstance(_lookup, DigestSupported):
        digest_name = _lookup.digest_type.name
    else:
        digest_name = f"{fmt_digest_type(record.digest_type)} (unsupported)"
    res = f"{TypeDNSSEC.DS.name} {record.key_tag} {record.algorithm} {record.digest_type}"
    if record.digest:
        res += f" {hexdigest(record)}"
    return f"{res} ; alg = {fmt_algorithm(record.algorithm)} ; digest = {digest_name}"


def hexdigest(record: DSRecord) -> str:
    """Return DS digest as hex."""
    return hexlify(b64decode(record.digest)).decode().upper()
