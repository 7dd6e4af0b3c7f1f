"""Decode DNSSEC DNSKEY and DS RDATA, and calculate DNSKEY key tags."""
from rdtools.common.data import DNSKEYRecord, DSRecord  # noqa
from rdtools.common.digest import (  # noqa
    DigestSupported,
    DigestUnsupported,
    digest_algorithm_name,
    resolve_digest_type,
)
from rdtools.common.dnssec import (  # noqa
    calculate_key_tag,
    decode_dnskey,
    decode_ds,
    dnskey_type,
    ds_type,
    keytag,
)
from rdtools.common.validate import DecodeError, MalformedInput, UnsupportedAlgorithm  # noqa
