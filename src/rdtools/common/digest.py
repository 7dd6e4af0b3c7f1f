"""
Registry of DS digest types and DNSSEC algorithms this package knows how to use.

The registry is deliberately partial. A digest type code that is known to
the protocol (DigestDNSSEC) is only usable once it has an entry in
SUPPORTED_DIGESTS; unknown or unsupported codes are never guessed.
"""

import logging
from typing import Final, Literal

from rdtools.common.data import AlgorithmDNSSEC, DigestDNSSEC, FrozenStrictBaseModel
from rdtools.common.validate import UnsupportedAlgorithm

logger = logging.getLogger(__name__)

# Digest type -> hashlib algorithm name. Add SHA-256/SHA-384 here to support them.
SUPPORTED_DIGESTS: Final[dict[DigestDNSSEC, str]] = {
    DigestDNSSEC.SHA1: "sha1",
}


class DigestSupported(FrozenStrictBaseModel):
    """Successful digest type lookup."""

    supported: Literal[True] = True
    digest_type: DigestDNSSEC
    name: str


class DigestUnsupported(FrozenStrictBaseModel):
    """Failed digest type lookup."""

    supported: Literal[False] = False
    code: int
    reason: str


DigestLookup = DigestSupported | DigestUnsupported


def resolve_digest_type(code: int | DigestDNSSEC) -> DigestLookup:
    """Look up a DS digest type code (or DigestDNSSEC member) in the registry."""
    if isinstance(code, DigestDNSSEC):
        code = code.value
    try:
        _digest = DigestDNSSEC(code)
    except ValueError:
        return DigestUnsupported(code=code, reason=f"Unassigned DS digest type {code}")
    name = SUPPORTED_DIGESTS.get(_digest)
    if name is None:
        return DigestUnsupported(
            code=code, reason=f"DS digest type {_digest.name} ({code}) not implemented"
        )
    return DigestSupported(digest_type=_digest, name=name)


def digest_algorithm_name(code: int | DigestDNSSEC) -> str:
    """
    Return the hashlib name of the digest algorithm for a DS digest type code.

    :raises UnsupportedAlgorithm: for any code not in SUPPORTED_DIGESTS
    """
    res = resolve_digest_type(code)
    if isinstance(res, DigestUnsupported):
        logger.debug("Refusing digest type %d: %s", res.code, res.reason)
        raise UnsupportedAlgorithm(res.code, res.reason)
    return res.name


def resolve_algorithm(code: int) -> AlgorithmDNSSEC:
    """
    Return the DNSSEC signature algorithm for an algorithm code.

    :raises UnsupportedAlgorithm: if the code is not assigned
    """
    try:
        return AlgorithmDNSSEC(code)
    except ValueError:
        raise UnsupportedAlgorithm(code, f"Unassigned DNSSEC algorithm {code}") from None
