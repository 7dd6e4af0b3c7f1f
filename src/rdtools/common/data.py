"""Data classes for decoded DNSSEC resource records."""

from abc import ABC
from enum import Enum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field

UInt8 = Annotated[int, Field(ge=0, le=0xFF)]
UInt16 = Annotated[int, Field(ge=0, le=0xFFFF)]


class FrozenBaseModel(BaseModel, ABC):
    """
    A frozen abstract base class for Pydantic models.

    This variant allows coercion of data - used when loading configuration objects.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class FrozenStrictBaseModel(BaseModel, ABC):
    """
    A frozen *strict* abstract base class for Pydantic models.

    This variant does NOT allow coercion of data - used for decoded records.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)


class AlgorithmDNSSEC(Enum):
    """
    DNSSEC Algorithms.

    https://www.iana.org/assignments/dns-sec-alg-numbers/dns-sec-alg-numbers.xhtml
    """

    RSAMD5 = 1
    DSA = 3
    RSASHA1 = 5
    DSA_NSEC3_SHA1 = 6
    RSASHA1_NSEC3_SHA1 = 7
    RSASHA256 = 8
    RSASHA512 = 10
    ECC_GOST = 12
    ECDSAP256SHA256 = 13
    ECDSAP384SHA384 = 14
    ED25519 = 15
    ED448 = 16


class TypeDNSSEC(Enum):
    """DNS RR type."""

    DS = 43
    DNSKEY = 48


class FlagsDNSKEY(Enum):
    """DNSKEY flags."""

    SEP = 0x0001
    REVOKE = 0x0080
    ZONE = 0x0100


class DigestDNSSEC(Enum):
    """
    DNSSEC DS Digest Types.

    https://www.iana.org/assignments/ds-rr-types/ds-rr-types.xhtml
    """

    SHA1 = 1
    SHA256 = 2
    GOST = 3
    SHA384 = 4


class DNSKEYRecord(FrozenStrictBaseModel):
    """DNSKEY RDATA fields (RFC 4034, section 2.1)."""

    if TYPE_CHECKING:
        # A frozen BaseModel will get a __hash__ function, but Pylance currently misses this
        def __hash__(self) -> int: ...

    flags: UInt16
    protocol: UInt8
    algorithm: UInt8
    public_key: str = Field(repr=False)

    @property
    def is_zone_key(self) -> bool:
        return bool(self.flags & FlagsDNSKEY.ZONE.value)

    @property
    def is_sep(self) -> bool:
        return bool(self.flags & FlagsDNSKEY.SEP.value)

    @property
    def is_revoked(self) -> bool:
        return bool(self.flags & FlagsDNSKEY.REVOKE.value)

    def as_tuple(self) -> tuple[int, int, int, str]:
        """Return the record as (flags, protocol, algorithm, public_key)."""
        return (self.flags, self.protocol, self.algorithm, self.public_key)


class DSRecord(FrozenStrictBaseModel):
    """DS RDATA fields (RFC 4034, section 5.1)."""

    if TYPE_CHECKING:
        # A frozen BaseModel will get a __hash__ function, but Pylance currently misses this
        def __hash__(self) -> int: ...

    key_tag: UInt16
    algorithm: UInt8
    digest_type: UInt8
    digest: str

    def as_tuple(self) -> tuple[int, int, int, str]:
        """Return the record as (key_tag, algorithm, digest_type, digest)."""
        return (self.key_tag, self.algorithm, self.digest_type, self.digest)
