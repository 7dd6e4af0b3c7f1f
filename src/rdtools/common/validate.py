"""Exception classes raised when decoding DNSSEC RDATA."""


class DecodeError(Exception):
    """Base class exception for all decoding errors."""


class MalformedInput(DecodeError):
    """Input data is too short or otherwise not parsable."""


class UnsupportedAlgorithm(DecodeError):
    """Algorithm or digest type code outside the implemented set."""

    def __init__(self, code: int, message: str | None = None):
        self.code = code
        super().__init__(message or f"Unsupported algorithm code {code}")
