class StrkeyError(Exception):
    pass


class MalformedLengthError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: invalid encoded length"


class MalformedEncodingError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: invalid base32 encoding"


class TooShortError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: encoded key is too short"


class UnknownVersionError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: unknown version byte or invalid payload length"


class ChecksumMismatchError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: checksum mismatch"


class UnexpectedVersionError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: unexpected version byte"


class InvalidPublicKeyError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: invalid ed25519 public key"


class InvalidMuxedAccountError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: invalid muxed ed25519 account"


class InvalidSignerKeyError(StrkeyError):
    def __str__(self) -> str:
        return "strkey: invalid signer key"
