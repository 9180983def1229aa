from .constants import PAYLOAD_LENGTHS, VersionByte
from .crc import crc16
from .encoding import (
    decode,
    decode_ed25519_public_key,
    decode_public_key,
    decode_version,
    encode,
    encode_ed25519_public_key,
    encode_public_key,
    is_strkey_char,
)
from . import constants
from . import encoding
from . import errors

__all__ = [
    "PAYLOAD_LENGTHS",
    "VersionByte",
    "constants",
    "crc16",
    "decode",
    "decode_ed25519_public_key",
    "decode_public_key",
    "decode_version",
    "encode",
    "encode_ed25519_public_key",
    "encode_public_key",
    "encoding",
    "errors",
    "is_strkey_char",
]
