import base64
import binascii
import typing as t

from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from . import constants, crc, errors
from .constants import VersionByte


def _to_str(src: t.Union[str, bytes, bytearray]) -> str:
    """Make sure bytes are decoded to string"""
    if isinstance(src, str):
        return src
    # Non ASCII bytes are replaced and later rejected as invalid characters
    return bytes(src).decode("ascii", errors="replace")


def is_strkey_char(char: str) -> bool:
    """Returns True if char is a valid character in a strkey formatted key."""
    return len(char) == 1 and char in constants.STRKEY_ALPHABET


def encode_base32(data: t.Union[bytes, bytearray]) -> str:
    """Encode bytes to uppercase base32 without padding"""
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def decode_base32(src: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode unpadded base32 into bytes.

    Only canonical encodings are accepted: the text must be made of uppercase
    letters and digits, and must be exactly what `encode_base32` produces for the
    decoded bytes.
    """
    text = _to_str(src)
    # Some lengths can never be produced by unpadded base32
    if len(text) % 8 in constants.INVALID_LENGTH_REMAINDERS:
        raise errors.MalformedLengthError()
    if not all(char in constants.STRKEY_ALPHABET for char in text):
        raise errors.MalformedEncodingError()
    # Add missing padding
    padding = "=" * (-len(text) % 8)
    try:
        decoded = base64.b32decode(text + padding)
    except binascii.Error:
        raise errors.MalformedEncodingError()
    # Reject unused trailing bits
    if encode_base32(decoded) != text:
        raise errors.MalformedEncodingError()
    return decoded


def encode(version: int, payload: t.Union[bytes, bytearray]) -> str:
    """Encode a payload into a strkey.

    The payload length is not checked against the version byte, so a string
    encoded with an unexpected length will fail to decode.

    Arguments:
        version: the version byte prefixed to the payload.
        payload: the raw bytes of the key.

    Returns:
        The strkey as an uppercase ASCII string.
    """
    if not 0 <= version <= 255:
        raise ValueError(f"Invalid version byte: {version}")
    raw = bytearray(payload)
    raw.insert(0, version)
    # Calculate and include crc16 checksum
    crc_int = crc.crc16(raw)
    crc_bytes = crc_int.to_bytes(constants.CHECKSUM_SIZE, byteorder="little")
    raw.extend(crc_bytes)
    # Encode to base32
    return encode_base32(raw)


def decode(src: t.Union[str, bytes, bytearray]) -> t.Tuple[bytes, VersionByte]:
    """Decode a strkey into payload and version byte.

    Raises:
        MalformedLengthError: the encoded length is impossible for base32.
        MalformedEncodingError: the string is not canonical unpadded base32.
        TooShortError: the decoded bytes can't hold a version byte and a checksum.
        UnknownVersionError: the version byte is unknown or the payload has the wrong length.
        ChecksumMismatchError: the checksum does not match.
    """
    raw = decode_base32(src)
    if len(raw) < constants.VERSION_SIZE + constants.CHECKSUM_SIZE:
        raise errors.TooShortError()
    version = raw[0]
    payload = raw[constants.VERSION_SIZE : -constants.CHECKSUM_SIZE]
    checksum = raw[-constants.CHECKSUM_SIZE :]
    expected_length = constants.PAYLOAD_LENGTHS.get(t.cast(VersionByte, version))
    if expected_length is None or expected_length != len(payload):
        raise errors.UnknownVersionError()
    if crc.crc16(raw[: -constants.CHECKSUM_SIZE]) != int.from_bytes(
        checksum, byteorder="little"
    ):
        raise errors.ChecksumMismatchError()
    return payload, VersionByte(version)


def decode_version(
    src: t.Union[str, bytes, bytearray], expected: VersionByte
) -> bytes:
    """Decode a strkey and return its payload when version byte is the expected one."""
    payload, version = decode(src)
    if version != expected:
        raise errors.UnexpectedVersionError()
    return payload


def encode_public_key(public_bytes: t.Union[bytes, bytearray]) -> str:
    """Encode an ed25519 public key from public bytes"""
    if len(public_bytes) != constants.PAYLOAD_LENGTHS[VersionByte.PUBKEY]:
        raise errors.InvalidPublicKeyError()
    return encode(VersionByte.PUBKEY, public_bytes)


def decode_public_key(public_key: t.Union[str, bytes, bytearray]) -> bytes:
    """Decode an ed25519 public key into public bytes."""
    try:
        return decode_version(public_key, VersionByte.PUBKEY)
    except errors.StrkeyError as exc:
        raise errors.InvalidPublicKeyError() from exc


def encode_ed25519_public_key(key: ed25519.Ed25519PublicKey) -> str:
    """Encode an ed25519 public key object into a strkey"""
    public_bytes = key.public_bytes(encoding=Encoding.Raw, format=PublicFormat.Raw)
    return encode_public_key(public_bytes)


def decode_ed25519_public_key(
    src: t.Union[str, bytes, bytearray]
) -> ed25519.Ed25519PublicKey:
    """Decode a strkey into an ed25519 public key object."""
    # If key is of type bytes or bytearray and is of length 32, consider it to be public bytes
    if isinstance(src, (bytes, bytearray)) and len(src) == 32:
        public_bytes = bytes(src)
    else:
        public_bytes = decode_public_key(src)
    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(public_bytes)
    except ValueError as exc:
        raise errors.InvalidPublicKeyError() from exc
