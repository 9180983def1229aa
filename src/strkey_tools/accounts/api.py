import logging
import types
import typing as t

from stellar_sdk import xdr as stellar_xdr

from strkey_tools.strkeys import encoding, errors
from strkey_tools.strkeys.constants import VersionByte

logger = logging.getLogger("strkey_tools.accounts")


MAX_ID = 2**64 - 1

# Version bytes of signer keys
SIGNER_VERSIONS: t.Mapping[stellar_xdr.SignerKeyType, VersionByte] = types.MappingProxyType(
    {
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_ED25519: VersionByte.PUBKEY,
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_PRE_AUTH_TX: VersionByte.PRE_AUTH_TX,
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_HASH_X: VersionByte.HASH_X,
    }
)

# SignerKey union arm holding the key, per signer type
SIGNER_ARMS: t.Mapping[stellar_xdr.SignerKeyType, str] = types.MappingProxyType(
    {
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_ED25519: "ed25519",
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_PRE_AUTH_TX: "pre_auth_tx",
        stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_HASH_X: "hash_x",
    }
)


def parse_uint64(src: str) -> int:
    """Parse a decimal unsigned 64 bits integer.

    Raises:
        ValueError: when src is not made of ASCII digits only, or when it does not fit in 64 bits.
    """
    if not (src.isascii() and src.isdigit()):
        raise ValueError(f"invalid unsigned integer: {src!r}")
    value = int(src)
    if value > MAX_ID:
        raise ValueError(f"integer does not fit in 64 bits: {src}")
    return value


def muxed_account_record(
    public_bytes: t.Union[bytes, bytearray], id: t.Optional[int] = None
) -> stellar_xdr.MuxedAccount:
    """Build a MuxedAccount record. Without routing id, the account is a plain ed25519 public key."""
    if id is None:
        return stellar_xdr.MuxedAccount(
            type=stellar_xdr.CryptoKeyType.KEY_TYPE_ED25519,
            ed25519=stellar_xdr.Uint256(bytes(public_bytes)),
        )
    return stellar_xdr.MuxedAccount(
        type=stellar_xdr.CryptoKeyType.KEY_TYPE_MUXED_ED25519,
        med25519=stellar_xdr.MuxedAccountMed25519(
            id=stellar_xdr.Uint64(id),
            ed25519=stellar_xdr.Uint256(bytes(public_bytes)),
        ),
    )


def encode_muxed_account(account: stellar_xdr.MuxedAccount) -> str:
    """Encode an account into a strkey.

    Accounts without routing id are encoded as plain ed25519 public keys.
    """
    if account.type == stellar_xdr.CryptoKeyType.KEY_TYPE_ED25519:
        return encoding.encode(VersionByte.PUBKEY, account.ed25519.uint256)
    if account.type == stellar_xdr.CryptoKeyType.KEY_TYPE_MUXED_ED25519:
        return encoding.encode(VersionByte.MUXED, account.med25519.to_xdr_bytes())
    raise errors.InvalidMuxedAccountError()


def _muxed_account_from_payload(payload: bytes, version: VersionByte) -> stellar_xdr.MuxedAccount:
    if version == VersionByte.PUBKEY:
        return muxed_account_record(payload)
    if version == VersionByte.MUXED:
        med25519 = stellar_xdr.MuxedAccountMed25519.from_xdr_bytes(payload)
        return stellar_xdr.MuxedAccount(
            type=stellar_xdr.CryptoKeyType.KEY_TYPE_MUXED_ED25519, med25519=med25519
        )
    raise errors.InvalidMuxedAccountError()


def decode_muxed_account(src: t.Union[str, bytes, bytearray]) -> stellar_xdr.MuxedAccount:
    """Decode either a plain ed25519 public key or a muxed account."""
    try:
        payload, version = encoding.decode(src)
    except errors.StrkeyError as exc:
        raise errors.InvalidMuxedAccountError() from exc
    return _muxed_account_from_payload(payload, version)


def signer_key_record(typ: stellar_xdr.SignerKeyType, key: t.Union[bytes, bytearray]) -> stellar_xdr.SignerKey:
    """Build a SignerKey record holding a 32 bytes key or hash."""
    try:
        arm = SIGNER_ARMS[typ]
    except KeyError as exc:
        raise errors.InvalidSignerKeyError() from exc
    return stellar_xdr.SignerKey(type=typ, **{arm: stellar_xdr.Uint256(bytes(key))})


def encode_signer_key(signer: stellar_xdr.SignerKey) -> str:
    """Encode a signer key into a strkey"""
    try:
        version = SIGNER_VERSIONS[signer.type]
    except KeyError as exc:
        raise errors.InvalidSignerKeyError() from exc
    key: stellar_xdr.Uint256 = getattr(signer, SIGNER_ARMS[signer.type])
    return encoding.encode(version, key.uint256)


def _signer_key_from_payload(payload: bytes, version: VersionByte) -> stellar_xdr.SignerKey:
    for typ, signer_version in SIGNER_VERSIONS.items():
        if version == signer_version:
            return signer_key_record(typ, payload)
    raise errors.InvalidSignerKeyError()


def decode_signer_key(src: t.Union[str, bytes, bytearray]) -> stellar_xdr.SignerKey:
    """Decode an ed25519 public key, a pre-authorized transaction hash or a hash-x into a signer key."""
    try:
        payload, version = encoding.decode(src)
    except errors.StrkeyError as exc:
        raise errors.InvalidSignerKeyError() from exc
    return _signer_key_from_payload(payload, version)


def mux(id: int, public_key: t.Union[str, bytes, bytearray]) -> str:
    """Multiplex an ed25519 public key with a routing id.

    Arguments:
        id: the routing id, an unsigned 64 bits integer.
        public_key: the strkey of an ed25519 public key ('G...').

    Returns:
        The strkey of the muxed account ('M...').
    """
    if not 0 <= id <= MAX_ID:
        raise ValueError(f"routing id does not fit in 64 bits: {id}")
    public_bytes = encoding.decode_public_key(public_key)
    muxed = encode_muxed_account(muxed_account_record(public_bytes, id))
    logger.debug("muxed id %d into account %s", id, muxed)
    return muxed


def split_muxed_payload(payload: bytes) -> t.Tuple[int, str]:
    """Split the 40 bytes payload of a muxed account into its routing id and ed25519 public key strkey."""
    med25519 = stellar_xdr.MuxedAccountMed25519.from_xdr_bytes(payload)
    return med25519.id.uint64, encoding.encode_public_key(med25519.ed25519.uint256)


def demux(muxed: t.Union[str, bytes, bytearray]) -> t.Tuple[int, str]:
    """Split a muxed account into its routing id and ed25519 public key.

    Plain ed25519 public keys are rejected.

    Returns:
        A tuple (id, public key strkey).
    """
    try:
        payload = encoding.decode_version(muxed, VersionByte.MUXED)
    except errors.StrkeyError as exc:
        raise errors.InvalidMuxedAccountError() from exc
    id, public_key = split_muxed_payload(payload)
    logger.debug("demuxed account into id %d and key %s", id, public_key)
    return id, public_key


def dump_payload(payload: bytes, version: VersionByte) -> bytes:
    """Return the XDR bytes of an already decoded strkey payload.

    - ed25519 public keys and muxed accounts are dumped as MuxedAccount unions
    - pre-authorized transaction hashes and hash-x signers are dumped as SignerKey unions
    - private keys are dumped as fixed length opaque data
    """
    record: t.Union[stellar_xdr.MuxedAccount, stellar_xdr.SignerKey, stellar_xdr.Uint256]
    if version in (VersionByte.PUBKEY, VersionByte.MUXED):
        record = _muxed_account_from_payload(payload, version)
    elif version == VersionByte.PRIVKEY:
        record = stellar_xdr.Uint256(payload)
    else:
        record = _signer_key_from_payload(payload, version)
    logger.debug("dumping %s record", type(record).__name__)
    return record.to_xdr_bytes()


def dump(src: t.Union[str, bytes, bytearray]) -> bytes:
    """Return the XDR bytes of the entity encoded in any valid strkey."""
    payload, version = encoding.decode(src)
    return dump_payload(payload, version)


def format_dump(data: t.Union[bytes, bytearray]) -> str:
    """Format bytes as a brace-delimited block of hex literals, 8 bytes per line."""
    out = ["{"]
    for idx, byte in enumerate(data):
        out.append("\n    " if idx % 8 == 0 else " ")
        out.append(f"0x{byte:02x},")
    out.append("\n}")
    return "".join(out)
