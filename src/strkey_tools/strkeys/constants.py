import enum
import types
import typing as t

# ALG_ED25519 is the only algorithm defined for the 3 low bits of a version byte
ALG_ED25519 = 0


class VersionByte(enum.IntEnum):
    """Version bytes prefixed to every strkey payload.

    The 5 high bits select the kind of key, the 3 low bits select the algorithm.
    """

    # PUBKEY is the version byte used for encoded ed25519 public keys
    PUBKEY = 6 << 3 | ALG_ED25519  # Base32-encodes to 'G...'

    # MUXED is the version byte used for encoded multiplexed ed25519 accounts
    MUXED = 12 << 3 | ALG_ED25519  # Base32-encodes to 'M...'

    # PRIVKEY is the version byte used for encoded ed25519 private keys (seeds)
    PRIVKEY = 18 << 3 | ALG_ED25519  # Base32-encodes to 'S...'

    # PRE_AUTH_TX is the version byte used for encoded pre-authorized transaction hashes
    PRE_AUTH_TX = 19 << 3  # Base32-encodes to 'T...'

    # HASH_X is the version byte used for encoded hash-x signers
    HASH_X = 23 << 3  # Base32-encodes to 'X...'

    # ERROR is reserved and never registered
    ERROR = 255


# Expected raw payload length (in bytes) for each valid version byte
PAYLOAD_LENGTHS: t.Mapping[VersionByte, int] = types.MappingProxyType(
    {
        VersionByte.PUBKEY: 32,
        VersionByte.MUXED: 40,
        VersionByte.PRIVKEY: 32,
        VersionByte.PRE_AUTH_TX: 32,
        VersionByte.HASH_X: 32,
    }
)

# Number of bytes used by the version byte and the checksum
VERSION_SIZE = 1
CHECKSUM_SIZE = 2

# Encoded lengths which no byte count can produce with unpadded base32
INVALID_LENGTH_REMAINDERS = frozenset((1, 3, 6))

# Characters allowed in a strkey
STRKEY_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
