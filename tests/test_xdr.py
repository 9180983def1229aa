import pytest
from stellar_sdk import xdr as stellar_xdr

from strkey_tools import accounts
from strkey_tools.strkeys.constants import VersionByte
from strkey_tools.strkeys.encoding import decode

from conftest import MUXED_ACCOUNT_1234

KEY = bytes(range(32))


def test_muxed_ed25519_layout() -> None:
    med25519 = stellar_xdr.MuxedAccountMed25519(
        id=stellar_xdr.Uint64(0x0102030405060708), ed25519=stellar_xdr.Uint256(KEY)
    )
    data = med25519.to_xdr_bytes()
    assert data == bytes([1, 2, 3, 4, 5, 6, 7, 8]) + KEY
    assert stellar_xdr.MuxedAccountMed25519.from_xdr_bytes(data) == med25519


def test_muxed_strkey_payload_is_muxed_ed25519_record() -> None:
    payload, version = decode(MUXED_ACCOUNT_1234)
    assert version == VersionByte.MUXED
    med25519 = stellar_xdr.MuxedAccountMed25519.from_xdr_bytes(payload)
    assert med25519.id.uint64 == 1234
    assert med25519.to_xdr_bytes() == payload


def test_muxed_account_union() -> None:
    muxed = accounts.muxed_account_record(KEY, 1234)
    data = muxed.to_xdr_bytes()
    assert data.hex() == "00000100" + "00000000000004d2" + KEY.hex()
    assert stellar_xdr.MuxedAccount.from_xdr_bytes(data) == muxed

    plain = accounts.muxed_account_record(KEY)
    assert plain.type == stellar_xdr.CryptoKeyType.KEY_TYPE_ED25519
    data = plain.to_xdr_bytes()
    assert data == bytes(4) + KEY
    assert stellar_xdr.MuxedAccount.from_xdr_bytes(data) == plain


@pytest.mark.parametrize(
    "typ,discriminant",
    [
        (stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_ED25519, b"\x00\x00\x00\x00"),
        (stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_PRE_AUTH_TX, b"\x00\x00\x00\x01"),
        (stellar_xdr.SignerKeyType.SIGNER_KEY_TYPE_HASH_X, b"\x00\x00\x00\x02"),
    ],
)
def test_signer_key_union(typ: stellar_xdr.SignerKeyType, discriminant: bytes) -> None:
    signer = accounts.signer_key_record(typ, KEY)
    data = signer.to_xdr_bytes()
    assert data == discriminant + KEY
    assert stellar_xdr.SignerKey.from_xdr_bytes(data) == signer


def test_private_key_has_no_discriminant() -> None:
    assert stellar_xdr.Uint256(KEY).to_xdr_bytes() == KEY
