import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519

from strkey_tools.strkeys import encode_ed25519_public_key

ZERO_PUBLIC_KEY = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"
ZERO_MUXED_ACCOUNT = "MAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAB5IG"
PUBLIC_KEY = "GA7QYNF7SOWQ3GLR2BGMZEHXAVIRZA4KVWLTJJFC7MGXUA74P7UJVSGZ"
MUXED_ACCOUNT_1234 = (
    "MAAAAAAAAAAAJUR7BQ2L7E5NBWMXDUCMZSIPOBKRDSBYVLMXGSSKF6YNPIB7Y77ITJXB2"
)
MUXED_ACCOUNT_MAX = (
    "MD777777777777Z7BQ2L7E5NBWMXDUCMZSIPOBKRDSBYVLMXGSSKF6YNPIB7Y77ITLQVY"
)


@pytest.fixture
def public_key() -> str:
    """A strkey ed25519 public key of a freshly generated key"""
    key = ed25519.Ed25519PrivateKey.generate().public_key()
    return encode_ed25519_public_key(key)
