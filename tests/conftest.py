"""Shared test fixtures for esjwt."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings."""
    monkeypatch.delenv("ESJWT_DURATION_MONTHS", raising=False)
    monkeypatch.delenv("ESJWT_LOG_LEVEL", raising=False)


def _pkcs8_pem(key: ec.EllipticCurvePrivateKey | rsa.RSAPrivateKey) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def p256_key() -> ec.EllipticCurvePrivateKey:
    """A freshly generated P-256 private key."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def p256_pem(p256_key: ec.EllipticCurvePrivateKey) -> str:
    """The P-256 key as a PKCS#8 PEM, the format of .p8 API keys."""
    return _pkcs8_pem(p256_key)


@pytest.fixture
def p256_sec1_pem(p256_key: ec.EllipticCurvePrivateKey) -> str:
    """The P-256 key as a SEC1 'EC PRIVATE KEY' PEM."""
    return p256_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def p256_public_pem(p256_key: ec.EllipticCurvePrivateKey) -> str:
    """The public half of the P-256 key as a PEM."""
    return (
        p256_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture
def p384_pem() -> str:
    """A private key on the wrong curve."""
    return _pkcs8_pem(ec.generate_private_key(ec.SECP384R1()))


@pytest.fixture
def rsa_pem() -> str:
    """A private key of the wrong type."""
    return _pkcs8_pem(rsa.generate_private_key(public_exponent=65537, key_size=2048))
