"""ECDSA P-256 / SHA-256 signing with raw JWS signature encoding."""

import logging

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from esjwt.crypto.errors import InvalidKeyError, SigningError

logger = logging.getLogger(__name__)

P256_COORDINATE_BYTES = 32
RAW_SIGNATURE_BYTES = 2 * P256_COORDINATE_BYTES


def load_signing_key(private_key_pem: bytes | str) -> ec.EllipticCurvePrivateKey:
    """Parse a PEM-encoded P-256 private key (PKCS#8 or SEC1)."""
    if isinstance(private_key_pem, str):
        private_key_pem = private_key_pem.encode()
    if not private_key_pem.strip():
        raise InvalidKeyError("Private key is empty")
    try:
        loaded = serialization.load_pem_private_key(private_key_pem, password=None)
    except TypeError as e:
        raise InvalidKeyError("Private key is encrypted") from e
    except (ValueError, UnsupportedAlgorithm) as e:
        raise InvalidKeyError("Private key is not a valid PEM-encoded key") from e
    if not isinstance(loaded, ec.EllipticCurvePrivateKey):
        raise InvalidKeyError("Private key is not an elliptic curve key")
    if not isinstance(loaded.curve, ec.SECP256R1):
        raise InvalidKeyError(f"Private key uses curve {loaded.curve.name}, expected secp256r1")
    return loaded


def der_to_raw(der_signature: bytes) -> bytes:
    """Re-encode a DER ECDSA signature as fixed-width big-endian r || s."""
    r, s = decode_dss_signature(der_signature)
    return r.to_bytes(P256_COORDINATE_BYTES, "big") + s.to_bytes(P256_COORDINATE_BYTES, "big")


def sign(private_key_pem: bytes | str, message: bytes) -> bytes:
    """Sign ``message`` with ES256 and return the 64-byte raw signature."""
    key = load_signing_key(private_key_pem)
    logger.debug("Signing %d bytes with %s", len(message), key.curve.name)
    try:
        der_signature = key.sign(message, ec.ECDSA(hashes.SHA256()))
        return der_to_raw(der_signature)
    except (InternalError, ValueError, OverflowError) as e:
        raise SigningError("ECDSA signing failed") from e
