"""ES256 token minting pipeline."""

import logging
from datetime import UTC, datetime

from esjwt.crypto.assembler import assemble, signing_input
from esjwt.crypto.b64 import base64url_encode
from esjwt.crypto.claims import build_header, build_payload
from esjwt.crypto.signer import sign
from esjwt.crypto.window import compute_window

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MONTHS = 5


def mint_token(
    private_key_pem: bytes | str,
    kid: str,
    iss: str,
    now: datetime | None = None,
    duration_months: int = DEFAULT_DURATION_MONTHS,
) -> str:
    """Build, sign, and serialize an ES256 token.

    Args:
        private_key_pem: PEM-encoded P-256 private key.
        kid: Key identifier placed in the header.
        iss: Issuer identifier placed in the payload.
        now: Issue time; defaults to the current UTC time.
        duration_months: Calendar months until the token expires.

    Returns:
        The ``header.payload.signature`` compact token.

    Raises:
        InvalidKeyError: If the key is not a P-256 private key.
        EncodingError: If the claims cannot be serialized.
        TimeComputationError: If the expiry cannot be computed.
        SigningError: If the signing primitive fails.
    """
    if now is None:
        now = datetime.now(UTC)
    window = compute_window(now, duration_months)
    logger.debug(
        "Minting token kid=%s iss=%s iat=%d exp=%d", kid, iss, window.iat, window.exp
    )

    header_b64 = base64url_encode(build_header(kid))
    payload_b64 = base64url_encode(build_payload(iss, window.iat, window.exp))
    signature = sign(private_key_pem, signing_input(header_b64, payload_b64))
    return assemble(header_b64, payload_b64, base64url_encode(signature))
