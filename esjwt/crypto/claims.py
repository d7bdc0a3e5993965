"""Header and payload construction with a fixed JSON field order."""

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from esjwt.crypto.errors import EncodingError
from esjwt.crypto.types import Header, Payload


def build_header(kid: str) -> bytes:
    """Serialize the ES256 header for the given key id as compact JSON."""
    try:
        return Header(kid=kid).model_dump_json().encode()
    except (ValidationError, PydanticSerializationError, UnicodeEncodeError) as e:
        raise EncodingError(f"Cannot encode token header: {e}") from e


def build_payload(iss: str, iat: int, exp: int) -> bytes:
    """Serialize the issuer, issued-at, and expiry claims as compact JSON."""
    try:
        return Payload(iss=iss, iat=iat, exp=exp).model_dump_json().encode()
    except (ValidationError, PydanticSerializationError, UnicodeEncodeError) as e:
        raise EncodingError(f"Cannot encode token payload: {e}") from e
