"""Type definitions for ES256 token headers, payloads, and time windows."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ES256 = "ES256"


class Header(BaseModel):
    """JOSE header of an ES256 token."""

    model_config = ConfigDict(frozen=True, strict=True)

    alg: Literal["ES256"] = ES256
    kid: str


class Payload(BaseModel):
    """Claim set carried in the token payload."""

    model_config = ConfigDict(frozen=True, strict=True)

    iss: str
    iat: int
    exp: int


class TimeWindow(BaseModel):
    """Issued-at and expiry as Unix timestamps."""

    model_config = ConfigDict(frozen=True)

    iat: int
    exp: int
