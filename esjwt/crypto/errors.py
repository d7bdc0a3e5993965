"""Errors raised while minting ES256 tokens."""


class TokenMintError(Exception):
    """Base exception for every token minting failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidKeyError(TokenMintError):
    """Raised when key material is not a PEM-encoded P-256 private key."""


class EncodingError(TokenMintError):
    """Raised when a header or payload cannot be serialized to JSON."""


class TimeComputationError(TokenMintError):
    """Raised when the expiry cannot be computed from the issue time."""


class SigningError(TokenMintError):
    """Raised when the ECDSA signing primitive fails."""
