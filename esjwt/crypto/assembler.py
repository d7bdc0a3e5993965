"""JWS compact serialization."""


def signing_input(header_b64: str, payload_b64: str) -> bytes:
    """Return the exact bytes covered by the signature."""
    return f"{header_b64}.{payload_b64}".encode("ascii")


def assemble(header_b64: str, payload_b64: str, signature_b64: str) -> str:
    """Join the three encoded segments into a compact token."""
    return f"{header_b64}.{payload_b64}.{signature_b64}"
