import hashlib

DEFAULT_PIN = "0000"

def digest(secret: str) -> str:
    """SHA-256 hex digest of a secret (64 lowercase hex chars)."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()

def default_verifier() -> str:
    return digest(DEFAULT_PIN)
