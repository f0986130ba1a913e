"""Password hashing helpers (pbkdf2_hmac)."""
import hashlib
import secrets
from typing import Optional

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 100_000


def hash_password(password: str, salt: Optional[str] = None, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Return `pbkdf2_sha256$<iterations>$<salt>$<hex digest>`."""
    salt = salt or secrets.token_hex(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${dk.hex()}"


def check_password_hash(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt, _ = stored.split("$")
        rounds = int(iterations)
    except (AttributeError, ValueError):
        return False
    if algorithm != ALGORITHM or rounds <= 0:
        return False
    return secrets.compare_digest(hash_password(password, salt=salt, iterations=rounds), stored)
