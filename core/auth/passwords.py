"""Password hashing (Argon2id via argon2-cffi)."""
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError

_hasher = PasswordHasher()


def hash_password(password: str, hasher: PasswordHasher | None = None) -> str:
    """Return an encoded "$argon2id$v=19$m=...,t=...,p=...$salt$hash" string."""
    return (hasher or _hasher).hash(password)


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against a stored hash; malformed hashes never match."""
    try:
        return _hasher.verify(encoded, password)
    except (VerificationError, InvalidHash):
        return False


def needs_rehash(encoded: str) -> bool:
    """True when the hash was made with weaker parameters than the current ones."""
    return _hasher.check_needs_rehash(encoded)
