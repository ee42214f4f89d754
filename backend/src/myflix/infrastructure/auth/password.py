"""Argon2id password hashing using argon2-cffi."""
import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from myflix.domain.identity.value_objects import PasswordHash

logger = logging.getLogger(__name__)

_hasher = PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MiB
    parallelism=2,
    hash_len=32,
    salt_len=16,
)

# Verified against when the username is unknown so both failure paths cost the same.
_DUMMY_HASH = _hasher.hash("myflix-placeholder-secret")


class CorruptPasswordHashError(RuntimeError):
    """A stored hash could not be parsed. Data corruption, not a wrong password."""


def hash_password(raw_password: str) -> PasswordHash:
    """Hash a raw password using Argon2id. Returns an opaque PasswordHash."""
    return PasswordHash(_hasher.hash(raw_password))


def verify_password(raw_password: str, password_hash: PasswordHash) -> bool:
    """Verify a raw password against a stored Argon2id hash.

    Returns False only on a genuine mismatch. A malformed hash raises
    CorruptPasswordHashError.
    """
    try:
        return _hasher.verify(str(password_hash), raw_password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError) as exc:
        logger.error("Stored password hash failed to parse: %s", type(exc).__name__)
        raise CorruptPasswordHashError("Stored password hash is malformed") from exc


def verify_dummy(raw_password: str) -> bool:
    """Burn one verification against the placeholder hash. Always False."""
    try:
        _hasher.verify(_DUMMY_HASH, raw_password)
    except VerifyMismatchError:
        pass
    return False


def needs_rehash(password_hash: PasswordHash) -> bool:
    """True if the hash was created with outdated parameters and should be updated."""
    return _hasher.check_needs_rehash(str(password_hash))
