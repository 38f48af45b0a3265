"""
Credential primitives: Argon2id password hashing and session tokens.

Hashes are PHC strings (``$argon2id$v=19$m=...,t=...,p=...$salt$hash``), so
the parameters and salt travel with the hash and ``verify_password`` needs
nothing else.
"""

import secrets

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError

from eventboard.core.exceptions import CredentialError

SESSION_TOKEN_BYTES = 32

# Library defaults: Argon2id, 16-byte random salt per hash.
_hasher = PasswordHasher()

# Checked against when a login names an unknown user, so that branch costs
# one Argon2 verify like a wrong password does.
_DUMMY_HASH = _hasher.hash(secrets.token_urlsafe(16))


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    try:
        return _hasher.hash(password)
    except HashingError as e:
        raise CredentialError(f"Error hashing password: {e}") from e


def verify_password(hashed_password: str, password: str) -> None:
    """
    Checks ``password`` against a stored PHC hash.

    Raises CredentialError on a mismatch and on a malformed hash alike;
    callers must not tell the client which one happened.
    """
    try:
        _hasher.verify(hashed_password, password)
    except (VerificationError, InvalidHashError) as e:
        raise CredentialError(f"Invalid password: {e}") from e


def verify_against_dummy(password: str) -> None:
    """Spends one Argon2 verify on ``password``; the outcome is always a mismatch."""
    try:
        _hasher.verify(_DUMMY_HASH, password)
    except VerificationError:
        return


def generate_session_token() -> str:
    """32 random bytes, URL-safe base64 without padding (43 characters)."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)
