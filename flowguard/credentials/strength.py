"""Credential comparison, strength validation and masking."""

import hmac

from loguru import logger

from flowguard.credentials.errors import (
    CommonPassword,
    CredentialTooLong,
    CredentialTooShort,
    NoDigit,
    NoLowercase,
    NoUppercase,
    WeakCredential,
)
from flowguard.credentials.types import DEFAULT_REQUIREMENTS, CredentialRequirements

COMMON_PASSWORDS = (
    "password", "12345678", "qwerty", "abc123", "monkey", "master",
    "dragon", "111111", "baseball", "iloveyou", "trustno1", "sunshine",
    "passw0rd", "shadow", "123123", "superman", "password1", "password123",
    "admin", "letmein", "welcome", "login", "hello", "football",
)

_COMMON_PASSWORDS = frozenset(p.encode("ascii") for p in COMMON_PASSWORDS)


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def constant_time_equal(a: str | bytes, b: str | bytes) -> bool:
    """
    Compare two secrets without leaking where they differ.

    Lengths are compared first; equal-length inputs take time that
    depends only on their length.
    """
    return hmac.compare_digest(_as_bytes(a), _as_bytes(b))


def is_common_password(password: str | bytes) -> bool:
    """Case-insensitive (ASCII) match against the known weak passwords."""
    return _as_bytes(password).lower() in _COMMON_PASSWORDS


def validate_credential_strength(
    credential: str | bytes,
    requirements: CredentialRequirements = DEFAULT_REQUIREMENTS,
) -> None:
    """
    Check a credential against a strength policy.

    Raises the first violated rule, in this order: too short, too long,
    no uppercase, no lowercase, no digit, no special character, common
    password. Lengths count UTF-8 bytes; non-ASCII bytes count as special.
    """
    data = _as_bytes(credential)

    if len(data) < requirements.min_length:
        raise CredentialTooShort()
    if len(data) > requirements.max_length:
        raise CredentialTooLong()

    has_upper = has_lower = has_digit = has_special = False
    for c in data:
        if 0x41 <= c <= 0x5A:
            has_upper = True
        elif 0x61 <= c <= 0x7A:
            has_lower = True
        elif 0x30 <= c <= 0x39:
            has_digit = True
        else:
            has_special = True

    if requirements.require_uppercase and not has_upper:
        raise NoUppercase()
    if requirements.require_lowercase and not has_lower:
        raise NoLowercase()
    if requirements.require_digit and not has_digit:
        raise NoDigit()
    if requirements.require_special and not has_special:
        raise WeakCredential()
    if requirements.reject_common and is_common_password(data):
        logger.debug("Rejected credential from common password list")
        raise CommonPassword()


def mask_credential(credential: str | bytes) -> str:
    """
    Mask a credential for display.

    - up to 4 chars: ``****``
    - 5 to 8 chars: first char, stars, last char (same length)
    - longer: first two chars, ``****``, last two chars
    """
    if isinstance(credential, bytes):
        credential = credential.decode("latin-1")

    n = len(credential)
    if n <= 4:
        return "****"
    if n <= 8:
        return credential[0] + "*" * (n - 2) + credential[-1]
    return credential[:2] + "****" + credential[-2:]
