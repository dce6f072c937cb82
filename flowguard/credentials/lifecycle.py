"""Credential file permissions and age checks."""

SECONDS_PER_DAY = 86400


def is_secure_file_mode(mode: int) -> bool:
    """True if group and other have no permission bits (owner unchecked)."""
    return (mode >> 3) & 0o7 == 0 and mode & 0o7 == 0


def is_expired(created_s: int, now_s: int, max_age_days: int) -> bool:
    """A credential exactly at its max age counts as expired."""
    return now_s - created_s >= max_age_days * SECONDS_PER_DAY


def days_until_expiry(created_s: int, now_s: int, max_age_days: int) -> int:
    """
    Whole days left before expiry, truncated toward zero.

    Zero or negative once expired. Informational only.
    """
    remaining = created_s + max_age_days * SECONDS_PER_DAY - now_s
    days = abs(remaining) // SECONDS_PER_DAY
    return days if remaining >= 0 else -days
