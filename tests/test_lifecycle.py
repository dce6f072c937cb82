"""Tests for credential file mode and expiry checks."""

import pytest

from flowguard.credentials.lifecycle import (
    SECONDS_PER_DAY,
    days_until_expiry,
    is_expired,
    is_secure_file_mode,
)


# ── is_secure_file_mode ─────────────────────────────────────────────


class TestIsSecureFileMode:
    @pytest.mark.parametrize("mode", [0o600, 0o400, 0o700, 0o000, 0o100600])
    def test_secure(self, mode):
        assert is_secure_file_mode(mode)

    @pytest.mark.parametrize("mode", [0o644, 0o777, 0o640, 0o604, 0o601, 0o610, 0o100644])
    def test_insecure(self, mode):
        assert not is_secure_file_mode(mode)


# ── is_expired / days_until_expiry ──────────────────────────────────


class TestIsExpired:
    def test_not_expired(self):
        assert not is_expired(1_000_000, 1_000_000 + SECONDS_PER_DAY, 90)

    def test_expired_at_boundary(self):
        assert is_expired(1_000_000, 1_000_000 + 90 * SECONDS_PER_DAY, 90)

    def test_one_second_before_boundary(self):
        assert not is_expired(0, 90 * SECONDS_PER_DAY - 1, 90)

    def test_zero_max_age(self):
        assert is_expired(100, 100, 0)


class TestDaysUntilExpiry:
    def test_89_remaining(self):
        assert days_until_expiry(0, SECONDS_PER_DAY, 90) == 89

    def test_expired_is_negative(self):
        assert days_until_expiry(0, 91 * SECONDS_PER_DAY, 90) < 0
        assert days_until_expiry(0, 91 * SECONDS_PER_DAY, 90) == -1

    def test_exact(self):
        assert days_until_expiry(0, 90 * SECONDS_PER_DAY, 90) == 0

    def test_truncates_toward_zero(self):
        # Half a day past expiry rounds to 0, not -1
        assert days_until_expiry(0, 90 * SECONDS_PER_DAY + SECONDS_PER_DAY // 2, 90) == 0
        # Half a day left rounds down to 0
        assert days_until_expiry(0, 90 * SECONDS_PER_DAY - SECONDS_PER_DAY // 2, 90) == 0
