"""Unit tests for password hashing utilities.

Note: Test strings in this file are synthetic test data, not real secrets.
"""

from iam.application.security import (
    burn_password_check,
    hash_password,
    verify_password,
)

# Minimum cost keeps the suite fast
FAST_ROUNDS = 4


class TestHashPassword:
    """Tests for hash_password function."""

    def test_returns_bcrypt_hash(self):
        """Hash should be in bcrypt format."""
        hashed = hash_password("password123", rounds=FAST_ROUNDS)

        assert hashed.startswith("$2")

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("password123", rounds=FAST_ROUNDS)

        assert "password123" not in hashed

    def test_salted(self):
        """Same password should produce different hashes."""
        assert hash_password("password123", rounds=FAST_ROUNDS) != hash_password(
            "password123", rounds=FAST_ROUNDS
        )

    def test_embeds_cost_factor(self):
        hashed = hash_password("password123", rounds=FAST_ROUNDS)

        assert hashed.split("$")[2] == "04"


class TestVerifyPassword:
    """Tests for verify_password function."""

    def test_correct_password(self):
        hashed = hash_password("password123", rounds=FAST_ROUNDS)

        assert verify_password("password123", hashed) is True

    def test_wrong_password(self):
        hashed = hash_password("password123", rounds=FAST_ROUNDS)

        assert verify_password("password124", hashed) is False

    def test_case_sensitive(self):
        hashed = hash_password("Password", rounds=FAST_ROUNDS)

        assert verify_password("password", hashed) is False

    def test_invalid_hash_returns_false(self):
        """A corrupt stored hash fails closed instead of raising."""
        assert verify_password("password123", "not-a-bcrypt-hash") is False


class TestBurnPasswordCheck:
    def test_returns_none(self):
        """Dummy check does the work but yields no verdict."""
        assert burn_password_check("anything", rounds=FAST_ROUNDS) is None
