"""
Unit tests for social_accounts.core.security
"""
import pytest
from social_accounts.core.exceptions import ComparisonFailure, HashingFailure
from social_accounts.core.security import (
    generate_salt,
    hash_password,
    verify_password,
)


class TestGenerateSalt:
    """Tests for generate_salt"""

    def test_salt_carries_work_factor(self):
        salt = generate_salt(4)
        assert isinstance(salt, bytes)
        assert salt.startswith(b"$2b$04$")

    def test_salts_are_random(self):
        assert generate_salt(4) != generate_salt(4)

    def test_invalid_rounds_raises_hashing_failure(self):
        with pytest.raises(HashingFailure, match="salt"):
            generate_salt(2)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword", generate_salt(4))
        assert isinstance(result, str)
        assert len(result) > 0

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123", generate_salt(4))
        assert result != "secret123"

    def test_same_salt_same_hash(self):
        salt = generate_salt(4)
        assert hash_password("same", salt) == hash_password("same", salt)

    def test_different_salts_different_hashes(self):
        assert hash_password("same", generate_salt(4)) != hash_password("same", generate_salt(4))

    def test_malformed_salt_raises_hashing_failure(self):
        with pytest.raises(HashingFailure, match="hashing"):
            hash_password("secret123", b"not-a-salt")

    def test_long_password_hashes(self):
        hashed = hash_password("x" * 100, generate_salt(4))
        assert verify_password("x" * 100, hashed) is True

    def test_multibyte_password_over_limit_hashes(self):
        password = "é" * 37  # 74 UTF-8 bytes
        hashed = hash_password(password, generate_salt(4))
        assert verify_password(password, hashed) is True

    def test_non_string_raises_hashing_failure(self):
        with pytest.raises(HashingFailure):
            hash_password(None, generate_salt(4))


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct", generate_salt(4))
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct", generate_salt(4))
        assert verify_password("wrong", hashed) is False

    def test_empty_hash_raises_comparison_failure(self):
        with pytest.raises(ComparisonFailure):
            verify_password("anything", "")

    def test_garbage_hash_raises_comparison_failure(self):
        with pytest.raises(ComparisonFailure):
            verify_password("anything", "plaintext-not-a-hash")

    def test_only_first_72_bytes_compared(self):
        hashed = hash_password("a" * 72 + "first", generate_salt(4))
        assert verify_password("a" * 72 + "second", hashed) is True
        assert verify_password("a" * 71, hashed) is False

    @pytest.mark.parametrize("stored_hash", [None, 123, b"$2b$04$abc"])
    def test_non_string_hash_raises_comparison_failure(self, stored_hash):
        with pytest.raises(ComparisonFailure):
            verify_password("anything", stored_hash)
