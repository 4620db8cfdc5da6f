"""Unit tests for password hashing."""

from article.util.password import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password / verify_password."""

    def test_hash_is_salted_and_not_the_password(self):
        """Two hashes of one password should differ and never equal it."""
        first = hash_password("password123", rounds=4)
        second = hash_password("password123", rounds=4)

        assert first != second
        assert "password123" not in first

    def test_verify_matches_only_the_right_password(self):
        hashed = hash_password("password123", rounds=4)

        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_malformed_hash_never_matches(self):
        """A broken stored hash should fail verification instead of raising."""
        assert not verify_password("password123", "not-a-bcrypt-hash")
