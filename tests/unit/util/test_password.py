"""Unit tests for bcrypt password hashing."""

from inkwell.util.password import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("secret123", rounds=4)

        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_verify_accepts_correct_password(self):
        hashed = hash_password("secret123", rounds=4)

        assert verify_password("secret123", hashed)

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("secret123", rounds=4)

        assert not verify_password("secret124", hashed)

    def test_same_password_gets_different_salts(self):
        assert hash_password("secret123", rounds=4) != hash_password(
            "secret123", rounds=4
        )

    def test_malformed_hash_is_a_mismatch(self):
        assert not verify_password("secret123", "not-a-bcrypt-hash")
