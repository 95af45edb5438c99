"""Tests for password hashing and login tokens."""

from datetime import timedelta

import pytest

from mediashelf.core.exceptions import UnauthenticatedError
from mediashelf.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        hashed = get_password_hash("pw1")
        assert hashed != "pw1"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self):
        assert get_password_hash("pw1") != get_password_hash("pw1")

    def test_verify(self):
        hashed = get_password_hash("pw1")
        assert verify_password("pw1", hashed)
        assert not verify_password("pw2", hashed)


class TestAccessToken:

    def test_round_trip_subject(self):
        token = create_access_token({"sub": "alice"})
        assert decode_access_token(token)["sub"] == "alice"

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "alice"}, expires_delta=timedelta(seconds=-1))
        with pytest.raises(UnauthenticatedError):
            decode_access_token(token)

    def test_tampered_token_rejected(self):
        header, _, signature = create_access_token({"sub": "alice"}).split(".")
        forged_payload = create_access_token({"sub": "mallory"}).split(".")[1]
        with pytest.raises(UnauthenticatedError):
            decode_access_token(".".join([header, forged_payload, signature]))
