from datetime import timedelta

import pytest
from jose import jwt

from todo_api.auth.utils import (
    create_session_token,
    hash_password,
    verify_password,
    verify_session_token,
)
from todo_api.config.settings import settings


def test_password_hash_roundtrip():
    hashed = hash_password("pw1")

    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)


def test_password_hashes_are_salted():
    assert hash_password("pw1") != hash_password("pw1")


def test_session_token_carries_user_id():
    token = create_session_token("u1")

    payload = verify_session_token(token)

    assert payload["sub"] == "u1"
    assert payload["type"] == "session"


def test_expired_session_token_is_rejected():
    token = create_session_token("u1", expires_delta=timedelta(seconds=-1))

    with pytest.raises(ValueError, match="expired"):
        verify_session_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "u1", "type": "session"}, "other-key", algorithm=settings.ALGORITHM)

    with pytest.raises(ValueError, match="Invalid token"):
        verify_session_token(token)


def test_token_of_other_type_is_rejected():
    token = jwt.encode({"sub": "u1", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(ValueError, match="Expected token type"):
        verify_session_token(token)
