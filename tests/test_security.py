from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from taskhub.errors import AppError, ErrorCode
from taskhub.utils.security import TokenManager, hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password(hashed, "secret1")
    assert not verify_password(hashed, "secret2")


def test_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_long_passwords_differing_after_72_bytes_do_not_match():
    base = "x" * 100
    hashed = hash_password(base + "a")
    assert verify_password(hashed, base + "a")
    assert not verify_password(hashed, base + "b")


def test_malformed_hash_is_rejected():
    assert not verify_password("not-a-bcrypt-hash", "secret1")


def test_token_round_trip():
    tokens = TokenManager("s3cret")
    token = tokens.create_access_token("user-1", "a@b.com")
    claims = tokens.decode_access_token(token)
    assert claims.user_id == "user-1"
    assert claims.email == "a@b.com"
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)


def test_expired_token():
    tokens = TokenManager("s3cret")
    token = tokens.create_access_token("user-1", "a@b.com", now=datetime.now(timezone.utc) - timedelta(hours=25))
    with pytest.raises(AppError) as exc:
        tokens.decode_access_token(token)
    assert exc.value.code == ErrorCode.TOKEN_EXPIRED
    assert exc.value.status_code == 401


def test_token_signed_with_other_secret_is_invalid():
    token = TokenManager("other").create_access_token("user-1", "a@b.com")
    with pytest.raises(AppError) as exc:
        TokenManager("s3cret").decode_access_token(token)
    assert exc.value.code == ErrorCode.INVALID_TOKEN


def test_token_with_unexpected_algorithm_is_invalid():
    token = TokenManager("s3cret", algorithm="HS512").create_access_token("user-1", "a@b.com")
    with pytest.raises(AppError) as exc:
        TokenManager("s3cret", algorithm="HS256").decode_access_token(token)
    assert exc.value.code == ErrorCode.INVALID_TOKEN


def test_unsigned_token_is_invalid():
    header = "eyJhbGciOiJub25lIiwidHlwIjoiSldUIn0"  # {"alg":"none","typ":"JWT"}
    payload = "eyJzdWIiOiJ1c2VyLTEiLCJlbWFpbCI6ImFAYi5jb20ifQ"
    with pytest.raises(AppError) as exc:
        TokenManager("s3cret").decode_access_token(f"{header}.{payload}.")
    assert exc.value.code == ErrorCode.INVALID_TOKEN


def test_token_missing_claims_is_invalid():
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = jwt.encode({"sub": "user-1", "exp": exp}, "s3cret", algorithm="HS256")
    with pytest.raises(AppError) as exc:
        TokenManager("s3cret").decode_access_token(token)
    assert exc.value.code == ErrorCode.INVALID_TOKEN


def test_garbage_token_is_invalid():
    with pytest.raises(AppError) as exc:
        TokenManager("s3cret").decode_access_token("not.a.token")
    assert exc.value.code == ErrorCode.INVALID_TOKEN


def test_asymmetric_algorithm_is_refused():
    with pytest.raises(ValueError):
        TokenManager("s3cret", algorithm="RS256")
