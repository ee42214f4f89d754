import base64
import json
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from myflix.application.errors import ExpiredTokenError, InvalidSignatureError
from myflix.config import get_settings
from myflix.infrastructure.auth import jwt as token_module
from myflix.infrastructure.auth.jwt import create_access_token, decode_access_token

T0 = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(monkeypatch):
    state = {"now": T0}
    monkeypatch.setattr(token_module, "_utcnow", lambda: state["now"])
    return state


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_issued_token_round_trips_to_claims(alice):
    issued = create_access_token(alice)
    claims = decode_access_token(issued.token)
    assert claims.user_id == alice.id
    assert claims.username == "alice1"
    assert claims.expires_at == issued.expires_at


def test_token_is_three_part_hs256(alice):
    token = create_access_token(alice).token
    assert token.count(".") == 2
    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_payload_never_contains_password_hash(alice):
    token = create_access_token(alice).token
    claims = jwt.get_unverified_claims(token)
    assert set(claims) == {"sub", "username", "iat", "exp"}
    assert str(alice.password_hash) not in json.dumps(claims)


def test_validity_window_is_seven_days(alice, frozen_clock):
    issued = create_access_token(alice)
    assert issued.expires_at == T0 + timedelta(days=7)
    claims = jwt.get_unverified_claims(issued.token)
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_token_valid_just_before_expiry(alice, frozen_clock):
    token = create_access_token(alice).token
    frozen_clock["now"] = T0 + timedelta(days=7) - timedelta(seconds=1)
    assert decode_access_token(token).user_id == alice.id


def test_token_expires_at_the_instant(alice, frozen_clock):
    token = create_access_token(alice).token
    frozen_clock["now"] = T0 + timedelta(days=7)
    with pytest.raises(ExpiredTokenError):
        decode_access_token(token)


def test_token_expired_long_after(alice, frozen_clock):
    token = create_access_token(alice).token
    frozen_clock["now"] = T0 + timedelta(days=30)
    with pytest.raises(ExpiredTokenError):
        decode_access_token(token)


def test_foreign_key_signature_rejected(alice):
    payload = {"sub": str(alice.id), "username": "alice1", "exp": int((T0 + timedelta(days=3650)).timestamp())}
    token = jwt.encode(payload, "some-other-secret-key-entirely", algorithm="HS256")
    with pytest.raises(InvalidSignatureError):
        decode_access_token(token)


def test_tampered_payload_rejected(alice):
    header, _, signature = create_access_token(alice).token.split(".")
    claims = jwt.get_unverified_claims(create_access_token(alice).token)
    claims["username"] = "mallory"
    forged = f"{header}.{_b64(claims)}.{signature}"
    with pytest.raises(InvalidSignatureError):
        decode_access_token(forged)


def test_unsigned_token_rejected(alice):
    header = _b64({"alg": "none", "typ": "JWT"})
    body = _b64({"sub": str(alice.id), "exp": 4102444800})
    with pytest.raises(InvalidSignatureError):
        decode_access_token(f"{header}.{body}.")


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "Bearer x.y.z"])
def test_garbage_rejected(garbage):
    with pytest.raises(InvalidSignatureError):
        decode_access_token(garbage)


def test_signature_checked_before_expiry(alice, frozen_clock):
    # expired AND wrongly signed: the signature failure wins
    payload = {"sub": str(alice.id), "username": "alice1", "exp": int((T0 - timedelta(days=1)).timestamp())}
    token = jwt.encode(payload, "some-other-secret-key-entirely", algorithm="HS256")
    with pytest.raises(InvalidSignatureError):
        decode_access_token(token)


def test_signed_token_with_bad_subject_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "not-a-uuid", "exp": 4102444800}, settings.secret_key, algorithm=settings.jwt_algorithm
    )
    with pytest.raises(InvalidSignatureError):
        decode_access_token(token)
