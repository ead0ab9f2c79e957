from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from jose import jwt

from auth_service.app.services.session_token import SessionTokenService


def _tamper_payload(token: str) -> str:
    header, payload, signature = token.split(".")
    i = len(payload) // 2
    replacement = "A" if payload[i] != "A" else "B"
    return ".".join([header, payload[:i] + replacement + payload[i + 1:], signature])


def test_issue_then_verify(session_tokens: SessionTokenService):
    user_id = uuid4()

    result = session_tokens.verify(session_tokens.issue(user_id))

    assert result.is_ok()
    assert result.value == user_id


def test_token_lives_exactly_one_hour(session_tokens: SessionTokenService):
    token = session_tokens.issue(uuid4())

    claims = jwt.get_unverified_claims(token)

    assert claims["exp"] - claims["iat"] == 3600
    assert session_tokens.expires_in == 3600


def test_token_still_valid_just_before_expiry(session_tokens: SessionTokenService):
    user_id = uuid4()
    issued_at = datetime.now(UTC) - timedelta(minutes=59)

    result = session_tokens.verify(session_tokens.issue(user_id, now=issued_at))

    assert result.is_ok()
    assert result.value == user_id


def test_expired_token(session_tokens: SessionTokenService):
    issued_at = datetime.now(UTC) - timedelta(hours=1, minutes=1)

    result = session_tokens.verify(session_tokens.issue(uuid4(), now=issued_at))

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"


def test_tampered_payload_is_invalid(session_tokens: SessionTokenService):
    token = session_tokens.issue(uuid4())

    result = session_tokens.verify(_tamper_payload(token))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


def test_token_signed_with_other_key_is_invalid(session_tokens: SessionTokenService):
    forged = SessionTokenService("some-other-secret").issue(uuid4())

    result = session_tokens.verify(forged)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


def test_expired_token_with_bad_signature_is_invalid(session_tokens: SessionTokenService):
    issued_at = datetime.now(UTC) - timedelta(hours=3)
    forged = SessionTokenService("some-other-secret").issue(uuid4(), now=issued_at)

    result = session_tokens.verify(forged)

    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "invalid_token_here"])
def test_malformed_token_is_invalid(session_tokens: SessionTokenService, token):
    result = session_tokens.verify(token)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


def test_token_without_subject_is_invalid(session_tokens: SessionTokenService):
    now = datetime.now(UTC)
    token = jwt.encode(
        {"iat": now, "exp": now + timedelta(hours=1)}, "unit-test-secret", algorithm="HS256"
    )

    result = session_tokens.verify(token)

    assert result.error.code == "INVALID_TOKEN"


def test_token_with_non_uuid_subject_is_invalid(session_tokens: SessionTokenService):
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "42", "iat": now, "exp": now + timedelta(hours=1)},
        "unit-test-secret",
        algorithm="HS256",
    )

    result = session_tokens.verify(token)

    assert result.error.code == "INVALID_TOKEN"


def test_empty_secret_is_rejected():
    with pytest.raises(ValueError):
        SessionTokenService("")


def test_every_single_bit_flip_is_invalid(session_tokens: SessionTokenService):
    token = session_tokens.issue(uuid4())
    accepted = []

    for i, char in enumerate(token):
        for bit in range(8):
            flipped = token[:i] + chr(ord(char) ^ (1 << bit)) + token[i + 1:]
            result = session_tokens.verify(flipped)
            if not (result.is_err() and result.error.code == "INVALID_TOKEN"):
                accepted.append((i, bit))

    assert accepted == []


@pytest.mark.parametrize("attempt", range(20))
def test_flipped_low_bit_of_last_signature_char_is_invalid(
    session_tokens: SessionTokenService, attempt
):
    token = session_tokens.issue(uuid4())
    flipped = token[:-1] + chr(ord(token[-1]) ^ 1)

    result = session_tokens.verify(flipped)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
