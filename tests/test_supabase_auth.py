import time

import pytest
from jose import jwt

from app.modules.user_management.infrastructure.external.supabase_auth import SupabaseAuthService
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import AuthenticationError


def _token(secret="test-jwt-secret", **claims) -> str:
    payload = {
        "sub": "auth-ada",
        "email": "ada@example.com",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture()
def verifier():
    return SupabaseAuthService(settings=get_settings())


async def test_valid_token_yields_identity(verifier):
    identity = await verifier.verify_token(_token())

    assert identity.auth_id == "auth-ada"
    assert identity.email == "ada@example.com"


async def test_expired_token_is_rejected(verifier):
    with pytest.raises(AuthenticationError, match="expired"):
        await verifier.verify_token(_token(exp=int(time.time()) - 10))


async def test_wrong_signature_is_rejected(verifier):
    with pytest.raises(AuthenticationError):
        await verifier.verify_token(_token(secret="someone-else"))


async def test_wrong_audience_is_rejected(verifier):
    with pytest.raises(AuthenticationError):
        await verifier.verify_token(_token(aud="anon"))


async def test_token_without_subject_is_rejected(verifier):
    with pytest.raises(AuthenticationError):
        await verifier.verify_token(_token(sub=""))
