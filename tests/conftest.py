import pytest
from django.contrib.auth.hashers import make_password
from rest_framework.test import APIClient

from api_session.models import User
from api_session.utils import ClaimsCodec, TokenIssuer, TokenRefresher

from tests.helpers import ACCESS_TTL, REFRESH_TTL, T0, TEST_SECRET, FakeClock


@pytest.fixture
def clock():
    return FakeClock(T0)


@pytest.fixture
def codec(clock):
    return ClaimsCodec(secret=TEST_SECRET, clock=clock)


@pytest.fixture
def issuer(codec, clock):
    return TokenIssuer(
        codec=codec,
        access_ttl=ACCESS_TTL,
        refresh_ttl=REFRESH_TTL,
        clock=clock,
    )


@pytest.fixture
def refresher(codec, issuer):
    return TokenRefresher(codec=codec, issuer=issuer)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create(
        username="gopher",
        password_hash=make_password("Secret123"),
    )
