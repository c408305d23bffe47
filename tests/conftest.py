# tests/conftest.py
import httpx
import pytest

from homegate.adapters.clients.request import RequestAuthenticator
from homegate.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        HOMEGATE_BACKEND_URL="https://api.homegate.test/",
        HOMEGATE_API_USERNAME="hg_test",
        HOMEGATE_API_PASSWORD="s3cret",
        HOMEGATE_USER_AGENT="homegate.ch App Android",
        HOMEGATE_APP_VERSION="Homegate/12.6.0/12060003/Android/30",
        HOMEGATE_APP_ID_SALT="pepper",
        HOMEGATE_APP_ID_WINDOW="hour",
    )


@pytest.fixture
def make_auth(test_settings):
    """Authenticator wired to a fake transport that replays `recorder`'s response."""

    def _make(recorder, signer=None) -> RequestAuthenticator:
        return RequestAuthenticator(
            settings=test_settings,
            signer=signer,
            transport=httpx.MockTransport(recorder),
        )

    return _make
