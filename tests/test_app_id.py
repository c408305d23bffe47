# tests/test_app_id.py
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from homegate.adapters.clients.app_id import (
    HmacAppIdSigner,
    require_header_value,
    signer_from_settings,
    truncate_timestamp,
)
from homegate.config import Settings
from homegate.domain.types import TruncationWindow
from homegate.exceptions import SigningError


def _signer(window=TruncationWindow.hour) -> HmacAppIdSigner:
    return HmacAppIdSigner(salt="pepper", version="Homegate/1.0", window=window)


def test_token_stable_within_hour_window():
    s = _signer()
    t1 = datetime(2024, 5, 1, 13, 0, 0, tzinfo=timezone.utc)
    t2 = datetime(2024, 5, 1, 13, 59, 59, 999999, tzinfo=timezone.utc)
    assert s.compute_identity_token(t1) == s.compute_identity_token(t2)


def test_token_changes_across_windows():
    s = _signer()
    t1 = datetime(2024, 5, 1, 13, 59, tzinfo=timezone.utc)
    t2 = t1 + timedelta(minutes=1)
    assert s.compute_identity_token(t1) != s.compute_identity_token(t2)


def test_token_is_pure_across_instances():
    now = datetime(2024, 5, 1, 13, 30, tzinfo=timezone.utc)
    assert _signer().compute_identity_token(now) == _signer().compute_identity_token(now)


def test_naive_timestamps_are_utc_and_aware_ones_are_converted():
    s = _signer()
    naive = datetime(2024, 5, 1, 13, 5)
    zurich_summer = datetime(2024, 5, 1, 15, 5, tzinfo=timezone(timedelta(hours=2)))
    assert s.compute_identity_token(naive) == s.compute_identity_token(zurich_summer)


def test_token_is_header_safe_hex():
    token = _signer().compute_identity_token(datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert len(token) == 64
    assert token.isascii()
    int(token, 16)


@pytest.mark.parametrize(
    "window,expected",
    [
        (TruncationWindow.minute, datetime(2024, 5, 1, 13, 42, tzinfo=timezone.utc)),
        (TruncationWindow.hour, datetime(2024, 5, 1, 13, 0, tzinfo=timezone.utc)),
        (TruncationWindow.day, datetime(2024, 5, 1, 0, 0, tzinfo=timezone.utc)),
    ],
)
def test_truncate_timestamp(window, expected):
    now = datetime(2024, 5, 1, 13, 42, 17, 123, tzinfo=timezone.utc)
    assert truncate_timestamp(now, window) == expected


def test_day_window_ignores_hour():
    s = _signer(TruncationWindow.day)
    assert s.compute_identity_token(datetime(2024, 5, 1, 0, 1)) == s.compute_identity_token(
        datetime(2024, 5, 1, 23, 59)
    )
    assert s.window_stamp(datetime(2024, 5, 1, 23, 59)) == "20240501"


def test_different_salt_gives_different_token():
    now = datetime(2024, 5, 1, 13, 0)
    other = HmacAppIdSigner(salt="salt", version="Homegate/1.0")
    assert _signer().compute_identity_token(now) != other.compute_identity_token(now)


@pytest.mark.parametrize("bad", ["", "two words", "tab\there", "zürich", "line\n", None, 42])
def test_require_header_value_rejects_unusable_tokens(bad):
    with pytest.raises(SigningError):
        require_header_value(bad)


def test_derivation_failure_is_a_signing_error():
    with pytest.raises(SigningError):
        _signer().compute_identity_token("2024-05-01")  # type: ignore[arg-type]


def test_signer_from_settings(test_settings):
    s = signer_from_settings(test_settings)
    assert s.window == TruncationWindow.hour
    assert s.app_version() == "Homegate/12.6.0/12060003/Android/30"


def test_settings_window_is_typed():
    s = Settings(_env_file=None, HOMEGATE_APP_ID_WINDOW="minute")
    assert s.HOMEGATE_APP_ID_WINDOW is TruncationWindow.minute
    assert signer_from_settings(s).window is TruncationWindow.minute

    with pytest.raises(ValidationError):
        Settings(_env_file=None, HOMEGATE_APP_ID_WINDOW="fortnight")
