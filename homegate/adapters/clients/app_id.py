# homegate/adapters/clients/app_id.py
from __future__ import annotations

import hashlib
import hmac
from datetime import datetime, timezone
from typing import Protocol

from ...config import Settings
from ...domain.types import TruncationWindow
from ...exceptions import SigningError

_STAMP_FORMATS = {
    TruncationWindow.minute: "%Y%m%d%H%M",
    TruncationWindow.hour: "%Y%m%d%H",
    TruncationWindow.day: "%Y%m%d",
}


class Signer(Protocol):
    """Produces the X-App-Id / X-App-Version pair sent with every request."""

    def compute_identity_token(self, now: datetime) -> str:
        raise NotImplementedError

    def app_version(self) -> str:
        raise NotImplementedError


def truncate_timestamp(now: datetime, window: TruncationWindow) -> datetime:
    """Floor `now` to the start of its window, in UTC. Naive input is read as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    now = now.replace(second=0, microsecond=0)
    if window in (TruncationWindow.hour, TruncationWindow.day):
        now = now.replace(minute=0)
    if window == TruncationWindow.day:
        now = now.replace(hour=0)
    return now


def require_header_value(value: object, name: str = "identity token") -> str:
    """Reject anything that can't go into an HTTP header verbatim."""
    if not isinstance(value, str) or not value:
        raise SigningError(f"{name} is empty or not a string", detail=repr(value))
    if not value.isascii() or not value.isprintable() or any(ch.isspace() for ch in value):
        raise SigningError(f"{name} is not a printable ASCII token", detail=repr(value))
    return value


class HmacAppIdSigner:
    """
    HMAC-SHA256 over the truncated UTC timestamp, keyed with a static salt.

    Pure: the clock value is the only input, so every call inside one window
    yields the same token.
    """

    def __init__(self, *, salt: str, version: str, window: TruncationWindow = TruncationWindow.hour) -> None:
        self._key = salt.encode("utf-8")
        self._version = version
        self.window = TruncationWindow(window)

    def window_stamp(self, now: datetime) -> str:
        return truncate_timestamp(now, self.window).strftime(_STAMP_FORMATS[self.window])

    def compute_identity_token(self, now: datetime) -> str:
        try:
            stamp = self.window_stamp(now)
            token = hmac.new(self._key, stamp.encode("ascii"), hashlib.sha256).hexdigest()
        except Exception as e:
            raise SigningError(f"identity token derivation failed: {e}") from e
        return require_header_value(token)

    def app_version(self) -> str:
        return self._version


def signer_from_settings(s: Settings) -> HmacAppIdSigner:
    return HmacAppIdSigner(
        salt=s.HOMEGATE_APP_ID_SALT,
        version=s.HOMEGATE_APP_VERSION,
        window=s.HOMEGATE_APP_ID_WINDOW,
    )
