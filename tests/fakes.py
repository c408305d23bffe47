# tests/fakes.py
from datetime import datetime
from pathlib import Path

import httpx

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FixedSigner:
    def __init__(self, token: str = "test-app-id") -> None:
        self.token = token
        self.calls: list[datetime] = []

    def compute_identity_token(self, now: datetime) -> str:
        self.calls.append(now)
        return self.token

    def app_version(self) -> str:
        return "Homegate/0.0.0/0/Test/0"


class Recorder:
    """MockTransport handler that records requests and replays one canned response."""

    def __init__(self, status_code: int = 200, text: str = "{}", content: bytes | None = None) -> None:
        self.status_code = status_code
        self.text = text
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]
