# homegate/adapters/clients/request.py
from __future__ import annotations

import base64
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from ...config import Settings, settings as default_settings
from ...exceptions import DecodeError, SigningError
from .app_id import Signer, require_header_value, signer_from_settings

log = logging.getLogger(__name__)

APPL_JSON = "application/json"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def basic_authorization(username: str, secret: str) -> str:
    key = base64.b64encode(f"{username}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {key}"


class RequestAuthenticator:
    """
    Builds the signed header set and issues single GET/POST calls.

    Headers are rebuilt for every call since X-App-Id is time-bound. Responses
    come back raw: status checks and decoding belong to the callers.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        signer: Signer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings if settings is not None else default_settings
        self.signer = signer if signer is not None else signer_from_settings(self.settings)
        self._transport = transport
        self._authorization = basic_authorization(
            self.settings.HOMEGATE_API_USERNAME, self.settings.HOMEGATE_API_PASSWORD
        )

    @property
    def backend_url(self) -> str:
        return self.settings.HOMEGATE_BACKEND_URL.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.backend_url}/{path.lstrip('/')}"

    def _identity_token(self, now: datetime) -> str:
        try:
            token = self.signer.compute_identity_token(now)
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(f"signer failed: {e}") from e
        return require_header_value(token)

    def _app_version(self) -> str:
        try:
            version = self.signer.app_version()
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(f"signer failed to report app version: {e}") from e
        return require_header_value(version, name="app version")

    def build_headers(self, now: datetime | None = None) -> dict[str, str]:
        app_id = self._identity_token(now or _utcnow())
        version = self._app_version()
        return {
            "Authorization": self._authorization,
            "Accept": APPL_JSON,
            "X-App-Id": app_id,
            "X-App-Version": version,
            "User-Agent": self.settings.HOMEGATE_USER_AGENT,
            "Content-Type": APPL_JSON,
        }

    def _client(self, headers: dict[str, str]) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=headers,
            timeout=float(self.settings.HTTP_TIMEOUT_S),
            transport=self._transport,
        )

    async def get_url(self, url: str) -> httpx.Response:
        headers = self.build_headers()
        log.debug("GET %s", url)
        async with self._client(headers) as client:
            return await client.get(url)

    async def post_url(self, url: str, body: str | bytes) -> httpx.Response:
        headers = self.build_headers()
        content = body.encode("utf-8") if isinstance(body, str) else body
        log.debug("POST %s (%d bytes)", url, len(content))
        async with self._client(headers) as client:
            return await client.post(url, content=content)

    async def get(self, path: str) -> httpx.Response:
        return await self.get_url(self.url_for(path))

    async def get_json(self, path: str) -> Any:
        """Ad-hoc lookup of a backend-relative path, e.g. '/rs/geo-areas?lan=en'."""
        resp = await self.get(path)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError both land here
            raise DecodeError(f"response from {path} is not JSON", detail=resp.content[:500]) from e
