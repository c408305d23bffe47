# homegate/adapters/clients/listings.py
from __future__ import annotations

import logging
from typing import Sequence

from pydantic import ValidationError

from ...domain.listing import ListingResponse
from ...exceptions import DecodeError, RequestConfigError
from .request import RequestAuthenticator

log = logging.getLogger(__name__)


def build_listings_url(backend_url: str, ids: Sequence[int | str]) -> str:
    """`{base}/listings/listings?ids=1,2,3` with ids kept in caller order."""
    if not ids:
        raise RequestConfigError("at least one listing id is required")
    parts = [str(i).strip() for i in ids]
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise RequestConfigError(f"listing ids must be plain digits, got {part!r}")
    id_string = ",".join(parts)
    return f"{backend_url.rstrip('/')}/listings/listings?ids={id_string}"


def parse_listings_result(text: str | bytes) -> ListingResponse:
    try:
        return ListingResponse.model_validate_json(text)
    except ValidationError as e:
        raise DecodeError("invalid listings response", detail=e.errors()) from e


class HomegateListingsClient:
    """Batch lookup of listings by id. The endpoint returns an unpaged bundle."""

    def __init__(self, *, authenticator: RequestAuthenticator | None = None) -> None:
        self.auth = authenticator if authenticator is not None else RequestAuthenticator()

    async def fetch_by_ids(self, ids: Sequence[int | str]) -> ListingResponse:
        url = build_listings_url(self.auth.backend_url, ids)
        resp = await self.auth.get_url(url)
        resp.raise_for_status()
        result = parse_listings_result(resp.text)
        log.debug("fetched %d listings for %d ids", len(result.listings), len(ids))
        return result
