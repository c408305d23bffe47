# homegate/adapters/clients/search.py
from __future__ import annotations

from ...domain.listing import RealEstate
from ...domain.paginated import Paginated, parse_search_result
from ...domain.search_request import Location, SearchRequest, default_search, with_location
from .request import RequestAuthenticator

SEARCH_PATH = "/search/listings"


class HomegateSearchClient:
    def __init__(self, *, authenticator: RequestAuthenticator | None = None) -> None:
        self.auth = authenticator if authenticator is not None else RequestAuthenticator()

    async def search_request(self, request: SearchRequest) -> Paginated[RealEstate]:
        resp = await self.auth.post_url(self.auth.url_for(SEARCH_PATH), request.to_json())
        resp.raise_for_status()
        return parse_search_result(resp.text)

    async def search(self, location: Location) -> Paginated[RealEstate]:
        """Default residential rent search around `location`."""
        return await self.search_request(with_location(default_search(), location))
