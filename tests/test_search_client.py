# tests/test_search_client.py
import json

import httpx
import pytest

from homegate.adapters.clients.search import HomegateSearchClient
from homegate.domain.search_request import FromTo, Location, default_search, with_filters, with_page
from homegate.exceptions import DecodeError

from fakes import FixedSigner, Recorder, read_fixture

ZURICH_LATLNG = (47.36667, 8.55)


@pytest.mark.asyncio
async def test_search_posts_default_request_with_location(make_auth):
    rec = Recorder(text=read_fixture("result-1.json"))
    client = HomegateSearchClient(authenticator=make_auth(rec, signer=FixedSigner()))

    page = await client.search(Location.around(*ZURICH_LATLNG, radius=1000))

    assert rec.last.method == "POST"
    assert str(rec.last.url) == "https://api.homegate.test/search/listings"
    body = json.loads(rec.last.content)
    assert body["query"]["location"] == {"latitude": 47.36667, "longitude": 8.55, "radius": 1000}
    assert body["query"]["monthlyRent"] == {"from": 500}
    assert page.total == 2
    assert len(page.results) == 2


@pytest.mark.asyncio
async def test_geo_tag_search_emits_no_coordinates(make_auth):
    rec = Recorder(text=read_fixture("result-1.json"))
    client = HomegateSearchClient(authenticator=make_auth(rec, signer=FixedSigner()))

    await client.search(Location.tagged("zurich"))

    loc = json.loads(rec.last.content)["query"]["location"]
    assert loc == {"geoTags": ["zurich"]}


@pytest.mark.asyncio
async def test_search_request_sends_custom_paging_and_filters(make_auth):
    rec = Recorder(text=read_fixture("result-1.json"))
    client = HomegateSearchClient(authenticator=make_auth(rec, signer=FixedSigner()))
    req = with_page(with_filters(default_search(), monthly_rent=FromTo.between(1000, 2500)), 20, 20)

    await client.search_request(req)

    body = json.loads(rec.last.content)
    assert body["from"] == 20
    assert body["query"]["monthlyRent"] == {"from": 1000, "to": 2500}


@pytest.mark.asyncio
async def test_search_non_json_body_is_decode_error(make_auth):
    rec = Recorder(text="Service temporarily unavailable")
    client = HomegateSearchClient(authenticator=make_auth(rec, signer=FixedSigner()))

    with pytest.raises(DecodeError):
        await client.search(Location.tagged("zurich"))


@pytest.mark.asyncio
async def test_search_http_error_propagates(make_auth):
    rec = Recorder(status_code=403, text='{"message": "forbidden"}')
    client = HomegateSearchClient(authenticator=make_auth(rec, signer=FixedSigner()))

    with pytest.raises(httpx.HTTPStatusError):
        await client.search(Location.tagged("zurich"))
