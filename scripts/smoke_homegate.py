# scripts/smoke_homegate.py
import argparse
import asyncio
import logging

from homegate.adapters.clients.listings import HomegateListingsClient
from homegate.adapters.clients.search import HomegateSearchClient
from homegate.domain.search_request import Location, ZURICH_CENTRE


def _quiet_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def main() -> None:
    p = argparse.ArgumentParser(description="Hit the live Homegate backend once.")
    p.add_argument("--ids", nargs="*", default=[], help="listing ids for a batch lookup")
    p.add_argument("--tag", action="append", default=[], help="geo tag, e.g. geo-city-zurich")
    p.add_argument("--radius", type=int, default=1000)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    _quiet_logging(args.verbose)

    if args.ids:
        resp = await HomegateListingsClient().fetch_by_ids(args.ids)
        for entry in resp.listings:
            print(entry.listing.id, entry.listing.title, entry.listing.prices.rent)
        return

    location = Location.tagged(*args.tag) if args.tag else Location.around(*ZURICH_CENTRE, radius=args.radius)
    page = await HomegateSearchClient().search(location)
    print(f"total={page.total} from={page.from_} size={page.size} next_from={page.next_from}")
    for r in page.results:
        print(r.listing.id, r.listing.characteristics.number_of_rooms, r.listing.title)


if __name__ == "__main__":
    asyncio.run(main())
