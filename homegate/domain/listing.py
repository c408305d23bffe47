# homegate/domain/listing.py
from __future__ import annotations

from pydantic import Field

from .base import HomegateModel
from .types import Category, Currency, ListingType, OfferType, PriceInterval


class GeoCoords(HomegateModel):
    latitude: float
    longitude: float


class Address(HomegateModel):
    country: str | None = None
    geo_coordinates: GeoCoords | None = None
    locality: str | None = None
    post_office_box_number: str | None = None
    postal_code: str | None = None
    region: str | None = None
    street: str | None = None
    street_addition: str | None = None


class Characteristics(HomegateModel):
    living_space: int | None = None
    lot_size: int | None = None
    number_of_rooms: float | None = None
    single_floor_space: int | None = None
    total_floor_space: int | None = None


class Lister(HomegateModel):
    phone: str | None = None
    logo_url: str | None = None


class Attachment(HomegateModel):
    type: str
    url: str
    file: str


class LocalizationEntryText(HomegateModel):
    title: str


class LocalizationEntry(HomegateModel):
    attachments: list[Attachment] = Field(default_factory=list)
    text: LocalizationEntryText


class Localization(HomegateModel):
    de: LocalizationEntry | None = None
    en: LocalizationEntry | None = None
    fr: LocalizationEntry | None = None
    it: LocalizationEntry | None = None
    primary: str | None = None

    def entry(self, lang: str | None = None) -> LocalizationEntry | None:
        """Entry for `lang`, falling back to the primary locale."""
        for code in (lang, self.primary):
            if code in ("de", "en", "fr", "it"):
                found = getattr(self, code)
                if found is not None:
                    return found
        return None

    def title(self, lang: str | None = None) -> str | None:
        e = self.entry(lang)
        return e.text.title if e else None


class RentPrice(HomegateModel):
    interval: PriceInterval | None = None
    net: int | None = None
    gross: int | None = None
    extra: int | None = None


class BuyPrice(HomegateModel):
    price: int | None = None


class Prices(HomegateModel):
    rent: RentPrice | None = None
    currency: Currency
    buy: BuyPrice | None = None


class Listing(HomegateModel):
    address: Address
    categories: list[Category]
    characteristics: Characteristics
    id: str
    lister: Lister
    localization: Localization
    offer_type: OfferType
    prices: Prices

    @property
    def title(self) -> str | None:
        return self.localization.title()


class ListingEntry(HomegateModel):
    listing: Listing


class ListingResponse(HomegateModel):
    listings: list[ListingEntry]


class ListingTypeWrapper(HomegateModel):
    type: ListingType


class RealEstate(HomegateModel):
    id: str | None = None
    listing: Listing
    listing_type: ListingTypeWrapper | None = None
    remote_viewing: bool | None = None
