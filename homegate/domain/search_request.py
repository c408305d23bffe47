# homegate/domain/search_request.py
"""
Search request body for POST /search/listings.

A request is a filter (`Query`) plus a field-selection tree (`ResultTemplate`)
telling the backend which optional fields to return per result. Everything is
immutable: start from `default_search()` and derive variants with the
`with_*` helpers, which always return a new request.

Unset ranges are left out of the body entirely. The backend treats a missing
key as "use your default" and an explicit null differently, so `None` must
never reach the wire.
"""
from __future__ import annotations

from typing import Any, Iterable, Literal, TypeVar

from pydantic import Field, field_validator, model_serializer, model_validator

from ..exceptions import RequestConfigError
from .base import HomegateModel
from .types import Category, OfferType

M = TypeVar("M", bound=HomegateModel)

SortDirection = Literal["asc", "desc"]

_COORD_KEYS = ("latitude", "longitude", "radius")
_KEEP: Any = object()


def coerce_categories(values: Iterable[Category | str] | None) -> tuple[Category, ...]:
    """Exact vocabulary tags only, order preserved."""
    if values is None:
        return ()
    if isinstance(values, (str, Category)):
        values = [values]
    out: list[Category] = []
    for v in values:
        if isinstance(v, Category):
            out.append(v)
            continue
        try:
            out.append(Category(v))
        except ValueError:
            raise RequestConfigError(f"unknown category: {v!r}") from None
    return tuple(out)


class FromTo(HomegateModel):
    from_: int | None = Field(default=None, alias="from")
    to: int | None = None

    @model_validator(mode="after")
    def _ordered(self) -> "FromTo":
        for bound in (self.from_, self.to):
            if bound is not None and bound < 0:
                raise RequestConfigError(f"range bounds must be >= 0, got {bound}")
        if self.from_ is not None and self.to is not None and self.from_ > self.to:
            raise RequestConfigError(f"range from={self.from_} is above to={self.to}")
        return self

    @classmethod
    def at_least(cls, lower: int) -> "FromTo":
        return cls(from_=lower)

    @classmethod
    def at_most(cls, upper: int) -> "FromTo":
        return cls(to=upper)

    @classmethod
    def between(cls, lower: int | None, upper: int | None) -> "FromTo":
        return cls(from_=lower, to=upper)


class Location(HomegateModel):
    """Either a coordinate + radius circle or a set of named geo tags.

    When tags are present they win and the coordinates are not serialized.
    """

    latitude: float | None = None
    longitude: float | None = None
    radius: int | None = None
    geo_tags: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _single_mode(self) -> "Location":
        if self.geo_tags:
            if any(not t or not t.strip() for t in self.geo_tags):
                raise RequestConfigError("geo tags must be non-empty strings")
            return self
        coords = (self.latitude, self.longitude, self.radius)
        if all(c is None for c in coords):
            raise RequestConfigError("location needs latitude/longitude/radius or geo tags")
        if any(c is None for c in coords):
            missing = [k for k, c in zip(_COORD_KEYS, coords) if c is None]
            raise RequestConfigError(f"incomplete coordinates, missing {', '.join(missing)}")
        if self.radius is not None and self.radius <= 0:
            raise RequestConfigError(f"radius must be > 0, got {self.radius}")
        return self

    @model_serializer(mode="wrap")
    def _emit_one_mode(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        if self.geo_tags:
            for key in _COORD_KEYS:
                data.pop(key, None)
        else:
            data.pop("geoTags", None)
            data.pop("geo_tags", None)
        return data

    @classmethod
    def around(cls, latitude: float, longitude: float, radius: int) -> "Location":
        return cls(latitude=latitude, longitude=longitude, radius=radius)

    @classmethod
    def tagged(cls, *tags: str) -> "Location":
        if not tags:
            raise RequestConfigError("at least one geo tag is required")
        return cls(geo_tags=tuple(tags))


class Query(HomegateModel):
    categories: tuple[Category, ...] = ()
    exclude_categories: tuple[Category, ...] = ()
    living_space: FromTo | None = None
    location: Location
    monthly_rent: FromTo | None = None
    number_of_rooms: FromTo | None = None
    offer_type: OfferType = OfferType.RENT
    purchase_price: FromTo | None = None

    @field_validator("categories", "exclude_categories", mode="before")
    @classmethod
    def _known_categories(cls, v: Any) -> tuple[Category, ...]:
        return coerce_categories(v)

    @field_validator("living_space", "monthly_rent", "number_of_rooms", "purchase_price", mode="before")
    @classmethod
    def _pair_to_range(cls, v: Any) -> Any:
        # (60, None) is shorthand for FromTo(from_=60)
        if isinstance(v, (tuple, list)) and len(v) == 2:
            return FromTo(from_=v[0], to=v[1])
        return v


# --- field-selection template ---


class GeoCoordsTemplate(HomegateModel):
    latitude: bool = True
    longitude: bool = True


class AddressTemplate(HomegateModel):
    country: bool = True
    geo_coordinates: GeoCoordsTemplate = Field(default_factory=GeoCoordsTemplate)
    locality: bool = True
    post_office_box_number: bool = True
    postal_code: bool = True
    region: bool = True
    street: bool = True
    street_addition: bool = True


class CharacteristicsTemplate(HomegateModel):
    living_space: bool = True
    lot_size: bool = True
    number_of_rooms: bool = True
    single_floor_space: bool = True
    total_floor_space: bool = True


class ListerTemplate(HomegateModel):
    logo_url: bool = False
    phone: bool = True


class LocaleTextTemplate(HomegateModel):
    title: bool = True


class LocaleUrlsTemplate(HomegateModel):
    type: bool = True


class LocaleTemplate(HomegateModel):
    attachments: bool = True
    text: LocaleTextTemplate = Field(default_factory=LocaleTextTemplate)
    urls: LocaleUrlsTemplate = Field(default_factory=LocaleUrlsTemplate)


class LocalizationTemplate(HomegateModel):
    de: LocaleTemplate = Field(default_factory=LocaleTemplate)
    en: LocaleTemplate = Field(default_factory=LocaleTemplate)
    fr: LocaleTemplate = Field(default_factory=LocaleTemplate)
    it: LocaleTemplate = Field(default_factory=LocaleTemplate)
    primary: bool = True


class ListingTemplate(HomegateModel):
    address: AddressTemplate = Field(default_factory=AddressTemplate)
    categories: bool = True
    characteristics: CharacteristicsTemplate = Field(default_factory=CharacteristicsTemplate)
    id: bool = True
    lister: ListerTemplate = Field(default_factory=ListerTemplate)
    localization: LocalizationTemplate = Field(default_factory=LocalizationTemplate)
    offer_type: bool = True
    prices: bool = True


class ResultTemplate(HomegateModel):
    id: bool = True
    lister_branding: bool = True
    listing: ListingTemplate = Field(default_factory=ListingTemplate)
    listing_type: bool = True
    remote_viewing: bool = True


class SearchRequest(HomegateModel):
    from_: int = Field(default=0, alias="from")
    query: Query
    result_template: ResultTemplate = Field(default_factory=ResultTemplate)
    size: int = 20
    sort_by: str = "listingType"
    sort_direction: SortDirection = "desc"
    track_total_hits: bool = True

    @model_validator(mode="after")
    def _valid_page(self) -> "SearchRequest":
        if self.from_ < 0:
            raise RequestConfigError(f"from must be >= 0, got {self.from_}")
        if self.size <= 0:
            raise RequestConfigError(f"size must be > 0, got {self.size}")
        return self

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, text: str | bytes) -> "SearchRequest":
        return cls.model_validate_json(text)


# --- defaults & builders ---

ZURICH_CENTRE = (47.35985528332324, 8.541818987578152)

RESIDENTIAL_CATEGORIES: tuple[Category, ...] = (
    Category.APARTMENT,
    Category.MAISONETTE,
    Category.DUPLEX,
    Category.ATTIC_FLAT,
    Category.ROOF_FLAT,
    Category.STUDIO,
    Category.SINGLE_ROOM,
    Category.TERRACE_FLAT,
    Category.BACHELOR_FLAT,
    Category.LOFT,
    Category.ATTIC,
    Category.ROW_HOUSE,
    Category.BIFAMILIAR_HOUSE,
    Category.TERRACE_HOUSE,
    Category.VILLA,
    Category.FARM_HOUSE,
    Category.CAVE_HOUSE,
    Category.CASTLE,
    Category.GRANNY_FLAT,
    Category.CHALET,
    Category.RUSTICO,
    Category.SINGLE_HOUSE,
    Category.HOBBY_ROOM,
    Category.CELLAR_COMPARTMENT,
    Category.ATTIC_COMPARTMENT,
)


def _replace(model: M, **changes: Any) -> M:
    """New validated instance of `model` with `changes` applied."""
    return type(model)(**{**dict(model), **changes})


def default_search() -> SearchRequest:
    return SearchRequest(
        query=Query(
            categories=RESIDENTIAL_CATEGORIES,
            exclude_categories=(Category.FURNISHED_FLAT,),
            living_space=FromTo.at_least(60),
            location=Location.around(ZURICH_CENTRE[0], ZURICH_CENTRE[1], radius=622),
            monthly_rent=FromTo.at_least(500),
            number_of_rooms=FromTo.at_least(2),
            offer_type=OfferType.RENT,
        ),
    )


def with_location(request: SearchRequest, location: Location) -> SearchRequest:
    return _replace(request, query=_replace(request.query, location=location))


def with_filters(
    request: SearchRequest,
    *,
    categories: Iterable[Category | str] | None = _KEEP,
    exclude_categories: Iterable[Category | str] | None = _KEEP,
    living_space: FromTo | tuple[int | None, int | None] | None = _KEEP,
    monthly_rent: FromTo | tuple[int | None, int | None] | None = _KEEP,
    purchase_price: FromTo | tuple[int | None, int | None] | None = _KEEP,
    number_of_rooms: FromTo | tuple[int | None, int | None] | None = _KEEP,
    offer_type: OfferType | str = _KEEP,
) -> SearchRequest:
    """
    Override only the filters passed. Omitted keywords keep their value,
    `None` clears a range so it is left out of the body.
    """
    changes = {
        k: v
        for k, v in {
            "categories": categories,
            "exclude_categories": exclude_categories,
            "living_space": living_space,
            "monthly_rent": monthly_rent,
            "purchase_price": purchase_price,
            "number_of_rooms": number_of_rooms,
            "offer_type": offer_type,
        }.items()
        if v is not _KEEP
    }
    if "offer_type" in changes:
        try:
            changes["offer_type"] = OfferType(changes["offer_type"])
        except ValueError:
            raise RequestConfigError(f"unknown offer type: {offer_type!r}") from None
    if not changes:
        return request
    return _replace(request, query=_replace(request.query, **changes))


def with_page(request: SearchRequest, from_: int, size: int | None = None) -> SearchRequest:
    return _replace(request, from_=from_, size=request.size if size is None else size)


def with_sort(request: SearchRequest, sort_by: str, direction: str = "desc") -> SearchRequest:
    if direction not in ("asc", "desc"):
        raise RequestConfigError(f"sort direction must be asc or desc, got {direction!r}")
    return _replace(request, sort_by=sort_by, sort_direction=direction)


def with_template(request: SearchRequest, template: ResultTemplate) -> SearchRequest:
    return _replace(request, result_template=template)
