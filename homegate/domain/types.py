# homegate/domain/types.py
from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    FLAT = "FLAT"
    APARTMENT = "APARTMENT"
    MAISONETTE = "MAISONETTE"
    DUPLEX = "DUPLEX"
    ATTIC_FLAT = "ATTIC_FLAT"
    ROOF_FLAT = "ROOF_FLAT"
    STUDIO = "STUDIO"
    SINGLE_ROOM = "SINGLE_ROOM"
    TERRACE_FLAT = "TERRACE_FLAT"
    BACHELOR_FLAT = "BACHELOR_FLAT"
    LOFT = "LOFT"
    ATTIC = "ATTIC"
    ROW_HOUSE = "ROW_HOUSE"
    BIFAMILIAR_HOUSE = "BIFAMILIAR_HOUSE"
    TERRACE_HOUSE = "TERRACE_HOUSE"
    VILLA = "VILLA"
    FARM_HOUSE = "FARM_HOUSE"
    CAVE_HOUSE = "CAVE_HOUSE"
    CASTLE = "CASTLE"
    GRANNY_FLAT = "GRANNY_FLAT"
    CHALET = "CHALET"
    RUSTICO = "RUSTICO"
    SINGLE_HOUSE = "SINGLE_HOUSE"
    HOBBY_ROOM = "HOBBY_ROOM"
    CELLAR_COMPARTMENT = "CELLAR_COMPARTMENT"
    ATTIC_COMPARTMENT = "ATTIC_COMPARTMENT"
    FURNISHED_FLAT = "FURNISHED_FLAT"
    PLOT = "PLOT"
    BUILDING_LAND = "BUILDING_LAND"
    RESIDENTIAL_COMMERCIAL_BUILDING = "RESIDENTIAL_COMMERCIAL_BUILDING"


class OfferType(str, Enum):
    RENT = "RENT"
    BUY = "BUY"


class ListingType(str, Enum):
    PREMIUM = "PREMIUM"
    TOP = "TOP"
    STANDARD = "STANDARD"


class Currency(str, Enum):
    CHF = "CHF"


class PriceInterval(str, Enum):
    MONTH = "MONTH"


class TruncationWindow(str, Enum):
    minute = "minute"
    hour = "hour"
    day = "day"
