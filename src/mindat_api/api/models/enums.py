"""Enumerated values used by Mindat filters and records. Each member's value is the token the API expects."""
from enum import Enum, IntEnum


class CrystalSystem(str, Enum):
    ISOMETRIC = "Isometric"
    ORTHORHOMBIC = "Orthorhombic"
    HEXAGONAL = "Hexagonal"
    TRIGONAL = "Trigonal"
    TETRAGONAL = "Tetragonal"
    MONOCLINIC = "Monoclinic"
    TRICLINIC = "Triclinic"
    AMORPHOUS = "Amorphous"
    ICOSAHEDRAL = "Icosahedral"


class CleavageType(str, Enum):
    NONE_OBSERVED = "None Observed"
    POOR_INDISTINCT = "Poor/Indistinct"
    IMPERFECT_FAIR = "Imperfect/Fair"
    DISTINCT_GOOD = "Distinct/Good"
    VERY_GOOD = "Very Good"
    PERFECT = "Perfect"


class Diapheny(str, Enum):
    TRANSPARENT = "Transparent"
    TRANSLUCENT = "Translucent"
    OPAQUE = "Opaque"


class EntryType(IntEnum):
    """Kind of geomaterial entry, sent and received as its integer code"""

    MINERAL = 0
    SYNONYM = 1
    VARIETY = 2
    MIXTURE = 3
    SERIES = 4
    GROUP_LIST = 5
    POLYTYPE = 6
    ROCK = 7
    COMMODITY = 8

    @classmethod
    def from_code(cls, code: int) -> "EntryType":
        """
        Maps an integer code to its entry type. Unknown codes fall back to MINERAL.

        Examples:
            >>> EntryType.from_code(7)
            <EntryType.ROCK: 7>
            >>> EntryType.from_code(99)
            <EntryType.MINERAL: 0>
        """
        try:
            return cls(code)
        except ValueError:
            return cls.MINERAL


class FractureType(str, Enum):
    NONE_OBSERVED = "None observed"
    IRREGULAR_UNEVEN = "Irregular/Uneven"
    SPLINTERY = "Splintery"
    HACKLY = "Hackly"
    CONCHOIDAL = "Conchoidal"
    SUB_CONCHOIDAL = "Sub-Conchoidal"
    FIBROUS = "Fibrous"
    MICACEOUS = "Micaceous"
    STEP_LIKE = "Step-Like"


class LustreType(str, Enum):
    ADAMANTINE = "Adamantine"
    SUB_ADAMANTINE = "Sub-Adamantine"
    VITREOUS = "Vitreous"
    SUB_VITREOUS = "Sub-Vitreous"
    RESINOUS = "Resinous"
    WAXY = "Waxy"
    GREASY = "Greasy"
    SILKY = "Silky"
    PEARLY = "Pearly"
    METALLIC = "Metallic"
    SUB_METALLIC = "Sub-Metallic"
    DULL = "Dull"
    EARTHY = "Earthy"


class Tenacity(str, Enum):
    BRITTLE = "brittle"
    VERY_BRITTLE = "very brittle"
    SECTILE = "sectile"
    WAXY = "waxy"
    FLEXIBLE = "flexible"
    ELASTIC = "elastic"
    FRAGILE = "fragile"
    MALLEABLE = "malleable"


class OpticalType(str, Enum):
    ISOTROPIC = "Isotropic"
    UNIAXIAL = "Uniaxial"
    BIAXIAL = "Biaxial"


class OpticalSign(str, Enum):
    POSITIVE = "+"
    NEGATIVE = "-"
    BOTH = "+/-"


class ImaStatus(str, Enum):
    APPROVED = "APPROVED"
    DISCREDITED = "DISCREDITED"
    PENDING_PUBLICATION = "PENDING_PUBLICATION"
    GRANDFATHERED = "GRANDFATHERED"
    QUESTIONABLE = "QUESTIONABLE"


class ImaNotes(str, Enum):
    REJECTED = "REJECTED"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    GROUP = "GROUP"
    REDEFINED = "REDEFINED"
    RENAMED = "RENAMED"
    INTERMEDIATE = "INTERMEDIATE"
    PUBLISHED_WITHOUT_APPROVAL = "PUBLISHED_WITHOUT_APPROVAL"
    UNNAMED_VALID = "UNNAMED_VALID"
    UNNAMED_INVALID = "UNNAMED_INVALID"
    NAMED_AMPHIBOLE = "NAMED_AMPHIBOLE"


class GeomaterialsOrdering(str, Enum):
    """Sort orders accepted by the geomaterials endpoint. A leading '-' sorts descending."""

    ID = "id"
    ID_DESC = "-id"
    NAME = "name"
    NAME_DESC = "-name"
    UPDATE_TIME = "updttime"
    UPDATE_TIME_DESC = "-updttime"
    APPROVAL_YEAR = "approval_year"
    APPROVAL_YEAR_DESC = "-approval_year"
    WEIGHTING = "weighting"
    WEIGHTING_DESC = "-weighting"
    LOCALITY_ENTRIES = "minstats__ms_locentries"
    LOCALITY_ENTRIES_DESC = "-minstats__ms_locentries"
    PHOTOS = "minstats__ms_photos"
    PHOTOS_DESC = "-minstats__ms_photos"

    def to_token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "GeomaterialsOrdering":
        """
        Parses an upstream ordering token.

        Raises:
            ValueError: if the token is not a known ordering
        """
        return cls(token)

    @property
    def descending(self) -> bool:
        return self.value.startswith("-")

    def __str__(self) -> str:
        return self.value


__all__ = [
    "CrystalSystem",
    "CleavageType",
    "Diapheny",
    "EntryType",
    "FractureType",
    "LustreType",
    "Tenacity",
    "OpticalType",
    "OpticalSign",
    "ImaStatus",
    "ImaNotes",
    "GeomaterialsOrdering",
]
