"""Nested records shared by several Mindat entities."""
from mindat_api.api.models.base import MindatRecord
from mindat_api.api.models.decoders import LenientInt, LenientStr


class Relation(MindatRecord):
    """
    A link from one geomaterial to another.

    relation_type codes: 1=Synonym, 2=Mixture, 4=Structurally related, 5=Associated at type locality,
    6=Epitaxial, 7=Polymorph, 8=Isostructural, 9=Chemically related, 10=Common Associates,
    11=Essential minerals, 12=Common ore minerals, 13=Accessory minerals
    """

    mineral_id: int
    relation_type: int
    relation_type_text: LenientStr = None


class MinStats(MindatRecord):
    """Photo and locality counters for a geomaterial"""

    ms_photos: LenientInt = None
    ms_locentries: LenientInt = None
    ms_photovotes: LenientInt = None
