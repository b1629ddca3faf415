from mindat_api.api.models.base import MindatRecord
from mindat_api.api.models.decoders import LenientStr


class Country(MindatRecord):
    """A country as listed by the /countries/ endpoint"""

    id: int
    text: LenientStr = None
    continent: LenientStr = None
    iso: LenientStr = None
    latdir: LenientStr = None
    longdir: LenientStr = None
