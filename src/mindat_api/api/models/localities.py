from __future__ import annotations
from typing import List, Optional
from pydantic import Field
from mindat_api.api.models.base import MindatRecord, BaseQuery
from mindat_api.api.models.decoders import LenientFloat, LenientInt, LenientInt16, LenientIntList, LenientStr


class Locality(MindatRecord):
    """
    A locality (mine, outcrop, region...) from the Mindat database.

    `elements` is the element list exactly as the API formats it, e.g. "Cu,Fe,S".
    `geomaterials` is only present when the field was expanded or selected.
    """

    id: int
    longid: LenientStr = None
    guid: LenientStr = None
    txt: LenientStr = None
    revtxtd: LenientStr = None
    description_short: LenientStr = None
    latitude: LenientFloat = None
    longitude: LenientFloat = None
    langtxt: LenientStr = None
    dateadd: LenientStr = None
    datemodify: LenientStr = None
    elements: LenientStr = None
    country: LenientStr = None
    refs: LenientStr = None
    coordsystem: LenientInt = None
    parent: LenientInt = None
    links: LenientStr = None
    area: LenientInt = None
    non_hierarchical: LenientInt = None
    age: LenientInt = None
    meteorite_type: LenientInt = None
    company: LenientInt = None
    company2: LenientInt = None
    loc_status: LenientInt = None
    loc_group: LenientInt = None
    status_year: LenientStr = None
    company_year: LenientStr = None
    discovered_before: LenientInt = None
    discovery_year: LenientInt = None
    discovery_year_type: LenientStr = None
    level: LenientInt = None
    locsinclude: LenientStr = None
    locsexclude: LenientStr = None
    wikipedia: LenientStr = None
    osmid: LenientStr = None
    geonames: LenientInt = None
    timestamp: LenientStr = None
    geomaterials: LenientIntList = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class LocalityAge(MindatRecord):
    """Geological age determination attached to a locality"""

    age_id: int
    age_mav: LenientFloat = None
    age_pmv: LenientFloat = None
    age_ma2v: LenientFloat = None
    age_pm2v: LenientFloat = None
    agemethod: LenientStr = None
    agereference: LenientStr = None
    age_ma: LenientStr = None
    age_pm: LenientStr = None
    age_ma2: LenientStr = None
    age_pm2: LenientStr = None
    ages1: LenientInt = None
    ages2: LenientInt = None
    age_type: LenientInt = None


class LocalityStatus(MindatRecord):
    ls_id: int
    ls_text: LenientStr = None
    ls_historical: LenientInt = None
    ls_wide: LenientInt = None


class LocalityType(MindatRecord):
    lt_id: int
    lt_text: LenientStr = None
    lt_parent: LenientInt = None
    lt_sortorder: LenientInt16 = None
    lt_erratic: LenientInt = None
    lt_area: LenientInt = None
    lt_underground: LenientInt = None


class LocalitiesQuery(BaseQuery):
    """
    Filters for the cursor-paginated /localities/ endpoint.

    Follow-up pages are requested by passing the cursor extracted from the previous envelope:

        >>> first = client.localities(LocalitiesQuery().with_country("Norway"))
        >>> cursor = first.data.next_cursor()
        >>> second = client.localities(LocalitiesQuery().with_country("Norway").with_cursor(cursor))
    """

    country: Optional[str] = None
    txt: Optional[str] = None
    description: Optional[str] = None
    elements_inc: Optional[str] = None
    elements_exc: Optional[str] = None
    id_in: Optional[List[int]] = Field(None, serialization_alias="id__in")
    updated_at: Optional[str] = None
    fields: Optional[str] = None
    omit: Optional[str] = None
    expand: Optional[List[str]] = None
    cursor: Optional[str] = None
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1)

    def with_country(self, country: str) -> LocalitiesQuery:
        return self._updated(country=country)

    def name_contains(self, text: str) -> LocalitiesQuery:
        return self._updated(txt=text)

    def description_contains(self, text: str) -> LocalitiesQuery:
        return self._updated(description=text)

    def with_elements(self, elements: str) -> LocalitiesQuery:
        return self._updated(elements_inc=elements)

    def without_elements(self, elements: str) -> LocalitiesQuery:
        return self._updated(elements_exc=elements)

    def with_ids(self, ids: List[int]) -> LocalitiesQuery:
        return self._updated(id_in=ids)

    def updated_since(self, timestamp: str) -> LocalitiesQuery:
        return self._updated(updated_at=timestamp)

    def select_fields(self, fields: str) -> LocalitiesQuery:
        return self._updated(fields=fields)

    def omit_fields(self, fields: str) -> LocalitiesQuery:
        return self._updated(omit=fields)

    def expand_fields(self, fields: List[str]) -> LocalitiesQuery:
        return self._updated(expand=fields)

    def with_cursor(self, cursor: str) -> LocalitiesQuery:
        """Continues from an opaque cursor taken from a previous envelope"""
        return self._updated(cursor=cursor)

    def with_page(self, page: int) -> LocalitiesQuery:
        return self._updated(page=page)

    def with_page_size(self, size: int) -> LocalitiesQuery:
        return self._updated(page_size=size)
