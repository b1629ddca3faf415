from __future__ import annotations
from typing import List, Optional
from pydantic import Field
from mindat_api.api.models.base import MindatRecord, BaseQuery
from mindat_api.api.models.decoders import LenientIntList, LenientStr, LenientStrList


class ImaMaterial(MindatRecord):
    """An entry of the IMA list of minerals as served by /minerals-ima/"""

    id: int
    name: LenientStr = None
    ima_formula: LenientStr = None
    ima_symbol: LenientStr = None
    ima_year: LenientStr = None
    discovery_year: LenientStr = None
    ima_status: LenientStrList = None
    ima_notes: LenientStrList = None
    type_specimen_store: LenientStr = None
    mindat_longid: LenientStr = None
    mindat_guid: LenientStr = None
    type_localities: LenientIntList = None
    description_short: LenientStr = None
    mindat_formula: LenientStr = None
    mindat_formula_note: LenientStr = None


class ImaMineralsQuery(BaseQuery):
    """Filters for the /minerals-ima/ endpoint"""

    q: Optional[str] = None
    ima: Optional[int] = None
    id_in: Optional[List[int]] = Field(None, serialization_alias="id__in")
    updated_at: Optional[str] = None
    fields: Optional[str] = None
    omit: Optional[str] = None
    expand: Optional[List[str]] = None
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1)

    def search(self, q: str) -> ImaMineralsQuery:
        return self._updated(q=q)

    def with_ima(self, ima: int) -> ImaMineralsQuery:
        return self._updated(ima=ima)

    def with_ids(self, ids: List[int]) -> ImaMineralsQuery:
        return self._updated(id_in=ids)

    def updated_since(self, timestamp: str) -> ImaMineralsQuery:
        return self._updated(updated_at=timestamp)

    def select_fields(self, fields: str) -> ImaMineralsQuery:
        return self._updated(fields=fields)

    def omit_fields(self, fields: str) -> ImaMineralsQuery:
        return self._updated(omit=fields)

    def expand_fields(self, fields: List[str]) -> ImaMineralsQuery:
        return self._updated(expand=fields)

    def with_page(self, page: int) -> ImaMineralsQuery:
        return self._updated(page=page)

    def with_page_size(self, size: int) -> ImaMineralsQuery:
        return self._updated(page_size=size)
