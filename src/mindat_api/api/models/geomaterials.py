from __future__ import annotations
from typing import List, Optional
from pydantic import Field
from mindat_api.api.models.base import MindatRecord, BaseQuery
from mindat_api.api.models.common import MinStats, Relation
from mindat_api.api.models.decoders import (LenientFloat, LenientInt, LenientIntList, LenientStr,
                                            LenientStrList, LenientUInt32, lenient_model, lenient_model_list)
from mindat_api.api.models.enums import (CleavageType, CrystalSystem, Diapheny, EntryType, FractureType,
                                         GeomaterialsOrdering, ImaNotes, ImaStatus, LustreType, OpticalSign,
                                         OpticalType, Tenacity)


LenientRelationList = lenient_model_list(Relation)
LenientMinStats = lenient_model(MinStats)


class Geomaterial(MindatRecord):
    """
    A mineral, rock, variety, synonym, polytype or other entry of the Mindat database.

    Only `id` is required. Numeric attributes tolerate empty strings and numeric strings,
    list attributes tolerate bare strings; see `mindat_api.api.models.decoders`.
    """

    id: int
    longid: LenientStr = None
    guid: LenientStr = None
    name: LenientStr = None
    updttime: LenientStr = None

    # formulas and IMA status
    mindat_formula: LenientStr = None
    mindat_formula_note: LenientStr = None
    ima_formula: LenientStr = None
    ima_status: LenientStrList = None
    ima_notes: LenientStrList = None
    ima_history: LenientStr = None
    shortcode_ima: LenientStr = None

    # relations to other entries
    varietyof: LenientInt = None
    synid: LenientInt = None
    polytypeof: LenientInt = None
    groupid: LenientInt = None
    entrytype: LenientInt = None
    entrytype_text: LenientStr = None
    relations: LenientRelationList = None

    description_short: LenientStr = None
    impurities: LenientStr = None
    elements: LenientStrList = None
    sigelements: LenientStrList = None
    key_elements: LenientStrList = None

    # occurrence and history
    tlform: LenientStr = None
    cim: LenientStr = None
    occurrence: LenientStr = None
    otheroccurrence: LenientStr = None
    industrial: LenientStr = None
    discovery_year: LenientStr = None
    approval_year: LenientUInt32 = None
    publication_year: LenientUInt32 = None
    aboutname: LenientStr = None
    other: LenientStr = None
    type_specimen_store: LenientStr = None

    # physical properties
    diapheny: LenientStr = None
    cleavage: LenientStr = None
    cleavagetype: LenientStr = None
    parting: LenientStr = None
    tenacity: LenientStr = None
    colour: LenientStr = None
    csmetamict: LenientInt = None
    hmin: LenientFloat = None
    hmax: LenientFloat = None
    hardtype: LenientInt = None
    vhnmin: LenientStr = None
    vhnmax: LenientStr = None
    vhnerror: LenientInt = None
    vhng: LenientInt = None
    vhns: LenientInt = None
    luminescence: LenientStr = None
    lustre: LenientStr = None
    lustretype: LenientStr = None
    streak: LenientStr = None
    dmeas: LenientStr = None
    dmeas2: LenientStr = None
    dcalc: LenientStr = None
    fracturetype: LenientStr = None
    morphology: LenientStr = None
    twinning: LenientStr = None
    epitaxidescription: LenientStr = None
    uv: LenientStr = None
    ir: LenientStr = None
    magnetism: LenientStr = None
    thermalbehaviour: LenientStr = None
    electrical: LenientStr = None

    # crystallography
    csystem: LenientStr = None
    cclass: LenientInt = None
    spacegroup: LenientInt = None
    spacegroupset: LenientStr = None
    a: LenientStr = None
    b: LenientStr = None
    c: LenientStr = None
    alpha: LenientStr = None
    beta: LenientStr = None
    gamma: LenientStr = None
    va3: LenientFloat = None
    z: LenientInt = None

    # optical properties
    opticalextinction: LenientStr = None
    opticaltype: LenientStr = None
    opticalsign: LenientStr = None
    opticalalpha: LenientStr = None
    opticalbeta: LenientStr = None
    opticalgamma: LenientStr = None
    opticalomega: LenientStr = None
    opticalepsilon: LenientStr = None
    opticaln: LenientStr = None
    optical2vcalc: LenientStr = None
    optical2vmeasured: LenientStr = None
    opticaldispersion: LenientStr = None
    opticalpleochroism: LenientStr = None
    opticalpleochorismdesc: LenientStr = None
    opticalbirefringence: LenientStr = None
    opticalcomments: LenientStr = None
    opticalcolour: LenientStr = None
    opticalinternal: LenientStr = None
    opticaltropic: LenientStr = None
    opticalanisotropism: LenientStr = None
    opticalbireflectance: LenientStr = None
    opticalr: LenientStr = None
    rimin: LenientFloat = None
    rimax: LenientFloat = None

    # classification
    strunz10ed1: LenientStr = None
    strunz10ed2: LenientStr = None
    strunz10ed3: LenientStr = None
    strunz10ed4: LenientStr = None
    dana8ed1: LenientStr = None
    dana8ed2: LenientStr = None
    dana8ed3: LenientStr = None
    dana8ed4: LenientStr = None

    # rocks and meteorites
    rock_parent: LenientInt = None
    rock_parent2: LenientInt = None
    rock_root: LenientInt = None
    rock_bgs_code: LenientStr = None
    meteoritical_code: LenientStr = None

    weighting: LenientInt = None
    minstats: LenientMinStats = None
    locality: LenientIntList = None
    type_localities: LenientIntList = None

    @property
    def entry_type(self) -> Optional[EntryType]:
        """The entry type as an enum, or None when the API did not send one"""
        return EntryType.from_code(self.entrytype) if self.entrytype is not None else None


class GeomaterialsQuery(BaseQuery):
    """
    Filters for the /geomaterials/ endpoint.

    Example:
        >>> query = (GeomaterialsQuery()
        ...          .ima_approved(True)
        ...          .with_elements("Cu")
        ...          .hardness_range(3.0, 4.5)
        ...          .order_by(GeomaterialsOrdering.NAME)
        ...          .with_page_size(50))
        >>> query.to_params()['elements_inc']
        'Cu'
    """

    RANGE_FIELDS = (
        ("hardness_min", "hardness_max"),
        ("density_min", "density_max"),
        ("ri_min", "ri_max"),
        ("bi_min", "bi_max"),
        ("optical2v_min", "optical2v_max"),
    )

    name: Optional[str] = None
    q: Optional[str] = None
    ima: Optional[bool] = None
    ima_status: Optional[List[ImaStatus]] = None
    ima_notes: Optional[List[ImaNotes]] = None
    entrytype: Optional[List[EntryType]] = None
    elements_inc: Optional[str] = None
    elements_exc: Optional[str] = None
    crystal_system: Optional[List[CrystalSystem]] = None
    cleavagetype: Optional[List[CleavageType]] = None
    fracturetype: Optional[List[FractureType]] = None
    lustretype: Optional[List[LustreType]] = None
    diapheny: Optional[List[Diapheny]] = None
    tenacity: Optional[List[Tenacity]] = None
    colour: Optional[str] = None
    streak: Optional[str] = None
    opticaltype: Optional[OpticalType] = None
    opticalsign: Optional[OpticalSign] = None
    hardness_min: Optional[float] = None
    hardness_max: Optional[float] = None
    density_min: Optional[float] = None
    density_max: Optional[float] = None
    ri_min: Optional[float] = None
    ri_max: Optional[float] = None
    bi_min: Optional[float] = None
    bi_max: Optional[float] = None
    optical2v_min: Optional[float] = None
    optical2v_max: Optional[float] = None
    varietyof: Optional[int] = None
    synid: Optional[int] = None
    polytypeof: Optional[int] = None
    groupid: Optional[int] = None
    id_in: Optional[List[int]] = Field(None, serialization_alias="id__in")
    non_utf: Optional[bool] = None
    meteoritical_code: Optional[str] = None
    meteoritical_code_exists: Optional[bool] = None
    updated_at: Optional[str] = None
    fields: Optional[str] = None
    omit: Optional[str] = None
    expand: Optional[List[str]] = None
    ordering: Optional[GeomaterialsOrdering] = None
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1)

    def with_name(self, name: str) -> GeomaterialsQuery:
        """Filter by name; `*` and `_` act as wildcards"""
        return self._updated(name=name)

    def search(self, q: str) -> GeomaterialsQuery:
        return self._updated(q=q)

    def ima_approved(self, approved: bool = True) -> GeomaterialsQuery:
        return self._updated(ima=approved)

    def with_ima_status(self, statuses: List[ImaStatus]) -> GeomaterialsQuery:
        return self._updated(ima_status=statuses)

    def with_ima_notes(self, notes: List[ImaNotes]) -> GeomaterialsQuery:
        return self._updated(ima_notes=notes)

    def entry_types(self, types: List[EntryType | int]) -> GeomaterialsQuery:
        return self._updated(entrytype=types)

    def with_elements(self, elements: str) -> GeomaterialsQuery:
        """Only entries containing all of the comma-separated elements, e.g. "Cu,S" """
        return self._updated(elements_inc=elements)

    def without_elements(self, elements: str) -> GeomaterialsQuery:
        return self._updated(elements_exc=elements)

    def crystal_systems(self, systems: List[CrystalSystem]) -> GeomaterialsQuery:
        return self._updated(crystal_system=systems)

    def cleavage_types(self, types: List[CleavageType]) -> GeomaterialsQuery:
        return self._updated(cleavagetype=types)

    def fracture_types(self, types: List[FractureType]) -> GeomaterialsQuery:
        return self._updated(fracturetype=types)

    def lustre_types(self, types: List[LustreType]) -> GeomaterialsQuery:
        return self._updated(lustretype=types)

    def diaphenies(self, values: List[Diapheny]) -> GeomaterialsQuery:
        return self._updated(diapheny=values)

    def tenacities(self, values: List[Tenacity]) -> GeomaterialsQuery:
        return self._updated(tenacity=values)

    def with_colour(self, colour: str) -> GeomaterialsQuery:
        return self._updated(colour=colour)

    def with_streak(self, streak: str) -> GeomaterialsQuery:
        return self._updated(streak=streak)

    def with_optical_type(self, optical_type: OpticalType) -> GeomaterialsQuery:
        return self._updated(opticaltype=optical_type)

    def with_optical_sign(self, optical_sign: OpticalSign) -> GeomaterialsQuery:
        return self._updated(opticalsign=optical_sign)

    def hardness_range(self, minimum: float, maximum: float) -> GeomaterialsQuery:
        """Mohs hardness bounds, always set together"""
        return self._updated(hardness_min=minimum, hardness_max=maximum)

    def density_range(self, minimum: float, maximum: float) -> GeomaterialsQuery:
        return self._updated(density_min=minimum, density_max=maximum)

    def refractive_index_range(self, minimum: float, maximum: float) -> GeomaterialsQuery:
        return self._updated(ri_min=minimum, ri_max=maximum)

    def birefringence_range(self, minimum: float, maximum: float) -> GeomaterialsQuery:
        return self._updated(bi_min=minimum, bi_max=maximum)

    def optical_2v_range(self, minimum: float, maximum: float) -> GeomaterialsQuery:
        return self._updated(optical2v_min=minimum, optical2v_max=maximum)

    def variety_of(self, geomaterial_id: int) -> GeomaterialsQuery:
        return self._updated(varietyof=geomaterial_id)

    def synonym_of(self, geomaterial_id: int) -> GeomaterialsQuery:
        return self._updated(synid=geomaterial_id)

    def polytype_of(self, geomaterial_id: int) -> GeomaterialsQuery:
        return self._updated(polytypeof=geomaterial_id)

    def in_group(self, group_id: int) -> GeomaterialsQuery:
        return self._updated(groupid=group_id)

    def with_ids(self, ids: List[int]) -> GeomaterialsQuery:
        return self._updated(id_in=ids)

    def include_non_utf(self, include: bool = True) -> GeomaterialsQuery:
        return self._updated(non_utf=include)

    def with_meteoritical_code(self, code: str) -> GeomaterialsQuery:
        return self._updated(meteoritical_code=code)

    def has_meteoritical_code(self, exists: bool = True) -> GeomaterialsQuery:
        return self._updated(meteoritical_code_exists=exists)

    def updated_since(self, timestamp: str) -> GeomaterialsQuery:
        """Only entries updated after an ISO-8601 datetime"""
        return self._updated(updated_at=timestamp)

    def select_fields(self, fields: str) -> GeomaterialsQuery:
        return self._updated(fields=fields)

    def omit_fields(self, fields: str) -> GeomaterialsQuery:
        return self._updated(omit=fields)

    def expand_fields(self, fields: List[str]) -> GeomaterialsQuery:
        return self._updated(expand=fields)

    def order_by(self, ordering: GeomaterialsOrdering) -> GeomaterialsQuery:
        return self._updated(ordering=ordering)

    def with_page(self, page: int) -> GeomaterialsQuery:
        return self._updated(page=page)

    def with_page_size(self, size: int) -> GeomaterialsQuery:
        return self._updated(page_size=size)


class GeomaterialsSearchQuery(BaseQuery):
    """Parameters of the free-text /geomaterials-search/ endpoint"""

    q: str
    size: Optional[int] = Field(None, ge=1)
