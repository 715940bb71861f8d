from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Tuple, Union


class SearchParams(BaseModel):
    """
    Search options forwarded to the Ohana search endpoint.

    Unknown fields (kind, service_area, lat_lng, ...) are kept and
    passed through untouched.
    """

    keyword: Optional[str] = None
    location: Optional[str] = None
    language: Optional[str] = None
    radius: Optional[str] = None
    org_name: Optional[str] = None
    category: Optional[str] = None
    page: Optional[str] = None
    per_page: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    def to_query(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Address(BaseModel):
    street_1: Optional[str] = None
    street_2: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class Location(BaseModel):
    id: Union[int, str]
    name: str
    slug: Optional[str] = None
    alternate_name: Optional[str] = None
    description: Optional[str] = None
    short_desc: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    address: Optional[Address] = None
    organization: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="allow")


class TerminologyEntry(BaseModel):
    name: str
    aka: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class ServiceTerm(BaseModel):
    name: str
    sub: List[str] = Field(default_factory=list)


class KeywordRemap(BaseModel):
    """
    Outcome of keyword_mapping().

    `keyword` is None when no remap applied; otherwise it holds the
    replacement keyword and `locations` the results of searching with it
    (which may still be empty).
    """

    original_keyword: Optional[str] = None
    keyword: Optional[str] = None
    locations: List[Location] = Field(default_factory=list)

    @property
    def remapped(self) -> bool:
        return self.keyword is not None


class SearchResponse(BaseModel):
    locations: List[Location]
    count: int
    keyword: Optional[str] = None
    remapped_from: Optional[str] = None
    terminology: Optional[str] = None
    service_terms: List[ServiceTerm] = Field(default_factory=list)


class TerminologyResponse(BaseModel):
    keyword: Optional[str] = None
    terminology: Optional[str] = None
