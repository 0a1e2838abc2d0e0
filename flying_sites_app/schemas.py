# schemas.py
from enum import IntEnum
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def prune_empty(value: Optional[str]) -> Optional[str]:
    """Turn empty text into None, leave everything else as is"""
    if value is None or len(value) == 0:
        return None
    return value


class SiteLocationType(IntEnum):
    SlopeStart = 1
    LandingSite = 2
    WhinchStart = 3


class SiteLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: SiteLocationType
    name: str
    # kept as sourced, no float conversion
    latitude: str
    longitude: str
    altitude: int = 0
    country: Optional[str] = None
    post_code: Optional[str] = None
    region_id: int = 0
    region: str = ''
    municipality: Optional[str] = None
    directions: Optional[str] = None
    directions_text: Optional[str] = None

    # only meaningful for WhinchStart
    towing_length: int = 0
    mobile_whinch: int = 0
    towing_whinch_height1: int = 0
    towing_whinch_height2: int = 0

    access_by_car: bool = False
    access_by_public_transport: bool = False
    access_by_foot: bool = False
    access_remarks: Optional[str] = None

    hanggliding: bool = False
    paragliding: bool = False

    suitability_hg: Optional[str] = None
    suitability_hg_en: Optional[str] = None
    suitability_pg: Optional[str] = None
    suitability_pg_en: Optional[str] = None

    remarks: Optional[str] = None

    @field_validator('country', 'post_code', 'municipality', 'directions', 'directions_text',
                     'access_remarks', 'suitability_hg', 'suitability_hg_en',
                     'suitability_pg', 'suitability_pg_en', 'remarks', mode='before')
    @classmethod
    def _prune(cls, value):
        return prune_empty(value)

    @property
    def is_mobile_whinch(self) -> bool:
        return self.mobile_whinch == -1


class Site(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    country: str = ''
    type: str = ''
    type_en: str = ''
    height_difference_max: int = 0
    web_cam1: Optional[str] = None
    web_cam2: Optional[str] = None
    web_cam3: Optional[str] = None
    wheather_info: Optional[str] = None
    wheather_phone: Optional[str] = None
    de_certified: bool = False
    de_cert_holder: Optional[str] = None
    contact: Optional[str] = None
    info: Optional[str] = None
    cable_car: Optional[str] = None
    remarks: Optional[str] = None
    requirements: Optional[str] = None
    url: Optional[str] = None

    locations: List[SiteLocation] = []

    @field_validator('web_cam1', 'web_cam2', 'web_cam3', 'wheather_info', 'wheather_phone',
                     'de_cert_holder', 'contact', 'info', 'cable_car', 'remarks',
                     'requirements', 'url', mode='before')
    @classmethod
    def _prune(cls, value):
        return prune_empty(value)

    @property
    def web_cams(self) -> List[Optional[str]]:
        return [self.web_cam1, self.web_cam2, self.web_cam3]

    def locations_of(self, location_type: SiteLocationType) -> Iterator[SiteLocation]:
        """Locations of one category, in source order"""
        return (location for location in self.locations if location.type == location_type)
