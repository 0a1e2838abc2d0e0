# dhv_xml_loader.py

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from ...errors import FieldConversionError, StructuralParseError, UnknownLocationTypeError
from ...schemas import Site, SiteLocation, SiteLocationType, prune_empty

logger = logging.getLogger(__name__)

ROOT_TAG = 'FlyingSites'
SITE_TAG = 'FlyingSite'
LOCATION_TAG = 'Location'


def _text(element: ET.Element, tag: str) -> str:
    return element.findtext(tag, default='') or ''


def _optional(element: ET.Element, tag: str) -> Optional[str]:
    return prune_empty(_text(element, tag))


def _flag(element: ET.Element, tag: str) -> bool:
    return _text(element, tag) == 'true'


def _number(element: ET.Element, tag: str, record: str) -> int:
    raw = _text(element, tag).strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError as e:
        raise FieldConversionError(f"{record}: {tag} is not a number: {raw!r}") from e


def split_coordinates(raw: str, record: str = '') -> Tuple[str, str]:
    """Split the 'longitude,latitude' pair and return it as (latitude, longitude)"""
    parts = raw.split(',')
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise FieldConversionError(f"{record}: Coordinates is not a comma separated pair: {raw!r}")
    longitude, latitude = (part.strip() for part in parts)
    return latitude, longitude


def _location_type(element: ET.Element, record: str) -> SiteLocationType:
    raw = _number(element, 'LocationType', record)
    try:
        return SiteLocationType(raw)
    except ValueError as e:
        raise UnknownLocationTypeError(f"{record}: unknown LocationType {raw}") from e


def parse_location(x: ET.Element, site_record: str = '') -> SiteLocation:
    record = f"{site_record} Location {_text(x, 'LocationID') or '?'}".strip()
    latitude, longitude = split_coordinates(_text(x, 'Coordinates'), record)

    return SiteLocation(
        id=_number(x, 'LocationID', record),
        type=_location_type(x, record),
        name=_text(x, 'LocationName'),
        latitude=latitude,
        longitude=longitude,
        altitude=_number(x, 'Altitude', record),
        country=_optional(x, 'LocationCountry'),
        post_code=_optional(x, 'PostCode'),
        region_id=_number(x, 'RegionID', record),
        region=_text(x, 'Region'),
        municipality=_optional(x, 'Municipality'),
        directions=_optional(x, 'Directions'),
        directions_text=_optional(x, 'DirectionsText'),

        towing_length=_number(x, 'TowingLength', record),
        mobile_whinch=_number(x, 'MobileWinch', record),
        towing_whinch_height1=_number(x, 'TowingHeight1', record),
        towing_whinch_height2=_number(x, 'TowingHeight2', record),

        access_by_car=_flag(x, 'AccessByCar'),
        access_by_public_transport=_flag(x, 'AccessByPublicTransport'),
        access_by_foot=_flag(x, 'AccessByFoot'),
        access_remarks=_optional(x, 'AccessRemarks'),

        hanggliding=_flag(x, 'Hanggliding'),
        paragliding=_flag(x, 'Paragliding'),

        suitability_hg=_optional(x, 'SuitabilityHG'),
        suitability_hg_en=_optional(x, 'SuitabilityHG_en'),
        suitability_pg=_optional(x, 'SuitabilityPG'),
        suitability_pg_en=_optional(x, 'SuitabilityPG_en'),

        remarks=_optional(x, 'LocationRemarks'),
    )


def parse_site(c: ET.Element) -> Site:
    record = f"FlyingSite {_text(c, 'SiteID') or '?'}"

    site = Site(
        id=_number(c, 'SiteID', record),
        name=_text(c, 'SiteName'),
        country=_text(c, 'SiteCountry'),
        type=_text(c, 'SiteType'),
        type_en=_text(c, 'SiteType_en'),
        height_difference_max=_number(c, 'HeightDifferenceMax', record),
        web_cam1=_optional(c, 'WebCam1'),
        web_cam2=_optional(c, 'WebCam2'),
        web_cam3=_optional(c, 'WebCam3'),
        wheather_info=_optional(c, 'WheaterInfo'),
        wheather_phone=_optional(c, 'WheaterPhone'),
        de_certified=_flag(c, 'DECertified'),
        de_cert_holder=_optional(c, 'DECertificationHolder'),
        contact=_optional(c, 'SiteContact'),
        info=_optional(c, 'SiteInformation'),
        cable_car=_optional(c, 'CableCar'),
        remarks=_optional(c, 'SiteRemarks'),
        requirements=_optional(c, 'Requirements'),
        url=_optional(c, 'SiteUrl'),

        locations=[parse_location(x, record) for x in c.findall(LOCATION_TAG)],
    )
    logger.debug(f"Parsed site {site.id} {site.name} with {len(site.locations)} locations")
    return site


def _flying_sites(root: ET.Element) -> ET.Element:
    # DHV exports wrap FlyingSites in an outer element
    if root.tag == ROOT_TAG:
        return root
    flying_sites = root.find(ROOT_TAG)
    if flying_sites is None:
        raise StructuralParseError(f"No {ROOT_TAG} element below <{root.tag}>")
    return flying_sites


def load_sites(source_xml: str) -> List[Site]:
    """Parse the DHV flying site XML into sites, in document order"""
    try:
        root = ET.fromstring(source_xml)
    except ET.ParseError as e:
        raise StructuralParseError(f"Source is not well-formed XML: {e}") from e

    site_elements = _flying_sites(root).findall(SITE_TAG)
    sites = [parse_site(c) for c in site_elements]
    logger.info(f"Loaded {len(sites)} sites with {sum(len(s.locations) for s in sites)} locations")
    return sites
