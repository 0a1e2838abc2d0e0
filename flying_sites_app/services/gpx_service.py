# services/gpx_service.py
import logging
import xml.etree.ElementTree as ET
from typing import Iterator, List, Tuple
from xml.dom import minidom

from config import DefaultConfig
from ..schemas import Site, SiteLocation, SiteLocationType
from .description_service import Style, describe_location
from ..tools.text_style import decorate

CONFIG = DefaultConfig()

GPX_NS = "http://www.topografix.com/GPX/1/1"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
GPX_SCHEMA_LOCATION = f"{GPX_NS} {GPX_NS}/gpx.xsd"

logger = logging.getLogger(__name__)


def waypoints_for(sites: List[Site], location_type: SiteLocationType) -> Iterator[Tuple[Site, SiteLocation]]:
    """(site, location) pairs of one category, site order first, then location order"""
    for site in sites:
        for location in site.locations_of(location_type):
            yield site, location


def _xml_prettify(root: ET.Element) -> str:
    rough = ET.tostring(root, encoding="unicode")
    return minidom.parseString(rough).toprettyxml(indent="  ", encoding=CONFIG.ENCODING).decode(CONFIG.ENCODING)


def build_gpx(sites: List[Site], location_type: SiteLocationType, style: Style = decorate) -> str:
    """GPX 1.1 document with one waypoint per location of the given category"""
    root = ET.Element("gpx")
    root.set("version", "1.1")
    root.set("creator", CONFIG.GPX_CREATOR)
    root.set("xmlns", GPX_NS)
    root.set("xmlns:xsi", XSI_NS)
    root.set("xsi:schemaLocation", GPX_SCHEMA_LOCATION)

    count = 0
    for site, location in waypoints_for(sites, location_type):
        wpt = ET.SubElement(root, "wpt")
        wpt.set("lat", location.latitude)
        wpt.set("lon", location.longitude)
        ET.SubElement(wpt, "name").text = location.name
        ET.SubElement(wpt, "desc").text = describe_location(site, location, style)
        count += 1

    logger.debug(f"Built {location_type.name} GPX with {count} waypoints")
    return _xml_prettify(root)
