# services/export_service.py
import logging
from pathlib import Path
from typing import Mapping, Union

from config import DefaultConfig
from ..errors import ArgumentError, StructuralParseError
from ..schemas import SiteLocationType
from ..tools.sites.dhv_xml_loader import load_sites
from .gpx_service import build_gpx, waypoints_for

CONFIG = DefaultConfig()

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


async def export_gpx_files(source_xml_path: PathLike, targets: Mapping[SiteLocationType, PathLike]):
    """Convert the flying site XML into one GPX file per location category"""
    missing = [t.name for t in SiteLocationType if t not in targets]
    if missing:
        raise ArgumentError(f"No target path for {', '.join(missing)}")

    try:
        source_xml = Path(source_xml_path).read_text(encoding=CONFIG.ENCODING)
    except UnicodeDecodeError as e:
        raise StructuralParseError(f"{source_xml_path} is not {CONFIG.ENCODING} encoded: {e}") from e
    sites = load_sites(source_xml)

    for location_type in SiteLocationType:
        target = Path(targets[location_type])
        count = sum(1 for _ in waypoints_for(sites, location_type))
        target.write_text(build_gpx(sites, location_type), encoding=CONFIG.ENCODING)
        logger.info(f"Wrote {count} {location_type.name} waypoints to {target}")
