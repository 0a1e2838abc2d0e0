import argparse
import asyncio
import logging
import sys

from config import DefaultConfig
from flying_sites_app.errors import ArgumentError, ParseError
from flying_sites_app.schemas import SiteLocationType
from flying_sites_app.services.export_service import export_gpx_files

CONFIG = DefaultConfig()

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def create_parser():
    parser = _ArgumentParser(
        prog="flying-sites-gpx",
        description="Convert the DHV flying site XML into GPX waypoint files, one per location type",
    )
    parser.add_argument("source", help="flying site XML")
    parser.add_argument("slope_start", help="GPX output for take-off sites")
    parser.add_argument("landing_site", help="GPX output for landing sites")
    parser.add_argument("whinch_start", help="GPX output for winch sites")
    return parser


def main(argv=None) -> int:
    logging.basicConfig(level=CONFIG.LOG_LEVEL)

    try:
        args = create_parser().parse_args(argv)
    except ArgumentError as e:
        logger.error(f"Invalid arguments supplied: {e}")
        return 2

    targets = {
        SiteLocationType.SlopeStart: args.slope_start,
        SiteLocationType.LandingSite: args.landing_site,
        SiteLocationType.WhinchStart: args.whinch_start,
    }
    try:
        asyncio.run(export_gpx_files(args.source, targets))
    except (ParseError, OSError) as e:
        logger.error(f"Error in converting {args.source}: {e}", exc_info=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
