# services/description_service.py
from typing import Callable, List, Tuple

from config import DefaultConfig
from ..schemas import Site, SiteLocation, SiteLocationType
from ..tools.directions import direction_arrows
from ..tools.text_style import decorate

CONFIG = DefaultConfig()

Style = Callable[[str, str], str]
Predicate = Callable[[Site, SiteLocation], bool]
Renderer = Callable[[Site, SiteLocation, Style], str]

LOCATION_TYPE_LABELS = {
    SiteLocationType.SlopeStart: "Startplatz",
    SiteLocationType.LandingSite: "Landeplatz",
    SiteLocationType.WhinchStart: "Winde",
}

CHECKED = "☑"
UNCHECKED = "☐"


def checkbox(value: bool) -> str:
    return CHECKED if value else UNCHECKED


def _section(style: Style, header: str, lines: List[str]) -> str:
    return "\n".join([style(header, CONFIG.HEADER_STYLE)] + lines)


def header_section(site: Site, location: SiteLocation, style: Style) -> str:
    return f"{LOCATION_TYPE_LABELS[location.type]} - {site.type}"


def info_section(site: Site, location: SiteLocation, style: Style) -> str:
    return site.info


def remarks_section(site: Site, location: SiteLocation, style: Style) -> str:
    return _section(style, "Bemerkungen", [site.remarks])


def requirements_section(site: Site, location: SiteLocation, style: Style) -> str:
    return _section(style, "Voraussetzungen", [site.requirements])


def terrain_section(site: Site, location: SiteLocation, style: Style) -> str:
    lines = []
    if location.directions:
        arrows = direction_arrows(location.directions)
        lines.append(" ".join(filter(None, ["Richtung:", location.directions, arrows])))
    if site.height_difference_max > 0:
        lines.append(f"Max. Höhendifferenz: {site.height_difference_max} m")
    if location.altitude > 0:
        lines.append(f"Höhe: {location.altitude} m")
    return _section(style, "Gelände", lines)


def winch_section(site: Site, location: SiteLocation, style: Style) -> str:
    lines = ["Mobile Abrollwinde" if location.is_mobile_whinch else "Stationäre Abrollwinde"]
    if location.towing_length > 0:
        lines.append(f"Schlepplänge: {location.towing_length} m")
    if location.towing_whinch_height1 > 0:
        lines.append(f"Schlepphöhe: {location.towing_whinch_height1} - {location.towing_whinch_height2} m")
    return _section(style, "Winde", lines)


def access_section(site: Site, location: SiteLocation, style: Style) -> str:
    lines = [
        f"{checkbox(location.access_by_car)} Auto "
        f"{checkbox(location.access_by_public_transport)} Öffentliche Verkhersmittel "
        f"{checkbox(location.access_by_foot)} Zu Fuß"
    ]
    if location.access_remarks:
        lines.append(location.access_remarks)
    if site.cable_car:
        lines.append(f"Gondel: {site.cable_car}")
    return _section(style, "Zugang", lines)


def flight_section(site: Site, location: SiteLocation, style: Style) -> str:
    lines = [f"{checkbox(location.paragliding)} Gleitschirm {checkbox(location.hanggliding)} Hängegleiter"]
    return _section(style, "Flugart", lines)


def location_remarks_section(site: Site, location: SiteLocation, style: Style) -> str:
    return _section(style, "Hinweise zum Platz", [location.remarks])


def _has_weather(site: Site) -> bool:
    return any([*site.web_cams, site.wheather_info, site.wheather_phone])


def weather_section(site: Site, location: SiteLocation, style: Style) -> str:
    lines = []
    if site.wheather_info:
        lines.append(site.wheather_info)
    if site.wheather_phone:
        lines.append(f"Wetter-Telefon: {site.wheather_phone}")
    for n, web_cam in enumerate(site.web_cams, start=1):
        if web_cam:
            lines.append(f"WebCam {n}: {web_cam}")
    return _section(style, "Wetter", lines)


def summary_section(site: Site, location: SiteLocation, style: Style) -> str:
    certified = f"{CHECKED} Zertifiziert" if site.de_certified else f"{UNCHECKED} Nicht Zertifiziert"
    lines = [f"DE-Zertifiziert: {certified}"]
    if site.de_cert_holder:
        lines.append(f"Zertifikatsinhaber: {site.de_cert_holder}")
    if site.contact:
        lines.append(f"Kontakt: {site.contact}")
    lines.append(f"Url: {site.url}" if site.url else "Url:")
    return _section(style, "Weiteres", lines)


def _always(site: Site, location: SiteLocation) -> bool:
    return True


# evaluated in this order, one section per matching predicate
SECTIONS: List[Tuple[Predicate, Renderer]] = [
    (_always, header_section),
    (lambda site, location: site.info is not None, info_section),
    (lambda site, location: site.remarks is not None, remarks_section),
    (lambda site, location: site.requirements is not None, requirements_section),
    (_always, terrain_section),
    (lambda site, location: location.type == SiteLocationType.WhinchStart, winch_section),
    (_always, access_section),
    (_always, flight_section),
    (lambda site, location: location.remarks is not None, location_remarks_section),
    (lambda site, location: _has_weather(site), weather_section),
    (_always, summary_section),
]


def describe_location(site: Site, location: SiteLocation, style: Style = decorate) -> str:
    """Build the waypoint description for one location of a site"""
    sections = [render(site, location, style) for applies, render in SECTIONS if applies(site, location)]
    return "\n\n".join(sections)
