import pytest

from flying_sites_app.schemas import Site, SiteLocation, SiteLocationType


def location_xml(location_id, location_type, name, coordinates="6.5,47.2", extra=""):
    return f"""
        <Location>
            <LocationID>{location_id}</LocationID>
            <LocationType>{location_type}</LocationType>
            <LocationName>{name}</LocationName>
            <Coordinates>{coordinates}</Coordinates>
            <Altitude>0</Altitude>
            <RegionID>0</RegionID>
            <Region></Region>
            {extra}
        </Location>"""


def site_xml(site_id, locations, extra=""):
    return f"""
    <FlyingSite>
        <SiteID>{site_id}</SiteID>
        <SiteName>Site {site_id}</SiteName>
        <SiteCountry>DE</SiteCountry>
        <SiteType>Hangstartgelände</SiteType>
        <SiteType_en>Hill launch</SiteType_en>
        <HeightDifferenceMax>0</HeightDifferenceMax>
        <DECertified>false</DECertified>
        {extra}
        {''.join(locations)}
    </FlyingSite>"""


def document_xml(*sites):
    return f'<?xml version="1.0" encoding="utf-8"?>\n<FlyingSites>{"".join(sites)}</FlyingSites>'


@pytest.fixture
def minimal_xml():
    return document_xml(site_xml(1, [location_xml(10, 1, "Test")]))


@pytest.fixture
def mixed_xml():
    return document_xml(
        site_xml(1, [
            location_xml(10, 1, "Nordhang", "10.43,51.88"),
            location_xml(11, 2, "Wiese", "10.44,51.87"),
            location_xml(12, 3, "Winde Ost", "10.45,51.86"),
        ]),
        site_xml(2, [
            location_xml(20, 3, "Winde West", "9.1,50.1"),
            location_xml(21, 1, "Südhang", "9.2,50.2"),
        ]),
        site_xml(3, []),
    )


@pytest.fixture
def identity_style():
    return lambda text, style: text


@pytest.fixture
def site():
    return Site(id=1, name="Rammelsberg", country="DE", type="Hangstartgelände", type_en="Hill launch")


@pytest.fixture
def slope_start():
    return SiteLocation(id=10, type=SiteLocationType.SlopeStart, name="Rammi NW",
                        latitude="51.889874", longitude="10.430972")
