from flying_sites_app.schemas import SiteLocationType
from flying_sites_app.services.description_service import describe_location
from flying_sites_app.tools.text_style import decorate


def sections(description):
    return description.split("\n\n")


def test_minimal_description(site, slope_start, identity_style):
    description = describe_location(site, slope_start, identity_style)

    assert sections(description) == [
        "Startplatz - Hangstartgelände",
        "Gelände",
        "Zugang\n☐ Auto ☐ Öffentliche Verkhersmittel ☐ Zu Fuß",
        "Flugart\n☐ Gleitschirm ☐ Hängegleiter",
        "Weiteres\nDE-Zertifiziert: ☐ Nicht Zertifiziert\nUrl:",
    ]


def test_access_line_is_never_omitted(site, slope_start, identity_style):
    description = describe_location(site, slope_start, identity_style)
    access_line = description.split("Zugang\n")[1].split("\n")[0]

    assert access_line.count("☐") == 3
    for label in ("Auto", "Öffentliche Verkhersmittel", "Zu Fuß"):
        assert label in access_line


def test_category_labels(site, slope_start, identity_style):
    landing = slope_start.model_copy(update={"type": SiteLocationType.LandingSite})
    winch = slope_start.model_copy(update={"type": SiteLocationType.WhinchStart})

    assert describe_location(site, landing, identity_style).startswith("Landeplatz - Hangstartgelände\n\n")
    assert describe_location(site, winch, identity_style).startswith("Winde - Hangstartgelände\n\n")


def test_full_description(site, slope_start, identity_style):
    site = site.model_copy(update={
        "info": "Bekanntes Gelände im Harz",
        "remarks": "Naturschutzgebiet",
        "requirements": "A-Schein",
        "height_difference_max": 250,
        "cable_car": "Rammelsbergbahn",
        "wheather_info": "Windmesser am Start",
        "wheather_phone": "05321 1234",
        "web_cam1": "https://cam1",
        "web_cam3": "https://cam3",
        "de_certified": True,
        "de_cert_holder": "DHV",
        "contact": "Harzer Gleitschirmflieger",
        "url": "https://www.dhv.de/gelaende/9427",
    })
    location = slope_start.model_copy(update={
        "directions": "NW, W",
        "altitude": 610,
        "access_by_car": True,
        "access_by_foot": True,
        "access_remarks": "Parkplatz an der Bergbahn",
        "paragliding": True,
        "remarks": "Startplatz bei Nässe rutschig",
    })

    assert sections(describe_location(site, location, identity_style)) == [
        "Startplatz - Hangstartgelände",
        "Bekanntes Gelände im Harz",
        "Bemerkungen\nNaturschutzgebiet",
        "Voraussetzungen\nA-Schein",
        "Gelände\nRichtung: NW, W ↖ ←\nMax. Höhendifferenz: 250 m\nHöhe: 610 m",
        "Zugang\n☑ Auto ☐ Öffentliche Verkhersmittel ☑ Zu Fuß\nParkplatz an der Bergbahn\nGondel: Rammelsbergbahn",
        "Flugart\n☑ Gleitschirm ☐ Hängegleiter",
        "Hinweise zum Platz\nStartplatz bei Nässe rutschig",
        "Wetter\nWindmesser am Start\nWetter-Telefon: 05321 1234\nWebCam 1: https://cam1\nWebCam 3: https://cam3",
        "Weiteres\nDE-Zertifiziert: ☑ Zertifiziert\nZertifikatsinhaber: DHV\n"
        "Kontakt: Harzer Gleitschirmflieger\nUrl: https://www.dhv.de/gelaende/9427",
    ]


def test_weather_section_with_single_webcam(site, slope_start, identity_style):
    site = site.model_copy(update={"web_cam2": "https://cam2"})
    assert "Wetter\nWebCam 2: https://cam2" in sections(describe_location(site, slope_start, identity_style))


def test_winch_section(site, slope_start, identity_style):
    winch = slope_start.model_copy(update={
        "type": SiteLocationType.WhinchStart,
        "mobile_whinch": -1,
        "towing_length": 1000,
        "towing_whinch_height1": 300,
        "towing_whinch_height2": 500,
    })
    result = sections(describe_location(site, winch, identity_style))
    assert result[2] == "Winde\nMobile Abrollwinde\nSchlepplänge: 1000 m\nSchlepphöhe: 300 - 500 m"


def test_stationary_winch_without_towing_data(site, slope_start, identity_style):
    winch = slope_start.model_copy(update={"type": SiteLocationType.WhinchStart, "mobile_whinch": 0})
    assert "Winde\nStationäre Abrollwinde" in sections(describe_location(site, winch, identity_style))


def test_no_winch_section_for_other_categories(site, slope_start, identity_style):
    location = slope_start.model_copy(update={"mobile_whinch": -1, "towing_length": 1000})
    description = describe_location(site, location, identity_style)
    assert "Abrollwinde" not in description
    assert "Schlepplänge" not in description


def test_direction_without_known_abbreviation(site, slope_start, identity_style):
    location = slope_start.model_copy(update={"directions": "alle"})
    assert "Gelände\nRichtung: alle" in sections(describe_location(site, location, identity_style))


def test_style_wraps_exactly_the_section_headers(site, slope_start):
    calls = []

    def style(text, tag):
        calls.append((text, tag))
        return f"*{text}*"

    description = describe_location(site, slope_start, style)

    assert calls == [("Gelände", "bold"), ("Zugang", "bold"), ("Flugart", "bold"), ("Weiteres", "bold")]
    assert description.startswith("Startplatz - Hangstartgelände\n\n*Gelände*\n\n*Zugang*\n")


def test_default_style_is_bold_text(site, slope_start):
    description = describe_location(site, slope_start)
    assert decorate("Weiteres", "bold") in description
    assert "Weiteres" not in description
