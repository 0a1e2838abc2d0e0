# config.py
import logging


class DefaultConfig:
    """Settings for the flying site GPX export"""

    GPX_CREATOR = "flying-sites-gpx"
    ENCODING = "utf-8"
    LOG_LEVEL = logging.INFO
    HEADER_STYLE = "bold"
