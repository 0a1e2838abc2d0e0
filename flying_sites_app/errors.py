# errors.py


class SiteConversionError(Exception):
    """Base class for everything that aborts a conversion run"""


class ArgumentError(SiteConversionError):
    """Command line arguments are missing or invalid"""


class ParseError(SiteConversionError, ValueError):
    """Source XML could not be mapped to sites"""


class StructuralParseError(ParseError):
    """Expected FlyingSites / FlyingSite structure is missing or the XML is malformed"""


class FieldConversionError(ParseError):
    """A single field holds a value that cannot be converted"""


class UnknownLocationTypeError(FieldConversionError):
    """LocationType outside of the known categories"""
