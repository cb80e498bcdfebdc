"""Well-known ports, handy for demos, fixtures and tests."""

from .entities.location import Location

HONGKONG = Location.create("CNHKG", "Hongkong")
MELBOURNE = Location.create("AUMEL", "Melbourne")
STOCKHOLM = Location.create("SESTO", "Stockholm")
HELSINKI = Location.create("FIHEL", "Helsinki")
CHICAGO = Location.create("USCHI", "Chicago")
TOKYO = Location.create("JNTKO", "Tokyo")
HAMBURG = Location.create("DEHAM", "Hamburg")
SHANGHAI = Location.create("CNSHA", "Shanghai")
ROTTERDAM = Location.create("NLRTM", "Rotterdam")
GOTHENBURG = Location.create("SEGOT", "Göteborg")
HANGZHOU = Location.create("CNHGH", "Hangzhou")
NEWYORK = Location.create("USNYC", "New York")
DALLAS = Location.create("USDAL", "Dallas")

ALL_LOCATIONS: dict[str, Location] = {
    str(location.unlocode): location
    for location in (
        HONGKONG,
        MELBOURNE,
        STOCKHOLM,
        HELSINKI,
        CHICAGO,
        TOKYO,
        HAMBURG,
        SHANGHAI,
        ROTTERDAM,
        GOTHENBURG,
        HANGZHOU,
        NEWYORK,
        DALLAS,
    )
}


def lookup(unlocode: str) -> Location | None:
    """Find a sample location by its UN/LOCODE, case-insensitively."""
    return ALL_LOCATIONS.get(unlocode.upper())
