"""Known coordinates of the Jerusalem light rail stations.

Names follow the operator's display names, so the nearest station found here
can be mapped back to an operator station id.
"""

from jlr_mcp.models.geo import StationCoordinate

STATION_COORDINATES: tuple[StationCoordinate, ...] = (
    StationCoordinate("העיר העתיקה - שער שכם", 31.7839, 35.2332),
    StationCoordinate("העיר העתיקה - שער יפו", 31.777, 35.2275),
    StationCoordinate("הדוידקה", 31.7821, 35.2225),
    StationCoordinate("ככר ספרא", 31.779, 35.223),
    StationCoordinate("שוק מחנה יהודה", 31.7849, 35.2124),
    StationCoordinate("מחנה יהודה", 31.7863, 35.206),
    StationCoordinate("מרכז העיר", 31.7825, 35.2178),
    StationCoordinate("הר הרצל", 31.7712, 35.1797),
    StationCoordinate("יפו מרכז", 31.7841, 35.2098),
    StationCoordinate("גבעת רם", 31.7735, 35.1986),
    StationCoordinate("בי''ח הדסה עין כרם", 31.7662, 35.1597),
    StationCoordinate("הר נוף", 31.7874, 35.1868),
    StationCoordinate("גבעת שאול", 31.7918, 35.1934),
    StationCoordinate("כיכר דניה", 31.7951, 35.2013),
    StationCoordinate("מרכז", 31.7756, 35.2173),
    StationCoordinate("תחנה מרכזית", 31.7884, 35.2032),
    StationCoordinate("שמעון הצדיק", 31.7931, 35.2291),
    StationCoordinate("שד' אשכול/בר לב", 31.7983, 35.2343),
    StationCoordinate("מעלות דפנה", 31.8012, 35.2303),
    StationCoordinate("גבעת המבתר", 31.8051, 35.2361),
    StationCoordinate("סיירת דוכיפת", 31.8091, 35.2394),
    StationCoordinate("פסגת זאב מרכז", 31.8161, 35.2402),
    StationCoordinate("פסגת זאב מזרח", 31.8222, 35.2414),
    StationCoordinate("נווה יעקב", 31.8287, 35.2404),
    StationCoordinate("נווה יעקב צפון", 31.8311, 35.2363),
    StationCoordinate("קניון מלחה", 31.7518, 35.1879),
    StationCoordinate("גן החיות", 31.7471, 35.1775),
)
