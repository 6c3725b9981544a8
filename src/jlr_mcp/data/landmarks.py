"""Fallback gazetteer of well-known Jerusalem landmarks.

Only consulted when the geocoder fails or finds nothing. Order matters:
the first key matching a query wins.
"""

from jlr_mcp.models.geo import LandmarkCoordinate

KNOWN_LANDMARKS: tuple[LandmarkCoordinate, ...] = (
    LandmarkCoordinate("הכותל המערבי", 31.7767, 35.2345),
    LandmarkCoordinate("כותל", 31.7767, 35.2345),
    LandmarkCoordinate("הכותל", 31.7767, 35.2345),
    LandmarkCoordinate("הר הבית", 31.7781, 35.2356),
    LandmarkCoordinate("כיפת הסלע", 31.7781, 35.2356),
    LandmarkCoordinate("מחנה יהודה", 31.7846, 35.2124),
    LandmarkCoordinate("שוק מחנה יהודה", 31.7846, 35.2124),
    LandmarkCoordinate("העיר העתיקה", 31.7767, 35.2315),
    LandmarkCoordinate("הרובע היהודי", 31.7737, 35.2323),
    LandmarkCoordinate("יד ושם", 31.7743, 35.1751),
    LandmarkCoordinate("מוזיאון ישראל", 31.7716, 35.2041),
    LandmarkCoordinate("הכנסת", 31.7752, 35.2082),
    LandmarkCoordinate("קניון מלחה", 31.7518, 35.1879),
    LandmarkCoordinate("גן החיות התנכי", 31.7471, 35.1775),
    LandmarkCoordinate("ממילא", 31.7776, 35.2242),
    LandmarkCoordinate("מלון המלך דוד", 31.7762, 35.2259),
)
