"""Hebrew display strings for distances, walking times and crowding."""

# Operator crowding indicator (Omes) -> Hebrew label
LOAD_LEVELS = {
    1: "נמוך",
    2: "בינוני",
}
HIGH_LOAD = "גבוה"


def format_distance(distance_meters: int) -> str:
    """Examples: 450 -> "450 מטר", 1234 -> '1.2 ק"מ'."""
    if distance_meters >= 1000:
        return f'{distance_meters / 1000:.1f} ק"מ'
    return f"{distance_meters} מטר"


def format_walk_time(walk_minutes: int) -> str:
    """Examples: 12 -> "12 דקות הליכה", 75 -> "1 שעות ו-15 דקות הליכה"."""
    if walk_minutes >= 60:
        hours, minutes = divmod(walk_minutes, 60)
        return f"{hours} שעות ו-{minutes} דקות הליכה"
    return f"{walk_minutes} דקות הליכה"


def load_level(load: int | None) -> str | None:
    if load is None:
        return None
    return LOAD_LEVELS.get(load, HIGH_LOAD)
