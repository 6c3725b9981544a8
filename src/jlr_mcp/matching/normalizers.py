import unicodedata
from functools import lru_cache

# Names of the service city in both scripts, already folded
LOCALITY_NAMES = ("ירושלים", "jerusalem")


@lru_cache(maxsize=4096)
def fold_text(text: str) -> str:
    """Fold text for comparison.

    - Normalizes to NFC so composed and decomposed forms compare equal
    - Case-folds (Hebrew is caseless, embedded Latin is not)
    - Trims surrounding whitespace

    Example: "  Mahane YEHUDA " -> "mahane yehuda"
    """
    return unicodedata.normalize("NFC", text).casefold().strip()


def mentions_locality(text: str) -> bool:
    """Check whether text names the service city in Hebrew or Latin script.

    Example: "שוק מחנה יהודה, ירושלים" -> True
    Example: "Jaffa Gate, Jerusalem" -> True
    Example: "Tel Aviv" -> False
    """
    folded = fold_text(text)
    return any(name in folded for name in LOCALITY_NAMES)


@lru_cache(maxsize=4096)
def fold_case(text: str) -> str:
    """Case-fold only, keeping whitespace and code points as given.

    Example: " Har HERZL" -> " har herzl"
    """
    return text.casefold()
