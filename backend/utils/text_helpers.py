import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase a name and collapse every non-alphanumeric run into a hyphen.

    "University of Toronto" -> "university-of-toronto"
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


def strip_qualifier(value: str) -> str:
    """Drop a trailing parenthetical note, e.g. "40,000 (approx)" -> "40,000"."""
    return value.split("(", 1)[0].strip()
