"""Route number extraction from free-form route labels."""

import re
from typing import NamedTuple

# Digits followed by exactly one letter, e.g. "7Т" but not "1Мая"
_NUMBER_LITERAL_RE = re.compile(r"[0-9]+[^\W\d_](?![^\W\d_])")
_NUMBER_RE = re.compile(r"[0-9]+")


class RouteIdentifier(NamedTuple):
    """Parts of a route label."""

    number: int
    literal_suffix: str
    cleaned_name: str


def extract_identifier(label: str) -> RouteIdentifier:
    """Split a route label into number, letter suffix and display name.

    A number with a letter suffix wins over a plain digit run, so
    ``"7т, Н.Крым - Центральный рынок"`` gives ``(7, "Т", "Н.Крым - ...")``.
    Labels without digits get number 0.

    Args:
        label: Route label with the category name already removed

    Returns:
        RouteIdentifier with the number, the uppercased suffix (or "") and the
        label with its leading ``"<number>, "`` removed
    """
    match = _NUMBER_LITERAL_RE.search(label)
    if match:
        token = match.group()
        number = int(token[:-1])
        literal_suffix = token[-1].upper()
    else:
        match = _NUMBER_RE.search(label)
        if not match:
            return RouteIdentifier(0, "", label)
        token = match.group()
        number = int(token)
        literal_suffix = ""

    cleaned_name = label.replace(f"{token}, ", "", 1)
    return RouteIdentifier(number, literal_suffix, cleaned_name)
