"""Nutrient name normalization."""

import re

_UNIT_SUFFIX = re.compile(r"\s(?:\((?:g|mg|µg|μg)\)|(?:g|mg|µg|μg))$")
_WHITESPACE = re.compile(r"\s+")


def normalize_nutrient_name(name: str) -> str:
    """Lowercase, drop a trailing g/mg/µg unit and remove all whitespace."""
    lowered = name.lower()
    without_unit = _UNIT_SUFFIX.sub("", lowered)
    return _WHITESPACE.sub("", without_unit)
