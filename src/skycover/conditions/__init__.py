"""Sky condition models and codecs."""

from skycover.conditions.codec import (
    COVERAGE_CODES,
    decode,
    encode,
    is_ceiling,
    lowest_ceiling,
)
from skycover.conditions.models import (
    Broken,
    CeilingType,
    Clear,
    CloudLayer,
    Condition,
    Few,
    Indefinite,
    NoSignificantClouds,
    Overcast,
    Scattered,
    SkyClear,
    SkyCondition,
)
from skycover.conditions.token import (
    format_layers,
    format_token,
    parse_layers,
    parse_token,
)

__all__ = [
    "CeilingType",
    "SkyCondition",
    "CloudLayer",
    "Condition",
    "Clear",
    "SkyClear",
    "NoSignificantClouds",
    "Few",
    "Scattered",
    "Broken",
    "Overcast",
    "Indefinite",
    "COVERAGE_CODES",
    "decode",
    "encode",
    "is_ceiling",
    "lowest_ceiling",
    "parse_token",
    "format_token",
    "parse_layers",
    "format_layers",
]
