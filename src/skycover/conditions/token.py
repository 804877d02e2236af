"""Report token form of sky conditions (e.g. ``BKN025CB``, ``VV002``, ``SKC``).

Token heights are counted in units of ``height_scale`` feet (hundreds of
feet by default) and always written with three digits.
"""

from collections.abc import Iterable

from skycover.conditions.codec import decode, encode
from skycover.conditions.models import (
    Clear,
    Condition,
    Indefinite,
    NoSignificantClouds,
    SkyClear,
)
from skycover.core.config import DEFAULT_CONFIG, SkycoverConfig
from skycover.core.exceptions import InvalidFormatError
from skycover.core.text import range_substring, split_on_separators

HEIGHT_DIGITS = 3

_CLEAR_CODES = frozenset(
    {Clear.coverage, SkyClear.coverage, NoSignificantClouds.coverage}
)


def parse_token(token: str, config: SkycoverConfig | None = None) -> Condition:
    """Parse a single sky condition token.

    Args:
        token: Token text, e.g. ``"FEW015"``, ``"OVC008TCU"`` or ``"CLR"``
        config: Settings to use (default: DEFAULT_CONFIG)

    Returns:
        The decoded condition

    Raises:
        InvalidFormatError: If the token does not follow the grammar
    """
    config = config or DEFAULT_CONFIG
    if token in _CLEAR_CODES:
        return decode({"coverage": token})

    code_length = 3
    if token.startswith(Indefinite.coverage):
        code_length = len(Indefinite.coverage)
    if len(token) < code_length + HEIGHT_DIGITS:
        raise InvalidFormatError(
            "Unrecognized sky condition token", field="token", value=token
        )

    coverage = range_substring(token, 0, code_length)
    digits = range_substring(token, code_length, HEIGHT_DIGITS)
    suffix = token[code_length + HEIGHT_DIGITS:]

    if coverage in _CLEAR_CODES:
        raise InvalidFormatError(
            f"{coverage} does not take a height", field="token", value=token
        )
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidFormatError(
            "Height must be three digits", field="height", value=digits
        )
    if suffix and coverage == Indefinite.coverage:
        raise InvalidFormatError(
            "Vertical visibility does not take a type", field="type", value=suffix
        )

    record: dict[str, object] = {
        "coverage": coverage,
        "height": int(digits) * config.height_scale,
    }
    if suffix:
        record["type"] = suffix
    return decode(record)


def format_token(condition: Condition, config: SkycoverConfig | None = None) -> str:
    """Format a condition as a report token.

    Heights are truncated to whole ``height_scale`` units.

    Raises:
        InvalidFormatError: If the height needs more than three digits
    """
    config = config or DEFAULT_CONFIG
    record = encode(condition)
    token = record["coverage"]

    if "height" in record:
        units = record["height"] // config.height_scale
        if units >= 10**HEIGHT_DIGITS:
            raise InvalidFormatError(
                "Height too large for a report token",
                field="height",
                value=record["height"],
            )
        token += f"{units:0{HEIGHT_DIGITS}d}"

    return token + record.get("type", "")


def parse_layers(group: str, config: SkycoverConfig | None = None) -> list[Condition]:
    """Parse a sky condition group holding one or more layers.

    Example: ``"FEW015 BKN025CB OVC100"`` gives three conditions.
    """
    config = config or DEFAULT_CONFIG
    return [
        parse_token(piece, config)
        for piece in split_on_separators(group, config.separators)
        if piece
    ]


def format_layers(
    conditions: Iterable[Condition], config: SkycoverConfig | None = None
) -> str:
    """Format conditions as a sky condition group."""
    config = config or DEFAULT_CONFIG
    return config.separators[0].join(format_token(c, config) for c in conditions)
