"""Conversion between sky condition records and condition values.

A record is the keyed form a report tokenizer produces for one sky
condition group: ``coverage`` (always), ``height`` (cloud layers and
vertical visibility) and ``type`` (only when vertical development was
reported). ``decode`` and ``encode`` are exact inverses of each other.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

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
from skycover.core.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)


def _read_height(record: Mapping[str, Any]) -> int:
    height = record.get("height")
    if height is None:
        raise InvalidFormatError(
            f"Missing height for {record['coverage']}", field="height", value=None
        )
    # bool is an int subclass but never a valid height
    if isinstance(height, bool) or not isinstance(height, int) or height < 0:
        raise InvalidFormatError(
            "Height must be a non-negative integer", field="height", value=height
        )
    return height


def _read_type(record: Mapping[str, Any]) -> CeilingType | None:
    code = record.get("type")
    if code is None:
        return None
    return CeilingType.from_code(code)


def _build(cls: type[SkyCondition], **fields: Any) -> Condition:
    try:
        return cls(**fields)
    except ValidationError as e:
        raise InvalidFormatError(
            f"Invalid {cls.coverage} condition", field="record", value=fields
        ) from e


def _decode_clear(cls: type[SkyCondition], record: Mapping[str, Any]) -> Condition:
    return _build(cls)


def _decode_layer(cls: type[SkyCondition], record: Mapping[str, Any]) -> Condition:
    return _build(cls, height=_read_height(record), type=_read_type(record))


def _decode_indefinite(
    cls: type[SkyCondition], record: Mapping[str, Any]
) -> Condition:
    return _build(cls, ceiling=_read_height(record))


_Reader = Callable[[type[SkyCondition], Mapping[str, Any]], Condition]

_DECODERS: dict[str, tuple[type[SkyCondition], _Reader]] = {
    Clear.coverage: (Clear, _decode_clear),
    SkyClear.coverage: (SkyClear, _decode_clear),
    NoSignificantClouds.coverage: (NoSignificantClouds, _decode_clear),
    Few.coverage: (Few, _decode_layer),
    Scattered.coverage: (Scattered, _decode_layer),
    Broken.coverage: (Broken, _decode_layer),
    Overcast.coverage: (Overcast, _decode_layer),
    Indefinite.coverage: (Indefinite, _decode_indefinite),
}

COVERAGE_CODES: frozenset[str] = frozenset(_DECODERS)


def decode(record: Mapping[str, Any]) -> Condition:
    """Decode a keyed sky condition record.

    Args:
        record: Mapping with ``coverage`` and, depending on the coverage
            code, ``height`` and ``type``

    Returns:
        The matching condition value

    Raises:
        InvalidFormatError: If the coverage code is unknown, a required
            height is missing or invalid, or the type code is unknown
    """
    coverage = record.get("coverage")
    try:
        if not isinstance(coverage, str):
            raise InvalidFormatError(
                "Coverage code must be a string", field="coverage", value=coverage
            )
        if coverage not in _DECODERS:
            raise InvalidFormatError(
                "Unrecognized coverage code", field="coverage", value=coverage
            )
        cls, reader = _DECODERS[coverage]
        return reader(cls, record)
    except InvalidFormatError as e:
        logger.debug(f"Rejected sky condition record {dict(record)!r}: {e}")
        raise


def encode(condition: Condition) -> dict[str, Any]:
    """Encode a condition value as a keyed record.

    The record holds ``coverage``, then ``height`` for cloud layers and
    vertical visibility, then ``type`` only when a layer carries one.

    Raises:
        TypeError: If the value is not a sky condition
    """
    if not isinstance(condition, SkyCondition):
        raise TypeError(f"Expected a sky condition, got {type(condition).__name__}")

    record: dict[str, Any] = {"coverage": condition.coverage}
    if isinstance(condition, CloudLayer):
        record["height"] = condition.height
        if condition.type is not None:
            record["type"] = condition.type.code
    elif isinstance(condition, Indefinite):
        record["height"] = condition.ceiling
    return record


def is_ceiling(condition: Condition) -> bool:
    """Whether the condition constitutes a ceiling (BKN, OVC or VV)."""
    return isinstance(condition, (Broken, Overcast, Indefinite))


def lowest_ceiling(conditions: Iterable[Condition]) -> int | None:
    """Get the lowest ceiling in feet AGL.

    Args:
        conditions: Reported sky conditions, in any order

    Returns:
        Lowest broken/overcast base or vertical visibility, or None if no
        layer forms a ceiling
    """
    heights = [
        c.ceiling if isinstance(c, Indefinite) else c.height
        for c in conditions
        if is_ceiling(c)
    ]
    return min(heights, default=None)
