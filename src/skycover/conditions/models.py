"""Sky condition data models."""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from skycover.core.exceptions import InvalidFormatError


class CeilingType(str, Enum):
    """Vertical development reported on a cloud layer."""

    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"

    @property
    def code(self) -> str:
        """Report code for this type."""
        return self.value

    @property
    def description(self) -> str:
        return _CEILING_TYPE_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "CeilingType":
        """Look up a ceiling type by its report code.

        Raises:
            InvalidFormatError: If the code is not CB or TCU
        """
        try:
            return cls(code)
        except ValueError as e:
            raise InvalidFormatError(
                "Unrecognized ceiling type code", field="type", value=code
            ) from e


_CEILING_TYPE_NAMES = {
    CeilingType.CUMULONIMBUS: "Cumulonimbus",
    CeilingType.TOWERING_CUMULUS: "Towering Cumulus",
}


class SkyCondition(BaseModel):
    """Base for all sky condition variants."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    coverage: ClassVar[str]
    label: ClassVar[str]

    @property
    def description(self) -> str:
        """Human-readable description of the condition."""
        return self.label

    def __str__(self) -> str:
        return self.description


class Clear(SkyCondition):
    """Sky clear below 12,000 ft (USA) or 25,000 ft (Canada).

    Typically reported by automated ceilometers.
    """

    coverage: ClassVar[str] = "CLR"
    label: ClassVar[str] = "Clear"


class SkyClear(SkyCondition):
    """Sky clear, typically reported by human observers."""

    coverage: ClassVar[str] = "SKC"
    label: ClassVar[str] = "Sky clear"


class NoSignificantClouds(SkyCondition):
    """No significant clouds below 5,000 ft and no TCU or CB."""

    coverage: ClassVar[str] = "NSC"
    label: ClassVar[str] = "No significant clouds"


class CloudLayer(SkyCondition):
    """A cloud layer with a base height and optional vertical development."""

    height: int = Field(ge=0, description="Cloud base in feet AGL")
    type: CeilingType | None = Field(
        default=None, description="Vertical development, if any"
    )

    @property
    def description(self) -> str:
        text = f"{self.label} at {self.height} ft"
        if self.type is not None:
            text = f"{text} ({self.type.description})"
        return text


class Few(CloudLayer):
    """Cloud coverage between 1 and 2 oktas."""

    coverage: ClassVar[str] = "FEW"
    label: ClassVar[str] = "Few"


class Scattered(CloudLayer):
    """Cloud coverage between 3 and 4 oktas."""

    coverage: ClassVar[str] = "SCT"
    label: ClassVar[str] = "Scattered"


class Broken(CloudLayer):
    """Cloud coverage between 5 and 7 oktas."""

    coverage: ClassVar[str] = "BKN"
    label: ClassVar[str] = "Broken"


class Overcast(CloudLayer):
    """Cloud coverage of 8 oktas."""

    coverage: ClassVar[str] = "OVC"
    label: ClassVar[str] = "Overcast"


class Indefinite(SkyCondition):
    """Sky obscured; the top of the obscuring layer is reported instead."""

    coverage: ClassVar[str] = "VV"
    label: ClassVar[str] = "Vertical visibility"

    ceiling: int = Field(ge=0, description="Top of the obscuration in feet AGL")

    @property
    def description(self) -> str:
        return f"{self.label} {self.ceiling} ft"


Condition = (
    Clear
    | SkyClear
    | NoSignificantClouds
    | Few
    | Scattered
    | Broken
    | Overcast
    | Indefinite
)
