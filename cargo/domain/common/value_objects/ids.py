import re
from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError

# Two-letter country code followed by three letters or digits 2-9.
_UNLOCODE_PATTERN = re.compile(r"^[A-Z]{2}[A-Z2-9]{3}$")


@dataclass(frozen=True)
class VoyageNumber(EntityId):
    """Strongly-typed voyage identifier, e.g. "0101" or "V100"."""

    value: str


@dataclass(frozen=True)
class UnLocode(EntityId):
    """
    United Nations location code.

    http://www.unece.org/cefact/locode/
    """

    value: str

    def __post_init__(self) -> None:
        super().__post_init__()
        normalized = self.value.upper()
        if not _UNLOCODE_PATTERN.match(normalized):
            raise ValidationError("Invalid UN/LOCODE", field="unlocode", value=self.value)
        # Frozen dataclass: bypass __setattr__ to store the canonical form
        object.__setattr__(self, "value", normalized)
