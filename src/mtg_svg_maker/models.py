"""Data model for card records."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mtg_svg_maker.domain.color_scheme import ColorScheme


class Card(BaseModel):
    """A card as read from the command line or a YAML card file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1)
    type_line: str
    rules_text: str
    mana_cost: Optional[str] = None
    flavor_text: Optional[str] = None
    power: Optional[str] = None
    toughness: Optional[str] = None
    border_color: Optional[str] = None
    color: Optional[str] = None
    art: Optional[str] = None

    @field_validator(
        "name", "type_line", "rules_text", "power", "toughness", "mana_cost", mode="before"
    )
    @classmethod
    def coerce_to_string(cls, v: Any) -> Optional[str]:
        """Accept numbers (YAML reads ``2`` as an int) for text fields."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            raise ValueError("Expected text or a number")
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @property
    def color_scheme(self) -> ColorScheme:
        return ColorScheme.resolve(self.color)

    def to_dict(self) -> dict[str, Any]:
        """Convert the card to a dictionary, leaving out unset fields."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """Create a card from a dictionary; unknown keys are ignored."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        result = self.name
        if self.mana_cost:
            result += f" - {self.mana_cost}"
        result += f"\n{self.type_line}"
        if self.power is not None and self.toughness is not None:
            result += f" {self.power}/{self.toughness}"
        return result
