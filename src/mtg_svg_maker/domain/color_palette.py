"""Five-color interface palette derived from a color scheme."""

from dataclasses import asdict, dataclass
from typing import Optional

from .color_scheme import ColorScheme

# Stroke drawn around name, type and power boxes
FRAME_STROKE_COLOR = "#111"


@dataclass(frozen=True)
class ColorPalette:
    """
    Immutable value object grouping the non-text interface colors.

    Two palettes are equal when all five colors match.
    """

    primary_color: str
    background_color: str
    border_color: str
    frame_stroke_color: str = FRAME_STROKE_COLOR
    accent_color: Optional[str] = None

    def __post_init__(self):
        """Default the accent to the primary color."""
        if self.accent_color is None:
            object.__setattr__(self, "accent_color", self.primary_color)

    @classmethod
    def from_color_scheme(cls, color_scheme: ColorScheme) -> "ColorPalette":
        """Create a palette from a color scheme's solid colors."""
        return cls(
            primary_color=color_scheme.primary_color,
            background_color=color_scheme.background_color,
            border_color=color_scheme.border_color,
            accent_color=color_scheme.primary_color,
        )

    @classmethod
    def default(cls, color_scheme: Optional[ColorScheme] = None) -> "ColorPalette":
        """Palette for ``color_scheme``, the colorless scheme when omitted."""
        return cls.from_color_scheme(color_scheme or ColorScheme.resolve())

    @classmethod
    def dark(cls) -> "ColorPalette":
        return cls(
            primary_color="#2A2A2A",
            background_color="#1A1A1A",
            border_color="#4A4A4A",
            frame_stroke_color="#333",
            accent_color="#6B6B6B",
        )

    @classmethod
    def light(cls) -> "ColorPalette":
        return cls(
            primary_color="#E8E8E8",
            background_color="#F5F5F5",
            border_color="#D4D4D4",
            frame_stroke_color="#666",
            accent_color="#8B8B8B",
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def to_tuple(self) -> tuple[str, ...]:
        return (
            self.primary_color,
            self.background_color,
            self.border_color,
            self.frame_stroke_color,
            self.accent_color,
        )
