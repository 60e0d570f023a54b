"""Predefined color schemes for card frames, text boxes and borders."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class SchemeName(str, Enum):
    """Enumeration of the available color schemes."""

    COLORLESS = "colorless"
    WHITE = "white"
    BLUE = "blue"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    GOLD = "gold"
    ARTIFACT = "artifact"

    def __str__(self) -> str:
        return self.value


# Three-stop gradients run outer to inner (frame) or light to dark (name/description)
SCHEMES: dict[SchemeName, dict] = {
    SchemeName.COLORLESS: {
        "frame_gradient": ("#8B8B8B", "#6B6B6B", "#4A4A4A"),
        "name_gradient": ("#F5F5F5", "#E8E8E8", "#D4D4D4"),
        "description_gradient": ("#F5F5F5", "#E8E8E8", "#D4D4D4"),
        "card_gradient": ("#3D3D3D", "#111", "#1A1A1A"),
        "primary_color": "#8B8B8B",
        "background_color": "#E8E8E8",
        "border_color": "#8B8B8B",
        "text_color": "#111",
        "metallic_highlight": ("#FFFFFF", "#E0E0E0", "#8B8B8B"),
        "metallic_shadow": ("#B0B0B0", "#8B8B8B", "#6B6B6B"),
        "metallic_pattern": ("#F5F5F5", "#B0B0B0"),
    },
    SchemeName.WHITE: {
        "frame_gradient": ("#FFF9C4", "#F5F5F5", "#BDB76B"),
        "name_gradient": ("#FFFFFF", "#FFF9C4", "#E0E0E0"),
        "description_gradient": ("#FFFFFF", "#F5F5F5", "#E0E0E0"),
        "card_gradient": ("#D7CCC8", "#BCAAA4", "#8D6E63"),
        "primary_color": "#8B8B8B",
        "background_color": "#FFFFFF",
        "border_color": "#F5F5F5",
        "text_color": "#111",
    },
    SchemeName.BLUE: {
        "frame_gradient": ("#42A5F5", "#1565C0", "#263238"),
        "name_gradient": ("#E3F2FD", "#BBDEFB", "#90CAF9"),
        "description_gradient": ("#F3F8FF", "#E3F2FD", "#BBDEFB"),
        "card_gradient": ("#546E7A", "#37474F", "#263238"),
        "primary_color": "#42A5F5",
        "background_color": "#E3F2FD",
        "border_color": "#1565C0",
        "text_color": "#111",
    },
    SchemeName.BLACK: {
        "frame_gradient": ("#424242", "#212121", "#000"),
        "name_gradient": ("#E0E0E0", "#BDBDBD", "#9E9E9E"),
        "description_gradient": ("#F5F5F5", "#E0E0E0", "#BDBDBD"),
        "card_gradient": ("#424242", "#212121", "#000"),
        "primary_color": "#424242",
        "background_color": "#E0E0E0",
        "border_color": "#212121",
        "text_color": "#111",
    },
    SchemeName.RED: {
        "frame_gradient": ("#F44336", "#D32F2F", "#B71C1C"),
        "name_gradient": ("#FFEBEE", "#FFCDD2", "#EF9A9A"),
        "description_gradient": ("#FFEBEE", "#FFCDD2", "#EF9A9A"),
        "card_gradient": ("#8D6E63", "#6D4C41", "#4E342E"),
        "primary_color": "#F44336",
        "background_color": "#FFEBEE",
        "border_color": "#D32F2F",
        "text_color": "#111",
    },
    SchemeName.GREEN: {
        "frame_gradient": ("#4CAF50", "#388E3C", "#2E7D32"),
        "name_gradient": ("#E8F5E8", "#C8E6C9", "#A5D6A7"),
        "description_gradient": ("#F1F8E9", "#E8F5E8", "#C8E6C9"),
        "card_gradient": ("#6D4C41", "#5D4037", "#4E342E"),
        "primary_color": "#4CAF50",
        "background_color": "#E8F5E8",
        "border_color": "#388E3C",
        "text_color": "#111",
    },
    SchemeName.GOLD: {
        "frame_gradient": ("#FFD700", "#FFA500", "#FF8C00"),
        "name_gradient": ("#F5DEB3", "#E1C16E", "#C9A13B"),
        "description_gradient": ("#FFF8DC", "#FFE4B5", "#FFDAB9"),
        "card_gradient": ("#8B7355", "#6B4423", "#4A2C0A"),
        "primary_color": "#FFD700",
        "background_color": "#FFF8DC",
        "border_color": "#FFA500",
        "text_color": "#111",
        "metallic_highlight": ("#FFFF99", "#FFD700", "#FFA500"),
        "metallic_shadow": ("#B8860B", "#8B6914", "#654321"),
        "metallic_pattern": ("#FFFACD", "#DAA520"),
    },
    SchemeName.ARTIFACT: {
        "frame_gradient": ("#D2B48C", "#BC8F8F", "#A0522D"),
        "name_gradient": ("#F5F5DC", "#DEB887", "#CD853F"),
        "description_gradient": ("#F5F5DC", "#DEB887", "#CD853F"),
        "card_gradient": ("#8B7355", "#6B4423", "#4A2C0A"),
        "primary_color": "#D2B48C",
        "background_color": "#F5F5DC",
        "border_color": "#BC8F8F",
        "text_color": "#111",
    },
}


@dataclass(frozen=True)
class ColorScheme:
    """
    Immutable set of colors and gradients themed to one card color.

    Schemes are looked up by name with :meth:`resolve`; names outside
    :class:`SchemeName` fall back to the colorless scheme. The metallic
    fields are only populated for the gold and colorless schemes and are
    ``None`` everywhere else.
    """

    name: SchemeName
    frame_gradient: tuple[str, str, str]
    name_gradient: tuple[str, str, str]
    description_gradient: tuple[str, str, str]
    card_gradient: tuple[str, str, str]
    primary_color: str
    background_color: str
    border_color: str
    text_color: str
    metallic_highlight: Optional[tuple[str, str, str]] = None
    metallic_shadow: Optional[tuple[str, str, str]] = None
    metallic_pattern: Optional[tuple[str, str]] = None

    @classmethod
    def resolve(cls, name: Union[SchemeName, str, None] = None) -> "ColorScheme":
        """Look up a scheme by name.

        Args:
            name: Scheme name, case-insensitive; ``None`` means colorless

        Returns:
            The matching scheme, or the colorless scheme for unknown names
        """
        scheme_name = cls.normalize_name(name)
        return cls(name=scheme_name, **SCHEMES[scheme_name])

    @staticmethod
    def normalize_name(name: Union[SchemeName, str, None]) -> SchemeName:
        """Map any name onto a known :class:`SchemeName`, defaulting to colorless."""
        if isinstance(name, SchemeName):
            return name
        if name is None:
            return SchemeName.COLORLESS
        try:
            return SchemeName(str(name).strip().lower())
        except ValueError:
            return SchemeName.COLORLESS

    @classmethod
    def all(cls) -> list["ColorScheme"]:
        """Return every predefined scheme in declaration order."""
        return [cls.resolve(name) for name in SchemeName]

    @property
    def scheme_name(self) -> str:
        return self.name.value

    @property
    def has_metallic_colors(self) -> bool:
        return self.metallic_highlight is not None

    @property
    def frame_gradient_start(self) -> str:
        return self.frame_gradient[0]

    @property
    def frame_gradient_end(self) -> str:
        return self.frame_gradient[2]

    @property
    def metallic_pattern_light(self) -> Optional[str]:
        return self.metallic_pattern[0] if self.metallic_pattern else None

    @property
    def metallic_pattern_dark(self) -> Optional[str]:
        return self.metallic_pattern[1] if self.metallic_pattern else None
