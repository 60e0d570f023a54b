"""Value objects describing card colors, geometry and costs."""

from mtg_svg_maker.domain.color_palette import FRAME_STROKE_COLOR, ColorPalette
from mtg_svg_maker.domain.color_scheme import ColorScheme, SchemeName
from mtg_svg_maker.domain.dimensions import Dimensions

__all__ = [
    "ColorPalette",
    "ColorScheme",
    "Dimensions",
    "FRAME_STROKE_COLOR",
    "SchemeName",
]
