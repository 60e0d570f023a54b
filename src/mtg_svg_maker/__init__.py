"""MTG SVG Maker: layered SVG card rendering."""

__version__ = "0.1.0"

from mtg_svg_maker.core import CardGenerator
from mtg_svg_maker.domain.color_scheme import ColorScheme, SchemeName
from mtg_svg_maker.domain.mana_cost import ManaCost
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.models import Card

__all__ = ["CardGenerator", "Card", "ColorScheme", "LayerConfig", "ManaCost", "SchemeName"]
