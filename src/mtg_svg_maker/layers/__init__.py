"""Card layers, listed in rendering order."""

from mtg_svg_maker.layers.art import ArtLayer
from mtg_svg_maker.layers.base import BaseLayer
from mtg_svg_maker.layers.border import BorderLayer
from mtg_svg_maker.layers.frame import FrameLayer
from mtg_svg_maker.layers.name import NameLayer
from mtg_svg_maker.layers.power import PowerLayer
from mtg_svg_maker.layers.text_box import TextBoxLayer
from mtg_svg_maker.layers.type_line import TypeLineLayer

__all__ = [
    "BaseLayer",
    "BorderLayer",
    "FrameLayer",
    "NameLayer",
    "ArtLayer",
    "TypeLineLayer",
    "TextBoxLayer",
    "PowerLayer",
]
