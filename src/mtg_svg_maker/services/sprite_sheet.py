"""Sprite sheet layout and shared definitions."""

import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from lxml import etree

from mtg_svg_maker.constants import ART_WINDOW_MASK_ID, CARD_HEIGHT, CARD_WIDTH, SVG_NAMESPACE
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.domain.mana_cost import DROP_SHADOW_FILTER_ID, define_drop_shadow_filter
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layer_factory import DEFAULT_LAYOUT
from mtg_svg_maker.services import gradients
from mtg_svg_maker.svg import (
    CARD_CSS,
    define_art_window_mask,
    font_face_css,
    format_value,
    local_name,
    parse_document,
    sub_element,
    svg_tag,
)

# Top-level card children replaced by the sheet's shared definitions
EXCLUDED_ELEMENTS = frozenset({"defs", "style"})
EXCLUDED_PREFIXES = ("linearGradient", "radialGradient", "pattern")
# Definitions every card repeats, hoisted into the sheet defs
SHARED_FILTER_IDS = frozenset({DROP_SHADOW_FILTER_ID})


class SpriteSheetAssets:
    """Styles, mask, filters and gradients defined once for a whole sprite sheet."""

    def __init__(
        self,
        color_schemes: Optional[Iterable[ColorScheme]] = None,
        art_window: Optional[Mapping[str, Any]] = None,
        mask_id: str = ART_WINDOW_MASK_ID,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        self.color_schemes = list(color_schemes) if color_schemes else ColorScheme.all()
        self.art_window = art_window or DEFAULT_LAYOUT["art_layer"]
        self.mask_id = mask_id
        self.layer_config = layer_config or LayerConfig.default()

    def add_to(self, root: etree._Element) -> etree._Element:
        """Add one ``<defs>`` with all shared assets to ``root``."""
        defs = sub_element(root, "defs")
        sub_element(defs, "style", font_face_css() + CARD_CSS, type="text/css")
        define_art_window_mask(defs, self.mask_id, self.art_window)
        define_drop_shadow_filter(defs, self.layer_config)
        for scheme in self.color_schemes:
            gradients.define_standard_gradients(defs, scheme)
            if gradients.is_metallic(scheme):
                gradients.define_metallic_gradients(defs, scheme)
        return defs


class SpriteSheetBuilder:
    """
    Lays rendered cards out in a grid.

    Cards fill rows left to right; the sheet is as wide as the fullest row.
    """

    def __init__(self, cards_per_row: int = 5, spacing: int = 30) -> None:
        if cards_per_row < 1:
            raise ValueError("cards_per_row must be at least 1")
        self.cards_per_row = cards_per_row
        self.spacing = spacing

    def sprite_dimensions(self, card_count: int) -> tuple[int, int]:
        """Width and height of a sheet holding ``card_count`` cards."""
        if card_count <= 0:
            return (0, 0)

        cols = min(card_count, self.cards_per_row)
        rows = math.ceil(card_count / self.cards_per_row)
        width = (cols * CARD_WIDTH) + ((cols - 1) * self.spacing)
        height = (rows * CARD_HEIGHT) + ((rows - 1) * self.spacing)
        return (width, height)

    def card_position(self, index: int) -> tuple[int, int]:
        """Top-left corner of the card at ``index``."""
        row, col = divmod(index, self.cards_per_row)
        return (col * (CARD_WIDTH + self.spacing), row * (CARD_HEIGHT + self.spacing))

    def build(
        self,
        card_sources: list[Union[str, Path, bytes]],
        assets: Optional[SpriteSheetAssets] = None,
    ) -> etree._Element:
        """Assemble a sprite sheet document.

        Args:
            card_sources: Rendered card SVGs as file paths or bytes, in order
            assets: Shared definitions, every scheme when omitted

        Returns:
            Root ``<svg>`` element of the sheet
        """
        width, height = self.sprite_dimensions(len(card_sources))
        root = etree.Element(svg_tag("svg"), nsmap={None: SVG_NAMESPACE})
        root.set("viewBox", f"0 0 {width} {height}")
        root.set("width", str(width))
        root.set("height", str(height))

        (assets or SpriteSheetAssets()).add_to(root)
        for index, source in enumerate(card_sources):
            self._add_card(root, parse_document(source), index)
        return root

    def write(self, root: etree._Element, output_file: Union[str, Path]) -> Path:
        path = Path(output_file)
        path.write_bytes(
            etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)
        )
        return path

    def _add_card(self, root: etree._Element, card_svg: etree._Element, index: int) -> None:
        if local_name(card_svg) != "svg":
            return

        x, y = self.card_position(index)
        group = sub_element(root, "g", transform=f"translate({format_value(x)}, {format_value(y)})")
        for child in list(card_svg):
            if not isinstance(child.tag, str):
                continue
            name = local_name(child)
            if name in EXCLUDED_ELEMENTS or name.startswith(EXCLUDED_PREFIXES):
                continue
            _remove_shared_filters(child)
            group.append(child)


def _remove_shared_filters(element: etree._Element) -> None:
    for filter_element in list(element.iter(svg_tag("filter"))):
        if filter_element.get("id") not in SHARED_FILTER_IDS:
            continue
        defs = filter_element.getparent()
        defs.remove(filter_element)
        if local_name(defs) == "defs" and len(defs) == 0:
            defs.getparent().remove(defs)
