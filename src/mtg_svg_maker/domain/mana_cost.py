"""Mana cost parsing and rendering."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lxml import etree

from mtg_svg_maker.constants import SVG_NAMESPACE
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.services.icon_service import IconService
from mtg_svg_maker.svg import format_value, parse_fragment, sub_element, svg_tag, url


class ManaColor(str, Enum):
    """Enumeration of mana colors."""

    WHITE = "white"
    BLUE = "blue"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    COLORLESS = "colorless"

    def __str__(self) -> str:
        return self.value


class ManaOrigin(str, Enum):
    """Where a mana element came from in the cost string."""

    NUMERIC = "numeric"  # leading generic number or X
    SYMBOL = "symbol"  # explicit C
    COLOR = "color"


# Letters accepted for each color; anything else is ignored
COLOR_MAP: dict[str, ManaColor] = {
    "B": ManaColor.BLACK,
    "S": ManaColor.BLACK,
    "U": ManaColor.BLUE,
    "I": ManaColor.BLUE,
    "G": ManaColor.GREEN,
    "F": ManaColor.GREEN,
    "W": ManaColor.WHITE,
    "P": ManaColor.WHITE,
    "R": ManaColor.RED,
    "M": ManaColor.RED,
    "C": ManaColor.COLORLESS,
}

CIRCLE_FILLS: dict[ManaColor, str] = {
    ManaColor.WHITE: "#FFF9C4",
    ManaColor.BLUE: "#90CAF9",
    ManaColor.BLACK: "#BDBDBD",
    ManaColor.RED: "#EF9A9A",
    ManaColor.GREEN: "#A5D6A7",
}
DEFAULT_CIRCLE_FILL = "#DDD"

DROP_SHADOW_FILTER_ID = "mana-cost-drop-shadow"

# Generic values from this number up are shown as X
VARIABLE_THRESHOLD = 10

_LEADING_DIGITS = re.compile(r"^(\d+)")


def define_drop_shadow_filter(defs: etree._Element, layer_config: LayerConfig) -> etree._Element:
    """Append the mana circle drop-shadow ``<filter>`` to ``defs``."""
    shadow = layer_config.drop_shadow_config
    filter_element = sub_element(
        defs,
        "filter",
        id=DROP_SHADOW_FILTER_ID,
        x="-50%",
        y="-50%",
        width="200%",
        height="200%",
    )
    sub_element(
        filter_element,
        "feDropShadow",
        dx=shadow["dx"],
        dy=shadow["dy"],
        stdDeviation=shadow["std_deviation"],
        flood_color="black",
        flood_opacity=shadow["flood_opacity"],
    )
    return filter_element


@dataclass(frozen=True)
class ManaCost:
    """
    Parsed mana cost: an ordered run of mana elements with their origins.

    ``elements`` and ``origins`` always have the same length. ``int_val``
    holds the generic amount for numeric-leading costs (clamped to 10, shown
    as ``X``) and is None otherwise.

    Example:
        >>> cost = ManaCost.parse("2RG")
        >>> [str(color) for color in cost.elements]
        ['colorless', 'red', 'green']
        >>> cost.int_val
        2
    """

    elements: tuple[ManaColor, ...] = ()
    origins: tuple[ManaOrigin, ...] = ()
    int_val: Optional[int] = None

    @classmethod
    def parse(cls, cost: Optional[str], max_circles: Optional[int] = None) -> "ManaCost":
        """Parse a cost string such as ``"2UR"`` or ``"XG"``.

        Args:
            cost: Cost string, case-insensitive; None or empty gives no elements
            max_circles: Cap on the number of elements, from the default
                layer configuration when omitted

        Returns:
            The parsed cost, truncated to ``max_circles`` elements
        """
        if not cost:
            return cls()

        if max_circles is None:
            max_circles = LayerConfig.default().mana_cost_config["max_circles"]

        text = str(cost).upper()
        elements: list[ManaColor] = []
        origins: list[ManaOrigin] = []
        int_val = None

        if _LEADING_DIGITS.match(text) or text.startswith("X"):
            text = re.sub(r"^X", str(VARIABLE_THRESHOLD), text)
            digits = _LEADING_DIGITS.match(text).group(1)
            int_val = min(int(digits), VARIABLE_THRESHOLD)
            elements.append(ManaColor.COLORLESS)
            origins.append(ManaOrigin.NUMERIC)
            text = text[len(digits):]

        for char in text:
            color = COLOR_MAP.get(char)
            if color is None:
                continue
            elements.append(color)
            origins.append(ManaOrigin.SYMBOL if char == "C" else ManaOrigin.COLOR)

        return cls(
            elements=tuple(elements[:max_circles]),
            origins=tuple(origins[:max_circles]),
            int_val=int_val,
        )

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def display_text(self) -> Optional[str]:
        """Glyph shown in the generic mana circle."""
        if self.int_val is None:
            return None
        return "X" if self.int_val >= VARIABLE_THRESHOLD else str(self.int_val)

    def draw(
        self,
        parent: etree._Element,
        layer_config: Optional[LayerConfig] = None,
        icon_service: Optional[IconService] = None,
    ) -> None:
        """Append the drop-shadow filter and the mana circles to ``parent``.

        Circles are laid out left to right from x=0 at the configured
        spacing, centred on y=0.
        """
        layer_config = layer_config or LayerConfig.default()
        icon_service = icon_service or IconService()
        spacing = layer_config.mana_cost_config["circle_spacing"]

        self._draw_drop_shadow_filter(parent, layer_config)
        group = sub_element(parent, "g", filter=url(DROP_SHADOW_FILTER_ID))
        for index, (color, origin) in enumerate(zip(self.elements, self.origins)):
            self._draw_element(group, index * spacing, 0, color, origin, layer_config, icon_service)

    def to_svg(
        self,
        layer_config: Optional[LayerConfig] = None,
        icon_service: Optional[IconService] = None,
    ) -> str:
        """Render the cost as an SVG fragment string."""
        wrapper = etree.Element(svg_tag("g"), nsmap={None: SVG_NAMESPACE})
        self.draw(wrapper, layer_config, icon_service)
        return "".join(
            etree.tostring(child, encoding="unicode", with_tail=False) for child in wrapper
        )

    @staticmethod
    def _draw_drop_shadow_filter(parent: etree._Element, layer_config: LayerConfig) -> None:
        define_drop_shadow_filter(sub_element(parent, "defs"), layer_config)

    def _draw_element(
        self,
        parent: etree._Element,
        x: float,
        y: float,
        color: ManaColor,
        origin: ManaOrigin,
        layer_config: LayerConfig,
        icon_service: IconService,
    ) -> None:
        config = layer_config.mana_cost_config
        sub_element(
            parent,
            "circle",
            cx=x,
            cy=y,
            r=config["circle_radius"],
            fill=CIRCLE_FILLS.get(color, DEFAULT_CIRCLE_FILL),
        )

        if origin is ManaOrigin.NUMERIC:
            if self.display_text is not None:
                self._draw_generic_text(parent, x, y, self.display_text, layer_config)
            return

        icon_size = config["icon_size"]
        icon_svg = icon_service.icon_svg(color, size=icon_size)
        if not icon_svg:
            return

        icon_x = format_value(x - (icon_size / 2))
        icon_y = format_value(y - (icon_size / 2))
        icon_group = sub_element(
            parent,
            "g",
            transform=f"translate({icon_x}, {icon_y})",
            opacity=layer_config.mana_cost_icon_opacity,
        )
        for element in parse_fragment(icon_svg):
            icon_group.append(element)

    @staticmethod
    def _draw_generic_text(
        parent: etree._Element, x: float, y: float, text: str, layer_config: LayerConfig
    ) -> None:
        sub_element(
            parent,
            "text",
            text,
            x=x,
            y=y + layer_config.mana_cost_text_y_offset,
            fill="#000",
            text_anchor="middle",
            font_weight="normal" if text == "X" else "600",
            font_size=layer_config.mana_cost_font_size,
            font_family="serif",
        )
