"""Power/toughness box."""

from typing import Optional, Union

from mtg_svg_maker.constants import CARD_WIDTH
from mtg_svg_maker.domain.color_palette import FRAME_STROKE_COLOR
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike, resolve_layer_color
from mtg_svg_maker.services import gradients
from mtg_svg_maker.svg import SvgCanvas, url

Stat = Optional[Union[str, int]]


class PowerLayer(BaseLayer):
    """
    Box showing ``power/toughness``, anchored to the right edge of the card.

    The box grows with the length of the text and is skipped entirely when
    either value is missing or blank.
    """

    kind = "power"

    def __init__(
        self,
        dimensions: DimensionsLike,
        power: Stat = None,
        toughness: Stat = None,
        color: Optional[str] = None,
        color_scheme: Optional[ColorScheme] = None,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        color_scheme = color_scheme or ColorScheme.resolve()
        super().__init__(
            dimensions,
            resolve_layer_color(color, color_scheme, "background_color"),
            color_scheme,
            layer_config,
        )
        self.power = None if power is None else str(power)
        self.toughness = None if toughness is None else str(toughness)

    @property
    def should_render(self) -> bool:
        return bool(
            self.power and self.power.strip() and self.toughness and self.toughness.strip()
        )

    @property
    def label(self) -> str:
        return f"{self.power}/{self.toughness}"

    @property
    def box_width(self) -> int:
        """Width grows per character beyond the baseline (e.g. ``1/1``)."""
        box = self.layer_config.power_box_config
        total_chars = len(self.power or "") + len(self.toughness or "") + 1
        extra = max(0, total_chars - box["baseline_chars"])
        return box["base_width"] + (extra * box["width_per_char"])

    @property
    def box_x(self) -> int:
        right_edge = CARD_WIDTH - self.layer_config.power_box_config["right_margin"]
        return right_edge - self.box_width

    def render(self, canvas: SvgCanvas) -> None:
        if not self.should_render:
            return

        gradients.define_all_gradients(canvas, self.color_scheme)
        config = self.layer_config
        corners = config.corner_radius("power")
        width = self.box_width
        box_x = self.box_x

        with canvas.group():
            canvas.rect(
                x=box_x,
                y=self.y,
                width=width,
                height=self.height,
                fill=url(gradients.name_gradient_id(self.color_scheme)),
                stroke=FRAME_STROKE_COLOR,
                stroke_width=config.stroke_width,
                rx=corners["x"],
                ry=corners["y"],
            )
            canvas.text(
                self.label,
                x=box_x + (width / 2),
                y=self.y + (self.height / 2) + config.positioning("power_area")["y_offset"],
                fill=config.default_text_color,
                font_size=config.font_size("power_area"),
                text_anchor="middle",
                class_=config.css_class("power_area"),
            )
