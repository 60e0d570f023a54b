"""Name bar with the card name and mana cost."""

from typing import Optional

from mtg_svg_maker.domain.color_palette import FRAME_STROKE_COLOR
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.domain.mana_cost import ManaCost
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike, resolve_layer_color
from mtg_svg_maker.services import gradients
from mtg_svg_maker.services.icon_service import IconService
from mtg_svg_maker.services.text_rendering import TextRenderingService
from mtg_svg_maker.svg import SvgCanvas, format_value, url


class NameLayer(BaseLayer):
    """Name bar; the mana cost sits right-aligned inside it."""

    kind = "name"

    def __init__(
        self,
        dimensions: DimensionsLike,
        name: str,
        cost: Optional[str] = None,
        color: Optional[str] = None,
        color_scheme: Optional[ColorScheme] = None,
        layer_config: Optional[LayerConfig] = None,
        icon_service: Optional[IconService] = None,
    ) -> None:
        color_scheme = color_scheme or ColorScheme.resolve()
        super().__init__(
            dimensions,
            resolve_layer_color(color, color_scheme, "background_color"),
            color_scheme,
            layer_config,
        )
        self.name = name
        self.cost = cost
        self.icon_service = icon_service or IconService()

    def render(self, canvas: SvgCanvas) -> None:
        gradients.define_all_gradients(canvas, self.color_scheme)
        with canvas.group():
            self._render_name_area(canvas)
            self._render_name(canvas)
            if self.cost:
                self._render_mana_cost(canvas)

    def _render_name_area(self, canvas: SvgCanvas) -> None:
        corners = self.layer_config.corner_radius("name")
        canvas.rect(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            fill=url(gradients.name_gradient_id(self.color_scheme)),
            stroke=FRAME_STROKE_COLOR,
            stroke_width=self.layer_config.stroke_width,
            rx=corners["x"],
            ry=corners["y"],
        )

    def _render_name(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        lines = TextRenderingService(config).layout(
            self.name,
            x=config.text_x_position(self.x),
            y=config.text_y_position(self.y, "name_area", self.height),
            font_size=config.font_size("name"),
            available_width=config.text_width(self.width, "name_area"),
            css_class=config.css_class("card_name"),
        )
        self.draw_lines(canvas, lines)

    def _render_mana_cost(self, canvas: SvgCanvas) -> None:
        config = self.layer_config.mana_cost_config
        mana_cost = ManaCost.parse(self.cost, max_circles=config["max_circles"])

        # Rightmost circle ends one margin inside the bar
        cost_x = self.x + self.width - config["margin"] - config["circle_radius"]
        cost_x -= config["circle_spacing"] * (len(mana_cost) - 1)
        cost_y = self.y + (self.height / 2) - 2

        with canvas.group(
            transform=f"translate({format_value(cost_x)}, {format_value(cost_y)})"
        ) as group:
            mana_cost.draw(group, self.layer_config, self.icon_service)
