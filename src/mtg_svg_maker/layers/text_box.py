"""Rules and flavor text box."""

from typing import Optional

from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike, resolve_layer_color
from mtg_svg_maker.services import gradients
from mtg_svg_maker.services.text_rendering import TextRenderingService
from mtg_svg_maker.svg import SvgCanvas, url


class TextBoxLayer(BaseLayer):
    """Text box with rules text at the top and flavor text near the bottom."""

    kind = "text-box"

    def __init__(
        self,
        dimensions: DimensionsLike,
        rules_text: str,
        flavor_text: Optional[str] = None,
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
        self.rules_text = rules_text
        self.flavor_text = flavor_text

    @property
    def has_flavor_text(self) -> bool:
        return bool(self.flavor_text and self.flavor_text.strip())

    def render(self, canvas: SvgCanvas) -> None:
        gradients.define_all_gradients(canvas, self.color_scheme)
        with canvas.group():
            canvas.rect(
                x=self.x,
                y=self.y,
                width=self.width,
                height=self.height,
                fill=url(gradients.description_gradient_id(self.color_scheme)),
                stroke=self.color_scheme.primary_color,
                stroke_width=self.layer_config.stroke_width,
            )
            self._render_rules_text(canvas)
            if self.has_flavor_text:
                self._render_separator(canvas)
                self._render_flavor_text(canvas)

    def _render_rules_text(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        self._render_text(
            canvas,
            self.rules_text,
            config.text_y_position(self.y, "description"),
            "description",
            config.css_class("card_description"),
        )

    def _render_flavor_text(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        offset = config.positioning("flavor_text")["y_offset"]
        self._render_text(
            canvas,
            self.flavor_text,
            self.y + self.height - offset,
            "flavor_text",
            config.css_class("flavor_text"),
        )

    def _render_text(
        self, canvas: SvgCanvas, text: str, y: float, kind: str, css_class: Optional[str]
    ) -> None:
        config = self.layer_config
        lines = TextRenderingService(config).layout(
            text,
            x=config.text_x_position(self.x),
            y=y,
            font_size=config.font_size(kind),
            available_width=config.text_width(self.width, kind),
            color=self.color_scheme.text_color,
            css_class=css_class,
        )
        self.draw_lines(canvas, lines)

    def _render_separator(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        separator_y = self.y + self.height - config.positioning("flavor_text")["separator_offset"]
        canvas.line(
            x1=config.text_x_position(self.x),
            y1=separator_y,
            x2=self.x + self.width - config.horizontal_padding,
            y2=separator_y,
            stroke=self.color_scheme.primary_color,
            stroke_width=1,
        )
