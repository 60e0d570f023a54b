"""Type line bar with the brand icon."""

from typing import Optional

from mtg_svg_maker.domain.color_palette import FRAME_STROKE_COLOR
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.exceptions import MissingAssetError
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike, resolve_layer_color
from mtg_svg_maker.services import gradients
from mtg_svg_maker.services.icon_service import IconService, extract_path_data
from mtg_svg_maker.services.text_rendering import TextRenderingService
from mtg_svg_maker.svg import SvgCanvas, format_value, url


class TypeLineLayer(BaseLayer):
    """Bar below the art holding the type line and a small brand mark."""

    kind = "type-line"

    def __init__(
        self,
        dimensions: DimensionsLike,
        type_line: str,
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
        self.type_line = type_line
        self.icon_service = icon_service or IconService()

    def render(self, canvas: SvgCanvas) -> None:
        gradients.define_all_gradients(canvas, self.color_scheme)
        with canvas.group():
            self._render_background(canvas)
            self._render_type_line(canvas)
            self._render_icon(canvas)

    def _render_background(self, canvas: SvgCanvas) -> None:
        corners = self.layer_config.corner_radius("type")
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

    def _render_type_line(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        lines = TextRenderingService(config).layout(
            self.type_line,
            x=config.text_x_position(self.x),
            y=config.text_y_position(self.y, "type_area", self.height),
            font_size=config.font_size("type"),
            available_width=config.text_width(self.width, "type_area"),
            css_class=config.css_class("card_type"),
        )
        self.draw_lines(canvas, lines)

    def _render_icon(self, canvas: SvgCanvas) -> None:
        brand_svg = self.icon_service.brand_icon_svg()
        if not brand_svg:
            raise MissingAssetError("Brand icon SVG not found")

        path_data = extract_path_data(brand_svg)
        if not path_data:
            return

        canvas.path(
            stroke_width=3,
            d=path_data,
            fill="none",
            stroke=FRAME_STROKE_COLOR,
            transform=self.icon_transform(),
            aria_label="brand",
        )

    def icon_transform(self) -> str:
        """Transform placing the brand icon at the right end of the bar."""
        icon = self.layer_config.type_icon_config
        # Offset is taken from the bar width, not its right edge
        translate = (
            f"translate({format_value(self.width - icon['x_offset'])},"
            f"{format_value(self.y + icon['y_offset'])})"
        )
        scale = f"scale({format_value(icon['scale'])})"
        aspect = (
            f"scale({icon['aspect_ratio']['x']},{icon['aspect_ratio']['y']})"
        )
        return f"{translate} {scale} {aspect}"
