"""Outermost card border with QR code and copyright lines."""

from typing import Optional

from mtg_svg_maker.constants import ART_WINDOW_MASK_ID
from mtg_svg_maker.domain.color_scheme import ColorScheme, SchemeName
from mtg_svg_maker.exceptions import ConfigurationError, MissingAssetError
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike
from mtg_svg_maker.services import gradients
from mtg_svg_maker.services.icon_service import IconService, extract_path_data
from mtg_svg_maker.services.metallic_renderer import (
    MetallicGeometry,
    MetallicOpacity,
    MetallicRenderer,
)
from mtg_svg_maker.svg import SvgCanvas, format_value, url

# Flat fills for plain borders, scheme names for metallic ones
SUPPORTED_COLORS: dict[str, object] = {
    "white": "#EEE",
    "black": "#000",
    "silver": SchemeName.COLORLESS,
    "gold": SchemeName.GOLD,
}

METALLIC_BASE_FILL = "#EEE"
BORDER_OPACITY = MetallicOpacity(texture=0.15, shadow=0.18)


class BorderLayer(BaseLayer):
    """
    Border around the whole card.

    White and black borders are flat fills. Silver and gold borders use the
    colorless and gold metallic schemes. The bottom strip carries the QR code
    and the copyright lines.

    Raises:
        ConfigurationError: If ``color`` is not white, black, silver or gold
    """

    kind = "border"

    def __init__(
        self,
        dimensions: DimensionsLike,
        color: Optional[str] = "white",
        mask_id: str = ART_WINDOW_MASK_ID,
        icon_service: Optional[IconService] = None,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        border_color = str(color if color is not None else "white").strip().lower()
        if border_color not in SUPPORTED_COLORS:
            raise ConfigurationError(
                f"Unsupported border color: {border_color!r}. "
                "Supported: white, black, silver, gold."
            )

        scheme_name = SUPPORTED_COLORS[border_color]
        color_scheme = ColorScheme.resolve(
            scheme_name if isinstance(scheme_name, SchemeName) else None
        )
        super().__init__(dimensions, border_color, color_scheme, layer_config)
        self.mask_id = mask_id
        self.icon_service = icon_service or IconService()

    @property
    def is_metallic(self) -> bool:
        return isinstance(SUPPORTED_COLORS[self.color], SchemeName)

    @property
    def fill_color(self) -> str:
        """Color of the QR code and copyright text."""
        return "#FFF" if self.color == "black" else "#111"

    def render(self, canvas: SvgCanvas) -> None:
        corners = self.layer_config.corner_radius("outer")
        if self.is_metallic:
            self._render_metallic_frame(canvas, corners)
        else:
            self._render_flat_frame(canvas, corners, SUPPORTED_COLORS[self.color])
        self._render_qr_code(canvas)
        self._render_copyright(canvas)

    def _render_flat_frame(self, canvas: SvgCanvas, corners, fill: str) -> None:
        canvas.rect(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            fill=fill,
            rx=corners["x"],
            ry=corners["y"],
            mask=url(self.mask_id),
        )

    def _render_metallic_frame(self, canvas: SvgCanvas, corners) -> None:
        self._render_flat_frame(canvas, corners, METALLIC_BASE_FILL)
        gradients.define_all_gradients(canvas, self.color_scheme)
        MetallicRenderer(self.color_scheme, self.layer_config).render(
            canvas,
            MetallicGeometry.from_dimensions(self.dimensions, padding=0),
            mask=self.mask_id,
            corners=corners,
            bottom_margin=0,
            opacity=BORDER_OPACITY,
        )

    def _render_qr_code(self, canvas: SvgCanvas) -> None:
        qr_svg = self.icon_service.qr_code_svg()
        if not qr_svg:
            raise MissingAssetError("QR code SVG content is missing")

        path_data = extract_path_data(qr_svg)
        if not path_data:
            raise MissingAssetError("No path element found in QR code SVG")

        qr = self.layer_config.qr_code_config
        canvas.path(
            fill=self.fill_color,
            transform=(
                f"translate({format_value(qr['x'])},{format_value(qr['y'])}) "
                f"scale({format_value(qr['scale'])})"
            ),
            d=path_data,
        )

    def _render_copyright(self, canvas: SvgCanvas) -> None:
        config = self.layer_config.copyright_config
        for index, line in enumerate(config["lines"]):
            canvas.text(
                line,
                x=config["x_position"],
                y=config["base_y"] + (index * config["line_spacing"]),
                fill=self.fill_color,
                font_size=self.layer_config.font_size("copyright"),
                text_anchor="start",
                class_=self.layer_config.css_class("copyright"),
            )
