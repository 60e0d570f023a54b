"""Colored inner frame."""

from typing import Optional

from mtg_svg_maker.constants import ART_WINDOW_MASK_ID
from mtg_svg_maker.domain.color_scheme import ColorScheme, SchemeName
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike, resolve_layer_color
from mtg_svg_maker.services import gradients
from mtg_svg_maker.services.metallic_renderer import (
    MetallicGeometry,
    MetallicOpacity,
    MetallicRenderer,
)
from mtg_svg_maker.svg import SvgCanvas, url

FRAME_OPACITY = MetallicOpacity(texture=0.3, shadow=0.4)


class FrameLayer(BaseLayer):
    """Gradient frame with the art window cut out; gold frames get a metal finish."""

    kind = "frame"

    def __init__(
        self,
        dimensions: DimensionsLike,
        color: Optional[str] = None,
        color_scheme: Optional[ColorScheme] = None,
        mask_id: str = ART_WINDOW_MASK_ID,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        color_scheme = color_scheme or ColorScheme.resolve()
        super().__init__(
            dimensions,
            resolve_layer_color(color, color_scheme, "primary_color"),
            color_scheme,
            layer_config,
        )
        self.mask_id = mask_id

    @property
    def is_metallic(self) -> bool:
        return self.color_scheme.name is SchemeName.GOLD

    def render(self, canvas: SvgCanvas) -> None:
        gradients.define_all_gradients(canvas, self.color_scheme)
        self._render_standard_frame(canvas)
        if self.is_metallic:
            MetallicRenderer(self.color_scheme, self.layer_config).render(
                canvas,
                MetallicGeometry.from_dimensions(self.dimensions),
                mask=self.mask_id,
                bottom_margin=self.layer_config.frame_bottom_margin,
                opacity=FRAME_OPACITY,
            )

    def _render_standard_frame(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        padding = config.horizontal_padding
        corners = config.corner_radius("inner")

        canvas.rect(
            x=self.x + padding,
            y=self.y + padding,
            width=self.width - (padding * 2),
            height=self.height - config.frame_bottom_margin,
            fill=url(gradients.frame_gradient_id(self.color_scheme)),
            stroke=self.color_scheme.primary_color,
            stroke_width=config.stroke_width,
            rx=corners["x"],
            ry=corners["y"],
            mask=url(self.mask_id),
        )
