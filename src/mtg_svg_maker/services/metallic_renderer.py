"""Three-pass brushed metal effect for gold and silver surfaces."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.domain.dimensions import Dimensions
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.services import gradients
from mtg_svg_maker.svg import SvgCanvas, url


@dataclass(frozen=True)
class MetallicGeometry:
    """Rectangle the metal is drawn over, inset horizontally by ``padding``."""

    x: float
    y: float
    width: float
    height: float
    padding: Optional[float] = None

    @classmethod
    def from_dimensions(
        cls, dimensions: Dimensions, padding: Optional[float] = None
    ) -> "MetallicGeometry":
        return cls(dimensions.x, dimensions.y, dimensions.width, dimensions.height, padding)


@dataclass(frozen=True)
class MetallicOpacity:
    texture: float = 0.05
    shadow: float = 0.08


@dataclass
class MetallicRenderer:
    """
    Draws the base, texture and shadow rectangles that make up the metal look.

    The scheme must define metallic colors and its gradients must already be
    in the canvas defs.

    Example:
        >>> renderer = MetallicRenderer(ColorScheme.resolve("gold"))
        >>> renderer.render(canvas, MetallicGeometry(10, 10, 610, 860), mask="artWindowMask")
    """

    color_scheme: ColorScheme
    layer_config: LayerConfig = field(default_factory=LayerConfig.default)

    def render(
        self,
        canvas: SvgCanvas,
        geometry: MetallicGeometry,
        mask: Optional[str] = None,
        corners: Optional[Mapping[str, float]] = None,
        bottom_margin: float = 0,
        opacity: Optional[MetallicOpacity] = None,
    ) -> None:
        """Draw the three stacked rectangles.

        Args:
            canvas: Canvas to draw on
            geometry: Rectangle and horizontal padding (horizontal padding
                from the layer config when None)
            mask: Optional mask ID applied to every rectangle
            corners: Corner radii, the configured inner radius when omitted
            bottom_margin: Height removed from the bottom of the rectangle
            opacity: Texture and shadow opacity
        """
        corners = corners or self.layer_config.corner_radius("inner")
        metallic = self.layer_config.metallic_config
        opacity = opacity or MetallicOpacity(
            texture=metallic["texture_opacity"], shadow=metallic["shadow_opacity"]
        )
        stroke_width = self.layer_config.stroke_width

        self._rect(
            canvas,
            geometry,
            bottom_margin,
            mask,
            corners,
            fill=url(gradients.metallic_highlight_gradient_id(self.color_scheme)),
            stroke=self.color_scheme.primary_color,
            stroke_width=stroke_width,
        )
        self._rect(
            canvas,
            geometry,
            bottom_margin,
            mask,
            corners,
            fill=url(gradients.metallic_pattern_id(self.color_scheme)),
            opacity=opacity.texture,
        )

        offset = metallic["shadow_offset"]
        self._rect(
            canvas,
            geometry,
            bottom_margin,
            mask,
            {"x": max(corners["x"] - offset, 0), "y": max(corners["y"] - offset, 0)},
            inset=offset,
            fill=url(gradients.metallic_shadow_gradient_id(self.color_scheme)),
            opacity=opacity.shadow,
        )

    def _rect(
        self,
        canvas: SvgCanvas,
        geometry: MetallicGeometry,
        bottom_margin: float,
        mask: Optional[str],
        corners: Mapping[str, float],
        inset: float = 0,
        **paint: Any,
    ) -> None:
        padding = geometry.padding
        if padding is None:
            padding = self.layer_config.horizontal_padding

        canvas.rect(
            x=geometry.x + padding + inset,
            y=geometry.y + padding + inset,
            width=geometry.width - (padding * 2) - (inset * 2),
            height=geometry.height - bottom_margin - (inset * 2),
            mask=url(mask) if mask else None,
            rx=corners["x"],
            ry=corners["y"],
            **paint,
        )
