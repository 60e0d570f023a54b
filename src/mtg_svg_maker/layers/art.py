"""Art window frame with optional artwork."""

from typing import Optional
from urllib.parse import urlsplit

from mtg_svg_maker.domain.color_palette import FRAME_STROKE_COLOR
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.exceptions import ConfigurationError
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layers.base import BaseLayer, DimensionsLike
from mtg_svg_maker.svg import SvgCanvas


def parse_image_url(url: Optional[str]) -> Optional[str]:
    """Validate an artwork URL or path.

    Args:
        url: URL or file path; None or empty means no artwork

    Returns:
        The URL, or None when no artwork was given

    Raises:
        ConfigurationError: If the URL cannot be parsed
    """
    if not url:
        return None
    try:
        parts = urlsplit(url)
        parts.port  # noqa: B018 - raises for out-of-range or non-numeric ports
    except ValueError as e:
        raise ConfigurationError(f"Invalid image URL: {url!r}. Error: {e}") from e
    return url


class ArtLayer(BaseLayer):
    """Frames around the transparent art window, plus the artwork if given."""

    kind = "art"

    def __init__(
        self,
        dimensions: DimensionsLike,
        color_scheme: Optional[ColorScheme] = None,
        art: Optional[str] = None,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        super().__init__(dimensions, "#000", color_scheme, layer_config)
        self.art = parse_image_url(art)

    def render(self, canvas: SvgCanvas) -> None:
        config = self.layer_config
        outset = config.art_frame_outset
        outer = config.corner_radius("art")
        inner = config.corner_radius("art_inner")

        with canvas.group():
            canvas.rect(
                x=self.x - outset,
                y=self.y - outset,
                width=self.width + (outset * 2),
                height=self.height + (outset * 2),
                fill="none",
                stroke=self.color_scheme.primary_color,
                stroke_width=config.stroke_width,
                rx=outer["x"],
                ry=outer["y"],
            )
            canvas.rect(
                x=self.x,
                y=self.y,
                width=self.width,
                height=self.height,
                fill="none",
                stroke=FRAME_STROKE_COLOR,
                stroke_width=config.stroke_width,
                rx=inner["x"],
                ry=inner["y"],
            )
            if self.art:
                canvas.image(
                    href=self.art,
                    x=self.x,
                    y=self.y,
                    width=self.width,
                    height=self.height,
                    preserveAspectRatio="xMidYMid slice",
                )
