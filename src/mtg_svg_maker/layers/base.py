"""Base class shared by all card layers."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional, Union

from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.domain.dimensions import Dimensions
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.services.text_rendering import TextLine
from mtg_svg_maker.svg import SvgCanvas

DimensionsLike = Union[Dimensions, Mapping[str, Any]]


def resolve_layer_color(
    color: Optional[str], color_scheme: ColorScheme, attribute: str
) -> str:
    """Use ``color`` when given, else the named color of the scheme."""
    return color or getattr(color_scheme, attribute)


class BaseLayer(ABC):
    """
    One rectangular region of the card.

    Layers hold their configuration only; :meth:`render` draws onto the
    canvas it is given and may be called for any number of canvases.
    """

    kind = "base"

    def __init__(
        self,
        dimensions: DimensionsLike,
        color: Optional[str] = None,
        color_scheme: Optional[ColorScheme] = None,
        layer_config: Optional[LayerConfig] = None,
    ) -> None:
        self.dimensions = Dimensions.coerce(dimensions)
        self.color_scheme = color_scheme or ColorScheme.resolve()
        self.layer_config = layer_config or LayerConfig.default()
        self.color = color

    @property
    def x(self) -> float:
        return self.dimensions.x

    @property
    def y(self) -> float:
        return self.dimensions.y

    @property
    def width(self) -> float:
        return self.dimensions.width

    @property
    def height(self) -> float:
        return self.dimensions.height

    @abstractmethod
    def render(self, canvas: SvgCanvas) -> None:
        """Draw the layer onto ``canvas``."""

    @staticmethod
    def draw_lines(canvas: SvgCanvas, lines: list[TextLine]) -> None:
        for line, attrs in lines:
            canvas.text(line, **attrs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.dimensions!r})"
