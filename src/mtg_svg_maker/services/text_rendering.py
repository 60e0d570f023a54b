"""Word wrapping and line placement for SVG text."""

import re
from typing import Any, Optional

from mtg_svg_maker.constants import CARD_WIDTH
from mtg_svg_maker.layer_config import LayerConfig

TextLine = tuple[str, dict[str, Any]]

_NEWLINE = re.compile(r"\r?\n")


class TextRenderingService:
    """
    Wraps text into positioned lines.

    Widths are estimated as ``len(text) * font_size * char_width_multiplier``
    rather than measured, so layout is deterministic and font independent.
    """

    def __init__(self, layer_config: Optional[LayerConfig] = None) -> None:
        self.layer_config = layer_config or LayerConfig.default()

    def layout(
        self,
        text: Optional[str],
        x: float = 0,
        y: float = 0,
        font_size: Optional[float] = None,
        available_width: Optional[float] = None,
        line_height: Optional[float] = None,
        color: Optional[str] = None,
        css_class: Optional[str] = None,
    ) -> list[TextLine]:
        """Wrap ``text`` and give every line its SVG text attributes.

        Args:
            text: Text to wrap; explicit newlines start new paragraphs
            x: Left edge shared by all lines
            y: Baseline of the first line
            font_size: Font size, the configured default when omitted
            available_width: Maximum estimated line width, the card width
                when omitted
            line_height: Distance between baselines, ``font_size`` times the
                configured multiplier when omitted
            color: Fill color, the configured default when omitted
            css_class: Optional CSS class added to every line

        Returns:
            ``(line, attrs)`` pairs where ``attrs`` holds x, y, fill,
            font_size and, when given, class
        """
        font_size = font_size or self.layer_config.default_font_size
        available_width = available_width or CARD_WIDTH
        if line_height is None:
            line_height = font_size * self.layer_config.default_line_height_multiplier
        color = color or self.layer_config.default_text_color

        lines = self.wrap(text, font_size, available_width)

        result = []
        for index, line in enumerate(lines):
            attrs: dict[str, Any] = {
                "x": x,
                "y": y + int(index * line_height),
                "fill": color,
                "font_size": font_size,
            }
            if css_class:
                attrs["class"] = css_class
            result.append((line, attrs))
        return result

    def wrap(self, text: Optional[str], font_size: float, available_width: float) -> list[str]:
        """Split ``text`` into lines that fit ``available_width``.

        Blank lines are dropped. A word wider than the available width is
        kept whole on its own line.
        """
        char_width = font_size * self.layer_config.char_width_multiplier
        lines: list[str] = []
        for paragraph in _NEWLINE.split(text or ""):
            lines.extend(self._wrap_paragraph(paragraph, char_width, available_width))
        return [line for line in lines if line]

    @staticmethod
    def _wrap_paragraph(paragraph: str, char_width: float, available_width: float) -> list[str]:
        lines = []
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if len(candidate) * char_width <= available_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        if current:
            lines.append(current)
        return lines
