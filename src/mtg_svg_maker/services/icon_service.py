"""Icon loading for mana symbols, the QR code and the brand mark."""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from mtg_svg_maker.svg import local_name, parse_fragment

logger = logging.getLogger(__name__)

ICONS_DIR = Path(__file__).resolve().parent.parent / "icons"
QR_CODE_FILE = "qrcode.svg"
BRAND_ICON_FILE = "brand.svg"

ICON_SETS: dict[str, dict[str, str]] = {
    "default": {
        "white": "white.svg",
        "blue": "blue.svg",
        "black": "black.svg",
        "red": "red.svg",
        "green": "green.svg",
        "colorless": "colorless.svg",
    },
}

_XML_DECLARATION = re.compile(r"<\?xml[^>]*\?>\s*")


def extract_path_data(svg_content: Optional[str]) -> Optional[str]:
    """Return the ``d`` attribute of the first ``<path>`` in ``svg_content``.

    Args:
        svg_content: Raw SVG markup

    Returns:
        The path data, or None when there is no path with data
    """
    if not svg_content:
        return None
    for element in parse_fragment(svg_content):
        for node in element.iter():
            if isinstance(node.tag, str) and local_name(node) == "path" and node.get("d"):
                return node.get("d")
    return None


class IconService:
    """
    Loads SVG icons from an icon directory and caches them per file.

    Mana icons are optional: unknown colors and missing files give ``None``.
    """

    def __init__(
        self, icon_set: str = "default", icons_dir: Optional[Union[str, Path]] = None
    ) -> None:
        self.icon_set = icon_set
        self.icons_dir = Path(icons_dir) if icons_dir else ICONS_DIR
        self._cache: dict[Path, str] = {}

    def icon_svg(self, color: str, size: int = 30) -> Optional[str]:
        """Mana icon for ``color`` resized to ``size`` pixels.

        Args:
            color: Mana color name (white, blue, black, red, green, colorless)
            size: Edge length written into the root width/height attributes

        Returns:
            The SVG markup, or None if there is no icon for this color
        """
        filename = ICON_SETS.get(self.icon_set, {}).get(str(color))
        if filename is None:
            return None

        path = self.icons_dir / filename
        if not path.is_file():
            logger.debug(f"No {color} icon at {path}")
            return None

        return self.resize_svg(self._load(path), size)

    def qr_code_svg(self) -> Optional[str]:
        return self._load_optional(self.icons_dir / QR_CODE_FILE)

    def brand_icon_svg(self) -> Optional[str]:
        return self._load_optional(self.icons_dir / BRAND_ICON_FILE)

    def available_colors(self) -> list[str]:
        return list(ICON_SETS.get(self.icon_set, {}))

    @staticmethod
    def available_icon_sets() -> list[str]:
        return list(ICON_SETS)

    @staticmethod
    def resize_svg(svg_content: str, size: int) -> str:
        """Rewrite the root ``<svg>`` width and height to ``{size}px``.

        The XML declaration is dropped so the result can be embedded.
        """
        elements = parse_fragment(svg_content)
        if not elements:
            return _XML_DECLARATION.sub("", svg_content)
        root = elements[0]
        root.set("width", f"{size}px")
        root.set("height", f"{size}px")
        return "".join(
            etree.tostring(element, encoding="unicode", with_tail=False) for element in elements
        )

    def _load_optional(self, path: Path) -> Optional[str]:
        if not path.is_file():
            logger.debug(f"Icon file missing: {path}")
            return None
        return self._load(path)

    def _load(self, path: Path) -> str:
        if path not in self._cache:
            self._cache[path] = path.read_text(encoding="utf-8")
        return self._cache[path]
