"""SVG document building on top of lxml."""

import base64
import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional, Union

from lxml import etree

from mtg_svg_maker.constants import CARD_HEIGHT, CARD_WIDTH, SVG_NAMESPACE
from mtg_svg_maker.exceptions import MissingAssetError

logger = logging.getLogger(__name__)

FONT_FAMILY = "Goudy Mediaeval DemiBold"
FONT_URL = "fonts/Goudy Mediaeval DemiBold.ttf"

_XML_DECLARATION = re.compile(r"<\?xml[^>]*\?>\s*")

CARD_CSS = """
.card-name {
  font-family: 'Goudy Mediaeval DemiBold', serif;
  font-weight: normal;
  font-style: normal;
}
.card-type {
  font-family: 'Goudy Mediaeval DemiBold', serif;
  font-weight: normal;
  font-style: normal;
}
.card-description {
  font-family: serif;
  font-weight: normal;
  font-style: normal;
}
.card-flavor-text {
  font-family: serif;
  font-weight: normal;
  font-style: italic;
}
.card-power-toughness {
  font-family: serif;
  font-weight: bold;
  font-style: normal;
}
.card-copyright {
  font-family: sans-serif;
  font-weight: normal;
  font-style: normal;
}
.mana-cost-text {
  font-family: serif;
  font-weight: normal;
  font-style: normal;
}
.mana-cost-text-large {
  font-family: serif;
  font-weight: 600;
  font-style: normal;
}
"""


def svg_tag(name: str) -> str:
    """Qualify a tag name with the SVG namespace."""
    return f"{{{SVG_NAMESPACE}}}{name}"


def url(element_id: str) -> str:
    """Reference a definition by its id."""
    return f"url(#{element_id})"


def attribute_name(name: str) -> str:
    """Convert a Python keyword into an SVG attribute name.

    Trailing underscores are dropped (``class_`` -> ``class``) and inner
    underscores become hyphens (``stroke_width`` -> ``stroke-width``).
    CamelCase names such as ``stdDeviation`` pass through unchanged.
    """
    return name.rstrip("_").replace("_", "-")


def format_value(value: Any) -> str:
    """Render an attribute value, dropping ``.0`` from integral floats."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def sub_element(
    parent: etree._Element, tag: str, text: Optional[str] = None, **attrs: Any
) -> etree._Element:
    """Append a namespaced child to ``parent``.

    Attributes whose value is ``None`` are skipped.
    """
    element = etree.SubElement(parent, svg_tag(tag))
    for key, value in attrs.items():
        if value is None:
            continue
        element.set(attribute_name(key), format_value(value))
    if text is not None:
        element.text = text
    return element


def make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_fragment(markup: str) -> list[etree._Element]:
    """Parse a string of SVG markup into a list of elements.

    The markup may hold several sibling elements and may start with an XML
    declaration. Unqualified elements are placed in the SVG namespace.
    """
    body = _XML_DECLARATION.sub("", markup).strip()
    if not body:
        return []
    wrapper = etree.fromstring(
        f'<g xmlns="{SVG_NAMESPACE}">{body}</g>', parser=make_parser()
    )
    return list(wrapper)


def parse_document(source: Union[str, Path, bytes]) -> etree._Element:
    """Parse a complete SVG document from a path or raw bytes."""
    parser = make_parser()
    if isinstance(source, bytes):
        return etree.fromstring(source, parser=parser)
    return etree.parse(str(source), parser=parser).getroot()


def local_name(element: etree._Element) -> str:
    """Tag name without its namespace."""
    return etree.QName(element).localname


class SvgCanvas:
    """
    Mutable SVG drawing surface.

    Drawing calls append to the innermost open container: the root ``<svg>``
    element, a group opened with :meth:`group`, or the single ``<defs>``
    block opened with :meth:`definitions`. The ``<defs>`` block is created
    first so it always precedes the drawn content.
    """

    def __init__(self, width: int = CARD_WIDTH, height: int = CARD_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.root = etree.Element(svg_tag("svg"), nsmap={None: SVG_NAMESPACE})
        self.root.set("width", format_value(width))
        self.root.set("height", format_value(height))
        self.root.set("viewBox", f"0 0 {format_value(width)} {format_value(height)}")
        self.defs = sub_element(self.root, "defs")
        self._stack: list[etree._Element] = [self.root]

    @property
    def current(self) -> etree._Element:
        return self._stack[-1]

    def element(self, tag: str, text: Optional[str] = None, **attrs: Any) -> etree._Element:
        return sub_element(self.current, tag, text, **attrs)

    def rect(self, **attrs: Any) -> etree._Element:
        return self.element("rect", **attrs)

    def text(self, content: str, **attrs: Any) -> etree._Element:
        return self.element("text", content, **attrs)

    def line(self, **attrs: Any) -> etree._Element:
        return self.element("line", **attrs)

    def path(self, **attrs: Any) -> etree._Element:
        return self.element("path", **attrs)

    def image(self, **attrs: Any) -> etree._Element:
        return self.element("image", **attrs)

    @contextmanager
    def group(self, **attrs: Any) -> Iterator[etree._Element]:
        """Open a ``<g>`` element that receives every drawing call in the block."""
        element = self.element("g", **attrs)
        with self._entered(element):
            yield element

    @contextmanager
    def definitions(self) -> Iterator[etree._Element]:
        """Route drawing calls in the block into the document ``<defs>``."""
        with self._entered(self.defs):
            yield self.defs

    @contextmanager
    def _entered(self, element: etree._Element) -> Iterator[None]:
        self._stack.append(element)
        try:
            yield
        finally:
            self._stack.pop()

    def to_string(self) -> str:
        return etree.tostring(self.root, encoding="unicode")

    def to_bytes(self) -> bytes:
        return etree.tostring(self.root, xml_declaration=True, encoding="UTF-8")


def font_face_css(embed_font: bool = False, font_path: Optional[Path] = None) -> str:
    """Build the ``@font-face`` rule for the card title font.

    Args:
        embed_font: Inline the font file as base64 data instead of linking it
        font_path: TrueType font file to inline

    Returns:
        The CSS rule

    Raises:
        MissingAssetError: If embedding is requested and the font file is missing
    """
    if embed_font:
        if font_path is None or not Path(font_path).is_file():
            raise MissingAssetError(f"Font file not found for embedding: {font_path}")
        data = base64.b64encode(Path(font_path).read_bytes()).decode("ascii")
        src = f"url(data:font/truetype;charset=utf-8;base64,{data})"
    else:
        src = f"url('{FONT_URL}')"

    return (
        "\n@font-face {\n"
        f"  font-family: '{FONT_FAMILY}';\n"
        f"  src: {src} format('truetype');\n"
        "  font-weight: normal;\n"
        "  font-style: normal;\n"
        "}\n"
    )


def define_art_window_mask(parent: etree._Element, mask_id: str, window: Any) -> etree._Element:
    """Add the mask that cuts the art window out of opaque layers.

    Args:
        parent: Element receiving the ``<mask>`` (normally a ``<defs>``)
        mask_id: ID of the mask
        window: Art layer placement with ``x``, ``y``, ``width``, ``height``
            and a ``corner_radius`` mapping
    """
    mask = sub_element(parent, "mask", id=mask_id)
    # White keeps the layer opaque, black opens the window
    sub_element(mask, "rect", x=0, y=0, width="100%", height="100%", fill="#FFF")
    corners = window.get("corner_radius", {"x": 5, "y": 5})
    sub_element(
        mask,
        "rect",
        x=window["x"],
        y=window["y"],
        width=window["width"],
        height=window["height"],
        fill="#000",
        rx=corners["x"],
        ry=corners["y"],
    )
    return mask


class Template:
    """
    Card document: one canvas, shared styles and the layers rendered into it.

    Layers are rendered as soon as they are added, each inside its own
    ``<g class="{kind}-layer">`` group. A template is built for exactly one
    card.
    """

    def __init__(
        self,
        width: int = CARD_WIDTH,
        height: int = CARD_HEIGHT,
        embed_font: bool = False,
        font_path: Optional[Path] = None,
    ) -> None:
        self.canvas = SvgCanvas(width, height)
        style = font_face_css(embed_font, font_path) + CARD_CSS
        with self.canvas.definitions():
            self.canvas.element("style", style, type="text/css")

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def define_mask(self, mask_id: str, window: Any) -> None:
        define_art_window_mask(self.canvas.defs, mask_id, window)

    def add_layer(self, layer) -> None:
        """Render ``layer`` on top of everything added so far."""
        with self.canvas.group(class_=f"{layer.kind}-layer"):
            layer.render(self.canvas)
        logger.debug(f"Rendered {layer.kind} layer")

    def to_svg(self) -> str:
        return self.canvas.to_string()

    def save(self, path: Union[str, Path]) -> Path:
        """Write the document to ``path`` with an XML declaration."""
        path = Path(path)
        path.write_bytes(self.canvas.to_bytes())
        logger.debug(f"Saved SVG to {path}")
        return path
