"""Gradient and pattern definitions for color schemes.

Every ID is derived from the scheme name, so the same scheme always maps to
the same ``url(#...)`` references. Defining a scheme twice appends a second,
identical set of definitions; renderers resolve either copy the same way.
"""

from lxml import etree

from mtg_svg_maker.domain.color_scheme import ColorScheme, SchemeName
from mtg_svg_maker.svg import SvgCanvas, sub_element

METALLIC_SCHEMES = frozenset({SchemeName.GOLD, SchemeName.COLORLESS})

# (offset, color index into metallic_highlight, opacity)
HIGHLIGHT_STOPS = (
    ("0%", 2, "0.6"),
    ("20%", 1, "0.9"),
    ("38%", 0, "1.0"),
    ("42%", 1, "0.7"),
    ("62%", 2, "0.5"),
    ("73%", 0, "0.8"),
    ("80%", 1, "0.6"),
    ("100%", 2, "0.4"),
)

SHADOW_STOPS = (("0%", "0.3"), ("50%", "0.5"), ("100%", "0.7"))

PATTERN_SIZE = 20


def card_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_card_gradient"


def frame_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_frame_gradient"


def name_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_name_gradient"


def description_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_description_gradient"


def metallic_highlight_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_metallic_highlight_gradient"


def metallic_shadow_gradient_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_metallic_shadow_gradient"


def metallic_pattern_id(scheme: ColorScheme) -> str:
    return f"{scheme.scheme_name}_metallic_pattern"


def is_metallic(scheme: ColorScheme) -> bool:
    """Whether the scheme gets highlight, shadow and pattern definitions."""
    return scheme.name in METALLIC_SCHEMES and scheme.has_metallic_colors


def define_all_gradients(canvas: SvgCanvas, scheme: ColorScheme) -> None:
    """Add the scheme's gradients (and metallic set, if any) to the canvas defs."""
    define_standard_gradients(canvas.defs, scheme)
    if is_metallic(scheme):
        define_metallic_gradients(canvas.defs, scheme)


def define_standard_gradients(parent: etree._Element, scheme: ColorScheme) -> None:
    """Add the card, frame, name and description gradients to ``parent``."""
    _linear_gradient(parent, card_gradient_id(scheme), scheme.card_gradient)
    _linear_gradient(parent, frame_gradient_id(scheme), scheme.frame_gradient)
    _linear_gradient(parent, name_gradient_id(scheme), scheme.name_gradient)
    _linear_gradient(parent, description_gradient_id(scheme), scheme.description_gradient)


def define_metallic_gradients(parent: etree._Element, scheme: ColorScheme) -> None:
    """Add the highlight gradient, shadow gradient and texture pattern to ``parent``."""
    highlight = sub_element(
        parent,
        "linearGradient",
        id=metallic_highlight_gradient_id(scheme),
        x1="0%",
        y1="0%",
        x2="100%",
        y2="100%",
    )
    for offset, index, opacity in HIGHLIGHT_STOPS:
        sub_element(
            highlight,
            "stop",
            offset=offset,
            stop_color=scheme.metallic_highlight[index],
            stop_opacity=opacity,
        )

    shadow = sub_element(
        parent,
        "radialGradient",
        id=metallic_shadow_gradient_id(scheme),
        cx="50%",
        cy="50%",
        r="70%",
    )
    for (offset, opacity), color in zip(SHADOW_STOPS, scheme.metallic_shadow):
        sub_element(shadow, "stop", offset=offset, stop_color=color, stop_opacity=opacity)

    _metallic_pattern(parent, scheme)


def _linear_gradient(parent: etree._Element, gradient_id: str, colors: tuple[str, ...]) -> None:
    gradient = sub_element(
        parent, "linearGradient", id=gradient_id, x1="0%", y1="0%", x2="100%", y2="100%"
    )
    for offset, color in zip(("0%", "50%", "100%"), colors):
        sub_element(gradient, "stop", offset=offset, stop_color=color)


def _metallic_pattern(parent: etree._Element, scheme: ColorScheme) -> None:
    light = scheme.metallic_pattern_light
    dark = scheme.metallic_pattern_dark
    pattern = sub_element(
        parent,
        "pattern",
        id=metallic_pattern_id(scheme),
        x="0",
        y="0",
        width=str(PATTERN_SIZE),
        height=str(PATTERN_SIZE),
        patternUnits="userSpaceOnUse",
    )
    # Crossed diagonals
    sub_element(pattern, "line", x1="0", y1="0", x2="20", y2="20",
                stroke=light, stroke_width="0.5", opacity="0.3")
    sub_element(pattern, "line", x1="20", y1="0", x2="0", y2="20",
                stroke=dark, stroke_width="0.5", opacity="0.2")
    # Dots
    sub_element(pattern, "circle", cx="5", cy="5", r="0.5", fill=light, opacity="0.6")
    sub_element(pattern, "circle", cx="15", cy="15", r="0.5", fill=light, opacity="0.6")
    sub_element(pattern, "circle", cx="10", cy="10", r="0.3", fill=dark, opacity="0.4")
