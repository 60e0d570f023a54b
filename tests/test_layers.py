"""Tests for the individual card layers."""

from pathlib import Path

import pytest
from conftest import NS, children, find_all

from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.exceptions import ConfigurationError, MissingAssetError
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.layer_factory import DEFAULT_LAYOUT
from mtg_svg_maker.layers import (
    ArtLayer,
    BorderLayer,
    FrameLayer,
    NameLayer,
    PowerLayer,
    TextBoxLayer,
    TypeLineLayer,
)
from mtg_svg_maker.layers.art import parse_image_url
from mtg_svg_maker.services.icon_service import IconService
from mtg_svg_maker.svg import SvgCanvas


def texts(canvas: SvgCanvas) -> list[str]:
    return [element.text for element in find_all(canvas.root, "text")]


class TestBorderLayer:
    """Test the outer border."""

    @pytest.mark.parametrize("color", ["white", "black", "silver", "gold", " Gold "])
    def test_supported_colors(self, color: str) -> None:
        """Test that the four border colors are accepted."""
        BorderLayer(DEFAULT_LAYOUT["border"], color=color)

    def test_unsupported_color_raises(self) -> None:
        """Test the error for other colors."""
        with pytest.raises(ConfigurationError) as exc_info:
            BorderLayer(DEFAULT_LAYOUT["border"], color="blue")

        message = str(exc_info.value)
        assert "'blue'" in message
        assert "white, black, silver, gold" in message

    def test_none_means_white(self) -> None:
        """Test that no color gives a white border."""
        assert BorderLayer(DEFAULT_LAYOUT["border"], color=None).color == "white"

    def test_flat_border(self, canvas: SvgCanvas) -> None:
        """Test the white border rectangle, QR code and copyright."""
        BorderLayer(DEFAULT_LAYOUT["border"], color="white").render(canvas)

        (rect,) = children(canvas.root, "rect")
        assert rect.get("fill") == "#EEE"
        assert rect.get("mask") == "url(#artWindowMask)"
        assert (rect.get("rx"), rect.get("ry")) == ("25", "25")

        (qr,) = children(canvas.root, "path")
        assert qr.get("transform") == "translate(40,820) scale(1.1)"
        assert qr.get("fill") == "#111"

        lines = children(canvas.root, "text")
        assert len(lines) == 3
        assert [line.get("y") for line in lines] == ["830", "848", "866"]
        assert all(line.get("class") == "card-copyright" for line in lines)

    def test_black_border_uses_light_text(self, canvas: SvgCanvas) -> None:
        """Test that QR code and copyright turn white on black."""
        BorderLayer(DEFAULT_LAYOUT["border"], color="black").render(canvas)

        assert children(canvas.root, "rect")[0].get("fill") == "#000"
        assert children(canvas.root, "path")[0].get("fill") == "#FFF"
        assert all(t.get("fill") == "#FFF" for t in children(canvas.root, "text"))

    def test_gold_border_is_metallic(self, canvas: SvgCanvas) -> None:
        """Test the flat base plus three metallic passes."""
        layer = BorderLayer(DEFAULT_LAYOUT["border"], color="gold")
        layer.render(canvas)

        assert layer.is_metallic
        rects = children(canvas.root, "rect")
        assert len(rects) == 4
        assert rects[0].get("fill") == "#EEE"
        assert rects[1].get("fill") == "url(#gold_metallic_highlight_gradient)"
        assert rects[2].get("opacity") == "0.15"
        assert rects[3].get("opacity") == "0.18"
        assert canvas.defs.find("svg:pattern[@id='gold_metallic_pattern']", NS) is not None

    def test_silver_border_uses_colorless_scheme(self, canvas: SvgCanvas) -> None:
        """Test that silver renders with colorless metallic colors."""
        BorderLayer(DEFAULT_LAYOUT["border"], color="silver").render(canvas)

        fills = [rect.get("fill") for rect in children(canvas.root, "rect")]
        assert "url(#colorless_metallic_highlight_gradient)" in fills

    def test_missing_qr_code_raises(self, canvas: SvgCanvas, empty_icons_dir: Path) -> None:
        """Test that the border needs the QR code."""
        layer = BorderLayer(
            DEFAULT_LAYOUT["border"], icon_service=IconService(icons_dir=empty_icons_dir)
        )

        with pytest.raises(MissingAssetError, match="QR code SVG content is missing"):
            layer.render(canvas)

    def test_qr_code_without_path_raises(
        self, canvas: SvgCanvas, copied_icons_dir: Path
    ) -> None:
        """Test the error for a QR code file without path data."""
        (copied_icons_dir / "qrcode.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg"><rect/></svg>', encoding="utf-8"
        )
        layer = BorderLayer(
            DEFAULT_LAYOUT["border"], icon_service=IconService(icons_dir=copied_icons_dir)
        )

        with pytest.raises(MissingAssetError, match="No path element found"):
            layer.render(canvas)

    def test_custom_copyright_lines(self, canvas: SvgCanvas) -> None:
        """Test that the copyright text comes from the configuration."""
        config = LayerConfig.with_overrides({"copyright": {"lines": ["Only line"]}})

        BorderLayer(DEFAULT_LAYOUT["border"], layer_config=config).render(canvas)

        assert texts(canvas) == ["Only line"]


class TestFrameLayer:
    """Test the inner frame."""

    def test_standard_frame(self, canvas: SvgCanvas, red_scheme: ColorScheme) -> None:
        """Test the gradient rectangle of a plain frame."""
        layer = FrameLayer(DEFAULT_LAYOUT["frame"], color_scheme=red_scheme)
        layer.render(canvas)

        (rect,) = children(canvas.root, "rect")
        assert (rect.get("x"), rect.get("y"), rect.get("width"), rect.get("height")) == (
            "25",
            "25",
            "580",
            "740",
        )
        assert rect.get("fill") == "url(#red_frame_gradient)"
        assert rect.get("stroke") == "#F44336"
        assert rect.get("mask") == "url(#artWindowMask)"
        assert layer.color == "#F44336"

    def test_gold_frame_is_metallic(self, canvas: SvgCanvas, gold_scheme: ColorScheme) -> None:
        """Test that gold frames add the metal passes."""
        FrameLayer(DEFAULT_LAYOUT["frame"], color_scheme=gold_scheme).render(canvas)

        rects = children(canvas.root, "rect")
        assert len(rects) == 4
        assert rects[2].get("opacity") == "0.3"
        assert rects[3].get("opacity") == "0.4"

    def test_colorless_frame_is_not_metallic(self, canvas: SvgCanvas) -> None:
        """Test that only gold frames get the metal finish."""
        FrameLayer(DEFAULT_LAYOUT["frame"]).render(canvas)

        assert len(children(canvas.root, "rect")) == 1


class TestNameLayer:
    """Test the name bar."""

    def test_name_and_cost(self, canvas: SvgCanvas, red_scheme: ColorScheme) -> None:
        """Test the bar, the name text and the mana cost placement."""
        NameLayer(
            DEFAULT_LAYOUT["name_area"], name="Fire Giant", cost="2RG", color_scheme=red_scheme
        ).render(canvas)

        (group,) = children(canvas.root, "g")
        (rect,) = children(group, "rect")
        assert rect.get("fill") == "url(#red_name_gradient)"
        assert rect.get("stroke") == "#111"
        assert rect.get("mask") is None

        (name,) = children(group, "text")
        assert name.text == "Fire Giant"
        assert (name.get("x"), name.get("y")) == ("45", "75")
        assert name.get("class") == "card-name"

        cost_group = group.find("svg:g[@transform]", NS)
        assert cost_group.get("transform") == "translate(505, 63)"
        assert len(find_all(cost_group, "circle")) == 3

    def test_without_cost(self, canvas: SvgCanvas) -> None:
        """Test that no cost means no circles."""
        NameLayer(DEFAULT_LAYOUT["name_area"], name="Land").render(canvas)

        (group,) = children(canvas.root, "g")
        assert find_all(group, "circle") == []
        assert group.find("svg:g[@transform]", NS) is None

    def test_default_color(self) -> None:
        """Test that the layer color falls back to the scheme background."""
        layer = NameLayer(
            DEFAULT_LAYOUT["name_area"], name="x", color_scheme=ColorScheme.resolve("blue")
        )

        assert layer.color == "#E3F2FD"


class TestArtLayer:
    """Test the art window."""

    def test_frames_without_art(self, canvas: SvgCanvas, red_scheme: ColorScheme) -> None:
        """Test the outer and inner frame rectangles."""
        ArtLayer(DEFAULT_LAYOUT["art_layer"], color_scheme=red_scheme).render(canvas)

        (group,) = children(canvas.root, "g")
        outer, inner = children(group, "rect")
        assert (outer.get("x"), outer.get("y"), outer.get("width"), outer.get("height")) == (
            "37",
            "92",
            "556",
            "406",
        )
        assert outer.get("stroke") == "#F44336"
        assert (outer.get("rx"), outer.get("ry")) == ("8", "8")
        assert inner.get("stroke") == "#111"
        assert (inner.get("rx"), inner.get("ry")) == ("5", "5")
        assert children(group, "image") == []

    def test_with_art(self, canvas: SvgCanvas) -> None:
        """Test the artwork image element."""
        ArtLayer(DEFAULT_LAYOUT["art_layer"], art="https://example.com/art.png").render(canvas)

        (image,) = find_all(canvas.root, "image")
        assert image.get("href") == "https://example.com/art.png"
        assert image.get("preserveAspectRatio") == "xMidYMid slice"
        assert (image.get("width"), image.get("height")) == ("550", "400")

    def test_invalid_url_raises(self) -> None:
        """Test that an unparseable URL is rejected at construction."""
        with pytest.raises(ConfigurationError, match="Invalid image URL"):
            ArtLayer(DEFAULT_LAYOUT["art_layer"], art="http://example.com:99999/art.png")

    @pytest.mark.parametrize(
        "url", ["https://example.com/a.png", "images/art.png", "file:///tmp/a.jpg"]
    )
    def test_valid_urls(self, url: str) -> None:
        """Test that URLs and relative paths pass through."""
        assert parse_image_url(url) == url

    def test_empty_url(self) -> None:
        """Test that no URL means no art."""
        assert parse_image_url("") is None
        assert parse_image_url(None) is None


class TestTypeLineLayer:
    """Test the type line bar."""

    def test_type_line_and_icon(self, canvas: SvgCanvas) -> None:
        """Test the bar, the text and the brand icon."""
        TypeLineLayer(DEFAULT_LAYOUT["type_area"], type_line="Creature - Goblin").render(canvas)

        (group,) = children(canvas.root, "g")
        (text,) = children(group, "text")
        assert text.text == "Creature - Goblin"
        assert text.get("class") == "card-type"
        assert children(group, "rect")[0].get("fill") == "url(#colorless_name_gradient)"

        (icon,) = children(group, "path")
        assert icon.get("aria-label") == "brand"
        assert icon.get("fill") == "none"
        assert icon.get("transform") == (
            "translate(557,504) scale(0.23) scale(0.93839063,1.0656543)"
        )

    def test_missing_brand_icon_raises(self, canvas: SvgCanvas, empty_icons_dir: Path) -> None:
        """Test that the brand icon is required."""
        layer = TypeLineLayer(
            DEFAULT_LAYOUT["type_area"],
            type_line="Instant",
            icon_service=IconService(icons_dir=empty_icons_dir),
        )

        with pytest.raises(MissingAssetError, match="Brand icon SVG not found"):
            layer.render(canvas)

    def test_brand_icon_without_path(self, canvas: SvgCanvas, copied_icons_dir: Path) -> None:
        """Test that a brand icon without path data is skipped."""
        (copied_icons_dir / "brand.svg").write_text(
            '<svg xmlns="http://www.w3.org/2000/svg"/>', encoding="utf-8"
        )
        TypeLineLayer(
            DEFAULT_LAYOUT["type_area"],
            type_line="Instant",
            icon_service=IconService(icons_dir=copied_icons_dir),
        ).render(canvas)

        assert find_all(canvas.root, "path") == []
        assert texts(canvas) == ["Instant"]


class TestTextBoxLayer:
    """Test the rules and flavor text box."""

    def test_rules_text_only(self, canvas: SvgCanvas, red_scheme: ColorScheme) -> None:
        """Test the box and the rules text position."""
        TextBoxLayer(
            DEFAULT_LAYOUT["text_box"], rules_text="Haste", color_scheme=red_scheme
        ).render(canvas)

        (group,) = children(canvas.root, "g")
        (rect,) = children(group, "rect")
        assert rect.get("fill") == "url(#red_description_gradient)"
        assert rect.get("stroke") == "#F44336"
        (text,) = children(group, "text")
        assert (text.text, text.get("x"), text.get("y")) == ("Haste", "55", "575")
        assert text.get("class") == "card-description"
        assert children(group, "line") == []

    def test_flavor_text(self, canvas: SvgCanvas) -> None:
        """Test the separator and flavor text near the bottom."""
        TextBoxLayer(
            DEFAULT_LAYOUT["text_box"], rules_text="Flying", flavor_text="Soar."
        ).render(canvas)

        (group,) = children(canvas.root, "g")
        (separator,) = children(group, "line")
        assert (separator.get("y1"), separator.get("y2")) == ("740", "740")
        assert (separator.get("x1"), separator.get("x2")) == ("55", "575")
        flavor = children(group, "text")[-1]
        assert (flavor.text, flavor.get("y")) == ("Soar.", "765")
        assert flavor.get("class") == "card-flavor-text"

    def test_blank_flavor_text_is_skipped(self, canvas: SvgCanvas) -> None:
        """Test that whitespace-only flavor text draws nothing."""
        TextBoxLayer(DEFAULT_LAYOUT["text_box"], rules_text="x", flavor_text="   ").render(canvas)

        (group,) = children(canvas.root, "g")
        assert children(group, "line") == []
        assert len(children(group, "text")) == 1

    def test_long_rules_text_wraps(self, canvas: SvgCanvas) -> None:
        """Test that rules text wraps onto several lines."""
        rules = " ".join(["damage"] * 30)
        TextBoxLayer(DEFAULT_LAYOUT["text_box"], rules_text=rules).render(canvas)

        lines = find_all(canvas.root, "text")
        assert len(lines) > 1
        assert [line.get("y") for line in lines[:2]] == ["575", "603"]


class TestPowerLayer:
    """Test the power/toughness box."""

    def test_box_size_and_position(self, canvas: SvgCanvas, red_scheme: ColorScheme) -> None:
        """Test a baseline-sized box."""
        layer = PowerLayer(
            DEFAULT_LAYOUT["power_area"], power="2", toughness="3", color_scheme=red_scheme
        )
        layer.render(canvas)

        assert layer.box_width == 60
        assert layer.box_x == 535
        (rect,) = find_all(canvas.root, "rect")
        assert (rect.get("x"), rect.get("width")) == ("535", "60")
        assert rect.get("fill") == "url(#red_name_gradient)"
        (text,) = find_all(canvas.root, "text")
        assert (text.text, text.get("x"), text.get("y")) == ("2/3", "565", "819")
        assert text.get("class") == "card-power-toughness"
        assert text.get("text-anchor") == "middle"

    def test_box_grows_with_text(self) -> None:
        """Test the width for long values."""
        layer = PowerLayer(DEFAULT_LAYOUT["power_area"], power="9999", toughness="9999")

        assert layer.box_width == 138
        assert layer.box_x == 457

    def test_zero_values_render(self, canvas: SvgCanvas) -> None:
        """Test that 0/0 is a valid stat line."""
        layer = PowerLayer(DEFAULT_LAYOUT["power_area"], power="0", toughness="0")
        layer.render(canvas)

        assert (layer.box_width, layer.box_x) == (60, 535)
        assert texts(canvas) == ["0/0"]

    def test_numbers_are_accepted(self) -> None:
        """Test that integer stats are converted to text."""
        layer = PowerLayer(DEFAULT_LAYOUT["power_area"], power=4, toughness=5)

        assert layer.label == "4/5"

    @pytest.mark.parametrize(
        "power,toughness", [(None, "2"), ("2", None), ("", "2"), ("2", "  "), (None, None)]
    )
    def test_missing_values_skip_rendering(self, canvas: SvgCanvas, power, toughness) -> None:
        """Test that nothing is drawn without both values."""
        PowerLayer(DEFAULT_LAYOUT["power_area"], power=power, toughness=toughness).render(canvas)

        assert find_all(canvas.root, "text") == []
        assert find_all(canvas.root, "rect") == []
