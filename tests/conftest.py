"""Shared fixtures for the card maker tests."""

from pathlib import Path

import pytest
from lxml import etree

from mtg_svg_maker.constants import SVG_NAMESPACE
from mtg_svg_maker.core import CardGenerator
from mtg_svg_maker.domain.color_scheme import ColorScheme
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.models import Card
from mtg_svg_maker.services.icon_service import ICONS_DIR, IconService
from mtg_svg_maker.svg import SvgCanvas

NS = {"svg": SVG_NAMESPACE}


def parse_svg(markup: str) -> etree._Element:
    """Parse a rendered SVG document string."""
    return etree.fromstring(markup.encode("utf-8"))


def find_all(element: etree._Element, tag: str) -> list[etree._Element]:
    """All descendants of ``element`` with the given SVG tag."""
    return element.findall(f".//svg:{tag}", NS)


def children(element: etree._Element, tag: str) -> list[etree._Element]:
    """Direct children of ``element`` with the given SVG tag."""
    return element.findall(f"svg:{tag}", NS)


@pytest.fixture
def layer_config() -> LayerConfig:
    """Default layer configuration."""
    return LayerConfig.default()


@pytest.fixture
def canvas() -> SvgCanvas:
    """Empty card-sized canvas."""
    return SvgCanvas()


@pytest.fixture
def icon_service() -> IconService:
    """Icon service reading the bundled icons."""
    return IconService()


@pytest.fixture
def empty_icons_dir(tmp_path: Path) -> Path:
    """Icon directory without any files."""
    icons = tmp_path / "icons"
    icons.mkdir()
    return icons


@pytest.fixture
def copied_icons_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled icon directory."""
    icons = tmp_path / "icons"
    icons.mkdir()
    for source in ICONS_DIR.glob("*.svg"):
        (icons / source.name).write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
    return icons


@pytest.fixture
def red_scheme() -> ColorScheme:
    return ColorScheme.resolve("red")


@pytest.fixture
def gold_scheme() -> ColorScheme:
    return ColorScheme.resolve("gold")


@pytest.fixture
def generator() -> CardGenerator:
    """Card generator with default configuration."""
    return CardGenerator()


@pytest.fixture
def creature_card() -> Card:
    """Red creature with cost, flavor text and power/toughness."""
    return Card(
        name="Goblin Guide",
        mana_cost="R",
        type_line="Creature - Goblin Scout",
        rules_text=(
            "Haste\nWhenever Goblin Guide attacks, defending player reveals "
            "the top card of their library."
        ),
        flavor_text="His maps are always up to date.",
        power="2",
        toughness="2",
        color="red",
    )


@pytest.fixture
def instant_card() -> Card:
    """Red instant without power or toughness."""
    return Card(
        name="Lightning Bolt",
        mana_cost="R",
        type_line="Instant",
        rules_text="Lightning Bolt deals 3 damage to any target.",
        color="red",
    )


@pytest.fixture
def card_configs() -> dict:
    """Card file contents with three cards."""
    return {
        "lightning_bolt": {
            "name": "Lightning Bolt",
            "mana_cost": "R",
            "type_line": "Instant",
            "rules_text": "Lightning Bolt deals 3 damage to any target.",
            "color": "red",
        },
        "serra_angel": {
            "name": "Serra Angel",
            "mana_cost": "3WW",
            "type_line": "Creature - Angel",
            "rules_text": "Flying, vigilance",
            "power": 4,
            "toughness": 4,
            "color": "white",
            "border_color": "gold",
        },
        "sol_ring": {
            "name": "Sol Ring",
            "mana_cost": "1",
            "type_line": "Artifact",
            "rules_text": "{T}: Add {C}{C}.",
            "color": "artifact",
            "border_color": "black",
        },
    }
