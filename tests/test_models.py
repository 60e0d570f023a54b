"""Tests for the card model and application settings."""

import pytest
from pydantic import ValidationError

from mtg_svg_maker.config import Settings
from mtg_svg_maker.domain.color_scheme import SchemeName
from mtg_svg_maker.models import Card


class TestCard:
    """Test the Card model."""

    def test_required_fields(self) -> None:
        """Test that name, type line and rules text are required."""
        with pytest.raises(ValidationError):
            Card(name="Bolt", type_line="Instant")

    def test_empty_name_rejected(self) -> None:
        """Test that the name cannot be empty."""
        with pytest.raises(ValidationError):
            Card(name="", type_line="Instant", rules_text="")

    def test_numbers_become_text(self) -> None:
        """Test that numeric stats from YAML are converted."""
        card = Card(
            name="Bear", type_line="Creature", rules_text="", mana_cost=2, power=2, toughness=0
        )

        assert (card.mana_cost, card.power, card.toughness) == ("2", "2", "0")

    def test_numeric_name_and_type_line(self) -> None:
        """Test that numeric names and type lines from YAML are converted."""
        card = Card.from_dict({"name": 1984, "type_line": 42, "rules_text": 3.5})

        assert (card.name, card.type_line, card.rules_text) == ("1984", "42", "3.5")

    def test_boolean_name_rejected(self) -> None:
        """Test that a YAML boolean is not taken as a name."""
        with pytest.raises(ValidationError):
            Card.from_dict({"name": True, "type_line": "Artifact", "rules_text": ""})

    def test_boolean_stat_rejected(self) -> None:
        """Test that booleans are not accepted as stats."""
        with pytest.raises(ValidationError):
            Card(name="Bear", type_line="Creature", rules_text="", power=True)

    def test_unknown_keys_ignored(self) -> None:
        """Test that extra keys in a card file are dropped."""
        card = Card.from_dict(
            {"name": "Bolt", "type_line": "Instant", "rules_text": "", "rarity": "common"}
        )

        assert card.to_dict() == {"name": "Bolt", "type_line": "Instant", "rules_text": ""}

    def test_frozen(self) -> None:
        """Test that cards cannot be modified."""
        card = Card(name="Bolt", type_line="Instant", rules_text="")

        with pytest.raises(ValidationError):
            card.name = "Shock"

    def test_color_scheme(self) -> None:
        """Test the scheme derived from the card color."""
        assert Card(name="a", type_line="b", rules_text="", color="Blue").color_scheme.name is (
            SchemeName.BLUE
        )
        assert Card(name="a", type_line="b", rules_text="").color_scheme.name is (
            SchemeName.COLORLESS
        )

    def test_str(self, creature_card: Card) -> None:
        """Test the short text form."""
        assert str(creature_card) == "Goblin Guide - R\nCreature - Goblin Scout 2/2"


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self) -> None:
        """Test the default values."""
        settings = Settings()

        assert settings.cards_per_row == 4
        assert settings.spacing == 30
        assert settings.embed_font is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that prefixed environment variables are read."""
        monkeypatch.setenv("MTG_SVG_CARDS_PER_ROW", "6")
        monkeypatch.setenv("MTG_SVG_DEBUG", "true")

        settings = Settings()

        assert settings.cards_per_row == 6
        assert settings.debug is True

    def test_invalid_cards_per_row(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a row needs at least one card."""
        monkeypatch.setenv("MTG_SVG_CARDS_PER_ROW", "0")

        with pytest.raises(ValidationError):
            Settings()
