"""Command-line interface for the MTG SVG card maker."""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from mtg_svg_maker import __version__
from mtg_svg_maker.config import settings
from mtg_svg_maker.core import CardGenerator
from mtg_svg_maker.exceptions import CardMakerError, ConfigurationError
from mtg_svg_maker.layer_config import LayerConfig
from mtg_svg_maker.models import Card
from mtg_svg_maker.services.card_store import add_card, load_card_configs
from mtg_svg_maker.services.icon_service import IconService
from mtg_svg_maker.services.sprite_sheet_service import SpriteSheetService

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output_card.svg"


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level!r}")
    logging.basicConfig(
        level=logging.DEBUG if verbose or settings.debug else level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def process_newlines(text: Optional[str]) -> Optional[str]:
    """Turn literal ``\\n`` sequences typed on the command line into newlines."""
    if text is None:
        return None
    return text.replace("\\n", "\n")


def add_card_options(parser: argparse.ArgumentParser) -> None:
    """Add the options describing a single card."""
    parser.add_argument("--name", required=True, help="Card name")
    parser.add_argument(
        "--mana-cost", "--mana", "--cost",
        dest="mana_cost",
        help='Mana cost (e.g., "2RR", "XG")',
    )
    parser.add_argument(
        "--type-line", "--type",
        dest="type_line",
        required=True,
        help='Card type & subtype (e.g., "Creature - Dragon", "Instant")',
    )
    parser.add_argument(
        "--rules-text", "--rules",
        dest="rules_text",
        required=True,
        help="Card rules text",
    )
    parser.add_argument(
        "--flavor-text", "--flavor",
        dest="flavor_text",
        help="Flavor text (optional)",
    )
    parser.add_argument("--power", help="Power (for creatures)")
    parser.add_argument("--toughness", help="Toughness (for creatures)")
    parser.add_argument(
        "--border-color", "--border",
        dest="border_color",
        help="Border color (white, black, gold, silver)",
    )
    parser.add_argument(
        "--color",
        default="colorless",
        help="Card color (white, blue, black, red, green, gold, artifact, colorless)",
    )
    parser.add_argument(
        "--art", "--artwork", "--image",
        dest="art",
        help="Image URL or path for card artwork",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate Magic: The Gathering style cards as SVG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Single card
    card_parser = subparsers.add_parser(
        "generate-card", aliases=["g", "gc"], help="Generate a single card"
    )
    add_card_options(card_parser)
    card_parser.add_argument(
        "--output",
        default=str(settings.output_dir / DEFAULT_OUTPUT),
        help="Output filename",
    )
    card_parser.add_argument(
        "--layer-config",
        help="YAML file with layer styling overrides",
    )
    card_parser.add_argument(
        "--embed-font",
        action="store_true",
        default=settings.embed_font,
        help="Embed the title font in the SVG",
    )
    card_parser.set_defaults(handler=generate_card)

    # Sprite sheet
    sprite_parser = subparsers.add_parser(
        "generate-sprite",
        aliases=["gs", "gcs"],
        help="Generate a sprite sheet from a YAML card file",
    )
    sprite_parser.add_argument("yaml_file", help="YAML card file")
    sprite_parser.add_argument("output_file", help="Output SVG file")
    sprite_parser.add_argument(
        "--cards-per-row",
        type=int,
        default=settings.cards_per_row,
        help="Number of cards per row in sprite",
    )
    sprite_parser.add_argument(
        "--spacing",
        type=int,
        default=settings.spacing,
        help="Spacing between cards in pixels",
    )
    sprite_parser.set_defaults(handler=generate_sprite)

    # Card file
    add_parser = subparsers.add_parser(
        "add-card", aliases=["a", "ac"], help="Add a card to a YAML card file"
    )
    add_parser.add_argument("yaml_file", help="YAML card file")
    add_card_options(add_parser)
    add_parser.set_defaults(handler=add_card_command)

    return parser


def card_from_args(args: argparse.Namespace) -> Card:
    return Card(
        name=args.name,
        type_line=args.type_line,
        rules_text=process_newlines(args.rules_text),
        mana_cost=args.mana_cost,
        flavor_text=process_newlines(args.flavor_text),
        power=args.power,
        toughness=args.toughness,
        border_color=args.border_color,
        color=args.color,
        art=args.art,
    )


def build_generator(
    layer_config_path: Optional[str] = None, embed_font: bool = False
) -> CardGenerator:
    layer_config = LayerConfig.from_yaml(layer_config_path) if layer_config_path else None
    return CardGenerator(
        layer_config=layer_config,
        icon_service=IconService(icons_dir=settings.icons_dir),
        embed_font=embed_font,
        font_path=settings.font_path,
    )


def generate_card(args: argparse.Namespace) -> int:
    card = card_from_args(args)
    generator = build_generator(args.layer_config, args.embed_font)
    generator.save_card(card, args.output)
    console.print(f"[green]✓[/green] Generated {args.output}!")
    return 0


def generate_sprite(args: argparse.Namespace) -> int:
    configs = load_card_configs(args.yaml_file)
    service = SpriteSheetService(
        cards_per_row=args.cards_per_row,
        spacing=args.spacing,
        generator=build_generator(),
    )
    if not service.create_sprite_sheet(configs, args.output_file):
        logger.error("Failed to generate sprite sheet")
        return 1

    width, height = service.sprite_dimensions(len(configs))
    console.print(f"[green]✓[/green] Generated {args.output_file}!")
    console.print(f"[blue]Sprite dimensions: {width}x{height} pixels[/blue]")
    console.print(f"[blue]Contains {len(configs)} cards[/blue]")
    return 0


def add_card_command(args: argparse.Namespace) -> int:
    card = card_from_args(args)
    key = add_card(args.yaml_file, card)
    console.print(f"[green]✓[/green] Added card '{card.name}' to {args.yaml_file}!")
    console.print(f"[blue]Key: {key}[/blue]")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.verbose)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.handler(args)
    except ValidationError as e:
        logger.error(f"Invalid card: {e}")
    except CardMakerError as e:
        logger.error(str(e))
    except OSError as e:
        logger.error(f"File error: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
