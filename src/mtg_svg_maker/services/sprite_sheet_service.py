"""Renders a batch of cards into one sprite sheet."""

import logging
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from mtg_svg_maker.core import CardGenerator
from mtg_svg_maker.exceptions import SpriteSheetError
from mtg_svg_maker.services.sprite_sheet import SpriteSheetAssets, SpriteSheetBuilder

logger = logging.getLogger(__name__)


class SpriteSheetService:
    """
    Renders every card to its own temporary SVG, then stitches them together.

    Temporary files live in one directory that is removed however the batch
    ends.
    """

    def __init__(
        self,
        cards_per_row: int = 5,
        spacing: int = 30,
        generator: Optional[CardGenerator] = None,
        assets: Optional[SpriteSheetAssets] = None,
    ) -> None:
        self.cards_per_row = cards_per_row
        self.spacing = spacing
        self.builder = SpriteSheetBuilder(cards_per_row=cards_per_row, spacing=spacing)
        self.assets = assets or SpriteSheetAssets()
        self.generator = generator or CardGenerator()

    def sprite_dimensions(self, card_count: int) -> tuple[int, int]:
        return self.builder.sprite_dimensions(card_count)

    def create_sprite_sheet(
        self, card_configs: Mapping[str, Mapping[str, Any]], output_file: Union[str, Path]
    ) -> bool:
        """Render ``card_configs`` into a sprite sheet at ``output_file``.

        Args:
            card_configs: Card fields by key, in sheet order
            output_file: Destination SVG file

        Returns:
            True when the sheet was written, False when there are no cards

        Raises:
            SpriteSheetError: If any card fails to render; nothing is written
        """
        if not card_configs:
            logger.warning("No cards to put on the sprite sheet")
            return False

        with tempfile.TemporaryDirectory(prefix="mtg_svg_sprite_") as temp_dir:
            card_files = self._render_cards(card_configs, Path(temp_dir))
            root = self.builder.build(card_files, self.assets)
            self.builder.write(root, output_file)

        width, height = self.sprite_dimensions(len(card_configs))
        logger.info(
            f"Sprite sheet with {len(card_configs)} cards ({width}x{height}) "
            f"saved to: {output_file}"
        )
        return True

    def _render_cards(
        self, card_configs: Mapping[str, Mapping[str, Any]], temp_dir: Path
    ) -> list[Path]:
        card_files = []
        for index, config in enumerate(card_configs.values()):
            try:
                path = temp_dir / f"card_{index}.svg"
                self.generator.build_template(dict(config)).save(path)
            except Exception as e:
                raise SpriteSheetError(f"Error generating card {index}: {e}") from e
            card_files.append(path)
            logger.debug(f"Rendered card {index} to {path}")
        return card_files
