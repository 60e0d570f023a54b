"""YAML card collection files.

A card file is a mapping from a card key (``lightning_bolt``) to that card's
fields::

    lightning_bolt:
      name: Lightning Bolt
      mana_cost: R
      type_line: Instant
      rules_text: Lightning Bolt deals 3 damage to any target.
      color: red
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

import yaml

from mtg_svg_maker.exceptions import CardFileError
from mtg_svg_maker.models import Card

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_card_configs(path: PathLike) -> dict[str, dict[str, Any]]:
    """Read a card file.

    Args:
        path: YAML file to read

    Returns:
        Card fields by key; empty when the file does not exist or is empty

    Raises:
        CardFileError: If the file is not valid YAML or not a mapping
    """
    path = Path(path)
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CardFileError(f"Invalid YAML syntax in {path}: {e}") from e
    except OSError as e:
        raise CardFileError(f"Error reading YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise CardFileError(
            f"Card file {path} must contain a mapping of cards, got {type(data).__name__}"
        )

    logger.debug(f"Loaded {len(data)} card(s) from {path}")
    return dict(data)


def save_card_configs(path: PathLike, configs: Mapping[str, Any]) -> Path:
    """Write a card file, keeping the order of the cards."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            dict(configs),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    return path


def generate_card_key(name: str, existing: Mapping[str, Any]) -> str:
    """Derive a unique key from a card name.

    Non-alphanumeric runs become single underscores; a numeric suffix is
    added when the key is already taken.

    Example:
        >>> generate_card_key("Lightning Bolt", {"lightning_bolt": {}})
        'lightning_bolt_1'
    """
    base_key = re.sub(r"_+", "_", re.sub(r"[^a-z0-9]", "_", name.lower())).rstrip("_")
    if base_key not in existing:
        return base_key

    counter = 1
    while f"{base_key}_{counter}" in existing:
        counter += 1
    return f"{base_key}_{counter}"


def add_card(path: PathLike, card: Card) -> str:
    """Append ``card`` to a card file, creating the file if needed.

    Returns:
        The key the card was stored under
    """
    configs = load_card_configs(path)
    key = generate_card_key(card.name, configs)
    configs[key] = card.to_dict()
    save_card_configs(path, configs)
    logger.debug(f"Stored '{card.name}' under key {key} in {path}")
    return key
