"""Navigation item loading.

Reads the flat item list produced by the content build. The file holds
either a list of item objects or an object with "items" and "posts"
lists. Items flagged isRootElement are pages supplied as-is (the welcome
page) and never enter the tree.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from docnav.core.items import DocPost, NavItem

logger = logging.getLogger(__name__)


@dataclass
class LoadedItems:
    """Tree input and externally supplied posts."""

    items: list[NavItem] = field(default_factory=list)
    posts: list[DocPost] = field(default_factory=list)


class ItemsLoader:
    """Loads navigation items from a JSON file.

    Every load() reads the file again; nothing is cached between builds.
    """

    def __init__(self, items_file: Path) -> None:
        self._items_file = items_file

    @property
    def items_file(self) -> Path:
        """Path of the JSON items file."""
        return self._items_file

    def load(self) -> LoadedItems:
        """Read and parse the items file.

        Returns:
            LoadedItems with tree items and supplied posts

        Raises:
            FileNotFoundError: If the items file doesn't exist
            ValueError: If the file is not valid JSON or has the wrong shape
        """
        if not self._items_file.exists():
            raise FileNotFoundError(f"Items file not found: {self._items_file}")

        try:
            data = json.loads(self._items_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self._items_file}: {e}") from e

        loaded = parse_items(data)
        logger.info(
            f"Loaded {len(loaded.items)} items and {len(loaded.posts)} posts "
            f"from {self._items_file}"
        )
        return loaded


def parse_items(data: object) -> LoadedItems:
    """Split raw JSON data into tree items and supplied posts.

    Raises:
        ValueError: If the data has the wrong shape
    """
    raw_posts: object = []
    if isinstance(data, dict):
        raw_items = data.get("items", [])
        raw_posts = data.get("posts", [])
    else:
        raw_items = data

    if not isinstance(raw_items, list):
        raise ValueError("items must be a list")
    if not isinstance(raw_posts, list):
        raise ValueError("posts must be a list")

    loaded = LoadedItems(posts=[DocPost.from_dict(raw) for raw in raw_posts])
    for raw in raw_items:
        item = NavItem.from_dict(raw)
        if item.is_root_element:
            loaded.posts.append(DocPost.from_item(item))
        else:
            loaded.items.append(item)
    return loaded
