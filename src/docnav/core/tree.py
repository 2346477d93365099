"""Navigation tree builder.

Builds the rooted navigation tree from flat NavItem descriptors.
Items are placed in discovery order first; a second pass re-sorts every
children map by weight. The two passes stay separate: placement order
only has to guarantee that parents exist, not final sibling order.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TypedDict

from docnav.core.errors import (
    MissingParentSectionError,
    MissingRootSectionError,
    NavigationTreeError,
)
from docnav.core.items import NavItem
from docnav.core.types import URLPath

logger = logging.getLogger(__name__)

WELCOME_ID = "welcome"
WELCOME_SLUG = URLPath("/docs")
REFERENCE_ID = "reference"
SPECIFICATION_ID = "specification"


class TreeNodeDict(TypedDict):
    """Dictionary representation of a tree node."""

    item: dict[str, object]
    children: dict[str, "TreeNodeDict"]


@dataclass
class TreeNode:
    """Navigation item with its ordered children.

    Children are keyed by section id for sections and by title for pages.
    """

    item: NavItem
    children: dict[str, "TreeNode"] = field(default_factory=dict)

    def to_dict(self) -> TreeNodeDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "item": self.item.to_dict(),
            "children": {key: child.to_dict() for key, child in self.children.items()},
        }


# Root section id -> root section node, in reading order
DocTree = dict[str, TreeNode]


def welcome_item() -> NavItem:
    """Synthetic root section every tree starts with."""
    return NavItem(
        title="Welcome",
        weight=0,
        is_root_section=True,
        is_section=True,
        root_section_id=WELCOME_ID,
        section_weight=0,
        slug=WELCOME_SLUG,
    )


def build_nav_tree(items: Sequence[NavItem]) -> DocTree:
    """Build the navigation tree from flat item descriptors.

    Args:
        items: Page and section descriptors in any order

    Returns:
        Root sections keyed by id, starting with the synthetic welcome section

    Raises:
        NavigationTreeError: If any item cannot be placed; no partial tree
            is returned
    """
    try:
        tree = _place_items(items)
        _sort_tree(tree)
    except Exception as e:
        raise NavigationTreeError(f"Failed to build navigation tree: {e}") from e

    logger.info(f"Built navigation tree with {len(tree)} root sections from {len(items)} items")
    return tree


def tree_to_dict(tree: DocTree) -> dict[str, TreeNodeDict]:
    """Convert a tree to dictionary for JSON serialization."""
    return {key: node.to_dict() for key, node in tree.items()}


def _processing_key(item: NavItem) -> tuple[bool, float, bool]:
    """Root sections first, then by weight, sections before pages."""
    return (not item.is_root_section, item.weight, not item.is_section)


def _place_items(items: Sequence[NavItem]) -> DocTree:
    """Insert items into a fresh tree in processing order."""
    tree: DocTree = {WELCOME_ID: TreeNode(welcome_item())}

    for item in sorted(items, key=_processing_key):
        if item.is_root_section:
            _register_root_section(tree, item)

        if item.parent:
            _attach_to_parent(tree, item)

        if not item.is_section:
            _insert_page(tree, item)

    return tree


def _register_root_section(tree: DocTree, item: NavItem) -> None:
    if item.root_section_id is None:
        raise ValueError(f"Root section {item.title} has no rootSectionId")

    existing = tree.get(item.root_section_id)
    children = existing.children if existing is not None else {}
    tree[item.root_section_id] = TreeNode(item, children)
    logger.debug(f"Registered root section {item.root_section_id}")


def _attach_to_parent(tree: DocTree, item: NavItem) -> None:
    parent = tree.get(item.parent) if item.parent else None
    if parent is None:
        raise MissingParentSectionError(str(item.parent), item.title)

    key = item.section_id or item.title
    # A page may have created a placeholder already; keep what it collected
    existing = parent.children.get(key)
    children = existing.children if existing is not None else {}
    parent.children[key] = TreeNode(item, children)
    logger.debug(f"Attached section {key} to {item.parent}")


def _insert_page(tree: DocTree, item: NavItem) -> None:
    root = tree.get(item.root_section_id) if item.root_section_id else None
    if root is None:
        raise MissingRootSectionError(item.root_section_id, item.title)

    if not item.section_id:
        root.children[item.title] = TreeNode(item)
        return

    section = root.children.get(item.section_id)
    if section is None:
        section = TreeNode(_placeholder_section(item))
        root.children[item.section_id] = section
        logger.debug(f"Created placeholder section {item.section_id} for {item.title}")
    section.children[item.title] = TreeNode(item)


def _placeholder_section(page: NavItem) -> NavItem:
    """Stand-in for a section whose own item has not been processed yet."""
    section_id = str(page.section_id)
    return NavItem(
        title=section_id,
        weight=page.weight,
        is_section=True,
        root_section_id=page.root_section_id,
        section_id=section_id,
    )


def _sort_tree(tree: DocTree) -> None:
    """Re-sort children of every root section by weight."""
    for root_key, root in tree.items():
        root.children = dict(
            sorted(root.children.items(), key=lambda entry: entry[1].item.weight)
        )

        # A single child needs no reordering below it
        if len(root.children) <= 1:
            continue

        for key, child in root.children.items():
            _sort_descendants(child)
            if root_key == REFERENCE_ID and key == SPECIFICATION_ID:
                child.item = replace(child.item, href=_canonical_version_slug(child))


def _sort_descendants(node: TreeNode) -> None:
    """Re-sort and re-key a section's children by title, recursively."""
    ordered = sorted(node.children.values(), key=lambda child: child.item.weight)
    node.children = {child.item.title: child for child in ordered}
    for child in ordered:
        _sort_descendants(child)


def _canonical_version_slug(specification: TreeNode) -> str | None:
    """Slug of the first specification version without a prerelease flag."""
    for version in specification.children.values():
        if version.item.is_prerelease is None:
            return version.item.slug
    return None
