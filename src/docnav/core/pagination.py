"""Page linearization and next/previous links.

Flattens the navigation tree into reading order and annotates every
readable page with links to its neighbours. Section headers are not
linked themselves; a link that crosses one gets a compound title naming
the section.
"""

import logging
from collections.abc import Iterator, Sequence

from docnav.core.errors import NavigationError, PaginationError, TraversalError
from docnav.core.items import DocPost, NavItem, PageLink
from docnav.core.tree import WELCOME_SLUG, DocTree, TreeNode, build_nav_tree

logger = logging.getLogger(__name__)


def convert_doc_posts(node: TreeNode) -> list[DocPost]:
    """Flatten a node and its descendants in pre-order.

    Nodes without a slug are traversed but not emitted.

    Raises:
        TraversalError: If the node has an unexpected shape
    """
    try:
        return list(_iter_posts(node))
    except Exception as e:
        raise TraversalError(f"Error in convert_doc_posts: {e}") from e


def add_doc_buttons(doc_posts: Sequence[DocPost], tree: DocTree) -> list[DocPost]:
    """Linearize the tree and add next/previous links.

    Args:
        doc_posts: Externally loaded posts; the one with the welcome slug
            replaces the tree's synthetic welcome entry
        tree: Navigation tree from build_nav_tree

    Returns:
        Posts in reading order, pages carrying their links

    Raises:
        TraversalError: If flattening a root section fails
        PaginationError: If computing links fails
    """
    try:
        posts = _flatten_tree(tree)
        if not posts:
            return []

        welcome = next((post for post in doc_posts if post.slug == WELCOME_SLUG), None)
        if welcome is None:
            logger.warning(f"No welcome page with slug {WELCOME_SLUG} supplied")
        else:
            posts[0] = welcome

        root_sections: list[str] = []
        linked: list[DocPost] = []
        for index in range(len(posts)):
            linked.append(_link_post(posts, index, root_sections))
    except NavigationError:
        raise
    except Exception as e:
        raise PaginationError(f"An error occurred while adding doc buttons: {e}") from e

    logger.info(f"Paginated {len(linked)} doc posts across {len(root_sections)} root sections")
    return linked


def paginate(items: Sequence[NavItem], doc_posts: Sequence[DocPost] = ()) -> list[DocPost]:
    """Build the navigation tree and return the linked reading order."""
    return add_doc_buttons(doc_posts, build_nav_tree(items))


def _iter_posts(node: TreeNode) -> Iterator[DocPost]:
    if node.item.slug:
        yield DocPost.from_item(node.item)
    for child in node.children.values():
        yield from _iter_posts(child)


def _flatten_tree(tree: DocTree) -> list[DocPost]:
    """Root section headers followed by their pages, in stored order."""
    posts: list[DocPost] = []
    for root in tree.values():
        posts.append(DocPost.from_item(root.item))
        for child in root.children.values():
            posts.extend(convert_doc_posts(child))
    return posts


def _link_post(posts: list[DocPost], index: int, root_sections: list[str]) -> DocPost:
    """Attach links to the post at index.

    root_sections accumulates root section titles seen so far and is
    read when a previous link crosses a section boundary.
    """
    post = posts[index]
    if post.is_root_section or post.is_section or index == 0:
        if post.is_root_section or index == 0:
            root_sections.append(post.title)
        return post

    return post.with_links(
        next_page=_next_link(posts, index),
        prev_page=_prev_link(posts, index, root_sections),
    )


def _next_link(posts: list[DocPost], index: int) -> PageLink | None:
    if index + 1 >= len(posts):
        return None

    following = posts[index + 1]
    if not following.is_boundary:
        return PageLink(title=following.title, href=following.slug)

    if index + 2 >= len(posts):
        return None
    target = posts[index + 2]
    return PageLink(title=f"{following.title} - {target.title}", href=target.slug)


def _prev_link(posts: list[DocPost], index: int, root_sections: list[str]) -> PageLink | None:
    previous = posts[index - 1]
    if not previous.is_boundary:
        return PageLink(title=previous.title, href=previous.slug)

    if index - 2 < 0:
        return None
    target = posts[index - 2]
    # Stepping back over a root section header enters the one before it
    section_title = root_sections[-2] if previous.is_root_section else root_sections[-1]
    return PageLink(title=f"{section_title} - {target.title}", href=target.slug)
