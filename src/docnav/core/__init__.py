"""Navigation core.

Builds the navigation tree from flat item descriptors and linearizes it
into pages with next/previous links.
"""

from docnav.core.items import DocPost, NavItem, PageLink
from docnav.core.pagination import add_doc_buttons, convert_doc_posts, paginate
from docnav.core.tree import DocTree, TreeNode, build_nav_tree

__all__ = [
    "DocPost",
    "DocTree",
    "NavItem",
    "PageLink",
    "TreeNode",
    "add_doc_buttons",
    "build_nav_tree",
    "convert_doc_posts",
    "paginate",
]
