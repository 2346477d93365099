"""Navigation error types."""


class NavigationError(Exception):
    """Base class for navigation build failures."""


class MissingParentSectionError(NavigationError):
    """Item references a parent section that is not in the tree."""

    def __init__(self, parent: str, title: str) -> None:
        self.parent = parent
        self.title = title
        super().__init__(f"Parent section {parent} not found for item {title}")


class MissingRootSectionError(NavigationError):
    """Leaf item references a root section that is not in the tree."""

    def __init__(self, root_section_id: str | None, title: str) -> None:
        self.root_section_id = root_section_id
        self.title = title
        super().__init__(f"Root section {root_section_id} not found for item {title}")


class NavigationTreeError(NavigationError):
    """Navigation tree construction failed."""


class TraversalError(NavigationError):
    """Flattening a tree node into pages failed."""


class PaginationError(NavigationError):
    """Computing next/previous page links failed."""
