"""Navigation item and page records.

NavItem is the flat input descriptor for a page or section. DocPost is
the linear page form produced by pagination, carrying next/previous links.
Both use the camelCase keys of the JSON content files on the wire, and
both carry unrecognised keys (excerpts, authors, ...) through untouched.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, TypedDict

from docnav.core.types import URLPath


class PageLinkDict(TypedDict):
    """Dictionary representation of a page link."""

    title: str
    href: str | None


_ITEM_STR_FIELDS = {
    "rootSectionId": "root_section_id",
    "sectionId": "section_id",
    "parent": "parent",
    "slug": "slug",
    "href": "href",
}

_ITEM_BOOL_FLAGS = {
    "isRootElement": "is_root_element",
    "isRootSection": "is_root_section",
    "isSection": "is_section",
}

_ITEM_KEYS = {
    "title",
    "weight",
    "sectionWeight",
    "isPrerelease",
    *_ITEM_STR_FIELDS,
    *_ITEM_BOOL_FLAGS,
}

# Links are recomputed on every build, never read back
_LINK_KEYS = {"nextPage", "prevPage"}

# Keys written from DocPost's own fields
_POST_KEYS = {"title", "slug", "href", *_ITEM_BOOL_FLAGS, *_LINK_KEYS}


@dataclass(frozen=True)
class NavItem:
    """Page or section descriptor."""

    title: str
    weight: float = 0
    is_root_element: bool = False
    is_root_section: bool = False
    is_section: bool = False
    root_section_id: str | None = None
    section_id: str | None = None
    parent: str | None = None
    slug: URLPath | None = None
    is_prerelease: bool | None = None
    href: str | None = None
    section_weight: float | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: object) -> "NavItem":
        """Parse an item from its JSON object form.

        Args:
            data: Raw item object with camelCase keys

        Returns:
            NavItem instance; keys it doesn't model are kept in extra

        Raises:
            ValueError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("navigation item must be a dictionary")

        title = data.get("title")
        if not isinstance(title, str):
            raise ValueError("navigation item title must be a string")

        kwargs: dict[str, Any] = {
            "title": title,
            "weight": _parse_number(data, "weight", title, default=0),
            "section_weight": _parse_number(data, "sectionWeight", title),
            "extra": {
                key: value
                for key, value in data.items()
                if key not in _ITEM_KEYS and key not in _LINK_KEYS
            },
        }

        for key, name in _ITEM_STR_FIELDS.items():
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{key} of item {title} must be a string")
            kwargs[name] = value

        for key, name in _ITEM_BOOL_FLAGS.items():
            value = data.get(key, False)
            if not isinstance(value, bool):
                raise ValueError(f"{key} of item {title} must be a boolean")
            kwargs[name] = value

        # Unset and false are distinct: only unset marks the canonical version
        is_prerelease = data.get("isPrerelease")
        if is_prerelease is not None and not isinstance(is_prerelease, bool):
            raise ValueError(f"isPrerelease of item {title} must be a boolean")
        kwargs["is_prerelease"] = is_prerelease

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"title": self.title, "weight": self.weight}
        for key, name in _ITEM_BOOL_FLAGS.items():
            if getattr(self, name):
                result[key] = True
        for key, name in _ITEM_STR_FIELDS.items():
            value = getattr(self, name)
            if value is not None:
                result[key] = value
        if self.is_prerelease is not None:
            result["isPrerelease"] = self.is_prerelease
        if self.section_weight is not None:
            result["sectionWeight"] = self.section_weight
        result.update(self.extra)
        return result


@dataclass(frozen=True)
class PageLink:
    """Link to an adjacent page in reading order."""

    title: str
    href: str | None

    def to_dict(self) -> PageLinkDict:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "href": self.href}


@dataclass(frozen=True)
class DocPost:
    """Page in linear reading order.

    content holds every other field of the source item or post (weight,
    rootSectionId, excerpt, ...) so renderers receive the page whole.
    """

    title: str
    slug: URLPath | None = None
    is_root_element: bool = False
    is_root_section: bool = False
    is_section: bool = False
    href: str | None = None
    next_page: PageLink | None = None
    prev_page: PageLink | None = None
    content: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_boundary(self) -> bool:
        """Whether this post is a section header rather than a readable page."""
        return self.is_root_element or self.is_root_section or self.is_section

    @classmethod
    def from_item(cls, item: NavItem) -> "DocPost":
        """Project a navigation item into page form."""
        return cls(
            title=item.title,
            slug=item.slug,
            is_root_element=item.is_root_element,
            is_root_section=item.is_root_section,
            is_section=item.is_section,
            href=item.href,
            content={
                key: value
                for key, value in item.to_dict().items()
                if key not in _POST_KEYS
            },
        )

    @classmethod
    def from_dict(cls, data: object) -> "DocPost":
        """Parse a post from its JSON object form.

        Links are not read back; they are computed by pagination.

        Raises:
            ValueError: If a field has the wrong type
        """
        return cls.from_item(NavItem.from_dict(data))

    def with_links(self, next_page: PageLink | None, prev_page: PageLink | None) -> "DocPost":
        """Return a copy carrying the given links."""
        return replace(self, next_page=next_page, prev_page=prev_page)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"title": self.title, **self.content}
        if self.slug is not None:
            result["slug"] = self.slug
        if self.is_root_element:
            result["isRootElement"] = True
        if self.is_root_section:
            result["isRootSection"] = True
        if self.is_section:
            result["isSection"] = True
        if self.href is not None:
            result["href"] = self.href
        if self.next_page is not None:
            result["nextPage"] = self.next_page.to_dict()
        if self.prev_page is not None:
            result["prevPage"] = self.prev_page.to_dict()
        return result


def _parse_number(
    data: dict[str, Any],
    key: str,
    title: str,
    default: float | None = None,
) -> Any:
    """Read a finite numeric field, rejecting booleans."""
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"{key} of item {title} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{key} of item {title} must be finite")
    return value
