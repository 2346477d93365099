"""Tests for navigation item and page records."""

import json

import pytest
from docnav.core.items import DocPost, NavItem, PageLink


class TestNavItemFromDict:
    """Tests for NavItem.from_dict()."""

    def test__camel_case_keys__parsed(self) -> None:
        """Map JSON keys onto item fields."""
        item = NavItem.from_dict(
            {
                "title": "Channels",
                "weight": 2,
                "rootSectionId": "guides",
                "sectionId": "concepts",
                "slug": "/docs/guides/concepts/channels",
                "isPrerelease": True,
            }
        )

        assert item.title == "Channels"
        assert item.weight == 2
        assert item.root_section_id == "guides"
        assert item.section_id == "concepts"
        assert item.slug == "/docs/guides/concepts/channels"
        assert item.is_prerelease is True
        assert not item.is_section

    def test__minimal_item__uses_defaults(self) -> None:
        """Default weight and flags for a bare title."""
        item = NavItem.from_dict({"title": "Bare"})

        assert item.weight == 0
        assert not item.is_root_section
        assert item.parent is None
        assert item.is_prerelease is None

    def test__missing_title__raises_error(self) -> None:
        """Require a string title."""
        with pytest.raises(ValueError, match="title must be a string"):
            NavItem.from_dict({"weight": 1})

    def test__non_numeric_weight__raises_error(self) -> None:
        """Reject weights that are not numbers."""
        with pytest.raises(ValueError, match="weight of item Page must be a number"):
            NavItem.from_dict({"title": "Page", "weight": "1"})

    def test__boolean_weight__raises_error(self) -> None:
        """Reject booleans passed as weight."""
        with pytest.raises(ValueError, match="must be a number"):
            NavItem.from_dict({"title": "Page", "weight": True})

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test__non_finite_weight__raises_error(self, weight: float) -> None:
        """Reject weights that cannot be ordered."""
        with pytest.raises(ValueError, match="weight of item Page must be finite"):
            NavItem.from_dict({"title": "Page", "weight": weight})

    def test__nan_from_json__raises_error(self) -> None:
        """Reject the NaN literal json.loads accepts."""
        with pytest.raises(ValueError, match="sectionWeight of item Page must be finite"):
            NavItem.from_dict(json.loads('{"title": "Page", "sectionWeight": NaN}'))

    def test__unknown_keys__kept_as_extra(self) -> None:
        """Carry fields the item does not model, dropping stale links."""
        item = NavItem.from_dict(
            {"title": "Page", "excerpt": "Intro", "nextPage": {"title": "X", "href": "/x"}}
        )

        assert item.extra == {"excerpt": "Intro"}
        assert item.to_dict()["excerpt"] == "Intro"

    def test__non_boolean_flag__raises_error(self) -> None:
        """Reject flags that are not booleans."""
        with pytest.raises(ValueError, match="isSection of item Page must be a boolean"):
            NavItem.from_dict({"title": "Page", "isSection": "yes"})

    def test__not_a_dict__raises_error(self) -> None:
        """Reject non-object entries."""
        with pytest.raises(ValueError, match="must be a dictionary"):
            NavItem.from_dict(["title"])


class TestNavItemToDict:
    """Tests for NavItem.to_dict()."""

    def test__unset_fields__omitted(self) -> None:
        """Write only set fields with camelCase keys."""
        item = NavItem(
            title="Guides",
            weight=1,
            is_root_section=True,
            is_section=True,
            root_section_id="guides",
        )

        assert item.to_dict() == {
            "title": "Guides",
            "weight": 1,
            "isRootSection": True,
            "isSection": True,
            "rootSectionId": "guides",
        }


class TestDocPost:
    """Tests for DocPost."""

    def test__from_item__projects_page_fields(self) -> None:
        """Keep title, slug, flags and href."""
        item = NavItem(
            title="Specification",
            weight=1,
            is_section=True,
            slug="/docs/reference/specification",
            href="/docs/reference/specification/v3.0.0",
        )

        post = DocPost.from_item(item)

        assert post.title == "Specification"
        assert post.slug == "/docs/reference/specification"
        assert post.is_section
        assert post.href == "/docs/reference/specification/v3.0.0"
        assert post.next_page is None

    def test__is_boundary__sections_and_root_element(self) -> None:
        """Treat root elements and sections as headers."""
        assert DocPost(title="Welcome", is_root_element=True).is_boundary
        assert DocPost(title="Guides", is_root_section=True, is_section=True).is_boundary
        assert DocPost(title="Concepts", is_section=True).is_boundary
        assert not DocPost(title="Page", slug="/docs/page").is_boundary

    def test__to_dict__includes_links(self) -> None:
        """Serialize links as title/href pairs."""
        post = DocPost(title="B", slug="/docs/b").with_links(
            next_page=PageLink(title="C", href="/docs/c"),
            prev_page=PageLink(title="A", href="/docs/a"),
        )

        assert post.to_dict() == {
            "title": "B",
            "slug": "/docs/b",
            "nextPage": {"title": "C", "href": "/docs/c"},
            "prevPage": {"title": "A", "href": "/docs/a"},
        }
