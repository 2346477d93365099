"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest
from docnav.config import Config, DocsConfig, ServerConfig


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """Two root sections with pages, a section and specification versions."""
    return [
        {"title": "Welcome", "slug": "/docs", "isRootElement": True},
        {
            "title": "Guides",
            "weight": 1,
            "isRootSection": True,
            "isSection": True,
            "rootSectionId": "guides",
        },
        {
            "title": "Getting Started",
            "weight": 0,
            "rootSectionId": "guides",
            "slug": "/docs/guides/getting-started",
        },
        {
            "title": "Concepts",
            "weight": 1,
            "isSection": True,
            "parent": "guides",
            "sectionId": "concepts",
            "rootSectionId": "guides",
            "slug": "/docs/guides/concepts",
        },
        {
            "title": "Channels",
            "weight": 1,
            "rootSectionId": "guides",
            "sectionId": "concepts",
            "slug": "/docs/guides/concepts/channels",
        },
        {
            "title": "Messages",
            "weight": 2,
            "rootSectionId": "guides",
            "sectionId": "concepts",
            "slug": "/docs/guides/concepts/messages",
        },
        {
            "title": "Reference",
            "weight": 2,
            "isRootSection": True,
            "isSection": True,
            "rootSectionId": "reference",
        },
        {
            "title": "Bindings",
            "weight": 0,
            "rootSectionId": "reference",
            "slug": "/docs/reference/bindings",
        },
        {
            "title": "Specification",
            "weight": 1,
            "isSection": True,
            "parent": "reference",
            "sectionId": "specification",
            "rootSectionId": "reference",
        },
        {
            "title": "3.1.0 (Pre-release)",
            "weight": 0,
            "rootSectionId": "reference",
            "sectionId": "specification",
            "slug": "/docs/reference/specification/v3.1.0",
            "isPrerelease": True,
        },
        {
            "title": "3.0.0",
            "weight": 1,
            "rootSectionId": "reference",
            "sectionId": "specification",
            "slug": "/docs/reference/specification/v3.0.0",
        },
    ]


@pytest.fixture
def items_file(tmp_path: Path, sample_items: list[dict[str, Any]]) -> Path:
    """Write the sample items to a JSON file."""
    path = tmp_path / "nav-items.json"
    path.write_text(json.dumps(sample_items), encoding="utf-8")
    return path


@pytest.fixture
def test_config(tmp_path: Path, items_file: Path) -> Config:
    """Create a test configuration pointing at the sample items file."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(items_file=items_file, output_file=tmp_path / "out" / "posts.json"),
    )
