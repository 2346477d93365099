"""Navigation API endpoints.

Provides the navigation tree and the paginated reading order. Every
request rebuilds from the items file.
"""

import logging

from aiohttp import web

from docnav.app_keys import items_loader_key
from docnav.core.errors import NavigationError
from docnav.core.items import DocPost
from docnav.core.pagination import add_doc_buttons
from docnav.core.tree import DocTree, build_nav_tree, tree_to_dict

logger = logging.getLogger(__name__)


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/posts", get_posts),
        web.get("/api/posts/{slug:.*}", get_post),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    try:
        tree, _ = _build(request)
    except (NavigationError, ValueError, FileNotFoundError) as e:
        return _error_response(e)
    return web.json_response({"tree": tree_to_dict(tree)})


async def get_posts(request: web.Request) -> web.Response:
    try:
        _, posts = _build(request)
    except (NavigationError, ValueError, FileNotFoundError) as e:
        return _error_response(e)
    return web.json_response({"posts": [post.to_dict() for post in posts]})


async def get_post(request: web.Request) -> web.Response:
    slug = request.match_info["slug"]
    normalized = slug if slug.startswith("/") else f"/{slug}"

    try:
        _, posts = _build(request)
    except (NavigationError, ValueError, FileNotFoundError) as e:
        return _error_response(e)

    for post in posts:
        if post.slug == normalized:
            return web.json_response(post.to_dict())

    return web.json_response(
        {"error": "Page not found", "slug": normalized},
        status=404,
    )


def _build(request: web.Request) -> tuple[DocTree, list[DocPost]]:
    loaded = request.app[items_loader_key].load()
    tree = build_nav_tree(loaded.items)
    return tree, add_doc_buttons(loaded.posts, tree)


def _error_response(error: Exception) -> web.Response:
    logger.error(f"Navigation build failed: {error}")
    return web.json_response({"error": str(error)}, status=500)
