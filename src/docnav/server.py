"""aiohttp server for Docnav.

Application factory and route registration for the navigation API.
"""

from aiohttp import web

from docnav.api.navigation import create_navigation_routes
from docnav.app_keys import items_loader_key
from docnav.config import Config
from docnav.core.loader import ItemsLoader


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[items_loader_key] = ItemsLoader(config.docs.items_file)
    app.router.add_routes(create_navigation_routes())
    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
