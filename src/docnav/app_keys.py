"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docnav.core.loader import ItemsLoader

items_loader_key = web.AppKey("items_loader", ItemsLoader)
