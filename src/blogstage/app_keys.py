"""Application keys for type-safe app configuration access."""

from aiohttp import web

from blogstage.core.renderer import PostRenderer
from blogstage.core.templates import TemplateSet

templates_key = web.AppKey("templates", TemplateSet)
renderer_key = web.AppKey("renderer", PostRenderer)
