"""aiohttp server for Blogstage.

Application factory and route registration.
"""

import logging

from aiohttp import web

from blogstage.app_keys import renderer_key, templates_key
from blogstage.config import Config
from blogstage.core.renderer import PostRenderer
from blogstage.core.templates import TemplateSet, load_templates
from blogstage.handlers.home import create_home_routes
from blogstage.handlers.posts import create_posts_routes

logger = logging.getLogger(__name__)


def create_app(config: Config, templates: TemplateSet | None = None) -> web.Application:
    """Create aiohttp application.

    Templates are loaded before the application is returned, so a strict
    configuration with missing files fails before anything is served.

    Args:
        config: Application configuration
        templates: Preloaded templates (default: load from config.content)

    Returns:
        Configured aiohttp application

    Raises:
        TemplateLoadError: If templates are missing in strict mode
    """
    if templates is None:
        templates = load_templates(config.content.content_dir, strict=config.content.strict)

    app = web.Application()
    app[templates_key] = templates
    app[renderer_key] = PostRenderer(config.content.posts_dir)

    app.router.add_routes(create_home_routes())
    app.router.add_routes(create_posts_routes())

    return app


def run_server(config: Config, app: web.Application | None = None) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration
        app: Application to serve (default: create_app(config))
    """
    if app is None:
        app = create_app(config)
    logger.info(f"listening on {config.server.host}:{config.server.port}")
    web.run_app(
        app,
        host=config.server.host,
        port=config.server.port,
        print=None,
    )
