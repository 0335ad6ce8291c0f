"""Post page endpoint.

Renders content/posts/{slug}.md inside the shared layout. A missing post is
rendered with the not-found template instead of an error response.
"""

import logging

from aiohttp import web

from blogstage.app_keys import renderer_key, templates_key
from blogstage.core.renderer import PostNotFoundError

logger = logging.getLogger(__name__)


def create_posts_routes() -> list[web.RouteDef]:
    return [web.get("/posts/{slug}", get_post)]


async def get_post(request: web.Request) -> web.Response:
    slug = request.match_info["slug"]
    templates = request.app[templates_key]
    renderer = request.app[renderer_key]

    try:
        body = await renderer.render(slug)
    except PostNotFoundError as e:
        logger.info(f"No post for slug {slug!r} ({e.path})")
        # Missing posts are served as a regular page with status 200. The slug
        # is HTML-escaped in the page, so "rock&roll" shows as "rock&amp;roll".
        return web.Response(text=templates.render_not_found(slug), content_type="text/html")

    return web.Response(text=templates.render_page(body), content_type="text/html")
