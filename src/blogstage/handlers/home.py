"""Homepage endpoint."""

from aiohttp import web

from blogstage.app_keys import templates_key


def create_home_routes() -> list[web.RouteDef]:
    return [web.get("/", get_home)]


async def get_home(request: web.Request) -> web.Response:
    templates = request.app[templates_key]
    return web.Response(text=templates.render_home(), content_type="text/html")
