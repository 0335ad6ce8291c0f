"""Page templates loaded once at startup.

Content directory structure:
    content/
    ├── banner.html        # Prepended to every page
    ├── layout.html        # Page wrapper with the {{ content }} placeholder
    ├── home.html          # Homepage body
    ├── not_found.html     # Missing post body with the {{slug}} placeholder
    └── posts/
        └── <slug>.md      # One Markdown file per post
"""

import html
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONTENT_PLACEHOLDER = "{{ content }}"
SLUG_PLACEHOLDER = "{{slug}}"

BANNER_FILE = "banner.html"
LAYOUT_FILE = "layout.html"
HOME_FILE = "home.html"
NOT_FOUND_FILE = "not_found.html"

DEFAULT_BANNER = '<header class="banner"><a href="/">Blog</a></header>\n'
DEFAULT_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Blog</title>
</head>
<body>
<main>
{{ content }}
</main>
</body>
</html>
"""
DEFAULT_HOME = "<h1>Welcome</h1>\n<p>Nothing to see here yet.</p>\n"
DEFAULT_NOT_FOUND = "<h1>Not found</h1>\n<p>No post named <code>{{slug}}</code>.</p>\n"


class TemplateLoadError(Exception):
    """Raised when a required template cannot be loaded in strict mode."""


@dataclass(frozen=True)
class TemplateSet:
    """Immutable set of page templates shared by all requests."""

    banner: str
    layout: str
    home: str
    not_found: str

    def render_page(self, body: str) -> str:
        """Wrap body in the layout and prefix it with the banner."""
        return self.banner + self.layout.replace(CONTENT_PLACEHOLDER, body)

    def render_home(self) -> str:
        return self.render_page(self.home)

    def render_not_found(self, slug: str) -> str:
        """Render the not-found page for slug.

        The slug comes straight from the request URL, so it is HTML-escaped
        before substitution.
        """
        body = self.not_found.replace(SLUG_PLACEHOLDER, html.escape(slug))
        return self.render_page(body)


def load_templates(content_dir: Path, *, strict: bool = True) -> TemplateSet:
    """Load all page templates from content_dir.

    Args:
        content_dir: Directory containing the template files
        strict: If True, any missing template is an error. Otherwise each
                missing template falls back to its built-in default.

    Returns:
        Fully populated TemplateSet

    Raises:
        TemplateLoadError: In strict mode, if a template is missing or
                           unreadable, or the layout lacks its placeholder
    """
    templates = TemplateSet(
        banner=_load_template(content_dir / BANNER_FILE, DEFAULT_BANNER, strict=strict),
        layout=_load_template(content_dir / LAYOUT_FILE, DEFAULT_LAYOUT, strict=strict),
        home=_load_template(content_dir / HOME_FILE, DEFAULT_HOME, strict=strict),
        not_found=_load_template(
            content_dir / NOT_FOUND_FILE, DEFAULT_NOT_FOUND, strict=strict
        ),
    )

    if CONTENT_PLACEHOLDER not in templates.layout:
        if strict:
            raise TemplateLoadError(
                f"{content_dir / LAYOUT_FILE} has no {CONTENT_PLACEHOLDER} placeholder"
            )
        logger.warning(
            f"{LAYOUT_FILE} has no {CONTENT_PLACEHOLDER} placeholder, pages will have no body"
        )

    if SLUG_PLACEHOLDER not in templates.not_found:
        logger.warning(f"{NOT_FOUND_FILE} has no {SLUG_PLACEHOLDER} placeholder")

    return templates


def _load_template(path: Path, default: str, *, strict: bool) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        if strict:
            raise TemplateLoadError(f"Missing {path}: {e}") from e
        logger.warning(f"Could not read {path}, using built-in default")
        return default
