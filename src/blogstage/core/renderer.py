"""Markdown rendering for blog posts.

Posts are read from disk on every request; rendered output is not cached.
"""

import asyncio
import logging
from pathlib import Path

import mistune

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"
UNSAFE_SLUG_CHARS = ("/", "\\", "\x00")


class PostNotFoundError(FileNotFoundError):
    """Raised when a slug has no readable Markdown file."""

    def __init__(self, slug: str, path: Path) -> None:
        super().__init__(f"Post not found: {path}")
        self.slug = slug
        self.path = path


class PostRenderer:
    """Renders Markdown posts to HTML.

    Strikethrough (``~~text~~``) and pipe tables are enabled. Raw HTML in
    posts is passed through unchanged.
    """

    def __init__(self, posts_dir: Path) -> None:
        """Initialize renderer.

        Args:
            posts_dir: Directory containing one ``<slug>.md`` file per post
        """
        self._posts_dir = posts_dir
        self._markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough", "table"],
        )

    @property
    def posts_dir(self) -> Path:
        """Directory containing post sources."""
        return self._posts_dir

    def resolve(self, slug: str) -> Path:
        """Return the source path for slug (e.g. "hello" -> posts/hello.md).

        Raises:
            PostNotFoundError: If slug is not a single plain file name
        """
        source_path = self._posts_dir / f"{slug}{POST_SUFFIX}"
        # match_info is percent-decoded, so "..%2Fx" arrives as "../x".
        if slug in ("", ".", "..") or any(c in slug for c in UNSAFE_SLUG_CHARS):
            raise PostNotFoundError(slug, source_path)
        return source_path

    def render_markdown(self, markdown_text: str) -> str:
        """Convert Markdown text to HTML.

        Args:
            markdown_text: Markdown source text

        Returns:
            HTML fragment
        """
        return self._markdown(markdown_text)

    async def render(self, slug: str) -> str:
        """Read and render the post for slug.

        The file read runs in a worker thread so the event loop keeps
        serving other requests.

        Args:
            slug: Post slug from the request URL

        Returns:
            HTML fragment for the post body

        Raises:
            PostNotFoundError: If the post file is missing or unreadable
        """
        source_path = self.resolve(slug)
        try:
            markdown_text = await asyncio.to_thread(source_path.read_text, encoding="utf-8")
        except (OSError, ValueError) as e:
            raise PostNotFoundError(slug, source_path) from e

        logger.debug(f"Rendering {len(markdown_text)} characters of markdown from {source_path}")
        return self.render_markdown(markdown_text)
