"""Shared test fixtures."""

from pathlib import Path

import pytest
from blogstage.config import Config, ContentConfig, LoggingConfig, ServerConfig

BANNER = '<div class="banner">Test Banner</div>'
LAYOUT = "<html><body><main>{{ content }}</main></body></html>"
HOME = "<h1>Home</h1>"
NOT_FOUND = "<p>Missing: {{slug}}</p>"


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Create a content directory with all templates and an empty posts/."""
    content = tmp_path / "content"
    content.mkdir()
    (content / "posts").mkdir()
    (content / "banner.html").write_text(BANNER)
    (content / "layout.html").write_text(LAYOUT)
    (content / "home.html").write_text(HOME)
    (content / "not_found.html").write_text(NOT_FOUND)
    return content


@pytest.fixture
def posts_dir(content_dir: Path) -> Path:
    return content_dir / "posts"


@pytest.fixture
def test_config(content_dir: Path) -> Config:
    """Create a strict test configuration pointing at content_dir."""
    return Config(
        server=ServerConfig(host="127.0.0.1", port=8080),
        content=ContentConfig(content_dir=content_dir, strict=True),
        logging=LoggingConfig(),
    )
