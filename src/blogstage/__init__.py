"""Blogstage - Markdown blog posts served as HTML pages."""

__version__ = "0.1.0"
