"""Request handlers for the homepage and post pages."""
