"""Configuration management for Blogstage.

Supports TOML configuration format with auto-discovery, environment
variable overrides (PORT, LOG_LEVEL) and CLI overrides.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "blogstage.toml"

PORT_ENV = "PORT"
LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class ContentConfig:
    """Content configuration."""

    content_dir: Path = field(default_factory=lambda: Path("content"))
    strict: bool = True

    @property
    def posts_dir(self) -> Path:
        """Directory holding one ``<slug>.md`` file per post."""
        return self.content_dir / "posts"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig
    content: ContentConfig
    logging: LoggingConfig
    config_path: Path | None = None

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Config:
        """Load configuration from file and environment.

        If config_path is provided, loads from that file.
        Otherwise, searches for blogstage.toml in current directory and parents.
        Environment variables are applied on top of the file values.

        Args:
            config_path: Optional explicit path to config file
            environ: Environment mapping (default: os.environ)

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            config = cls._load_from_file(config_path)
        else:
            discovered_path = cls._discover_config()
            if discovered_path is None:
                config = cls._default()
            else:
                config = cls._load_from_file(discovered_path)

        return config._with_environment(os.environ if environ is None else environ)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            content=ContentConfig(),
            logging=LoggingConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            content=cls._parse_content(data.get("content"), config_dir),
            logging=cls._parse_logging(data.get("logging")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "0.0.0.0")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_content(cls, data: object, config_dir: Path) -> ContentConfig:
        """Parse content configuration section.

        Args:
            data: Raw content section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ContentConfig instance
        """
        if data is None:
            return ContentConfig(content_dir=config_dir / "content")

        if not isinstance(data, dict):
            raise ValueError("content section must be a dictionary")

        content_dir = data.get("dir", "content")
        if not isinstance(content_dir, str):
            raise ValueError("content.dir must be a string")

        strict = data.get("strict", True)
        if not isinstance(strict, bool):
            raise ValueError("content.strict must be a boolean")

        return ContentConfig(content_dir=config_dir / content_dir, strict=strict)

    @classmethod
    def _parse_logging(cls, data: object) -> LoggingConfig:
        if data is None:
            return LoggingConfig()

        if not isinstance(data, dict):
            raise ValueError("logging section must be a dictionary")

        level = data.get("level", "info")
        if not isinstance(level, str):
            raise ValueError("logging.level must be a string")

        return LoggingConfig(level=level)

    def _with_environment(self, environ: Mapping[str, str]) -> Config:
        """Apply PORT and LOG_LEVEL from the environment.

        A PORT value that is not a valid port number is ignored.
        """
        port: int | None = None
        raw_port = environ.get(PORT_ENV)
        if raw_port is not None:
            try:
                port = int(raw_port)
            except ValueError:
                port = None
            if port is not None and not 0 <= port <= 65535:
                port = None

        log_level = environ.get(LOG_LEVEL_ENV) or None

        return self.with_overrides(port=port, log_level=log_level)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        content_dir: Path | None = None,
        strict: bool | None = None,
        log_level: str | None = None,
    ) -> Config:
        """Create a new Config with overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            content_dir: Override content.content_dir
            strict: Override content.strict
            log_level: Override logging.level

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        content = self.content
        if content_dir is not None or strict is not None:
            content = replace(
                self.content,
                content_dir=content_dir if content_dir is not None else self.content.content_dir,
                strict=strict if strict is not None else self.content.strict,
            )

        logging = self.logging
        if log_level is not None:
            logging = replace(self.logging, level=log_level)

        return replace(self, server=server, content=content, logging=logging)
