"""Docnav settings read from docnav.toml.

The file is looked up from the working directory upwards unless a path
is given. Relative paths in [docs] resolve against the file's directory.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "docnav.toml"
DEFAULT_ITEMS_FILE = "nav-items.json"
DEFAULT_OUTPUT_FILE = "doc-posts.json"


@dataclass
class ServerConfig:
    """Where the navigation API listens."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Item list to read and doc posts file to write."""

    items_file: Path = field(default_factory=lambda: Path(DEFAULT_ITEMS_FILE))
    output_file: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILE))


@dataclass
class Config:
    """Docnav settings."""

    server: ServerConfig
    docs: DocsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Read settings from config_path, or from a discovered docnav.toml.

        Without either, every setting takes its default.

        Raises:
            FileNotFoundError: If config_path is given but missing
            ValueError: If the file is not valid TOML or a value has the wrong type
        """
        if config_path is None:
            config_path = cls._discover_config()
            if config_path is None:
                return cls(server=ServerConfig(), docs=DocsConfig())
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        return cls._load_from_file(config_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        for directory in (Path.cwd(), *Path.cwd().parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        return cls(
            server=_parse_server(_table(data, "server")),
            docs=_parse_docs(_table(data, "docs"), path.parent),
            config_path=path,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        items_file: Path | None = None,
        output_file: Path | None = None,
    ) -> "Config":
        """Return a copy with every non-None command line value applied."""
        server_changes = {
            name: value
            for name, value in (("host", host), ("port", port))
            if value is not None
        }
        docs_changes = {
            name: value
            for name, value in (("items_file", items_file), ("output_file", output_file))
            if value is not None
        }
        return replace(
            self,
            server=replace(self.server, **server_changes),
            docs=replace(self.docs, **docs_changes),
        )


def _table(data: dict[str, object], name: str) -> dict[str, object]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"{name} section must be a dictionary")
    return section


def _parse_server(section: dict[str, object]) -> ServerConfig:
    host = section.get("host", "127.0.0.1")
    if not isinstance(host, str):
        raise ValueError("server.host must be a string")

    # bool is an int subclass; TOML true is not a port
    port = section.get("port", 8080)
    if not isinstance(port, int) or isinstance(port, bool):
        raise ValueError("server.port must be an integer")

    return ServerConfig(host=host, port=port)


def _parse_docs(section: dict[str, object], config_dir: Path) -> DocsConfig:
    paths: dict[str, Path] = {}
    for key, default in (("items_file", DEFAULT_ITEMS_FILE), ("output_file", DEFAULT_OUTPUT_FILE)):
        value = section.get(key, default)
        if not isinstance(value, str):
            raise ValueError(f"docs.{key} must be a string")
        paths[key] = config_dir / value
    return DocsConfig(**paths)
