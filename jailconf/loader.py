"""
Configuration loader: reads jail.conf text from files or streams.
"""

import sys
from pathlib import Path
from typing import IO

from .const import DEFAULT_ENCODING, MAX_NESTING_DEPTH, STDIN_NAME
from .logging import get_logger
from .syntax import Document, ParseError, parse

logger = get_logger("loader")


class ConfigError(Exception):
    """Exception raised when a configuration cannot be read or parsed."""

    def __init__(self, message: str, source_name: str = "<string>"):
        self.source_name = source_name
        super().__init__(f"{source_name}: {message}")


class ConfigLoader:
    """
    Loads jail.conf documents from files, streams or strings.

    Usage:
        loader = ConfigLoader()
        document = loader.load_file("/etc/jail.conf")
        # or
        document = loader.load_string(config_text)
    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH, encoding: str = DEFAULT_ENCODING):
        self.max_depth = max_depth
        self.encoding = encoding
        self.last_document: Document | None = None

    def load_file(self, path: str | Path) -> Document:
        """
        Load a configuration file.

        Args:
            path: Path to the configuration file

        Returns:
            Parsed document

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError("Configuration file not found", str(path))

        if not path.is_file():
            raise ConfigError("Not a file", str(path))

        try:
            source = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise ConfigError(f"Cannot decode as {self.encoding}: {e}", str(path)) from e
        except OSError as e:
            raise ConfigError(f"Cannot read file: {e.strerror or e}", str(path)) from e

        return self.load_string(source, str(path))

    def load_stream(self, stream: IO | None = None, name: str = STDIN_NAME) -> Document:
        """
        Load a configuration from an open stream, standard input by default.

        Binary streams are decoded with the loader's encoding.
        """
        if stream is None:
            stream = sys.stdin

        try:
            data = stream.read()
        except OSError as e:
            raise ConfigError(f"Cannot read input: {e}", name) from e

        if isinstance(data, bytes):
            try:
                data = data.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise ConfigError(f"Cannot decode as {self.encoding}: {e}", name) from e

        return self.load_string(data, name)

    def load_string(self, source: str, name: str = "<string>") -> Document:
        """
        Parse configuration text.

        Raises:
            ConfigError: If the text cannot be parsed
        """
        logger.debug(f"Parsing {name} ({len(source)} characters)")

        try:
            document = parse(source, max_depth=self.max_depth)
        except ParseError as e:
            raise ConfigError(f"Failed to parse configuration: {e}", name) from e

        logger.debug(f"Parsed {len(document)} top-level entries from {name}")
        self.last_document = document
        return document


def load_file(path: str | Path, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Convenience function to load a configuration file."""
    return ConfigLoader(max_depth).load_file(path)


def load_stream(stream: IO | None = None, name: str = STDIN_NAME, max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Convenience function to load a configuration from a stream (stdin by default)."""
    return ConfigLoader(max_depth).load_stream(stream, name)


def load_string(source: str, name: str = "<string>", max_depth: int = MAX_NESTING_DEPTH) -> Document:
    """Convenience function to parse configuration text."""
    return ConfigLoader(max_depth).load_string(source, name)
