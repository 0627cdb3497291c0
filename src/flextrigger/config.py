"""Application-level configuration persisted as JSON in the user config directory.

The configuration file lives at ``~/.config/flextrigger/flextrigger.json`` by
default and stores the matching options, an optional custom delimiter set,
the snippet file to load and the log level.  Environment variables (usually
loaded from a ``.env`` file) override the file values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from flextrigger.context.catalog import DEFAULT_MAX_TRIGGER_LENGTH, CatalogOptions
from flextrigger.context.detector import TriggerDetector
from flextrigger.snippets import load_snippets


ENV_MAX_TRIGGER_LENGTH = "FLEXTRIGGER_MAX_TRIGGER_LENGTH"
ENV_CASE_SENSITIVE = "FLEXTRIGGER_CASE_SENSITIVE"
ENV_SNIPPETS = "FLEXTRIGGER_SNIPPETS"
ENV_LOG_LEVEL = "FLEXTRIGGER_LOG_LEVEL"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def default_config_path() -> Path:
    """Return the conventional path to the application config file."""
    return Path.home() / ".config" / "flextrigger" / "flextrigger.json"


def default_snippets_path() -> Path:
    """Return the default snippet file location."""
    return Path.home() / ".config" / "flextrigger" / "snippets.json"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class AppConfig:
    """Application configuration backed by a JSON file.

    Attributes:
        config_path: Absolute path to the JSON configuration file.
        max_trigger_length: Longest trigger the detector considers.
        case_sensitive: Whether typed text must match trigger casing.
        delimiters: Custom boundary characters as one string, or ``None``
            for the built-in set.
        snippets_path: Snippet file to load, or ``None`` for
            :func:`default_snippets_path`.
        log_level: Logging level name used by the CLI.
    """

    config_path: Path
    max_trigger_length: int = DEFAULT_MAX_TRIGGER_LENGTH
    case_sensitive: bool = True
    delimiters: Optional[str] = None
    snippets_path: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        # Fails early on a bad limit instead of at the first scan.
        CatalogOptions(max_trigger_length=self.max_trigger_length)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """Load the configuration from a JSON file.

        If the file does not exist an ``AppConfig`` with default values is
        returned.

        Args:
            path: Explicit config file path.  Falls back to
                :func:`default_config_path` when ``None``.

        Returns:
            A populated ``AppConfig`` instance.
        """
        path = path or default_config_path()

        if not path.exists():
            return cls(config_path=path)

        data = json.loads(path.read_text())

        return cls(
            config_path=path,
            max_trigger_length=data.get("max_trigger_length", DEFAULT_MAX_TRIGGER_LENGTH),
            case_sensitive=data.get("case_sensitive", True),
            delimiters=data.get("delimiters"),
            snippets_path=Path(data["snippets_path"]) if data.get("snippets_path") else None,
            log_level=data.get("log_level", "WARNING"),
        )

    def save(self) -> None:
        """Persist the current configuration to disk as pretty-printed JSON.

        Parent directories are created automatically when they do not exist.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        payload = {
            "max_trigger_length": self.max_trigger_length,
            "case_sensitive": self.case_sensitive,
            "delimiters": self.delimiters,
            "snippets_path": str(self.snippets_path) if self.snippets_path else None,
            "log_level": self.log_level,
        }

        self.config_path.write_text(json.dumps(payload, indent=2))

    def apply_env(self, environ: Mapping[str, str]) -> "AppConfig":
        """Override fields from ``FLEXTRIGGER_*`` variables in *environ*.

        Args:
            environ: Usually :data:`os.environ` after ``load_dotenv()``.

        Returns:
            ``self``, for chaining.

        Raises:
            ValueError: If a variable holds an unparseable value.
        """
        raw = environ.get(ENV_MAX_TRIGGER_LENGTH)
        if raw:
            try:
                limit = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_MAX_TRIGGER_LENGTH} must be an integer, got {raw!r}") from None
            CatalogOptions(max_trigger_length=limit)
            self.max_trigger_length = limit

        raw = environ.get(ENV_CASE_SENSITIVE)
        if raw:
            self.case_sensitive = _parse_bool(ENV_CASE_SENSITIVE, raw)

        raw = environ.get(ENV_SNIPPETS)
        if raw:
            self.snippets_path = Path(raw).expanduser()

        raw = environ.get(ENV_LOG_LEVEL)
        if raw:
            self.log_level = raw.upper()

        return self

    def resolved_snippets_path(self) -> Path:
        """Return the snippet file to load."""
        return self.snippets_path or default_snippets_path()

    def detector(self) -> TriggerDetector:
        """Build a :class:`TriggerDetector` from this config and its snippet file.

        Raises:
            SnippetFileError: If the snippet file is malformed.
        """
        return TriggerDetector(
            load_snippets(self.resolved_snippets_path()),
            max_trigger_length=self.max_trigger_length,
            case_sensitive=self.case_sensitive,
            delimiters=self.delimiters,
        )
