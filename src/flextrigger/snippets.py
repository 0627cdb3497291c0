"""Snippet catalog files.

A snippet file is JSON, either ``{"snippets": [...]}`` or a bare list, where
each entry is ``{"trigger": str, "content": str}``.  Files are validated
against :data:`SNIPPETS_SCHEMA` (JSON Schema Draft 2020-12) before any
trigger is built, so a bad file never half-replaces a catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from flextrigger.context.catalog import Trigger

logger = logging.getLogger(__name__)


_ENTRY_SCHEMA = {
    "type": "object",
    "properties": {
        "trigger": {"type": "string", "minLength": 1},
        "content": {"type": "string"},
        "description": {"type": "string"},
    },
    "required": ["trigger", "content"],
}

SNIPPETS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "oneOf": [
        {"type": "array", "items": _ENTRY_SCHEMA},
        {
            "type": "object",
            "properties": {"snippets": {"type": "array", "items": _ENTRY_SCHEMA}},
            "required": ["snippets"],
        },
    ],
}

_validator = Draft202012Validator(SNIPPETS_SCHEMA)


class SnippetFileError(ValueError):
    """Raised when a snippet file is not valid JSON or fails the schema."""


def parse_snippets(data: Any) -> List[Trigger]:
    """Validate decoded JSON and return its triggers in file order.

    Args:
        data: Decoded JSON document.

    Returns:
        The triggers, in the order they appear.

    Raises:
        SnippetFileError: If *data* does not match :data:`SNIPPETS_SCHEMA`.
    """
    error = best_match(_validator.iter_errors(data))
    if error is not None:
        where = "/".join(str(p) for p in error.absolute_path) or "<root>"
        raise SnippetFileError(f"Invalid snippet data at {where}: {error.message}")

    entries = data["snippets"] if isinstance(data, dict) else data
    return [Trigger.from_dict(entry) for entry in entries]


def load_snippets(path: Path) -> List[Trigger]:
    """Load triggers from the JSON file at *path*.

    A missing file yields an empty list.

    Raises:
        SnippetFileError: If the file is not UTF-8, not valid JSON or fails
            validation.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No snippet file at %s", path)
        return []

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SnippetFileError(f"{path}: not valid UTF-8 ({exc.reason})") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnippetFileError(f"{path}: {exc}") from exc

    triggers = parse_snippets(data)
    logger.info("Loaded %d snippet(s) from %s", len(triggers), path)
    return triggers


def save_snippets(path: Path, triggers: List[Trigger]) -> None:
    """Write *triggers* to *path* as ``{"snippets": [...]}``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"snippets": [t.to_dict() for t in triggers]}
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
