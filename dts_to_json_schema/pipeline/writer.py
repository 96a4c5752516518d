"""
Atomic file writer for generated schema documents.

The target file is only replaced once the new document has been written
out in full and has passed validation.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Callable
from pathlib import Path

from .errors import OutputWriteError


class AtomicWriter:
    """Writes a document next to its target, checks it, then swaps it in."""

    def __init__(self, validate: Callable[[str], None] | None = None):
        """
        Args:
            validate: Called with the serialized document; raises to abort the write
        """
        self._validate = validate or self._default_validate

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to path, leaving any previous file untouched on failure.

        Raises:
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # The rename below is only atomic within one filesystem
        fd, staged_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True)
        staged = Path(staged_name)

        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if validate:
                self._validate(content)
            staged.replace(path)
        except BaseException:
            staged.unlink(missing_ok=True)
            raise

    def _default_validate(self, content: str) -> None:
        """Check that content is a JSON object carrying a `$schema` key."""
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise OutputWriteError(f"Generated schema is not valid JSON: {e}") from e

        if not isinstance(document, dict) or "$schema" not in document:
            raise OutputWriteError("Generated schema is missing the $schema key")
