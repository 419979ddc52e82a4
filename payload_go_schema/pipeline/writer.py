"""
Atomic JSON writer for the final schema document.

Ensures that file writes are atomic so an interrupted run never leaves
a half-written schema for the Go generator to pick up.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from ..errors import SchemaWriteError
from .config import OutputConfig, OutputMode


class AtomicWriter:
    """Serializes documents as pretty-printed JSON.

    Uses a two-phase approach:
    1. Serialize and write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def __init__(self, config: OutputConfig | None = None):
        self.config = config or OutputConfig()

    def dumps(self, json_schema: dict[str, Any]) -> str:
        """
        Serialize a document.

        Raises:
            SchemaWriteError: If the document holds values JSON cannot represent
        """
        try:
            return json.dumps(json_schema, indent=self.config.indent) + "\n"
        except (TypeError, ValueError) as e:
            raise SchemaWriteError(f"Schema document is not serializable: {e}") from e

    def write(self, path: Path, json_schema: dict[str, Any]) -> Path:
        """
        Write a document to path.

        Args:
            path: Target file path
            json_schema: The final document

        Returns:
            The path written to

        Raises:
            FileExistsError: If the file exists and the mode forbids overwriting
            SchemaWriteError: If serialization fails
            OSError: If file operations fail
        """
        path = Path(path)
        if self.config.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        content = self.dumps(json_schema)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.config.atomic_write:
            path.write_text(content, encoding="utf-8")
            return path

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        return path
