"""
Configuration for the schema pipeline.

Feature flags are passed explicitly at construction time rather than
read from the environment. Only the output path may be overridden by
an environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

# Go package that provides every opaque type referenced by the annotations
DEFAULT_ADAPTER_IMPORT = "github.com/ainsleydev/webkit/pkg/adapters/payload"

# Package alias used as the prefix for opaque type names
ADAPTER_PACKAGE = "payload"

OUTPUT_PATH_ENV = "PAYLOAD_TS_OUTPUT_PATH"


class OutputMode(str, Enum):
    """Controls behavior when the output file already exists."""

    FORCE = "force"  # Default: overwrite
    ERROR_IF_EXISTS = "error"  # Raise if the file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
        indent: JSON indentation
    """

    mode: OutputMode = OutputMode.FORCE
    atomic_write: bool = True
    indent: int = 4


@dataclass
class SchemaOptions:
    """Options for annotating the field tree and rewriting the schema."""

    # Replace upload fields with the adapter's Media type and drop the media definition
    use_opaque_media_type: bool = False

    # Attach a "payload" sidecar to every data-bearing field's schema
    assign_relationship_metadata: bool = False

    # Import path for the opaque Go types
    adapter_import: str = DEFAULT_ADAPTER_IMPORT

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> SchemaOptions:
        """Create options from a dictionary."""
        options = SchemaOptions()
        names = {f.name for f in fields(SchemaOptions)}
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                options.output = OutputConfig(
                    mode=mode,
                    atomic_write=v.get("atomic_write", True),
                    indent=v.get("indent", 4),
                )
            elif k in names:
                setattr(options, k, v)
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return {
            "use_opaque_media_type": self.use_opaque_media_type,
            "assign_relationship_metadata": self.assign_relationship_metadata,
            "adapter_import": self.adapter_import,
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
                "indent": self.output.indent,
            },
        }

    def opaque_type(self, name: str) -> str:
        """Qualify an opaque type name with the adapter package alias."""
        return f"{ADAPTER_PACKAGE}.{name}"


def resolve_output_path(explicit: str | Path | None = None, config_output_file: str | None = None, env: dict[str, str] | None = None) -> Path | None:
    """
    Work out where the final document is written.

    An explicit path wins, then the PAYLOAD_TS_OUTPUT_PATH environment
    variable, then the config's TypeScript output file. A ".ts" suffix
    is rewritten to ".json".

    Returns:
        The output path, or None if nothing was configured
    """
    env = os.environ if env is None else env
    candidate = explicit or env.get(OUTPUT_PATH_ENV) or config_output_file
    if not candidate:
        return None
    path = Path(candidate)
    if path.suffix == ".ts":
        path = path.with_suffix(".json")
    return path
