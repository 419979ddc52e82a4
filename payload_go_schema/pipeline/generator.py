"""
Pipeline orchestrator.

1. Walk every collection and global, attaching Go annotations
2. Build the base JSON schema document (the runtime's job)
3. Run the rewrite passes in order
4. Optionally write the result to disk
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..errors import SchemaGenerationError
from .annotator.walker import FieldTreeWalker
from .builder import SchemaBuilder
from .config import SchemaOptions, resolve_output_path
from .fields.nodes import PayloadConfig
from .passes import SchemaPassPipeline
from .writer import AtomicWriter

SchemaBuildFn = Callable[[PayloadConfig], dict[str, Any]]


class SchemaGenerator:
    """Produces the Go-annotated JSON schema for a Payload config."""

    def __init__(
        self,
        config: PayloadConfig,
        options: SchemaOptions | None = None,
        build_schema: SchemaBuildFn | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: The Payload config (field trees are annotated in place)
            options: Pipeline options
            build_schema: Turns the annotated config into the base document.
                Defaults to the reference SchemaBuilder.
        """
        self.config = config
        self.options = options or SchemaOptions()
        self.build_schema = build_schema or (lambda c: SchemaBuilder(c.id_type).build(c))
        self.walker = FieldTreeWalker(self.options)
        self.pipeline = SchemaPassPipeline(self.options)

    def annotate(self) -> PayloadConfig:
        return self.walker.map_config(self.config)

    def generate(self) -> dict[str, Any]:
        """
        Run the whole pipeline.

        Returns:
            The final document
        """
        config = self.annotate()
        return self.pipeline.run(self.build_schema(config))

    def write(self, path: str | Path | None = None) -> Path:
        """
        Generate and write the document.

        Args:
            path: Explicit output path; falls back to PAYLOAD_TS_OUTPUT_PATH,
                then the config's TypeScript output file

        Returns:
            The path written to

        Raises:
            SchemaGenerationError: If no output path can be resolved
        """
        output = resolve_output_path(path, self.config.output_file)
        if output is None:
            raise SchemaGenerationError("No output path: pass one, set PAYLOAD_TS_OUTPUT_PATH or typescript.outputFile")
        return AtomicWriter(self.options.output).write(output, self.generate())
