"""
Base class for schema rewrite passes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SchemaPass(ABC):
    """A single rewrite of the generated JSON schema document.

    Passes run in a fixed order on one shared document; each receives the
    previous pass's output. A pass must leave documents that lack the
    shape it looks for unchanged.
    """

    name: str = ""

    @abstractmethod
    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        """
        Rewrite the document.

        Args:
            json_schema: The document, mutated in place

        Returns:
            The rewritten document
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
