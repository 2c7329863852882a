"""Source parser port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.parsed_module import ParsedModule


class SourceParserPort(Protocol):
    """Contract for turning one source file into a ParsedModule.

    Implementations are stateless between calls.
    """

    def parse_file(self, path: Path, module_name: str) -> ParsedModule:
        """Parse single file.

        Args:
            path: Path to .py file
            module_name: Fully qualified name the module is imported as

        Returns:
            ParsedModule with raw (unresolved) references

        Raises:
            ParseError: File cannot be read or has invalid syntax
        """
        ...
