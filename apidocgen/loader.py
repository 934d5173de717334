"""Loading of documentation XML files produced by the compiler."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List


class DocumentLoadError(RuntimeError):
    """Raised when a documentation file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load documentation file {path}: {reason}")
        self.path = path


def load_documentation(path: Path) -> ET.ElementTree:
    """Parse a single documentation file into an element tree."""
    try:
        return ET.parse(path)
    except ET.ParseError as exc:
        raise DocumentLoadError(path, str(exc)) from exc
    except OSError as exc:
        raise DocumentLoadError(path, exc.strerror or str(exc)) from exc


def load_documentation_files(paths: Iterable[Path]) -> List[ET.ElementTree]:
    """Parse every documentation file, preserving input order."""
    return [load_documentation(Path(path)) for path in paths]


__all__ = ["DocumentLoadError", "load_documentation", "load_documentation_files"]
