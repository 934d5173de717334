from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from apidocgen.models import DocumentVariant
from tests._fixtures.engines import RecordingEngine, make_document

_DOCUMENTATION_XML = """<?xml version="1.0"?>
<doc>
  <assembly><name>Widgets.Api</name></assembly>
  <members>
    <member name="M:Widgets.Api.WidgetController.List">
      <summary>Lists widgets.</summary>
      <url>https://api.example.com/v1/widgets</url>
      <verb>GET</verb>
      <response code="200"><see cref="T:Widgets.Api.Widget"/>OK</response>
    </member>
  </members>
</doc>
"""


@pytest.fixture
def assembly_file(tmp_path: Path) -> Path:
    """Provide a placeholder assembly on disk."""
    path = tmp_path / "bin" / "Widgets.Api.dll"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"MZ\x90\x00")
    return path


@pytest.fixture
def documentation_file(tmp_path: Path) -> Path:
    """Provide a well-formed XML documentation file."""
    path = tmp_path / "bin" / "Widgets.Api.xml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_DOCUMENTATION_XML, encoding="utf-8")
    return path


@pytest.fixture
def two_variant_engine() -> RecordingEngine:
    """Engine returning clean diagnostics and the variants v2 and v1."""
    return RecordingEngine(
        {
            DocumentVariant(title="v2"): make_document("Widgets v2"),
            DocumentVariant(title="v1"): make_document("Widgets v1"),
        }
    )


@pytest.fixture(autouse=True)
def reset_apidocgen_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog keeps receiving records."""
    yield
    logger = logging.getLogger("apidocgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
