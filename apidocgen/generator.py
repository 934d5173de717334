"""Generation orchestration: one engine call, one file per document variant."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable, List, Sequence
from xml.etree.ElementTree import ElementTree

from .engine import GenerationEngine
from .loader import load_documentation_files
from .models import (
    DocumentVariant,
    FilterSetVersion,
    GenerationDiagnostics,
    GenerationRequest,
    GenerationSettings,
    GeneratorConfig,
    OpenApiDocument,
    OpenApiFormat,
    OpenApiSpecVersion,
    PropertyNameResolver,
)
from .serializer import serialize_document

DocumentLoader = Callable[[Iterable[Path]], Sequence[ElementTree]]
DocumentSerializer = Callable[[OpenApiDocument, OpenApiSpecVersion, OpenApiFormat], str]


class OpenApiGenerationError(RuntimeError):
    """Raised when the engine reports any document or operation error.

    The message lists every error from the run so a single report covers it.
    """

    def __init__(self, diagnostics: GenerationDiagnostics) -> None:
        super().__init__(format_diagnostics(diagnostics))
        self.diagnostics = diagnostics


def format_diagnostics(diagnostics: GenerationDiagnostics) -> str:
    lines: List[str] = []

    if diagnostics.document.errors:
        lines.append("DocumentGenerationDiagnostic:")
        for error in diagnostics.document.errors:
            lines.append(f"\t{error.exception_type}: {error.message}")
        lines.append("")

    if diagnostics.operations:
        lines.append("OperationGenerationDiagnostics:")
        for operation in diagnostics.failed_operations:
            lines.append(f"\t{operation.operation_method}:")
            for error in operation.errors:
                lines.append(f"\t\t{error.exception_type}: {error.message}")

    return "\n".join(lines).rstrip("\n") + "\n" if lines else ""


def output_file_name(prefix: str, variant: DocumentVariant, output_format: OpenApiFormat) -> str:
    """Return ``{prefix}.{title}.{format}``, dropping the title segment when empty."""
    if variant.title:
        return ".".join((prefix, variant.title, output_format.value))
    return ".".join((prefix, output_format.value))


class DocumentGenerator:
    """Drives a generation engine and writes its documents to disk."""

    def __init__(
        self,
        engine: GenerationEngine,
        *,
        loader: DocumentLoader = load_documentation_files,
        serializer: DocumentSerializer = serialize_document,
    ) -> None:
        self.engine = engine
        self.loader = loader
        self.serializer = serializer

    def generate(self, request: GenerationRequest) -> List[Path]:
        """Generate every document variant for ``request`` and return the written paths.

        Nothing is written when the engine reports errors; the run raises
        :class:`OpenApiGenerationError` instead. Variants are processed in
        sorted order so file output and the returned list are reproducible.
        """
        documents = self.loader(request.documentation_paths)
        config = GeneratorConfig(
            documents=tuple(documents),
            assembly_paths=tuple(request.assembly_paths),
            document_version=request.document_version,
            filter_set_version=FilterSetVersion.V1,
        )
        settings = GenerationSettings(
            property_name_resolver=PropertyNameResolver.DEFAULT,
            remove_duplicate_string_from_param_name=True,
        )
        result = self.engine.generate(config, settings)

        if result.diagnostics.has_errors:
            raise OpenApiGenerationError(result.diagnostics)

        output_dir = Path(request.output_path).absolute()
        written: List[Path] = []
        for variant in sorted(result.documents, key=DocumentVariant.sort_key):
            document = result.documents[variant]
            if request.description:
                document = replace(
                    document, info=replace(document.info, description=request.description)
                )

            target = output_dir / output_file_name(
                request.output_file_name_prefix, variant, request.output_format
            )
            text = self.serializer(document, request.spec_version, request.output_format)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
            written.append(target)

        return written


__all__ = [
    "DocumentGenerator",
    "OpenApiGenerationError",
    "format_diagnostics",
    "output_file_name",
]
