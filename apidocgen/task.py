"""Build task wrapper: validates parameters, runs generation and logs the outcome."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .engine import GenerationEngine
from .generator import DocumentGenerator, OpenApiGenerationError
from .inputs import InputValidationError, TaskParameters, build_request
from .loader import DocumentLoadError
from .logging import get_logger


class GenerateOpenApiDocumentTask:
    """Generates OpenAPI documents as one step of a larger build.

    ``execute`` mirrors a build task contract: it returns ``True`` on success
    and exposes the written documents on :attr:`open_api_documents`; failures
    are logged and reported by returning ``False``.
    """

    def __init__(
        self,
        parameters: TaskParameters,
        engine: GenerationEngine,
    ) -> None:
        self.parameters = parameters
        self.generator = DocumentGenerator(engine)
        self.open_api_documents: List[Path] = []
        self.logger = get_logger("task")

    def execute(self) -> bool:
        try:
            request = build_request(self.parameters)
        except InputValidationError as exc:
            for issue in exc.issues:
                self.logger.error("Invalid %s: %s (%s)", issue.parameter, issue.value, issue.detail)
            return False

        self.logger.debug(
            "Generating OpenAPI %s documents (%s) from %d documentation file(s) into %s",
            request.spec_version.value,
            request.output_format.value,
            len(request.documentation_paths),
            request.output_path,
        )

        try:
            self.open_api_documents = self.generator.generate(request)
        except (OpenApiGenerationError, DocumentLoadError) as exc:
            self.logger.error("%s", exc)
            return False

        if not self.open_api_documents:
            self.logger.warning("Generation engine produced no documents")
        for path in self.open_api_documents:
            self.logger.info("Wrote %s", path)
        return True


__all__ = ["GenerateOpenApiDocumentTask"]
