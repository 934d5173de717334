"""Generate OpenAPI documents from C# XML documentation as a build step."""

from .engine import GenerationEngine, load_engine
from .generator import DocumentGenerator, OpenApiGenerationError
from .inputs import InputValidationError, TaskParameters, build_request
from .task import GenerateOpenApiDocumentTask

__all__ = [
    "DocumentGenerator",
    "GenerateOpenApiDocumentTask",
    "GenerationEngine",
    "InputValidationError",
    "OpenApiGenerationError",
    "TaskParameters",
    "build_request",
    "load_engine",
]
