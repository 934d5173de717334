"""Core data models shared across apidocgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from xml.etree.ElementTree import ElementTree

DEFAULT_OUTPUT_FILE_NAME_PREFIX = "OpenApiDocument"


class OpenApiSpecVersion(Enum):
    """OpenAPI specification versions documents can be written in."""

    OPENAPI_2_0 = "2.0"
    OPENAPI_3_0 = "3.0"


class OpenApiFormat(Enum):
    """Serialization formats; the value doubles as the file extension segment."""

    JSON = "Json"
    YAML = "Yaml"


class FilterSetVersion(Enum):
    """Filter set the engine applies while walking documentation."""

    V1 = "V1"


class PropertyNameResolver(Enum):
    """Strategy used by the engine to name schema properties."""

    DEFAULT = "default"
    CAMEL_CASE = "camel_case"


@dataclass(frozen=True)
class GenerationRequest:
    """Validated inputs for a single generation run."""

    document_version: str
    assembly_paths: Tuple[Path, ...]
    documentation_paths: Tuple[Path, ...]
    output_path: str
    spec_version: OpenApiSpecVersion = OpenApiSpecVersion.OPENAPI_3_0
    output_format: OpenApiFormat = OpenApiFormat.JSON
    description: Optional[str] = None
    output_file_name_prefix: str = DEFAULT_OUTPUT_FILE_NAME_PREFIX


@dataclass(frozen=True)
class DocumentVariant:
    """Identifies one generated document among its siblings (e.g. an audience)."""

    title: str = ""
    categorizer: str = ""
    attributes: Tuple[Tuple[str, str], ...] = ()

    def sort_key(self) -> Tuple[str, str, Tuple[Tuple[str, str], ...]]:
        return (self.title, self.categorizer, self.attributes)


@dataclass
class OpenApiInfo:
    title: str = ""
    version: str = ""
    description: Optional[str] = None


@dataclass
class OpenApiDocument:
    """In-memory OpenAPI document as produced by a generation engine."""

    info: OpenApiInfo = field(default_factory=OpenApiInfo)
    servers: List[Dict[str, Any]] = field(default_factory=list)
    paths: Dict[str, Any] = field(default_factory=dict)
    components: Dict[str, Any] = field(default_factory=dict)
    tags: List[Dict[str, Any]] = field(default_factory=list)
    extensions: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationErrorRecord:
    """Single failure reported by the engine."""

    exception_type: str
    message: str


@dataclass
class DocumentGenerationDiagnostic:
    """Errors that apply to the document as a whole."""

    errors: List[GenerationErrorRecord] = field(default_factory=list)


@dataclass
class OperationGenerationDiagnostic:
    """Errors raised while generating a single API operation."""

    operation_method: str
    errors: List[GenerationErrorRecord] = field(default_factory=list)


@dataclass
class GenerationDiagnostics:
    """Aggregated report returned by the engine alongside the documents."""

    document: DocumentGenerationDiagnostic = field(default_factory=DocumentGenerationDiagnostic)
    operations: List[OperationGenerationDiagnostic] = field(default_factory=list)

    @property
    def failed_operations(self) -> List[OperationGenerationDiagnostic]:
        return [operation for operation in self.operations if operation.errors]

    @property
    def has_errors(self) -> bool:
        return bool(self.document.errors) or bool(self.operations)


@dataclass(frozen=True)
class GeneratorConfig:
    """Inputs handed to the engine for one run."""

    documents: Sequence[ElementTree]
    assembly_paths: Tuple[Path, ...]
    document_version: str
    filter_set_version: FilterSetVersion = FilterSetVersion.V1


@dataclass(frozen=True)
class GenerationSettings:
    property_name_resolver: PropertyNameResolver = PropertyNameResolver.DEFAULT
    remove_duplicate_string_from_param_name: bool = True


@dataclass
class GenerationResult:
    """Documents keyed by variant plus the diagnostics describing the run."""

    documents: Mapping[DocumentVariant, OpenApiDocument] = field(default_factory=dict)
    diagnostics: GenerationDiagnostics = field(default_factory=GenerationDiagnostics)
