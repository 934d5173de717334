"""Validation and normalization of raw generation parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .models import (
    DEFAULT_OUTPUT_FILE_NAME_PREFIX,
    GenerationRequest,
    OpenApiFormat,
    OpenApiSpecVersion,
)

PathInput = Union[str, Path]

_SPEC_VERSION_TOKENS = {
    "2.0": OpenApiSpecVersion.OPENAPI_2_0,
    "3.0": OpenApiSpecVersion.OPENAPI_3_0,
}
_OUTPUT_FORMAT_TOKENS = {
    "json": OpenApiFormat.JSON,
    "yaml": OpenApiFormat.YAML,
}


@dataclass
class InputIssue:
    """Describes one rejected input value."""

    parameter: str
    value: str
    detail: str


class InputValidationError(ValueError):
    """Raised when a category of task parameters fails validation."""

    def __init__(self, message: str, issues: Sequence[InputIssue]) -> None:
        super().__init__(message)
        self.issues = list(issues)


@dataclass
class TaskParameters:
    """Raw parameters as supplied by the build host."""

    document_version: str
    assembly_paths: Sequence[PathInput] = field(default_factory=list)
    documentation_paths: Sequence[PathInput] = field(default_factory=list)
    intermediate_output_path: Optional[str] = None
    output_path: Optional[str] = None
    description: Optional[str] = None
    spec_version: str = "3.0"
    output_file_name_prefix: str = DEFAULT_OUTPUT_FILE_NAME_PREFIX
    output_format: str = "JSON"


def validate_assembly_paths(paths: Iterable[PathInput]) -> Tuple[List[Path], List[InputIssue]]:
    """Return the assemblies that exist plus one issue per missing entry."""
    return _validate_files(paths, parameter="AssemblyPath")


def validate_documentation_paths(
    paths: Iterable[PathInput],
) -> Tuple[List[Path], List[InputIssue]]:
    """Return the documentation files that exist plus one issue per missing entry."""
    return _validate_files(paths, parameter="XmlDocumentationFile")


def validate_output_path(
    requested: Optional[str], fallback: Optional[str]
) -> Tuple[str, List[InputIssue]]:
    """Resolve the output directory, falling back to the intermediate output path.

    The directory is not required to exist; it is created when documents are written.
    """
    resolved = requested if requested else (fallback or "")
    if not resolved:
        return resolved, [
            InputIssue(
                parameter="OutputPath",
                value=requested or "",
                detail="no output path given and no intermediate output path to fall back to",
            )
        ]
    return resolved, []


def validate_spec_version(token: Optional[str]) -> Tuple[OpenApiSpecVersion, List[InputIssue]]:
    """Match ``2.0``/``3.0``; unknown tokens still yield 3.0 alongside the issue."""
    version = _SPEC_VERSION_TOKENS.get((token or "").strip().lower())
    if version is None:
        return OpenApiSpecVersion.OPENAPI_3_0, [
            InputIssue(
                parameter="OpenApiSpecVersion",
                value=token or "",
                detail=f"expected one of {', '.join(_SPEC_VERSION_TOKENS)}",
            )
        ]
    return version, []


def validate_output_format(token: Optional[str]) -> Tuple[OpenApiFormat, List[InputIssue]]:
    """Match ``JSON``/``YAML`` case-insensitively; unknown tokens still yield JSON."""
    output_format = _OUTPUT_FORMAT_TOKENS.get((token or "").strip().lower())
    if output_format is None:
        return OpenApiFormat.JSON, [
            InputIssue(
                parameter="OutputFormat",
                value=token or "",
                detail="expected one of JSON, YAML",
            )
        ]
    return output_format, []


def build_request(parameters: TaskParameters) -> GenerationRequest:
    """Validate every parameter category and return a request ready for generation.

    Categories are checked in a fixed order and the first one holding issues
    raises :class:`InputValidationError`, so no generation work is attempted
    on inputs known to be bad. Unrecognized spec version or format tokens are
    treated as failures even though their validators supply a default.
    """
    assemblies, issues = validate_assembly_paths(parameters.assembly_paths)
    _raise_for_issues(issues)

    documentation, issues = validate_documentation_paths(parameters.documentation_paths)
    _raise_for_issues(issues)

    output_path, issues = validate_output_path(
        parameters.output_path, parameters.intermediate_output_path
    )
    _raise_for_issues(issues)

    spec_version, issues = validate_spec_version(parameters.spec_version)
    _raise_for_issues(issues)

    output_format, issues = validate_output_format(parameters.output_format)
    _raise_for_issues(issues)

    return GenerationRequest(
        document_version=parameters.document_version,
        assembly_paths=tuple(assemblies),
        documentation_paths=tuple(documentation),
        output_path=output_path,
        spec_version=spec_version,
        output_format=output_format,
        description=parameters.description,
        output_file_name_prefix=parameters.output_file_name_prefix
        or DEFAULT_OUTPUT_FILE_NAME_PREFIX,
    )


def _validate_files(
    paths: Iterable[PathInput], *, parameter: str
) -> Tuple[List[Path], List[InputIssue]]:
    valid: List[Path] = []
    issues: List[InputIssue] = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            issues.append(InputIssue(parameter=parameter, value=str(raw), detail="file not found"))
            continue
        if path not in valid:
            valid.append(path)
    return valid, issues


def _raise_for_issues(issues: Sequence[InputIssue]) -> None:
    if not issues:
        return
    parameter = issues[0].parameter
    values = ";".join(issue.value for issue in issues)
    raise InputValidationError(f"Invalid {parameter}: {values}", issues)


__all__ = [
    "InputIssue",
    "InputValidationError",
    "TaskParameters",
    "build_request",
    "validate_assembly_paths",
    "validate_documentation_paths",
    "validate_output_format",
    "validate_output_path",
    "validate_spec_version",
]
