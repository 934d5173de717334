"""Configuration loading for apidocgen (.apidocgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .inputs import TaskParameters
from .models import DEFAULT_OUTPUT_FILE_NAME_PREFIX

CONFIG_FILE_NAME = ".apidocgen.yml"
DEFAULT_INTERMEDIATE_OUTPUT_DIR = "obj"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ApiDocGenConfig:
    """Represents the settings defined in .apidocgen.yml."""

    root: Path
    document_version: Optional[str] = None
    assemblies: List[Path] = field(default_factory=list)
    documentation_files: List[Path] = field(default_factory=list)
    description: Optional[str] = None
    output_path: Optional[Path] = None
    intermediate_output_path: Optional[Path] = None
    spec_version: str = "3.0"
    output_file_name_prefix: str = DEFAULT_OUTPUT_FILE_NAME_PREFIX
    output_format: str = "JSON"
    engine: Optional[str] = None

    def to_parameters(self, **overrides: Any) -> TaskParameters:
        """Merge non-empty ``overrides`` over file values into task parameters."""
        values: Dict[str, Any] = {
            "document_version": self.document_version or "1.0.0",
            "assembly_paths": list(self.assemblies),
            "documentation_paths": list(self.documentation_files),
            "description": self.description,
            "output_path": str(self.output_path) if self.output_path else None,
            "intermediate_output_path": str(
                self.intermediate_output_path or self.root / DEFAULT_INTERMEDIATE_OUTPUT_DIR
            ),
            "spec_version": self.spec_version,
            "output_file_name_prefix": self.output_file_name_prefix,
            "output_format": self.output_format,
        }
        for key, value in overrides.items():
            if key not in values:
                raise TypeError(f"Unknown task parameter: {key}")
            if value is None or value == []:
                continue
            values[key] = value
        return TaskParameters(**values)


def load_config(config_path: Path) -> ApiDocGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ApiDocGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILE_NAME} must contain a mapping at the root")

    output_path = _as_str(data.get("output_path"))
    intermediate = _as_str(data.get("intermediate_output_path"))

    return ApiDocGenConfig(
        root=root,
        document_version=_as_str(data.get("document_version")),
        assemblies=[root / item for item in _as_str_list(data.get("assemblies"))],
        documentation_files=[
            root / item for item in _as_str_list(data.get("documentation_files"))
        ],
        description=_as_str(data.get("description")),
        output_path=root / output_path if output_path else None,
        intermediate_output_path=root / intermediate if intermediate else None,
        spec_version=_as_str(data.get("spec_version")) or "3.0",
        output_file_name_prefix=_as_str(data.get("output_file_name_prefix"))
        or DEFAULT_OUTPUT_FILE_NAME_PREFIX,
        output_format=_as_str(data.get("output_format")) or "JSON",
        engine=_as_str(data.get("engine")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    # YAML reads an unquoted 3.0 as a float.
    return str(value) if isinstance(value, (str, int, float)) and value != "" else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
