"""Generation engine contract and plugin discovery."""

from __future__ import annotations

from abc import ABC, abstractmethod
from importlib import import_module, metadata
from typing import Iterable, List, Optional

from .models import GenerationResult, GenerationSettings, GeneratorConfig

_ENTRY_POINT_GROUP = "apidocgen.engines"


class EngineNotFoundError(LookupError):
    """Raised when no generation engine matches the requested name."""


class GenerationEngine(ABC):
    """Turns documentation plus assembly metadata into OpenAPI documents."""

    @abstractmethod
    def generate(self, config: GeneratorConfig, settings: GenerationSettings) -> GenerationResult:
        """Return the generated documents keyed by variant along with diagnostics.

        Implementations report failures through ``GenerationResult.diagnostics``
        rather than by raising.
        """


def load_engine(name: Optional[str] = None) -> GenerationEngine:
    """Resolve a generation engine by ``module:attribute`` reference or plugin name.

    Plugins register under the ``apidocgen.engines`` entry point group. When
    ``name`` is omitted and exactly one plugin is installed, it is used.
    """
    if name and ":" in name:
        module_name, _, attribute = name.partition(":")
        try:
            loaded = getattr(import_module(module_name), attribute)
        except (ImportError, AttributeError) as exc:
            raise EngineNotFoundError(f"Cannot import generation engine '{name}': {exc}") from exc
        return _coerce_engine(loaded)

    entries = list(_iter_entry_points())
    if name:
        matches = [entry for entry in entries if entry.name.lower() == name.lower()]
        if not matches:
            raise EngineNotFoundError(f"Unknown generation engine: {name}")
        entry = matches[0]
    else:
        if len(entries) != 1:
            available = ", ".join(sorted(entry.name for entry in entries)) or "none installed"
            raise EngineNotFoundError(
                f"Specify a generation engine explicitly (available: {available})"
            )
        entry = entries[0]

    try:
        loaded = entry.load()
    except Exception as exc:
        raise EngineNotFoundError(
            f"Failed to load generation engine entry point '{entry.name}': {exc}"
        ) from exc
    return _coerce_engine(loaded)


def available_engines() -> List[str]:
    """Return the names of installed engine plugins."""
    return sorted(entry.name for entry in _iter_entry_points())


def _coerce_engine(obj: object) -> GenerationEngine:
    if isinstance(obj, GenerationEngine):
        return obj
    if isinstance(obj, type) and issubclass(obj, GenerationEngine):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, GenerationEngine):
            return instance
    raise TypeError("Generation engine must be a GenerationEngine subclass, instance or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = ["EngineNotFoundError", "GenerationEngine", "available_engines", "load_engine"]
