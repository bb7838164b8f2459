"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fences.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters serialize a computed LayoutOutput. They never recompute
    quantities; they only read the settled output.

    Attributes:
        format_name: Registered name of the export format (e.g., "bom").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: str

    @abstractmethod
    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export layout output to a file."""
        ...

    @abstractmethod
    def export_string(self, output: LayoutOutput) -> str:
        """Export layout output as a string."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports a layout output to one or more formats in a directory.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: LayoutOutput,
        project_name: str = "fence",
    ) -> dict[str, Path]:
        """Export ``output`` to each of ``formats``.

        Files are named ``{project_name}_{format}.{ext}``.

        Returns:
            Mapping of format name to written file path.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath
        return results
