"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decking.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "devis-terrasse"


class ExportError(Exception):
    """Raised when a quote artifact cannot be produced."""

    def __init__(self, message: str, format_name: str, path: Path | None = None) -> None:
        self.message = message
        self.format_name = format_name
        self.path = path
        super().__init__(message)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all quote exporters.

    Attributes:
        format_name: Registry key for the export format (e.g., "txt", "pdf").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: QuoteOutput, path: Path) -> None:
        """Write the quote to a file."""
        ...

    def export_string(self, output: QuoteOutput) -> str:
        """Return the quote as a string.

        Raises:
            NotImplementedError: If the format is binary (e.g., PDF).
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("txt")
        class TextQuoteExporter:
            format_name = "txt"
            file_extension = "txt"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
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
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes quote artifacts to a directory.

    File names carry the quote's timestamp in milliseconds,
    ``{project_name}-{timestamp}.{ext}``, so successive exports never
    collide. Each export is a one-shot write of one quote snapshot.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path, project_name: str = DEFAULT_PROJECT_NAME) -> None:
        self.output_dir = Path(output_dir)
        self.project_name = project_name

    def filename_for(self, output: QuoteOutput, extension: str) -> str:
        timestamp = int(output.generated_at.timestamp() * 1000)
        return f"{self.project_name}-{timestamp}.{extension}"

    def export_all(self, formats: list[str], output: QuoteOutput) -> dict[str, Path]:
        """Export a quote to several formats.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            ExportError: If a file cannot be written.
        """
        exporters = {fmt: ExporterRegistry.get(fmt)() for fmt in formats}

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExportError(
                f"Cannot create output directory {self.output_dir}: {e}",
                format_name=formats[0] if formats else "",
                path=self.output_dir,
            ) from e

        results: dict[str, Path] = {}
        for format_name, exporter in exporters.items():
            filepath = self.output_dir / self.filename_for(output, exporter.file_extension)
            logger.info(f"Exporting to {format_name}: {filepath}")
            try:
                exporter.export(output, filepath)
            except OSError as e:
                raise ExportError(
                    f"Failed to write {format_name} export to {filepath}: {e}",
                    format_name=format_name,
                    path=filepath,
                ) from e
            results[format_name] = filepath

        return results

    def export_single(self, format_name: str, output: QuoteOutput) -> Path:
        """Export a quote to one format and return the file path."""
        return self.export_all([format_name], output)[format_name]
