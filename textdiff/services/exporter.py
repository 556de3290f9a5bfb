"""
Export service for difference results.

Serializes a list of lines as plain text, CSV or JSON and writes
it to a destination file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from textdiff.core.models import ExportFormat, ExportRequest, SerializationError
from textdiff.services.file_io import FileIOService


class ResultExporter:
    """Writes difference results to files."""

    def __init__(self, file_io_service: Optional[FileIOService] = None):
        self._file_io = file_io_service or FileIOService()

    def export(
        self,
        lines: Sequence[str],
        export_format: Optional[ExportFormat],
        destination: Path | str
    ) -> None:
        """
        Export lines to a file.

        Args:
            lines: The difference result to write
            export_format: Serialization to use (inferred from the
                destination's extension if None)
            destination: Path of the file to create or overwrite

        Raises:
            SerializationError: If the lines cannot be encoded
            FileAccessError: If the destination cannot be written
        """
        request = ExportRequest.for_destination(lines, destination, export_format)
        self.export_request(request)

    def export_request(self, request: ExportRequest) -> None:
        """Carry out a single export request."""
        # Serialize first so a failed encoding never touches the destination
        content = self.render(request.lines, request.export_format)
        self._file_io.write_text(request.destination, content)

        logging.info(
            f"ResultExporter - Exported {len(request.lines)} lines as "
            f"{request.export_format.name} to {request.destination}"
        )

    def render(self, lines: Sequence[str], export_format: ExportFormat) -> str:
        """Serialize lines without writing them anywhere."""
        if export_format == ExportFormat.CSV:
            return self._render_csv(lines)
        elif export_format == ExportFormat.JSON:
            return self._render_json(lines)
        else:
            return self._render_text(lines)

    def _render_text(self, lines: Sequence[str]) -> str:
        return ''.join(f"{line}\n" for line in lines)

    def _render_csv(self, lines: Sequence[str]) -> str:
        # Single column, no header. Embedded quotes are not escaped.
        return ''.join(f'"{line}"\n' for line in lines)

    def _render_json(self, lines: Sequence[str]) -> str:
        try:
            return json.dumps(list(lines), ensure_ascii=False, separators=(',', ':'))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode result as JSON: {e}", e) from e
