"""ExportService: printable recipe documents.

Consumes a successful ``compute_recipe`` result and writes it out as PDF or
Markdown. The incoming result is read, never modified; a failed compute
result is passed straight back so the caller reports the original problem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from fpdf.errors import FPDFException

from panpizza.output.document import generate_recipe_markdown, generate_recipe_pdf
from panpizza.services.base import BaseService
from panpizza.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)

_DOCUMENT_KEYS = ("recipe", "total_weight", "pan", "pizza_count", "unit_label")


def _document_data(result: ServiceResult) -> dict[str, Any]:
    """Copy the fields the document layouts need out of a compute result."""
    return {key: result.data[key] for key in _DOCUMENT_KEYS if key in result.data}


class ExportService(BaseService):
    """Write recipes to portable document formats."""

    def export_pdf(
        self,
        result: ServiceResult,
        output_path: Path,
        *,
        page_size: str = "A4",
        title: str = "Pan Pizza Recipe",
    ) -> ServiceResult:
        """Write a one-recipe PDF to *output_path*."""
        op = "export_pdf"
        if not result.ok:
            return result
        try:
            content = generate_recipe_pdf(_document_data(result), page_size=page_size, title=title)
        except FPDFException as exc:
            log.debug("export.layout_failed", page_size=page_size, exc_info=True)
            return ServiceResult.failure(
                op, ErrorCode.EXPORT_FAILED, f"Could not lay out the PDF: {exc}", page_size=page_size
            )
        return self._write(op, output_path, content, page_size=page_size)

    def export_markdown(
        self,
        result: ServiceResult,
        output_path: Path,
        *,
        title: str = "Pan Pizza Recipe",
    ) -> ServiceResult:
        """Write the recipe as a Markdown document to *output_path*."""
        if not result.ok:
            return result
        content = generate_recipe_markdown(_document_data(result), title=title)
        return self._write("export_markdown", output_path, content.encode("utf-8"))

    def _write(self, op: str, output_path: Path, content: bytes, **extra: Any) -> ServiceResult:
        output_path = output_path.resolve()
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(content)
        except OSError as exc:
            log.debug("export.write_failed", path=str(output_path), exc_info=True)
            return ServiceResult.failure(
                op,
                ErrorCode.EXPORT_FAILED,
                f"Could not write {output_path}: {exc}",
                path=str(output_path),
            )
        log.debug("export.written", op=op, path=str(output_path), bytes=len(content))
        return ServiceResult.success(
            op, {"path": str(output_path), "bytes": len(content), **extra}
        )
