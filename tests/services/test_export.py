"""Tests for ExportService (PDF and Markdown)."""

from __future__ import annotations

from pathlib import Path

import pytest

from panpizza.services.export import ExportService
from panpizza.services.recipe import RecipeService
from panpizza.services.result import ErrorCode, ServiceResult
from tests.conftest import pdf_text


class TestExportPdf:
    def test_writes_pdf(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        target = tmp_path / "out" / "recipe.pdf"
        result = ExportService().export_pdf(recipe_result, target)
        assert result.ok
        assert result.op == "export_pdf"
        assert target.read_bytes().startswith(b"%PDF")
        assert result.data["path"] == str(target.resolve())
        assert result.data["bytes"] == target.stat().st_size
        assert result.data["page_size"] == "A4"

    def test_letter_page(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        result = ExportService().export_pdf(
            recipe_result, tmp_path / "r.pdf", page_size="Letter", title="Sunday dough"
        )
        assert result.ok
        assert result.data["page_size"] == "Letter"

    @pytest.mark.usefixtures("uncompressed_pdf")
    def test_written_page_content(self, tmp_path: Path) -> None:
        computed = RecipeService().compute(28, 40, "metric", 2)
        target = tmp_path / "two.pdf"
        ExportService().export_pdf(computed, target, title="Two pans")
        text = pdf_text(target.read_bytes())
        assert "(Two pans) Tj" in text
        assert "(Recipe is for 2 pizza(s) baked in a 28x40 cm pan) Tj" in text
        assert "(- Bread flour: 542 gram(s)) Tj" in text
        assert "(- Salt: 11.4 gram(s)) Tj" in text
        assert "(14. Remove the pizza" in text

    def test_unknown_page_size(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        target = tmp_path / "r.pdf"
        result = ExportService().export_pdf(recipe_result, target, page_size="Tabloidish")
        assert not result.ok
        assert result.op == "export_pdf"
        assert result.error is not None
        assert result.error.code is ErrorCode.EXPORT_FAILED
        assert result.error.detail == {"page_size": "Tabloidish"}
        assert not target.exists()

    def test_input_result_unchanged(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        before = recipe_result.model_dump()
        ExportService().export_pdf(recipe_result, tmp_path / "r.pdf")
        assert recipe_result.model_dump() == before

    def test_no_recipe_passes_through(self, tmp_path: Path) -> None:
        failed = RecipeService().compute(0, 40, "metric", 1)
        target = tmp_path / "r.pdf"
        result = ExportService().export_pdf(failed, target)
        assert result is failed
        assert not target.exists()


class TestExportMarkdown:
    def test_writes_markdown(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        target = tmp_path / "recipe.md"
        result = ExportService().export_markdown(recipe_result, target, title="Detroit night")
        assert result.ok
        assert result.op == "export_markdown"
        text = target.read_text(encoding="utf-8")
        assert text.startswith("# Detroit night\n")
        assert "Recipe is for 1 pizza(s) baked in a 28x40 cm pan" in text
        assert "| Bread flour | 271 |" in text
        assert "| Yeast | 1.4 |" in text
        assert "| **Total** | **509** |" in text
        assert "14. Remove the pizza from the pan" in text

    def test_unwritable_target(self, recipe_result: ServiceResult, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = ExportService().export_markdown(recipe_result, blocker / "recipe.md")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EXPORT_FAILED"
