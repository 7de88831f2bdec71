"""Printable recipe documents — PDF (fpdf2) and Markdown.

Both layouts take the ``compute_recipe`` result payload
(``recipe``, ``pan``, ``pizza_count``, ``unit_label``) and only read it.
Uses fpdf2 (pure Python, no system dependencies).
"""

from __future__ import annotations

from typing import Any

from fpdf import FPDF

from panpizza.domain.steps import INSTRUCTION_STEPS
from panpizza.output.labels import display_name, format_grams, pan_summary


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text.replace("—", " - ")  # em dash
        .replace("–", "-")  # en dash
        .replace("‘", "'")
        .replace("’", "'")
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class RecipePDF(FPDF):
    """Single-recipe page layout."""

    def __init__(self, page_size: str = "A4") -> None:
        super().__init__(format=page_size)
        self.set_margins(left=12, top=12, right=12)
        self.set_auto_page_break(auto=True, margin=23)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")
        self.set_text_color(0, 0, 0)

    def underlined_heading(self, title: str, size: int) -> None:
        self.set_font("Helvetica", "U", size)
        self.cell(0, size * 0.5, _safe(title), new_x="LMARGIN", new_y="NEXT")
        self.ln(3)

    def body_line(self, text: str) -> None:
        self.set_font("Helvetica", "", 12)
        self.multi_cell(0, 6, _safe(text), new_x="LMARGIN", new_y="NEXT")
        self.ln(1)


def generate_recipe_pdf(
    data: dict[str, Any],
    *,
    page_size: str = "A4",
    title: str = "Pan Pizza Recipe",
) -> bytes:
    """Lay out a recipe page and return the PDF bytes."""
    pdf = RecipePDF(page_size=page_size)
    pdf.alias_nb_pages()
    pdf.add_page()

    pdf.underlined_heading(title, 18)
    pdf.body_line(pan_summary(data))
    pdf.ln(3)

    for key, grams in data["recipe"].items():
        pdf.body_line(f"- {display_name(key)}: {format_grams(grams)} gram(s)")
    pdf.ln(3)

    pdf.underlined_heading("Instructions", 14)
    for index, step in enumerate(INSTRUCTION_STEPS, start=1):
        pdf.body_line(f"{index}. {step}")

    return bytes(pdf.output())


def generate_recipe_markdown(data: dict[str, Any], *, title: str = "Pan Pizza Recipe") -> str:
    """Render the same content as a Markdown document."""
    lines = [f"# {title}", "", pan_summary(data), ""]
    lines.append("| Ingredient | Weight (grams) |")
    lines.append("| --- | ---: |")
    for key, grams in data["recipe"].items():
        lines.append(f"| {display_name(key)} | {format_grams(grams)} |")
    if "total_weight" in data:
        lines.append(f"| **Total** | **{format_grams(data['total_weight'])}** |")
    lines.extend(["", "## Instructions", ""])
    for index, step in enumerate(INSTRUCTION_STEPS, start=1):
        lines.append(f"{index}. {step}")
    return "\n".join(lines) + "\n"
