from __future__ import annotations

from typing import Any

from impresor.config import ZEBRA_COLOR

# Layout nodes follow the renderer's document-definition schema verbatim:
# plain dicts, lists and strings, keys in the renderer's camelCase.

SPACER = "\n"

Row = list[Any]


def span_row(cell: dict[str, Any], count: int) -> Row:
    """A cell spanning *count* columns, followed by the covered placeholders."""
    return [{**cell, "colSpan": count}] + [{} for _ in range(count - 1)]


def pad_row(cells: list[Any], count: int) -> Row:
    """Populated *cells* followed by blank cells up to *count* columns."""
    return list(cells) + ["" for _ in range(count - len(cells))]


def title_row(text: str, count: int) -> Row:
    """Centred section title spanning the whole table."""
    return span_row({"text": text, "style": "tableHeader", "alignment": "center"}, count)


def table(
    body: list[Row],
    widths: list[Any],
    *,
    style: str = "tableContent",
    layout: Any = "lightHorizontalLines",
    **extra: Any,
) -> dict[str, Any]:
    """Build a table node. *extra* keys are placed on the inner table dict."""
    return {
        "style": style,
        "table": {"widths": widths, **extra, "body": body},
        "layout": layout,
    }


def zebra_fill(row_index: int, node: Any = None, column_index: int | None = None) -> str | None:
    """Row background callback: shade odd rows."""
    return ZEBRA_COLOR if row_index % 2 != 0 else None


def zebra_layout() -> dict[str, Any]:
    return {"fillColor": zebra_fill}
