"""Markdown and JSON rendering of segmented blocks.

render_blocks_markdown() turns a block sequence back into report text: text
runs are emitted verbatim and tables are rebuilt as pipe tables with a plain
'---' separator.  Column alignment is not kept by the segmenter, so a
round trip normalises separator rows and cell padding but keeps the order
and contents of every line.

blocks_to_json() / blocks_from_json() convert blocks to and from plain
JSON-ready dicts for the CLI and for callers that store parse results.
"""

from collections.abc import Iterable, Sequence

from report_segmenter.segmentation.patterns import RENDERED_SEPARATOR_CELL
from report_segmenter.segmentation.schema import BLOCK_LIST_ADAPTER, Block, TableBlock, TextBlock


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def _render_row(cells: Sequence[str]) -> str:
    """Render one row of cells as '| a | b |'."""
    return "| " + " | ".join(cells) + " |"


def render_table_markdown(table: TableBlock) -> str:
    """Convert a TableBlock into a GFM pipe table string (no trailing newline)."""
    if table.is_empty:
        return ""

    # Header row + separator
    lines: list[str] = [_render_row(table.headers)]
    lines.append(_render_row([RENDERED_SEPARATOR_CELL] * len(table.headers)))

    # Body rows keep their own width
    for row in table.rows:
        lines.append(_render_row(row))

    return "\n".join(lines)


def render_blocks_markdown(blocks: Iterable[Block]) -> str:
    """Rebuild report text from a block sequence."""
    parts: list[str] = []
    previous_was_table = False
    for block in blocks:
        if isinstance(block, TextBlock):
            parts.append(block.content)
            previous_was_table = False
            continue
        rendered = render_table_markdown(block)
        if not rendered:
            continue
        # Blank-only runs between tables are not kept as blocks; without a
        # blank line here the two tables would re-parse as one.
        if previous_was_table:
            parts.append("\n")
        parts.append(rendered + "\n")
        previous_was_table = True
    return "".join(parts)


# ─── JSON Export ─────────────────────────────────────────────────────────────


def blocks_to_json(blocks: Iterable[Block]) -> list[dict]:
    """Return JSON-ready dicts, one per block, tagged with their 'kind'."""
    return [block.model_dump(mode="json") for block in blocks]


def blocks_from_json(data: list[dict]) -> tuple[Block, ...]:
    """Validate dicts produced by blocks_to_json() back into blocks.

    Raises pydantic.ValidationError for an unknown 'kind' or badly typed cells.
    """
    return tuple(BLOCK_LIST_ADAPTER.validate_python(data))


# ─── Summary ─────────────────────────────────────────────────────────────────


def summarize_blocks(blocks: Iterable[Block]) -> dict[str, int]:
    """Count text blocks, tables, and table body rows."""
    summary = {"text_blocks": 0, "tables": 0, "table_rows": 0}
    for block in blocks:
        if isinstance(block, TextBlock):
            summary["text_blocks"] += 1
        else:
            summary["tables"] += 1
            summary["table_rows"] += len(block.rows)
    return summary
