"""Line-by-line block segmentation of report text.

Walks the report one line at a time with one line of lookahead and splits it
into TextBlock runs and TableBlock tables.  All mutable data for one pass
lives in a SegmenterState owned by that pass, so concurrent calls never share
buffers.

Two modes:
  scanning  -- outside a table; lines accumulate in the text buffer
  in_table  -- inside a table; pipe rows accumulate in the table buffer

A pipe-anchored line only opens a table when the NEXT line is a separator
row.  Once inside a table, any pipe-anchored line is accepted as a body row,
and the first non-row line (blank lines included) closes it.
"""

from dataclasses import dataclass, field

from report_segmenter.segmentation.classifiers import looks_like_separator_row, looks_like_table_row
from report_segmenter.segmentation.schema import Block, TextBlock
from report_segmenter.segmentation.tables import materialize_table


def split_lines(text: str) -> list[str]:
    """Split on '\\n' only, keeping each line's newline.

    A trailing newline does not produce an extra empty line, so joining the
    result gives back *text* exactly.
    """
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


@dataclass
class SegmenterState:
    """Mutable state for a single segmentation pass."""

    in_table: bool = False
    text_buffer: list[str] = field(default_factory=list)
    table_buffer: list[str] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)

    def flush_text(self) -> None:
        """Emit the buffered text run unless it is whitespace only.

        A whitespace-only run stays buffered and carries into the next text
        run, so blank lines before a table are kept rather than lost.
        """
        content = "".join(self.text_buffer)
        if content.strip():
            self.blocks.append(TextBlock(content=content))
            self.text_buffer = []

    def flush_table(self) -> None:
        """Materialize the buffered rows as a table and return to scanning."""
        if self.table_buffer:
            self.blocks.append(materialize_table(self.table_buffer))
        self.table_buffer = []
        self.in_table = False

    def step(self, line: str, next_line: str | None) -> None:
        """Consume one line, given the line after it (None at end of input)."""
        if self.in_table:
            if looks_like_table_row(line):
                self.table_buffer.append(line)
                return
            # Table ended; this line joins the pending text run
            self.flush_table()
            self.text_buffer.append(line)
            return

        is_header = looks_like_table_row(line) and next_line is not None and looks_like_separator_row(next_line)
        if is_header:
            self.flush_text()
            self.in_table = True
            self.table_buffer = [line]
            return

        # Ordinary line, or a pipe row with no separator after it
        self.text_buffer.append(line)

    def finish(self) -> tuple[Block, ...]:
        """Flush whatever is pending at end of input and return the blocks."""
        if self.in_table:
            self.flush_table()
        self.flush_text()
        return tuple(self.blocks)


def segment_lines(lines: list[str]) -> tuple[Block, ...]:
    """Run the segmentation state machine over pre-split lines."""
    state = SegmenterState()
    for i, line in enumerate(lines):
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        state.step(line, next_line)
    return state.finish()
