"""Cell splitting and table materialization.

Turns the raw pipe-row lines buffered by the segmenter into a TableBlock.
The first line is the header, the second is the separator (discarded), and
everything after it is a body row.
"""

import logging

from report_segmenter.segmentation.patterns import CELL_DELIMITER, LEADING_PIPE_RE, TRAILING_PIPE_RE
from report_segmenter.segmentation.schema import TableBlock

logger = logging.getLogger(__name__)


def parse_row(line: str) -> list[str]:
    """Split one pipe row into trimmed cell strings.

    Exactly one leading and one trailing pipe are removed before splitting,
    so '| a || c |' gives ['a', '', 'c'].  Escaped pipes ('\\|') are not
    honoured and terminate the cell like any other pipe.
    """
    inner = LEADING_PIPE_RE.sub("", line.strip(), count=1)
    inner = TRAILING_PIPE_RE.sub("", inner, count=1)
    return [cell.strip() for cell in inner.split(CELL_DELIMITER)]


def materialize_table(lines: list[str]) -> TableBlock:
    """Build a TableBlock from buffered header, separator, and body lines.

    With fewer than two lines there is no header/separator pair; an empty
    TableBlock is returned instead of raising.
    """
    if len(lines) < 2:
        logger.debug("Degenerate table buffer (%d line(s)), emitting empty table", len(lines))
        return TableBlock()

    headers = parse_row(lines[0])
    # lines[1] is the separator row
    rows = [parse_row(line) for line in lines[2:]]
    logger.debug("Materialized table: %d columns, %d rows", len(headers), len(rows))
    return TableBlock(headers=headers, rows=rows)
