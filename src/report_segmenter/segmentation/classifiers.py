"""Line classification helpers for GFM table segmentation.

Each function takes a single raw line (or, for the fast-path guard, the whole
report text) and returns True/False.  Surrounding whitespace is ignored for
the anchor checks only; cell splitting in tables.py sees the raw line.
"""

from report_segmenter.segmentation.patterns import FAST_PATH_MARKERS, SEPARATOR_ROW_RE, TABLE_ROW_RE


def looks_like_table_row(line: str) -> bool:
    """Return True if the line starts and ends with a pipe, e.g. '| a | b |'."""
    return bool(TABLE_ROW_RE.match(line.strip()))


def looks_like_separator_row(line: str) -> bool:
    """Return True if the line is a header separator such as '| --- | :---: |'."""
    return bool(SEPARATOR_ROW_RE.match(line.strip()))


def might_contain_table(text: str) -> bool:
    """Cheap pre-check: a table needs at least one pipe and a '---' separator cell.

    When this returns False the full line-by-line pass is skipped and the text
    is kept as a single text block.  Tables whose separator cells use fewer
    than three hyphens (e.g. '|-|-|') are therefore only recognised when a
    '---' run appears elsewhere in the same text.
    """
    return all(marker in text for marker in FAST_PATH_MARKERS)
