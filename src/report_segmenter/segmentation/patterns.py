"""Compiled regex patterns and marker constants for GFM table segmentation.

These patterns identify the structural lines of a pipe table in LLM-generated
report text: pipe-anchored rows and the hyphen/colon separator row that
follows a header.  Used by classifiers.py and tables.py.
"""

import re

# ─── Row Patterns ─────────────────────────────────────────────────────────────

# Pipe-anchored row such as "| Revenue | 2023 |".  Callers strip the line
# first; the pattern needs a pipe at both ends, so a lone "|" never matches.
TABLE_ROW_RE = re.compile(r"^\|.*\|$")

# Separator row such as "|---|:---:|---:|" or "| --- | --- |"
SEPARATOR_ROW_RE = re.compile(r"^\|(?:\s*:?-+:?\s*\|)+$")


# ─── Cell Patterns ────────────────────────────────────────────────────────────

# One leading pipe plus the whitespace after it
LEADING_PIPE_RE = re.compile(r"^\|\s*")

# One trailing pipe plus the whitespace before it
TRAILING_PIPE_RE = re.compile(r"\s*\|$")

# Cell delimiter; "\|" is NOT treated as an escape
CELL_DELIMITER = "|"


# ─── Fast-Path Markers ────────────────────────────────────────────────────────

# Every table has at least one pipe and a separator cell of three hyphens
FAST_PATH_MARKERS = ("|", "---")

# Separator cell emitted when rendering a table back to markdown
RENDERED_SEPARATOR_CELL = "---"
