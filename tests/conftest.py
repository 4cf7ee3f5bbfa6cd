"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from report_segmenter.segmentation.pipeline import parse_content_cached

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


# A report in the shape the upstream generator produces: headings, prose with
# stray pipes, a pipe line with no separator after it, and two tables.
SAMPLE_REPORT = """\
# NVDA Deep Dive

Revenue grew sharply | driven by data center demand.

## Segment revenue

| Segment | FY2023 | FY2024 |
|:--------|-------:|-------:|
| Data Center | 15.0 | 47.5 |
| Gaming | 9.1 | 10.4 |

Margins | expanded
|not a table|

| Metric | Value |
| --- | --- |
| P/E | 65x |
"""


@pytest.fixture
def sample_report() -> str:
    """Return a multi-section report containing two tables."""
    return SAMPLE_REPORT


@pytest.fixture(autouse=True)
def _clear_parse_cache():
    """Start every test with an empty parse_content_cached() cache."""
    parse_content_cached.cache_clear()
    yield
    parse_content_cached.cache_clear()
