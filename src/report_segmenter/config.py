"""Shared configuration for the report segmenter and its command-line tool."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Number of distinct report texts kept by parse_content_cached
PARSE_CACHE_SIZE = int(os.getenv("REPORT_SEGMENTER_CACHE_SIZE", "256"))

# Log level for the segment-report CLI
LOG_LEVEL = os.getenv("REPORT_SEGMENTER_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Where the CLI writes output when --output is not given
OUTPUT_DIR = ROOT / "data" / "segmented"


def output_path(input_path: Path, markdown: bool = False) -> Path:
    """Return the default output file for a report, e.g. data/segmented/aapl.blocks.json."""
    suffix = ".blocks.md" if markdown else ".blocks.json"
    return OUTPUT_DIR / f"{input_path.stem}{suffix}"
