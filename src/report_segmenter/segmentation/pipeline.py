"""Main entry point for segmenting report text into blocks.

parse_content() is the function renderers call: it applies the fast-path
guard, then runs the segmenter.  It is pure and never raises for str input,
so parse_content_cached() can memoize it on the input text.

Running this module (or the ``segment-report`` console script) segments a
report file from disk and writes the blocks as JSON, or as reconstructed
markdown with --markdown.
"""

import argparse
import functools
import json
import logging
import sys
from pathlib import Path

from report_segmenter.config import LOG_FORMAT, LOG_LEVEL, PARSE_CACHE_SIZE, output_path
from report_segmenter.segmentation.classifiers import might_contain_table
from report_segmenter.segmentation.formatting import blocks_to_json, render_blocks_markdown, summarize_blocks
from report_segmenter.segmentation.schema import Block, TextBlock
from report_segmenter.segmentation.segmenter import segment_lines, split_lines

logger = logging.getLogger(__name__)


# ─── Parsing ─────────────────────────────────────────────────────────────────


def parse_content(text: str) -> tuple[Block, ...]:
    """Split report text into an ordered tuple of TextBlock and TableBlock values.

    Text with no pipe or no '---' run skips the line-by-line pass and comes
    back unchanged as a single TextBlock, even when it is empty.
    """
    if not might_contain_table(text):
        logger.debug("Fast path: no table markers in %d chars", len(text))
        return (TextBlock(content=text),)

    lines = split_lines(text)
    blocks = segment_lines(lines)
    logger.debug("Segmented %d lines into %d blocks", len(lines), len(blocks))
    return blocks


@functools.lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_content_cached(text: str) -> tuple[Block, ...]:
    """Memoized parse_content(); results are immutable and safe to share."""
    return parse_content(text)


# ─── Command Line ────────────────────────────────────────────────────────────


def segment_file(input_path: Path, out_path: Path, markdown: bool = False) -> dict[str, int]:
    """Segment one report file and write the result; return the block summary."""
    with open(input_path, "r", encoding="utf-8") as fopen:
        text = fopen.read()

    blocks = parse_content(text)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as fopen:
        if markdown:
            fopen.write(render_blocks_markdown(blocks))
        else:
            json.dump(blocks_to_json(blocks), fopen, indent=2, ensure_ascii=False)

    return summarize_blocks(blocks)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    parser = argparse.ArgumentParser(description="Split a generated research report into text and table blocks")
    parser.add_argument("input", type=Path, help="Report file (markdown / plain text)")
    parser.add_argument("--output", type=Path, default=None, help="Output file (default: data/segmented/<name>.blocks.json)")
    parser.add_argument("--markdown", action="store_true", help="Write reconstructed markdown instead of JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if not args.input.is_file():
        logger.error("Input file not found: %s", args.input)
        return 1

    out_path = args.output or output_path(args.input, markdown=args.markdown)
    summary = segment_file(args.input, out_path, markdown=args.markdown)
    logger.info(
        "Segmented %s: %d text blocks, %d tables (%d rows) -> %s",
        args.input.name,
        summary["text_blocks"],
        summary["tables"],
        summary["table_rows"],
        out_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
